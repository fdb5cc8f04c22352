"""Content record models: documents, display options, listing filters, load results"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mdcontent.errors import ErrorList


class SharingPlatform(str, Enum):
    """Platforms a post may offer share links for; declaration order is irrelevant"""
    linkedin = "linkedin"
    reddit = "reddit"
    bluesky = "bluesky"
    email = "email"
    x = "x"
    twitter = "twitter"
    facebook = "facebook"
    mastodon = "mastodon"
    threads = "threads"
    pinterest = "pinterest"
    telegram = "telegram"
    line = "line"
    weibo = "weibo"
    whatsapp = "whatsapp"


def _to_datetime(value: Any) -> Any:
    """Coerce YAML dates and ISO strings to datetime; reject numbers and booleans."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"invalid timestamp {value!r}") from None
    raise ValueError(f"invalid timestamp {value!r}: expected a date or date-time")


def _to_terms(value: Any) -> tuple[str, ...]:
    """Normalize a taxonomy value to a duplicate-free tuple (first occurrence wins)."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError(f"expected a list of strings, got {type(value).__name__}")
    terms = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, (dict, list)):
            raise ValueError(f"expected a string term, got {type(item).__name__}")
        terms.append(str(item).strip())
    return tuple(dict.fromkeys(t for t in terms if t))


class DisplayOptions(BaseModel):
    """Per-document display flags; each absent key falls back to its default."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    show_table_of_contents: bool = Field(default=False, alias="showTableOfContents")
    show_breadcrumbs:       bool = Field(default=False, alias="showBreadcrumbs")
    show_author:            bool = Field(default=True,  alias="showAuthor")
    show_summary:           bool = Field(default=False, alias="showSummary")


DISPLAY_KEYS = tuple(f.alias for f in DisplayOptions.model_fields.values())


class ContentDocument(BaseModel):
    """One page or post: validated front matter plus an opaque Markdown body."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path:          str                              # source location, unique in a set
    title:         str
    date:          datetime
    draft:         bool = False
    tags:          tuple[str, ...] = ()
    categories:    tuple[str, ...] = ()
    summary:       Optional[str] = None
    description:   Optional[str] = None
    lastmod:       Optional[datetime] = None
    slug:          str = ""
    display:       DisplayOptions = Field(default_factory=DisplayOptions)
    sharing_links: tuple[SharingPlatform, ...] = Field(default=(), alias="sharingLinks")
    extra:         dict[str, Any] = Field(default_factory=dict)   # unrecognized front matter keys
    body:          str = ""
    content_hash:  str = ""
    word_count:    int = 0
    reading_time:  int = 0                           # minutes
    auto_summary:  str = ""

    def __hash__(self) -> int:
        return hash(self.path)

    @field_validator("title", "summary", "description", mode="before")
    @classmethod
    def _scalar_to_str(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("date", "lastmod", mode="before")
    @classmethod
    def _parse_timestamp(cls, v: Any) -> Any:
        return _to_datetime(v)

    @field_validator("tags", "categories", mode="before")
    @classmethod
    def _parse_terms(cls, v: Any) -> tuple[str, ...]:
        return _to_terms(v)

    @field_validator("sharing_links", mode="before")
    @classmethod
    def _parse_links(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            return (v.strip().lower(),)
        if isinstance(v, (list, tuple)):
            return tuple(str(p).strip().lower() for p in v)
        return v

    @property
    def effective_summary(self) -> str:
        """Authored summary, else the text before <!--more-->, else the first paragraph."""
        return self.summary or self.auto_summary


class ListFilter(BaseModel):
    """Narrowing criteria for published listings. Drafts are never listed regardless."""
    model_config = ConfigDict(frozen=True)

    tags:       tuple[str, ...] = ()       # document must carry every tag
    categories: tuple[str, ...] = ()       # document must carry every category
    since:      Optional[datetime] = None  # inclusive
    until:      Optional[datetime] = None  # inclusive; a bare date covers the whole day
    limit:      Optional[int] = Field(default=None, ge=0)

    @field_validator("tags", "categories", mode="before")
    @classmethod
    def _parse_terms(cls, v: Any) -> tuple[str, ...]:
        return _to_terms(v)

    @field_validator("since", mode="before")
    @classmethod
    def _parse_since(cls, v: Any) -> Any:
        return _to_datetime(v)

    @field_validator("until", mode="before")
    @classmethod
    def _parse_until(cls, v: Any) -> Any:
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.max)
        if isinstance(v, str) and len(v.strip()) == 10:
            return datetime.combine(date.fromisoformat(v.strip()), time.max)
        return _to_datetime(v)


@dataclass(frozen=True)
class RawSource:
    """Already-materialized source text and the location it was read from."""
    path: str
    text: str


@dataclass
class LoadResult:
    """Best-effort valid subset of a load plus every problem encountered."""
    documents: list[ContentDocument] = field(default_factory=list)
    errors:    ErrorList = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
