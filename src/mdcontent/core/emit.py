"""Metadata serialization: front matter blocks, full sources, and the published JSON index"""

import json
from pathlib import Path
from typing import Any, Iterable

import yaml

from mdcontent.core.models import ContentDocument
from mdcontent.core.store import list_published


def _iso(value) -> str | None:
    return value.isoformat() if value is not None else None


def to_front_matter(doc: ContentDocument) -> dict[str, Any]:
    """Front matter dict using source key names; re-parsing it yields an equal document."""
    fm: dict[str, Any] = {"title": doc.title, "date": _iso(doc.date)}
    if doc.lastmod is not None:
        fm["lastmod"] = _iso(doc.lastmod)
    fm["draft"] = doc.draft
    fm["slug"] = doc.slug
    if doc.summary is not None:
        fm["summary"] = doc.summary
    if doc.description is not None:
        fm["description"] = doc.description
    fm["tags"] = list(doc.tags)
    fm["categories"] = list(doc.categories)
    fm.update(doc.display.model_dump(by_alias=True))
    fm["sharingLinks"] = [p.value for p in doc.sharing_links]
    fm.update(doc.extra)
    return fm


def dump_front_matter(doc: ContentDocument) -> str:
    """Return the YAML front matter block, delimiters included."""
    header = yaml.safe_dump(to_front_matter(doc), default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n"


def build_source(doc: ContentDocument) -> str:
    """Return a complete source: front matter block followed by the body."""
    return f"{dump_front_matter(doc)}\n{doc.body.lstrip()}"


def index_entry(doc: ContentDocument) -> dict[str, Any]:
    """Renderer-facing metadata for one document; the body is left out."""
    return {
        "path": doc.path,
        "slug": doc.slug,
        "title": doc.title,
        "date": _iso(doc.date),
        "lastmod": _iso(doc.lastmod),
        "summary": doc.effective_summary,
        "description": doc.description,
        "tags": list(doc.tags),
        "categories": list(doc.categories),
        "display": doc.display.model_dump(by_alias=True),
        "sharingLinks": [p.value for p in doc.sharing_links],
        "wordCount": doc.word_count,
        "readingTime": doc.reading_time,
    }


def build_index(documents: Iterable[ContentDocument]) -> list[dict[str, Any]]:
    """Index of published documents, newest first. Drafts are excluded."""
    return [index_entry(d) for d in list_published(documents)]


def write_index(documents: Iterable[ContentDocument], out: Path) -> Path:
    """Write the published index as JSON to out. Returns the written path."""
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(build_index(documents), indent=2, default=str), encoding="utf-8")
    return out
