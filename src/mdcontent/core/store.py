"""Content record store: load sources, list published documents, look up by path"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import Iterable, Optional

from mdcontent.config import Settings
from mdcontent.core.models import ContentDocument, ListFilter, LoadResult, RawSource
from mdcontent.core.parse import normalize_path, parse_source, read_sources
from mdcontent.core.validate import as_utc, validate
from mdcontent.errors import DuplicatePathError, ErrorList, MalformedMetadataError


logger = logging.getLogger(__name__)


def _parse_one(source: RawSource, settings: Settings) -> tuple[Optional[ContentDocument], ErrorList]:
    """Parse and validate one source; a document is returned only when it has no errors."""
    try:
        doc = parse_source(
            source,
            parser_config=settings.parser_config,
            words_per_minute=settings.words_per_minute,
            summary_length=settings.summary_length,
        )
    except MalformedMetadataError as e:
        return None, [e]
    errors = validate(doc)
    return (None, errors) if errors else (doc, [])


def load_all(sources: Iterable[RawSource], settings: Settings = None) -> LoadResult:
    """Parse every source independently; bad or duplicate documents are reported, not raised.

    Output keeps input order. On a path collision the first source wins.
    """
    settings = settings or Settings()
    sources = list(sources)
    parse = partial(_parse_one, settings=settings)

    if settings.workers > 1 and len(sources) > 1:
        with ThreadPoolExecutor(max_workers=settings.workers) as pool:
            outcomes = list(pool.map(parse, sources))
    else:
        outcomes = [parse(s) for s in sources]

    result = LoadResult()
    kept: dict[str, str] = {}   # document path -> source that claimed it
    for source, (doc, errors) in zip(sources, outcomes):
        if errors:
            for e in errors:
                logger.warning("Rejected %s", e)
            result.errors.extend(errors)
            continue
        if doc.path in kept:
            dup = DuplicatePathError(doc.path, first_source=kept[doc.path], rejected_source=source.path)
            logger.warning("Rejected %s", dup)
            result.errors.append(dup)
            continue
        kept[doc.path] = source.path
        result.documents.append(doc)

    logger.info("Loaded %d document(s), %d error(s)", len(result.documents), len(result.errors))
    return result


def load_directory(root: Path, settings: Settings = None) -> LoadResult:
    """Read every Markdown file under root and load it."""
    sources, read_errors = read_sources(Path(root))
    logger.debug("Discovered %d source(s) under %s", len(sources) + len(read_errors), root)
    result = load_all(sources, settings)
    return LoadResult(documents=result.documents, errors=read_errors + result.errors)


def _matches(doc: ContentDocument, criteria: ListFilter) -> bool:
    if criteria.tags and not set(criteria.tags) <= set(doc.tags):
        return False
    if criteria.categories and not set(criteria.categories) <= set(doc.categories):
        return False
    when = as_utc(doc.date)
    if criteria.since is not None and when < as_utc(criteria.since):
        return False
    if criteria.until is not None and when > as_utc(criteria.until):
        return False
    return True


def sort_newest_first(documents: Iterable[ContentDocument]) -> list[ContentDocument]:
    """Order by date descending; equal dates fall back to path ascending."""
    by_path = sorted(documents, key=lambda d: d.path)
    return sorted(by_path, key=lambda d: as_utc(d.date), reverse=True)


def list_published(
    documents: Iterable[ContentDocument],
    criteria: ListFilter = None,
    ) -> list[ContentDocument]:
    """Return non-draft documents, newest first, narrowed by criteria. Drafts never appear."""
    criteria = criteria or ListFilter()
    published = [d for d in documents if not d.draft and _matches(d, criteria)]
    ordered = sort_newest_first(published)
    return ordered if criteria.limit is None else ordered[:criteria.limit]


def get_by_path(documents: Iterable[ContentDocument], path: str) -> ContentDocument | None:
    """Return the document at path (drafts included), or None if not found."""
    wanted = normalize_path(path)
    return next((d for d in documents if d.path == wanted), None)


class ContentStore:
    """A loaded document set with the query operations a renderer needs."""

    def __init__(self, result: LoadResult):
        self._result = result
        self._by_path = {d.path: d for d in result.documents}

    @classmethod
    def from_sources(cls, sources: Iterable[RawSource], settings: Settings = None) -> "ContentStore":
        return cls(load_all(sources, settings))

    @classmethod
    def from_directory(cls, root: Path, settings: Settings = None) -> "ContentStore":
        return cls(load_directory(root, settings))

    @property
    def documents(self) -> list[ContentDocument]:
        return list(self._result.documents)

    @property
    def errors(self) -> ErrorList:
        return list(self._result.errors)

    def __len__(self) -> int:
        return len(self._by_path)

    def published(self, criteria: ListFilter = None) -> list[ContentDocument]:
        return list_published(self._result.documents, criteria)

    def get(self, path: str) -> ContentDocument | None:
        return self._by_path.get(normalize_path(path))

    def errors_for(self, path: str) -> ErrorList:
        """Load errors reported against path, e.g. why a source is missing from the set."""
        wanted = normalize_path(path)
        return [e for e in self._result.errors if normalize_path(e.path) == wanted]

    def taxonomy(self, facet: str = "tags") -> dict[str, int]:
        """Term -> number of published documents carrying it, most used first."""
        if facet not in ("tags", "categories"):
            raise ValueError(f"Unknown taxonomy: {facet}")
        counts = Counter(t for d in self.published() for t in getattr(d, facet))
        return dict(sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])))
