"""Pure invariant checks over a single ContentDocument"""

from datetime import datetime, timezone

from mdcontent.core.models import ContentDocument
from mdcontent.errors import ErrorList, MalformedMetadataError


def as_utc(value: datetime) -> datetime:
    """Make a timestamp comparable: naive values are read as UTC."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _duplicates(terms) -> list[str]:
    seen, dupes = set(), []
    for t in terms:
        if t in seen and t not in dupes:
            dupes.append(t)
        seen.add(t)
    return dupes


def validate(document: ContentDocument) -> ErrorList:
    """Return every invariant violation in document; an empty list means well-formed."""
    path = document.path
    errors: ErrorList = []

    if not path or not path.strip():
        errors.append(MalformedMetadataError(path, "path must not be empty", field="path"))
    if not isinstance(document.title, str) or not document.title.strip():
        errors.append(MalformedMetadataError(path, "title must be a non-empty string", field="title"))
    if not isinstance(document.date, datetime):
        errors.append(MalformedMetadataError(path, "date must be a valid date-time", field="date"))
    elif document.lastmod is not None and as_utc(document.lastmod) < as_utc(document.date):
        errors.append(MalformedMetadataError(path, "lastmod is earlier than date", field="lastmod"))

    for facet in ("tags", "categories"):
        if dupes := _duplicates(getattr(document, facet)):
            errors.append(MalformedMetadataError(
                path, f"duplicate {facet}: {', '.join(dupes)}", field=facet,
            ))
    return errors
