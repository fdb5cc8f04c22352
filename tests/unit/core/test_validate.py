"""Unit tests for core/validate.py"""

from datetime import datetime, timezone

from mdcontent.core.models import ContentDocument
from mdcontent.core.parse import parse_source
from mdcontent.core.validate import as_utc, validate
from mdcontent.errors import MalformedMetadataError


def _doc(**kwargs) -> ContentDocument:
    defaults = dict(path="posts/a.md", title="A post", date=datetime(2025, 1, 1))
    defaults.update(kwargs)
    return ContentDocument(**defaults)


def test_validate_well_formed_is_empty(sources):
    """Every sample document is well formed."""
    for source in sources:
        assert validate(parse_source(source)) == []


def test_validate_blank_title():
    errors = validate(_doc(title="   "))
    assert len(errors) == 1
    assert isinstance(errors[0], MalformedMetadataError)
    assert errors[0].field == "title"


def test_validate_empty_path():
    errors = validate(_doc(path=""))
    assert [e.field for e in errors] == ["path"]


def test_validate_lastmod_before_date():
    errors = validate(_doc(lastmod=datetime(2024, 12, 31)))
    assert [e.field for e in errors] == ["lastmod"]


def test_validate_lastmod_mixed_timezones():
    """Naive timestamps compare as UTC against aware ones."""
    doc = _doc(date=datetime(2025, 1, 1, 12), lastmod=datetime(2025, 1, 1, 13, tzinfo=timezone.utc))
    assert validate(doc) == []


def test_validate_duplicate_terms():
    """Duplicates that bypass model normalization are still caught."""
    doc = ContentDocument.model_construct(
        path="a.md", title="T", date=datetime(2025, 1, 1),
        tags=("java", "java"), categories=("x", "y", "x"),
    )
    errors = validate(doc)
    assert sorted(e.field for e in errors) == ["categories", "tags"]
    assert "java" in str(errors[0])


def test_validate_reports_every_problem():
    doc = ContentDocument.model_construct(path="", title="", date=datetime(2025, 1, 1), tags=("a", "a"))
    assert len(validate(doc)) == 3


def test_as_utc():
    naive = datetime(2025, 1, 1)
    assert as_utc(naive).tzinfo is timezone.utc
    aware = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert as_utc(aware) is aware
