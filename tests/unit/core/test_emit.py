"""Unit tests for core/emit.py"""

import json

import yaml

from mdcontent.core.emit import build_index, build_source, dump_front_matter, to_front_matter, write_index
from mdcontent.core.models import RawSource
from mdcontent.core.parse import parse_source
from mdcontent.core.store import load_all

from blog_samples import ABOUT_MD, PYTHON_MD, QUARKUS_MD


_DERIVED_FROM_RAW = {"body", "content_hash"}


def _reparse(doc):
    return parse_source(RawSource(path=doc.path, text=build_source(doc)))


def test_round_trip_preserves_metadata():
    """Serializing a document and parsing it back yields an equal record."""
    for path, text in [("about.md", ABOUT_MD), ("q/index.md", QUARKUS_MD), ("p.md", PYTHON_MD)]:
        doc = parse_source(RawSource(path=path, text=text))
        again = _reparse(doc)
        assert again.model_dump(exclude=_DERIVED_FROM_RAW) == doc.model_dump(exclude=_DERIVED_FROM_RAW)
        assert again.body.strip() == doc.body.strip()


def test_round_trip_is_stable():
    """A second serialization of the re-parsed document is byte-identical to the first."""
    doc = parse_source(RawSource(path="q/index.md", text=QUARKUS_MD))
    once = build_source(doc)
    assert build_source(_reparse(doc)) == once


def test_to_front_matter_uses_source_keys():
    fm = to_front_matter(parse_source(RawSource(path="q/index.md", text=QUARKUS_MD)))
    assert fm["showTableOfContents"] is True
    assert fm["sharingLinks"] == ["linkedin", "reddit", "bluesky", "email"]
    assert fm["series"] == ["quarkus-basics"]
    assert fm["date"] == "2025-01-15T10:30:00+01:00"
    assert "lastmod" not in fm


def test_dump_front_matter_is_delimited_yaml():
    block = dump_front_matter(parse_source(RawSource(path="about.md", text=ABOUT_MD)))
    assert block.startswith("---\n")
    assert block.endswith("---\n")
    data = yaml.safe_load(block.strip("-\n"))
    assert data["title"] == "About"
    assert data["showAuthor"] is False


def test_build_index_published_only(sources):
    index = build_index(load_all(sources).documents)
    assert [e["path"] for e in index] == [
        "posts/python-cluster-checks.md",
        "posts/quarkus-on-kubernetes/index.md",
        "about.md",
    ]
    quarkus = index[1]
    assert quarkus["summary"] == "Build a native Quarkus image and run it on a cluster."
    assert quarkus["slug"] == "quarkus-on-kubernetes"
    assert quarkus["display"]["showTableOfContents"] is True
    assert "body" not in quarkus


def test_write_index(sources, tmp_path):
    out = write_index(load_all(sources).documents, tmp_path / "site" / "index.json")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data) == 3
    assert data[0]["date"] == "2025-03-01T00:00:00"
