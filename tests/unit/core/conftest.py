"""Shared fixtures for core unit tests: a small blog of pages, posts and a draft"""

import pytest

from mdcontent.core.models import RawSource

from blog_samples import ABOUT_MD, DRAFT_MD, PYTHON_MD, QUARKUS_MD


@pytest.fixture(name="sources")
def sources_fixture():
    return [
        RawSource(path="about.md", text=ABOUT_MD),
        RawSource(path="posts/quarkus-on-kubernetes/index.md", text=QUARKUS_MD),
        RawSource(path="posts/python-cluster-checks.md", text=PYTHON_MD),
        RawSource(path="posts/notes.md", text=DRAFT_MD),
    ]
