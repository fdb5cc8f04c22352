"""Fixtures for CLI integration tests: a content directory on disk"""

import pytest


POST = """\
---
title: {title}
date: {date}
draft: {draft}
tags: [{tags}]
---

{title} body text.
"""


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path, monkeypatch):
    """A small blog under tmp_path/content; cwd is tmp_path so no stray config is read."""
    monkeypatch.chdir(tmp_path)
    root = tmp_path / "content"
    (root / "posts").mkdir(parents=True)
    (root / "about.md").write_text(
        POST.format(title="About", date="2024-11-02", draft="false", tags=""), encoding="utf-8")
    (root / "posts" / "quarkus.md").write_text(
        POST.format(title="Quarkus on Kubernetes", date="2025-01-15", draft="false", tags="quarkus, kubernetes"),
        encoding="utf-8")
    (root / "posts" / "python.md").write_text(
        POST.format(title="Python checks", date="2025-03-01", draft="false", tags="python, kubernetes"),
        encoding="utf-8")
    (root / "posts" / "notes.md").write_text(
        POST.format(title="Draft notes", date="2025-06-01", draft="true", tags="quarkus"), encoding="utf-8")
    return root
