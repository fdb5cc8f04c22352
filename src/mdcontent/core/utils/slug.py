"""Slug generation for document identifiers"""

import re
from pathlib import PurePosixPath


BUNDLE_STEMS = {"index", "_index"}


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def slug_for_path(path: str) -> str:
    """Derive a slug from a source path; page bundles (dir/index.md) take the directory name."""
    p = PurePosixPath(path)
    if p.stem in BUNDLE_STEMS and p.parent.name:
        return slugify(p.parent.name)
    return slugify(p.stem)
