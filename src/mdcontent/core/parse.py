"""Source discovery, front matter extraction, and per-document parsing"""

import re
from pathlib import Path, PurePosixPath
from typing import Any

import yaml
from pydantic import ValidationError

from mdcontent.core.models import DISPLAY_KEYS, ContentDocument, RawSource
from mdcontent.core.utils.hashing import sha256
from mdcontent.core.utils.slug import slug_for_path
from mdcontent.core.utils.text import auto_summary, reading_time, word_count
from mdcontent.errors import ErrorList, MalformedMetadataError


FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
MD_EXTENSIONS = {'.md', '.markdown'}

# front matter key -> ContentDocument field
FIELD_KEYS = {
    'title': 'title',
    'date': 'date',
    'draft': 'draft',
    'tags': 'tags',
    'categories': 'categories',
    'summary': 'summary',
    'description': 'description',
    'lastmod': 'lastmod',
    'slug': 'slug',
    'sharingLinks': 'sharing_links',
}
_FRONT_MATTER_NAMES = {v: k for k, v in FIELD_KEYS.items()}


def split_front_matter(text: str) -> tuple[dict[str, Any], str] | None:
    """Return (front_matter, body), or None when the text has no front matter block.

    Raises ValueError when the block is not valid YAML or not a mapping.
    """
    text = text.removeprefix('\ufeff')
    m = FRONTMATTER_RE.match(text)
    if not m:
        return None
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML front matter: {e}") from e
    if not isinstance(fm, dict):
        raise ValueError(f"Invalid YAML front matter: expected a mapping, got {type(fm).__name__}")
    return fm, text[m.end():]


def normalize_path(path: str) -> str:
    """Canonical document path: POSIX separators, no leading './'."""
    posix = PurePosixPath(path.replace('\\', '/')).as_posix()
    return posix[2:] if posix.startswith('./') else posix


def _field_error(path: str, exc: ValidationError) -> MalformedMetadataError:
    """Collapse a pydantic ValidationError into one MalformedMetadataError naming the first bad field."""
    first = exc.errors()[0]
    keys = [p for p in first.get('loc') or () if isinstance(p, str)]
    name = _FRONT_MATTER_NAMES.get(keys[-1], keys[-1]) if keys else None
    if first.get('type') == 'missing':
        return MalformedMetadataError(path, f"required field '{name}' is missing", field=name)
    return MalformedMetadataError(path, f"field '{name}': {first.get('msg')}", field=name)


def parse_source(
    source: RawSource,
    parser_config: str = 'gfm-like',
    words_per_minute: int = 213,
    summary_length: int = 70,
    ) -> ContentDocument:
    """Parse one raw source into a ContentDocument. Raises MalformedMetadataError."""
    path = normalize_path(source.path)
    try:
        split = split_front_matter(source.text)
    except ValueError as e:
        raise MalformedMetadataError(path, str(e)) from e
    if split is None:
        raise MalformedMetadataError(path, "missing front matter block")
    fm, body = split

    data: dict[str, Any] = {'path': path}
    display: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in fm.items():
        key = str(key)
        if key in FIELD_KEYS:
            data[FIELD_KEYS[key]] = value
        elif key in DISPLAY_KEYS:
            display[key] = value
        else:
            extra[key] = value

    if not data.get('slug'):
        data['slug'] = slug_for_path(path)
    words = word_count(body, parser_config)
    data.update(
        display=display,
        extra=extra,
        body=body,
        content_hash=sha256(source.text),
        word_count=words,
        reading_time=reading_time(words, words_per_minute),
        auto_summary=auto_summary(body, summary_length, parser_config),
    )

    try:
        return ContentDocument.model_validate(data)
    except ValidationError as e:
        raise _field_error(path, e) from e


def _is_hidden(rel: Path) -> bool:
    """True when any directory in rel is hidden or '_'-prefixed, or the file itself is hidden."""
    return any(part.startswith(('.', '_')) for part in rel.parts[:-1]) or rel.name.startswith('.')


def discover_files(path: Path) -> list[Path]:
    """Return sorted Markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(
        p for p in path.rglob('*')
        if p.is_file() and p.suffix in MD_EXTENSIONS and not _is_hidden(p.relative_to(path))
    )


def read_sources(root: Path) -> tuple[list[RawSource], ErrorList]:
    """Read every discovered file as UTF-8. Undecodable files are reported, not raised."""
    sources: list[RawSource] = []
    errors: ErrorList = []
    for p in discover_files(root):
        rel = p.name if root.is_file() else p.relative_to(root).as_posix()
        try:
            sources.append(RawSource(path=rel, text=p.read_text(encoding='utf-8')))
        except UnicodeDecodeError as e:
            errors.append(MalformedMetadataError(rel, f"not valid UTF-8: {e.reason}"))
    return sources, errors
