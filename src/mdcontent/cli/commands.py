"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdcontent.config import Settings, load_config
from mdcontent.core.emit import dump_front_matter, write_index
from mdcontent.core.models import ListFilter
from mdcontent.core.store import ContentStore
from mdcontent.errors import DuplicatePathError, ErrorList


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the configured log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _store(root: Optional[str], settings: Settings) -> ContentStore:
    """Load the store from root (or the configured content_dir); a missing root is fatal."""
    path = Path(root or settings.content_dir)
    if not path.exists():
        _fail(f"Content root not found: {path}")
    return ContentStore.from_directory(path, settings)


def _echo_errors(errors: ErrorList) -> None:
    for e in errors:
        typer.echo(f"Error: {e}", err=True)


RootArg = Annotated[Optional[str], typer.Argument(help="Content root (defaults to content_dir)")]
WorkersOpt = Annotated[Optional[int], typer.Option("--workers", help="Parser threads")]


def check_cmd(root: RootArg = None, workers: WorkersOpt = None):
    """Load every source and report malformed or duplicate documents."""
    settings = _settings(overrides={"workers": workers})
    store = _store(root, settings)
    _echo_errors(store.errors)
    rejected = {e.rejected_source if isinstance(e, DuplicatePathError) else e.path for e in store.errors}
    typer.echo(f"Checked {len(store) + len(rejected)} source(s): "
               f"{len(store)} valid, {len(store.errors)} error(s)")
    if store.errors:
        raise typer.Exit(1)


def list_cmd(
    root: RootArg = None,
    tag: Annotated[Optional[list[str]], typer.Option("--tag", help="Require this tag (repeatable)")] = None,
    category: Annotated[Optional[list[str]], typer.Option("--category", help="Require this category (repeatable)")] = None,
    since: Annotated[Optional[str], typer.Option("--since", help="Earliest ISO date or date-time, inclusive")] = None,
    until: Annotated[Optional[str], typer.Option("--until", help="Latest ISO date-time, inclusive; a bare date covers the day")] = None,
    limit: Annotated[Optional[int], typer.Option("--limit", min=0, help="Max documents to list")] = None,
    workers: WorkersOpt = None,
    ):
    """List published documents, newest first. Drafts are never listed."""
    settings = _settings(overrides={"workers": workers})
    store = _store(root, settings)
    _echo_errors(store.errors)
    try:
        criteria = ListFilter(
            tags=tag or (), categories=category or (), since=since, until=until, limit=limit,
        )
    except ValueError as e:
        _fail("Invalid filter", e)
    docs = store.published(criteria)
    if not docs:
        typer.echo("No published documents match.")
        return
    for d in docs:
        typer.echo(f"{d.date.date().isoformat()}  {d.path}  {d.title}")


def show_cmd(
    path: Annotated[str, typer.Argument(help="Document path relative to the content root")],
    root: Annotated[Optional[str], typer.Option("--root", help="Content root (defaults to content_dir)")] = None,
    ):
    """Print one document's front matter, drafts included."""
    settings = _settings()
    store = _store(root, settings)
    doc = store.get(path)
    if doc is None:
        problems = store.errors_for(path)
        if problems:
            _echo_errors(problems)
            _fail(f"Document at {path} was rejected")
        _fail(f"No document at path: {path}")
    typer.echo(dump_front_matter(doc), nl=False)
    typer.echo(f"# {doc.word_count} words, {doc.reading_time} min read")


def index_cmd(
    root: RootArg = None,
    out: Annotated[Optional[str], typer.Option("--out", help="Index output file")] = None,
    workers: WorkersOpt = None,
    ):
    """Write the JSON index of published documents for the renderer."""
    settings = _settings(overrides={"index_file": out, "workers": workers})
    store = _store(root, settings)
    _echo_errors(store.errors)
    try:
        written = write_index(store.documents, Path(settings.index_file))
    except OSError as e:
        _fail("Index write failed", e)
    typer.echo(f"Indexed {len(store.published())} published document(s) to {written}")
