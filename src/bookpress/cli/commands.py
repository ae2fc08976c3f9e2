"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from bookpress.config import Settings, load_config
from bookpress.core.archive import check_layout, inspect_archive
from bookpress.core.errors import BookpressError
from bookpress.core.pipeline import run_build


STARTER_BOOK = {
    "title": "My Book",
    "author": "Anonymous",
    "sections": [
        {"name": "Introduction", "content": "Write your first chapter here."},
        {"name": "", "content": "Sections without a name get a 'Page N' entry in the table of contents."},
    ],
}


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(settings: Settings, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_cmd(
    path: Annotated[Path, typer.Argument(help="Book file (.yaml/.yml/.json) or directory of chapter files")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Override the book title")] = None,
    author: Annotated[Optional[str], typer.Option("--author", help="Override the book author")] = None,
    body_format: Annotated[Optional[str], typer.Option("--body-format", help="text or markdown")] = None,
    identifier: Annotated[Optional[str], typer.Option("--identifier", help="Fixed book identifier instead of a fresh UUID")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
    """Build an EPUB from a book file or chapter directory."""
    settings = _settings(overrides={"output_dir": out, "body_format": body_format})
    _setup_logging(settings, verbose)
    try:
        saved = run_build(path, settings, title=title, author=author, identifier=identifier)
    except (BookpressError, ValueError) as e:
        _fail(f"Build failed ({type(e).__name__})", e)
    typer.echo(f"Built {saved}")


def inspect_cmd(
    path: Annotated[Path, typer.Argument(help="EPUB file to inspect")],
    ):
    """List archive entries and check the mimetype-first layout."""
    try:
        data = path.read_bytes()
        entries = inspect_archive(data)
    except (OSError, BookpressError) as e:
        _fail(f"Cannot read {path}", e)
    for entry in entries:
        mode = "deflated" if entry.compressed else "stored"
        typer.echo(f"  {entry.path:<32} {mode:<8} {entry.size:>8}")
    try:
        check_layout(data)
    except BookpressError as e:
        _fail("Layout invalid", e)
    typer.echo(f"Layout OK - {len(entries)} entries")


def init_cmd(
    path: Annotated[Path, typer.Argument(help="Where to write the starter book file")] = Path("book.yaml"),
    ):
    """Write a starter book YAML file."""
    if path.exists():
        _fail(f"{path} already exists")
    try:
        path.write_text(
            yaml.dump(STARTER_BOOK, default_flow_style=False, allow_unicode=True, sort_keys=False),
            encoding="utf-8",
        )
    except OSError as e:
        _fail(f"Cannot write {path}", e)
    typer.echo(f"Wrote {path}")
