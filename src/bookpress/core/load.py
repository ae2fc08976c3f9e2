"""Book loading from YAML/JSON book files or a directory of chapter files"""

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bookpress.core.errors import LoadError
from bookpress.core.models import Book, Section


logger = logging.getLogger(__name__)

BOOK_EXTENSIONS = {'.yaml', '.yml', '.json'}
CHAPTER_EXTENSIONS = {'.md', '.txt'}
HEADING_RE = re.compile(r'^#[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*(?:\n|$)')


def _read_mapping(path: Path) -> dict[str, Any]:
    """Parse a YAML or JSON book file into a dict."""
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read {path}: {e}") from e
    try:
        data = json.loads(text) if path.suffix == '.json' else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise LoadError(f"Invalid book file {path}: {e}") from e
    if not isinstance(data, dict):
        raise LoadError(f"Invalid book file {path}: expected a mapping, got {type(data).__name__}")
    return data


def load_book_file(path: Path, default_author: str = "Anonymous") -> Book:
    """Load {title, author?, sections: [{name, content}]} from YAML or JSON."""
    data = _read_mapping(path)
    data.setdefault('author', default_author)
    if data['author'] is None:
        data['author'] = default_author
    try:
        return Book.model_validate(data)
    except ValidationError as e:
        raise LoadError(f"Invalid book file {path}: {e}") from e


def split_heading(text: str) -> tuple[str | None, str]:
    """Return (heading, body) when text opens with a level-1 '# Heading' line, else (None, text)."""
    m = HEADING_RE.match(text)
    if not m:
        return None, text
    return m.group(1), text[m.end():].lstrip('\n')


def discover_chapters(path: Path) -> list[Path]:
    """Return chapter files directly under path, sorted by name."""
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix in CHAPTER_EXTENSIONS)


def load_book_dir(path: Path, title: str = None, default_author: str = "Anonymous") -> Book:
    """One section per chapter file; the name is the file's leading heading or its stem."""
    sections = []
    for p in discover_chapters(path):
        try:
            text = p.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read {p}: {e}") from e
        heading, body = split_heading(text)
        sections.append(Section(name=heading or p.stem, content=body.rstrip('\n')))
    logger.debug("Loaded %d chapter file(s) from %s", len(sections), path)
    return Book(title=path.resolve().name if title is None else title, author=default_author, sections=sections)


def load_book(path: Path, default_author: str = "Anonymous") -> Book:
    """Load a book from a book file or a chapter directory."""
    if path.is_dir():
        return load_book_dir(path, default_author=default_author)
    if path.suffix not in BOOK_EXTENSIONS:
        raise LoadError(f"Unsupported book file {path}: expected one of {', '.join(sorted(BOOK_EXTENSIONS))}")
    return load_book_file(path, default_author)
