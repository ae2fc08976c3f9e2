"""Build orchestration: validate -> render -> package -> deliver"""

import asyncio
import logging
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path

from bookpress.config import Settings
from bookpress.core.archive import package
from bookpress.core.deliver import FileSaver, deliver, suggested_filename
from bookpress.core.load import load_book
from bookpress.core.models import Book, BookArtifact, GeneratedDocument
from bookpress.core.render.container import render_container
from bookpress.core.render.content import render_sections
from bookpress.core.render.navigation import build_nav_points, render_navigation
from bookpress.core.render.package import build_manifest, build_spine, render_package
from bookpress.core.validate import validate


logger = logging.getLogger(__name__)


def mint_identifier() -> str:
    """Return a fresh 'urn:uuid:...' book identifier."""
    return f"urn:uuid:{uuid.uuid4()}"


def format_modified(moment: datetime) -> str:
    """Format as the UTC 'YYYY-MM-DDTHH:MM:SSZ' form used by dcterms:modified."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def build_documents(
    book: Book,
    identifier: str,
    modified: str,
    body_format: str = "text",
    ) -> list[GeneratedDocument]:
    """Validate book and generate every archive document, in archive order.

    Order is container, package, navigation, then content documents in
    section order. Raises EmptyBookError before any rendering is done.
    """
    validate(book)
    pages = render_sections(book.sections, body_format)
    manifest = build_manifest(pages)
    opf = render_package(book.title, book.author, identifier, modified, manifest, build_spine(manifest))
    ncx = render_navigation(book.title, book.author, identifier, build_nav_points(book.sections))
    return [render_container(opf.path), opf, ncx, *pages]


def build_book(
    book: Book,
    body_format: str = "text",
    identifier: str = None,
    modified: datetime = None,
    fallback_name: str = "untitled",
    ) -> BookArtifact:
    """Build an EPUB from a snapshot of book and return the archive with its suggested file name.

    identifier and modified are minted per call unless given explicitly.
    """
    snapshot = book.model_copy(deep=True)
    moment = (modified or datetime.now(timezone.utc)).replace(microsecond=0)
    identifier = identifier or mint_identifier()
    stamp = format_modified(moment)

    logger.info("Building %r: %d section(s), id=%s", snapshot.title, len(snapshot.sections), identifier)
    documents = build_documents(snapshot, identifier, stamp, body_format)
    data = package(documents, moment)
    return BookArtifact(
        filename=suggested_filename(snapshot.title, fallback_name),
        data=data,
        identifier=identifier,
        modified=stamp,
    )


def build(book: Book, **options) -> "asyncio.Task[BookArtifact] | Future[BookArtifact]":
    """Snapshot book now and start building it on a worker thread; return the pending handle.

    Inside a running event loop the handle is an asyncio.Task; elsewhere it is
    a concurrent.futures.Future. Either resolves once, to the artifact or to
    the build's error, and may be awaited or queried any number of times.
    Later edits to book do not reach the build. Overlapping calls share no
    state.
    """
    snapshot = book.model_copy(deep=True)
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="bookpress-build")
        future = pool.submit(build_book, snapshot, **options)
        pool.shutdown(wait=False)
        return future
    return loop.create_task(asyncio.to_thread(build_book, snapshot, **options))


def run_build(
    path: Path,
    settings: Settings,
    title: str = None,
    author: str = None,
    identifier: str = None,
    ) -> Path:
    """Load a book from path, build it, and save it under settings.output_dir. Returns the saved path."""
    book = load_book(path, default_author=settings.author)
    updates = {k: v for k, v in {"title": title, "author": author}.items() if v is not None}
    if updates:
        book = book.model_copy(update=updates)

    artifact = build_book(
        book,
        body_format=settings.body_format,
        identifier=identifier,
        fallback_name=settings.fallback_name,
    )
    saver = FileSaver(Path(settings.output_dir))
    deliver(artifact, saver)
    return saver.path_for(artifact.filename)
