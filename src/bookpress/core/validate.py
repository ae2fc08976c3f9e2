"""Book model checks run before any document is generated"""

from bookpress.core.errors import EmptyBookError
from bookpress.core.models import Book


def validate(book: Book) -> None:
    """Raise EmptyBookError unless the book has sections and at least one non-empty body.

    Sections with empty bodies are accepted and render as empty content;
    whitespace-only bodies count as empty.
    """
    if not book.sections:
        raise EmptyBookError("book has no sections")
    if all(not s.content.strip() for s in book.sections):
        raise EmptyBookError(f"all {len(book.sections)} section bodies are empty")
