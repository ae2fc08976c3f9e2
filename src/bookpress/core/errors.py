"""Typed build failures surfaced to callers"""


class BookpressError(Exception):
    """Base class for every failure a build can report."""


class EmptyBookError(BookpressError):
    """The book has no sections, or every section body is empty."""


class EncodingError(BookpressError):
    """A text field holds characters that cannot appear in an XML document."""

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"{field}: {reason}")


class EmptyManifestError(BookpressError):
    """Package document requested with no content documents; validation was bypassed."""


class PackagingError(BookpressError):
    """Archive serialization failed; no archive was produced."""


class DeliveryError(BookpressError):
    """The finished archive could not be handed to the saver."""


class LoadError(ValueError):
    """A book file or directory could not be read into a Book."""
