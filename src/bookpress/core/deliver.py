"""Hand-off of finished archives to a saver"""

import logging
from pathlib import Path
from typing import Callable

from bookpress.core.errors import DeliveryError
from bookpress.core.models import EPUB_EXTENSION, BookArtifact
from bookpress.core.utils.slug import safe_filename


logger = logging.getLogger(__name__)

Saver = Callable[[bytes, str], None]


def suggested_filename(title: str, fallback: str = "untitled") -> str:
    """'<sanitized title>.epub', or '<fallback>.epub' for a blank title."""
    return f"{safe_filename(title, fallback)}.{EPUB_EXTENSION}"


class FileSaver:
    """Save archives into a directory, replacing any existing file of the same name."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def path_for(self, filename: str) -> Path:
        return self.output_dir / filename

    def __call__(self, data: bytes, filename: str) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        dest = self.path_for(filename)
        tmp = dest.with_name(f".{dest.name}.part")
        try:
            tmp.write_bytes(data)
            tmp.replace(dest)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise


def deliver(artifact: BookArtifact, saver: Saver) -> None:
    """Pass the archive and its suggested name to saver; wrap saver failures in DeliveryError.

    Not retried. Whether the user keeps the file is the saver's business.
    """
    try:
        saver(artifact.data, artifact.filename)
    except Exception as e:
        raise DeliveryError(f"could not save {artifact.filename}: {e}") from e
    logger.info("Delivered %s (%d bytes)", artifact.filename, len(artifact.data))
