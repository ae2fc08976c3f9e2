"""EPUB container serialization and read-back checks"""

import io
import logging
import zipfile
from datetime import datetime, timezone

from bookpress.core.errors import PackagingError
from bookpress.core.models import EPUB_MIMETYPE, MIMETYPE_PATH, ArchiveEntry, GeneratedDocument


logger = logging.getLogger(__name__)

DateTime = tuple[int, int, int, int, int, int]


def _zip_info(path: str, date_time: DateTime, compress_type: int) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(path, date_time=date_time)
    info.compress_type = compress_type
    info.external_attr = 0o644 << 16
    return info


def _check_unique(documents: list[GeneratedDocument]) -> None:
    seen = {MIMETYPE_PATH}
    for doc in documents:
        if doc.path in seen:
            raise PackagingError(f"duplicate archive path: {doc.path}")
        seen.add(doc.path)


def package(documents: list[GeneratedDocument], modified: datetime = None) -> bytes:
    """Serialize the marker entry and documents into one EPUB archive.

    The mimetype entry is written first and stored uncompressed; documents
    follow in the given order with deflate compression. Any failure raises
    PackagingError and no bytes are returned.
    """
    _check_unique(documents)
    moment = modified or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    date_time = moment.timetuple()[:6]
    buf = io.BytesIO()
    current = MIMETYPE_PATH
    try:
        with zipfile.ZipFile(buf, "w") as zf:
            zf.writestr(_zip_info(MIMETYPE_PATH, date_time, zipfile.ZIP_STORED), EPUB_MIMETYPE.encode("ascii"))
            for doc in documents:
                current = doc.path
                zf.writestr(_zip_info(doc.path, date_time, zipfile.ZIP_DEFLATED), doc.content.encode("utf-8"))
    except (UnicodeEncodeError, ValueError, OSError, zipfile.LargeZipFile) as e:
        raise PackagingError(f"failed to write {current}: {e}") from e

    data = buf.getvalue()
    logger.debug("Packaged %d entries (%d bytes)", len(documents) + 1, len(data))
    return data


def _open(data: bytes) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as e:
        raise PackagingError(f"not a zip archive: {e}") from e


def inspect_archive(data: bytes) -> list[ArchiveEntry]:
    """Return the archive's entries in stored order."""
    with _open(data) as zf:
        return [
            ArchiveEntry(path=i.filename, compressed=i.compress_type != zipfile.ZIP_STORED, size=i.file_size)
            for i in zf.infolist()
        ]


def check_layout(data: bytes) -> None:
    """Raise PackagingError unless the first entry is the uncompressed, byte-exact mimetype marker."""
    with _open(data) as zf:
        infos = zf.infolist()
        if not infos or infos[0].filename != MIMETYPE_PATH:
            raise PackagingError(f"first entry must be {MIMETYPE_PATH!r}")
        first = infos[0]
        if first.compress_type != zipfile.ZIP_STORED:
            raise PackagingError(f"{MIMETYPE_PATH!r} entry must be stored uncompressed")
        if first.extra:
            raise PackagingError(f"{MIMETYPE_PATH!r} entry must not carry an extra field")
        if zf.read(first) != EPUB_MIMETYPE.encode("ascii"):
            raise PackagingError(f"{MIMETYPE_PATH!r} content must be exactly {EPUB_MIMETYPE!r}")
