"""Book model and the intermediate documents produced by a build"""

from pydantic import BaseModel, ConfigDict, Field


EPUB_MIMETYPE = "application/epub+zip"
EPUB_EXTENSION = "epub"
LANGUAGE = "en"

MIMETYPE_PATH  = "mimetype"
CONTAINER_PATH = "META-INF/container.xml"
CONTENT_DIR    = "OEBPS"
PACKAGE_HREF   = "content.opf"
NAV_HREF       = "toc.ncx"
NAV_ID         = "toc"

OPF_MEDIA_TYPE   = "application/oebps-package+xml"
NCX_MEDIA_TYPE   = "application/x-dtbncx+xml"
XHTML_MEDIA_TYPE = "application/xhtml+xml"


def page_id(index: int) -> str:
    """Manifest/spine id of the section at zero-based index."""
    return f"page{index}"


def page_href(index: int) -> str:
    """Content document file name (relative to CONTENT_DIR) of the section at index."""
    return f"{page_id(index)}.xhtml"


class Section(BaseModel):
    """One named unit of content; body is untrusted author text."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    content: str = ""

    @property
    def heading(self) -> str:
        """The name, or "" when it is blank; names are otherwise used verbatim."""
        return self.name if self.name.strip() else ""


class Book(BaseModel):
    title:    str = ""
    author:   str = "Anonymous"
    sections: list[Section] = Field(default_factory=list)


class GeneratedDocument(BaseModel):
    """An archive member; path is archive-relative and unique within a build."""
    model_config = ConfigDict(frozen=True)

    path:       str
    media_type: str
    content:    str


class ManifestEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id:         str
    href:       str
    media_type: str


class NavPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    play_order: int
    label:      str
    target:     str


class BookArtifact(BaseModel):
    """Result of a successful build: archive bytes plus the suggested file name."""
    model_config = ConfigDict(frozen=True)

    filename:   str
    data:       bytes
    identifier: str
    modified:   str


class ArchiveEntry(BaseModel):
    """One member of a built archive, in archive order."""
    model_config = ConfigDict(frozen=True)

    path:       str
    compressed: bool
    size:       int
