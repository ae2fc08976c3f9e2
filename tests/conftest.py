"""Root test configuration: shared book fixtures and archive readers"""

import io
import zipfile
import xml.etree.ElementTree as ET

import pytest

from bookpress.core.models import Book, Section


NS = {
    "opf": "http://www.idpf.org/2007/opf",
    "dc": "http://purl.org/dc/elements/1.1/",
    "ncx": "http://www.daisy.org/z3986/2005/ncx/",
    "xhtml": "http://www.w3.org/1999/xhtml",
    "container": "urn:oasis:names:tc:opendocument:xmlns:container",
}


@pytest.fixture(name="ns")
def ns_fixture():
    return NS


@pytest.fixture(name="book")
def book_fixture():
    """The two-section book: a named page with '&' and an unnamed page with a tag-like body."""
    return Book(
        title="My Book",
        author="Jane Author",
        sections=[
            Section(name="Intro", content="Hello & welcome"),
            Section(name="", content="<ok>"),
        ],
    )


@pytest.fixture(name="abc_book")
def abc_book_fixture():
    return Book(
        title="Letters",
        sections=[Section(name=n, content=f"Body of {n}") for n in ("A", "B", "C")],
    )


@pytest.fixture(name="read_zip")
def read_zip_fixture():
    """Return a function mapping archive bytes to {path: text} in archive order."""
    def _read(data: bytes) -> dict[str, str]:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            return {i.filename: zf.read(i).decode("utf-8") for i in zf.infolist()}
    return _read


@pytest.fixture(name="parse_xml")
def parse_xml_fixture():
    """Return a function parsing document text into an Element (fails on malformed XML)."""
    def _parse(text: str) -> ET.Element:
        return ET.fromstring(text.encode("utf-8"))
    return _parse
