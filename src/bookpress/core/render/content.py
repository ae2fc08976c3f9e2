"""Per-section XHTML content documents"""

from markdown_it import MarkdownIt

from bookpress.core.models import (
    CONTENT_DIR, LANGUAGE, XHTML_MEDIA_TYPE, GeneratedDocument, Section, page_href,
)
from bookpress.core.utils.xml import check_text, escape


BODY_FORMATS = ("text", "markdown")


def _make_parser() -> MarkdownIt:
    """commonmark with raw HTML disabled, so author-typed tags are escaped, and self-closing void tags."""
    return MarkdownIt("commonmark", options_update={"html": False, "xhtmlOut": True})


def render_body(content: str, body_format: str, field: str) -> str:
    """Return the XHTML fragment for a section body under the given body format."""
    if body_format == "text":
        return f"<p>{escape(content, field)}</p>"
    if body_format == "markdown":
        return _make_parser().render(check_text(content, field)).rstrip("\n")
    raise ValueError(f"Unknown body format: {body_format!r} (expected one of {', '.join(BODY_FORMATS)})")


def render_section(section: Section, index: int, body_format: str = "text") -> GeneratedDocument:
    """Build the standalone XHTML document for the section at zero-based index.

    The heading is omitted when the section name is blank; the title element
    is then empty.
    """
    name = escape(section.heading, f"sections[{index}].name")
    heading = f"\n      <h1>{name}</h1>" if name else ""
    body = render_body(section.content, body_format, f"sections[{index}].content")
    text = (
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
        "<!DOCTYPE html>\n"
        f'<html xmlns="http://www.w3.org/1999/xhtml" xmlns:epub="http://www.idpf.org/2007/ops" '
        f'xml:lang="{LANGUAGE}" lang="{LANGUAGE}">\n'
        "  <head>\n"
        f"    <title>{name}</title>\n"
        "  </head>\n"
        "  <body>\n"
        f"    <section>{heading}\n"
        f"      {body}\n"
        "    </section>\n"
        "  </body>\n"
        "</html>\n"
    )
    return GeneratedDocument(path=f"{CONTENT_DIR}/{page_href(index)}", media_type=XHTML_MEDIA_TYPE, content=text)


def render_sections(sections: list[Section], body_format: str = "text") -> list[GeneratedDocument]:
    """Render every section in order; any failure aborts the whole list."""
    return [render_section(s, i, body_format) for i, s in enumerate(sections)]
