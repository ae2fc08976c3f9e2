"""Unit tests for core/render/content.py"""

import pytest

from bookpress.core.errors import EncodingError
from bookpress.core.models import Section
from bookpress.core.render.content import render_body, render_section, render_sections


def _section_el(root, ns):
    return root.find("xhtml:body/xhtml:section", ns)


def test_render_section_path_and_media_type():
    """Documents are named OEBPS/page{index}.xhtml with the XHTML media type."""
    doc = render_section(Section(name="A", content="x"), 3)
    assert doc.path == "OEBPS/page3.xhtml"
    assert doc.media_type == "application/xhtml+xml"


def test_render_section_title_and_heading(parse_xml, ns):
    """The title element and h1 both carry the section name."""
    root = parse_xml(render_section(Section(name="Intro", content="Hello"), 0).content)
    assert root.find("xhtml:head/xhtml:title", ns).text == "Intro"
    assert _section_el(root, ns).find("xhtml:h1", ns).text == "Intro"
    assert _section_el(root, ns).find("xhtml:p", ns).text == "Hello"


def test_render_section_unnamed_has_no_heading(parse_xml, ns):
    """An empty name gives an empty title and no h1."""
    root = parse_xml(render_section(Section(name="", content="body"), 1).content)
    assert not root.find("xhtml:head/xhtml:title", ns).text
    assert _section_el(root, ns).find("xhtml:h1", ns) is None


def test_render_section_escapes_body():
    """Reserved characters in the body are emitted as entities."""
    doc = render_section(Section(name="Intro", content="Hello & welcome"), 0)
    assert "Hello &amp; welcome" in doc.content
    doc = render_section(Section(name="", content="<ok>"), 1)
    assert "&lt;ok&gt;" in doc.content
    assert "<ok>" not in doc.content


@pytest.mark.parametrize("name,content", [
    ("Tom & Jerry", "a < b && c > d"),
    ('"Quoted"', "it's <b>not</b> bold"),
    ("</h1><script>", "]]> <!-- --> &amp;"),
    ("multi", "line one\n\nline two\r\nline three"),
])
def test_render_section_text_round_trip(parse_xml, ns, name, content):
    """Parsed text of the heading, title, and paragraph equals the original strings."""
    root = parse_xml(render_section(Section(name=name, content=content), 0).content)
    section = _section_el(root, ns)
    assert root.find("xhtml:head/xhtml:title", ns).text == name
    assert section.find("xhtml:h1", ns).text == name
    assert section.find("xhtml:p", ns).text == content


def test_render_section_rejects_control_characters():
    """A body with a NUL character raises EncodingError naming the field."""
    with pytest.raises(EncodingError, match=r"sections\[2\]\.content"):
        render_section(Section(name="x", content="bad" + chr(0)), 2)


def test_render_sections_preserves_order():
    """render_sections emits one document per section, in section order."""
    docs = render_sections([Section(name=n, content=n) for n in "XYZ"])
    assert [d.path for d in docs] == ["OEBPS/page0.xhtml", "OEBPS/page1.xhtml", "OEBPS/page2.xhtml"]
    assert "<h1>Y</h1>" in docs[1].content


def test_render_body_markdown_formats_inline_markup():
    """The markdown body format renders emphasis as XHTML elements."""
    assert render_body("**bold** and *it*", "markdown", "f") == "<p><strong>bold</strong> and <em>it</em></p>"


def test_render_body_markdown_escapes_raw_html():
    """Author-typed tags are escaped, not passed through, under the markdown body format."""
    out = render_body("<script>alert(1)</script>", "markdown", "f")
    assert "<script>" not in out
    assert "&lt;script&gt;" in out


def test_render_section_markdown_is_well_formed(parse_xml, ns):
    """Markdown output with void elements still parses as XML."""
    content = "line one  \nline two\n\n---\n\n- a & b\n- <c>"
    root = parse_xml(render_section(Section(name="M", content=content), 0, "markdown").content)
    section = _section_el(root, ns)
    assert section.find("xhtml:hr", ns) is not None
    assert [li.text for li in section.iter(f"{{{ns['xhtml']}}}li")] == ["a & b", "<c>"]


def test_render_body_unknown_format():
    """An unknown body format raises ValueError."""
    with pytest.raises(ValueError, match="Unknown body format"):
        render_body("x", "rst", "f")
