"""Unit tests for core/utils/xml.py"""

import html

import pytest

from bookpress.core.errors import EncodingError
from bookpress.core.utils.xml import check_text, escape


@pytest.mark.parametrize("text,expected", [
    ("a & b", "a &amp; b"),
    ("<tag>", "&lt;tag&gt;"),
    ('say "hi"', "say &quot;hi&quot;"),
    ("it's", "it&#x27;s"),
    ("plain", "plain"),
    ("", ""),
])
def test_escape_reserved_characters(text, expected):
    """escape replaces markup-reserved characters with entities."""
    assert escape(text, "f") == expected


def test_escape_carriage_return_is_character_reference():
    """escape keeps carriage returns as &#13; so parsers do not normalize them away."""
    assert escape("a\r\nb", "f") == "a&#13;\nb"


def test_escape_unescape_round_trip():
    """html.unescape reverses escape exactly."""
    text = "5 < 6 && \"q\" 'x' > 2\r\n"
    assert html.unescape(escape(text, "f")) == text


@pytest.mark.parametrize("code", [0x00, 0x08, 0x0B, 0x1F, 0xFFFE, 0xD800])
def test_check_text_rejects_non_xml_characters(code):
    """Control characters, noncharacters and lone surrogates raise EncodingError."""
    with pytest.raises(EncodingError) as exc:
        check_text(f"ok{chr(code)}", "sections[0].content")
    assert exc.value.field == "sections[0].content"
    assert f"U+{code:04X}" in str(exc.value)


def test_check_text_allows_tabs_newlines_and_unicode():
    """Tab, newline, CR, and non-ASCII text are representable."""
    text = "tab\tnl\ncr\r caf" + chr(0xE9) + chr(0x1F600)
    assert check_text(text, "f") == text
