"""Escaping boundary for text embedded in generated XML documents"""

import html
import re

from bookpress.core.errors import EncodingError


# Characters outside the XML 1.0 Char production (lone surrogates included).
_INVALID_XML_RE = re.compile(r'[^\u0009\u000a\u000d\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]')


def check_text(value: str, field: str) -> str:
    """Return value unchanged, or raise EncodingError if it cannot appear in an XML document."""
    m = _INVALID_XML_RE.search(value)
    if m:
        raise EncodingError(field, f"character U+{ord(m.group()):04X} at offset {m.start()} is not allowed in XML")
    return value


def escape(value: str, field: str) -> str:
    """Escape &, <, > and both quote characters after checking value is representable.

    Carriage returns become character references so XML end-of-line
    normalization does not rewrite them.
    """
    return html.escape(check_text(value, field), quote=True).replace("\r", "&#13;")
