"""NCX navigation map: one nav point per section, in section order"""

from bookpress.core.models import (
    CONTENT_DIR, NAV_HREF, NCX_MEDIA_TYPE, GeneratedDocument, NavPoint, Section, page_href,
)
from bookpress.core.utils.xml import escape


def nav_label(section: Section, index: int) -> str:
    """Section heading, or a positional 'Page N' label when the name is blank."""
    return section.heading or f"Page {index + 1}"


def build_nav_points(sections: list[Section]) -> list[NavPoint]:
    """Return nav points with playOrder 1..len(sections) targeting each content document."""
    return [
        NavPoint(play_order=i + 1, label=nav_label(s, i), target=page_href(i))
        for i, s in enumerate(sections)
    ]


def _nav_point_xml(point: NavPoint) -> str:
    label = escape(point.label, f"nav[{point.play_order}].label")
    return (
        f'    <navPoint id="navpoint-{point.play_order}" playOrder="{point.play_order}">\n'
        f"      <navLabel>\n"
        f"        <text>{label}</text>\n"
        f"      </navLabel>\n"
        f'      <content src="{escape(point.target, "nav.target")}"/>\n'
        f"    </navPoint>\n"
    )


def render_navigation(title: str, author: str, identifier: str, points: list[NavPoint]) -> GeneratedDocument:
    """Build toc.ncx carrying the book identifier, escaped title/author, and the nav map."""
    text = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">\n'
        "  <head>\n"
        f'    <meta name="dtb:uid" content="{escape(identifier, "identifier")}"/>\n'
        '    <meta name="dtb:depth" content="1"/>\n'
        '    <meta name="dtb:totalPageCount" content="0"/>\n'
        '    <meta name="dtb:maxPageNumber" content="0"/>\n'
        "  </head>\n"
        "  <docTitle>\n"
        f"    <text>{escape(title, 'title')}</text>\n"
        "  </docTitle>\n"
        "  <docAuthor>\n"
        f"    <text>{escape(author, 'author')}</text>\n"
        "  </docAuthor>\n"
        "  <navMap>\n"
        + "".join(_nav_point_xml(p) for p in points)
        + "  </navMap>\n"
        "</ncx>\n"
    )
    return GeneratedDocument(path=f"{CONTENT_DIR}/{NAV_HREF}", media_type=NCX_MEDIA_TYPE, content=text)
