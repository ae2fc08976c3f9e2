"""OPF package document: metadata, manifest, and spine"""

from bookpress.core.errors import EmptyManifestError
from bookpress.core.models import (
    CONTENT_DIR, LANGUAGE, NAV_HREF, NAV_ID, NCX_MEDIA_TYPE, OPF_MEDIA_TYPE, PACKAGE_HREF,
    GeneratedDocument, ManifestEntry, page_id,
)
from bookpress.core.utils.xml import escape


def build_manifest(content_docs: list[GeneratedDocument]) -> list[ManifestEntry]:
    """Return one entry per content document (ids page0..pageN-1) followed by the navigation entry.

    Raises EmptyManifestError when content_docs is empty.
    """
    if not content_docs:
        raise EmptyManifestError("no content documents to list in the manifest")
    prefix = f"{CONTENT_DIR}/"
    entries = []
    for i, doc in enumerate(content_docs):
        if not doc.path.startswith(prefix):
            raise EmptyManifestError(f"content document outside {CONTENT_DIR}/: {doc.path}")
        entries.append(ManifestEntry(id=page_id(i), href=doc.path[len(prefix):], media_type=doc.media_type))
    entries.append(ManifestEntry(id=NAV_ID, href=NAV_HREF, media_type=NCX_MEDIA_TYPE))
    return entries


def build_spine(manifest: list[ManifestEntry]) -> list[str]:
    """Spine idrefs: every manifest id except the navigation entry, in manifest order."""
    return [e.id for e in manifest if e.id != NAV_ID]


def render_package(
    title: str,
    author: str,
    identifier: str,
    modified: str,
    manifest: list[ManifestEntry],
    spine: list[str],
    ) -> GeneratedDocument:
    """Build content.opf. All text fields are escaped; ids and hrefs come from build_manifest."""
    items = "".join(
        f'    <item id="{e.id}" href="{escape(e.href, "manifest.href")}" media-type="{e.media_type}"/>\n'
        for e in manifest
    )
    itemrefs = "".join(f'    <itemref idref="{idref}"/>\n' for idref in spine)
    text = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<package version="3.0" xml:lang="{LANGUAGE}" xmlns="http://www.idpf.org/2007/opf" '
        'unique-identifier="book-id">\n'
        '  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">\n'
        f'    <dc:identifier id="book-id">{escape(identifier, "identifier")}</dc:identifier>\n'
        '    <meta refines="#book-id" property="identifier-type" scheme="xsd:string">uuid</meta>\n'
        f'    <meta property="dcterms:modified">{escape(modified, "modified")}</meta>\n'
        f"    <dc:language>{LANGUAGE}</dc:language>\n"
        f"    <dc:title>{escape(title, 'title')}</dc:title>\n"
        f"    <dc:creator>{escape(author, 'author')}</dc:creator>\n"
        "  </metadata>\n"
        "  <manifest>\n"
        f"{items}"
        "  </manifest>\n"
        f'  <spine toc="{NAV_ID}">\n'
        f"{itemrefs}"
        "  </spine>\n"
        "</package>\n"
    )
    return GeneratedDocument(path=f"{CONTENT_DIR}/{PACKAGE_HREF}", media_type=OPF_MEDIA_TYPE, content=text)
