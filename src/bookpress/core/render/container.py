"""META-INF/container.xml pointing readers at the package document"""

from bookpress.core.models import CONTAINER_PATH, OPF_MEDIA_TYPE, GeneratedDocument
from bookpress.core.utils.xml import escape


def render_container(package_path: str) -> GeneratedDocument:
    text = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">\n'
        "  <rootfiles>\n"
        f'    <rootfile full-path="{escape(package_path, "package_path")}" media-type="{OPF_MEDIA_TYPE}"/>\n'
        "  </rootfiles>\n"
        "</container>\n"
    )
    return GeneratedDocument(path=CONTAINER_PATH, media_type="application/xml", content=text)
