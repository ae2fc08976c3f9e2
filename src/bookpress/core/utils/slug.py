"""File name generation for delivered books"""

import re


def safe_filename(text: str, fallback: str) -> str:
    """Strip characters unsafe in file names; return fallback when nothing usable remains."""
    text = re.sub(r'\s+', ' ', text)
    text = re.sub(r'[\x00-\x1f\x7f<>:"/\\|?*]', '', text)
    text = re.sub(r' +', ' ', text).strip(' .')
    return text or fallback
