"""Utility functions."""

from page_extract.utils.text import count_words, normalize_text
from page_extract.utils.url_utils import get_hostname, is_same_origin, make_absolute

__all__ = [
    "count_words",
    "normalize_text",
    "get_hostname",
    "is_same_origin",
    "make_absolute",
]
