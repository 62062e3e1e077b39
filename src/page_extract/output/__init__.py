"""Output writers."""

from page_extract.output.writer import ResultWriter, format_reply

__all__ = [
    "ResultWriter",
    "format_reply",
]
