"""PDF text extraction."""

from page_extract.pdf.base import PdfPageStats, PdfTextExtractor, PdfTextResult
from page_extract.pdf.pdfminer_extractor import PdfminerTextExtractor

__all__ = [
    "PdfPageStats",
    "PdfTextExtractor",
    "PdfTextResult",
    "PdfminerTextExtractor",
]
