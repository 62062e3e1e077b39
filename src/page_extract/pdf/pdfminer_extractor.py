"""PDF text extraction with pdfminer.six."""

import asyncio
import io
import logging

from pdfminer.high_level import extract_text
from pdfminer.pdfpage import PDFPage

from page_extract.pdf.base import PdfPageStats, PdfTextExtractor, PdfTextResult
from page_extract.utils.text import count_words
from page_extract.utils.url_utils import looks_like_pdf

logger = logging.getLogger(__name__)

_PDF_MAGIC = b"%PDF-"


class PdfminerTextExtractor(PdfTextExtractor):
    """Extract text from PDF bytes.

    Args:
        data: Raw PDF document.
        url: Where the document came from, used for detection and logs.
        content_type: Response content type, if known.
        max_pages: Extract at most this many pages (0 = all).
    """

    def __init__(
        self,
        data: bytes,
        url: str = "",
        content_type: str | None = None,
        max_pages: int = 0,
    ):
        self.data = data
        self.url = url
        self.content_type = content_type
        self.max_pages = max_pages

    def is_pdf_page(self) -> bool:
        if self.content_type and self.content_type.split(";")[0].strip() == "application/pdf":
            return True
        if self.url and looks_like_pdf(self.url):
            return True
        return self.data.lstrip()[:5] == _PDF_MAGIC

    async def extract_text(self) -> PdfTextResult:
        try:
            return await asyncio.to_thread(self._extract)
        except Exception as e:
            logger.debug("pdfminer failed on %s", self.url or "<bytes>", exc_info=True)
            return PdfTextResult(success=False, error=str(e) or type(e).__name__)

    def _extract(self) -> PdfTextResult:
        total_pages = sum(1 for _ in PDFPage.get_pages(io.BytesIO(self.data)))
        extracted_pages = min(total_pages, self.max_pages) if self.max_pages else total_pages

        text = extract_text(io.BytesIO(self.data), maxpages=self.max_pages).strip()
        if not text:
            return PdfTextResult(
                success=False,
                error="No extractable text in PDF",
                metadata=PdfPageStats(extracted_pages=extracted_pages, total_pages=total_pages),
            )

        return PdfTextResult(
            success=True,
            text=text,
            metadata=PdfPageStats(
                extracted_pages=extracted_pages,
                total_pages=total_pages,
                char_count=len(text),
                word_count=count_words(text),
            ),
        )
