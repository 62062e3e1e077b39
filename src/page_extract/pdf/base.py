"""Contract for PDF text extraction collaborators."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PdfPageStats(BaseModel):
    """Page and size statistics reported by a PDF extractor."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    extracted_pages: int = 0
    total_pages: int = 0
    char_count: int = 0
    word_count: int = 0


class PdfTextResult(BaseModel):
    """Outcome of a PDF text extraction."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    text: str | None = None
    metadata: PdfPageStats | None = None
    error: str | None = None


class PdfTextExtractor(ABC):
    """Extract text from the current page when it is a PDF document."""

    @abstractmethod
    def is_pdf_page(self) -> bool:
        """Whether the current page is a PDF document."""
        pass

    @abstractmethod
    async def extract_text(self) -> PdfTextResult:
        """Extract the document's text.

        Failures are reported through ``success=False`` and ``error``
        rather than raised.
        """
        pass
