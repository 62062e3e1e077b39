"""Base class for page fetchers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel

from page_extract.config import FetcherConfig
from page_extract.document import DocumentSource, StaticDocumentSource
from page_extract.pdf import PdfminerTextExtractor, PdfTextExtractor


class FetchResult(BaseModel):
    """Result of fetching a page over HTTP."""

    url: str
    final_url: str  # After redirects
    html: str
    content: bytes = b""
    content_type: str = ""
    status_code: int
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.status_code >= 200 and self.status_code < 400 and not self.error


@dataclass
class OpenedPage:
    """A page ready for extraction."""

    url: str
    final_url: str
    status_code: int
    source: DocumentSource
    pdf_extractor: PdfTextExtractor | None = None


class BaseFetcher(ABC):
    """Abstract base class for page fetchers."""

    def __init__(self, config: FetcherConfig):
        self.config = config

    @abstractmethod
    async def open(self, url: str) -> OpenedPage:
        """Load a page and return a source to extract from.

        Raises:
            FetchError: The page could not be loaded.
        """
        pass

    @staticmethod
    def _opened_from_result(result: FetchResult) -> OpenedPage:
        """Wrap a static fetch result, routing PDFs to the PDF extractor."""
        if "application/pdf" in result.content_type or result.content.startswith(b"%PDF-"):
            pdf = PdfminerTextExtractor(
                result.content,
                url=result.final_url,
                content_type=result.content_type,
            )
            return OpenedPage(
                url=result.url,
                final_url=result.final_url,
                status_code=result.status_code,
                source=StaticDocumentSource("", url=result.final_url),
                pdf_extractor=pdf,
            )
        return OpenedPage(
            url=result.url,
            final_url=result.final_url,
            status_code=result.status_code,
            source=StaticDocumentSource(result.html, url=result.final_url),
        )

    @abstractmethod
    async def __aenter__(self):
        """Async context manager entry."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        pass
