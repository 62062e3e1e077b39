"""Main content extraction from web pages."""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from page_extract.config import ExtractionConfig
from page_extract.document import DocumentSource
from page_extract.exceptions import PdfExtractionError
from page_extract.extractor.aggregator import CrossBoundaryAggregator
from page_extract.extractor.locator import ContentLocator
from page_extract.extractor.metadata import Metadata, MetadataExtractor
from page_extract.extractor.noise_filter import NoiseFilter
from page_extract.pdf.base import PdfTextExtractor
from page_extract.utils.text import count_words, normalize_text

logger = logging.getLogger(__name__)


class Stats(BaseModel):
    """Size statistics of the extracted content."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    char_count: int = 0
    word_count: int = 0


class ExtractionResult(BaseModel):
    """Extracted content from a page."""

    model_config = ConfigDict(frozen=True)

    content: str
    metadata: Metadata
    stats: Stats

    def to_reply(self) -> dict:
        """Serialize as a successful ``extractContent`` reply."""
        return {
            "success": True,
            "content": self.content,
            "metadata": self.metadata.model_dump(by_alias=True, exclude_none=True),
            "stats": self.stats.model_dump(by_alias=True),
        }


class ExtractionState(str, Enum):
    """Where an extraction run currently is."""

    IDLE = "idle"
    DETECTING_FORMAT = "detecting_format"
    PDF_EXTRACTION = "pdf_extraction"
    STANDARD_EXTRACTION = "standard_extraction"
    DONE = "done"
    FAILED = "failed"


class ContentExtractor:
    """Extract main content and metadata from a document.

    One instance serves one extraction; it holds no state shared with other
    runs.
    """

    def __init__(self, config: ExtractionConfig | None = None):
        self.config = config or ExtractionConfig()
        self.noise_filter = NoiseFilter(self.config.noise)
        self.locator = ContentLocator(self.config, self.noise_filter)
        self.aggregator = CrossBoundaryAggregator(self.config)
        self.metadata_extractor = MetadataExtractor()
        self.state = ExtractionState.IDLE

    def _transition(self, state: ExtractionState) -> None:
        logger.debug("Extraction state %s -> %s", self.state.value, state.value)
        self.state = state

    async def extract(
        self,
        source: DocumentSource,
        pdf_extractor: PdfTextExtractor | None = None,
    ) -> ExtractionResult:
        """Extract content from ``source``.

        Takes the PDF branch when ``pdf_extractor`` reports the page as a
        PDF. Errors propagate to the caller; nothing is retried and no
        partial content is returned.
        """
        try:
            self._transition(ExtractionState.DETECTING_FORMAT)
            if pdf_extractor is not None and pdf_extractor.is_pdf_page():
                self._transition(ExtractionState.PDF_EXTRACTION)
                result = await self._extract_pdf(source, pdf_extractor)
            else:
                self._transition(ExtractionState.STANDARD_EXTRACTION)
                result = await self._extract_standard(source)
        except Exception:
            self._transition(ExtractionState.FAILED)
            raise

        self._transition(ExtractionState.DONE)
        logger.debug(
            "Extracted %d chars, %d words",
            result.stats.char_count,
            result.stats.word_count,
        )
        return result

    async def _extract_pdf(
        self, source: DocumentSource, pdf_extractor: PdfTextExtractor
    ) -> ExtractionResult:
        """Delegate to the PDF collaborator and trust its statistics."""
        pdf_result = await pdf_extractor.extract_text()
        if not pdf_result.success or not pdf_result.text:
            raise PdfExtractionError(pdf_result.error or "PDF extraction failed")

        pages = pdf_result.metadata
        snapshot = await source.capture()
        metadata = self.metadata_extractor.extract(snapshot).model_copy(
            update={
                "is_pdf": True,
                "pdf_pages": pages.extracted_pages if pages else None,
                "pdf_total_pages": pages.total_pages if pages else None,
            }
        )

        return ExtractionResult(
            content=pdf_result.text,
            metadata=metadata,
            stats=Stats(
                char_count=pages.char_count if pages else 0,
                word_count=pages.word_count if pages else 0,
            ),
        )

    async def _extract_standard(self, source: DocumentSource) -> ExtractionResult:
        await self.locator.await_readiness(source)
        snapshot = await source.capture()

        located = self.locator.locate(snapshot)
        main_text = located.text if located else ""
        frame_text = self.aggregator.from_frames(snapshot)
        shadow_text = self.aggregator.from_shadow_roots(snapshot)

        combined = self.config.section_separator.join(
            part for part in (main_text, frame_text, shadow_text) if part
        )

        metadata = self.metadata_extractor.extract(snapshot)
        content = normalize_text(combined, self.config.max_content_length)

        return ExtractionResult(
            content=content,
            metadata=metadata,
            stats=Stats(char_count=len(content), word_count=count_words(content)),
        )
