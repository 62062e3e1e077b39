"""Content extraction from web pages."""

from page_extract.extractor.aggregator import CrossBoundaryAggregator
from page_extract.extractor.locator import ContentLocator, LocatedContent
from page_extract.extractor.main_content import (
    ContentExtractor,
    ExtractionResult,
    ExtractionState,
    Stats,
)
from page_extract.extractor.metadata import Metadata, MetadataExtractor
from page_extract.extractor.noise_filter import NoiseFilter

__all__ = [
    "ContentExtractor",
    "ContentLocator",
    "CrossBoundaryAggregator",
    "ExtractionResult",
    "ExtractionState",
    "LocatedContent",
    "Metadata",
    "MetadataExtractor",
    "NoiseFilter",
    "Stats",
]
