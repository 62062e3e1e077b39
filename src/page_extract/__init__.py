"""Clean article text and metadata extraction from web pages."""

__version__ = "0.1.0"

from page_extract.config import ExtractionConfig, NoiseRules
from page_extract.document import DocumentSource, StaticDocumentSource
from page_extract.extractor import ContentExtractor, ExtractionResult, Metadata, Stats
from page_extract.handler import handle_message

__all__ = [
    "__version__",
    "ContentExtractor",
    "DocumentSource",
    "ExtractionConfig",
    "ExtractionResult",
    "Metadata",
    "NoiseRules",
    "StaticDocumentSource",
    "Stats",
    "handle_message",
]
