"""Request handling at the message transport boundary."""

import logging
from collections.abc import Mapping
from typing import Any

from page_extract.config import ExtractionConfig
from page_extract.document import DocumentSource
from page_extract.extractor import ContentExtractor
from page_extract.pdf import PdfTextExtractor

logger = logging.getLogger(__name__)


async def handle_message(
    request: Mapping[str, Any],
    source: DocumentSource,
    pdf_extractor: PdfTextExtractor | None = None,
    config: ExtractionConfig | None = None,
) -> dict[str, Any]:
    """Produce exactly one reply for a transport request.

    Supported actions are ``extractContent``, ``checkPDFExtractor`` and
    ``ping``. Extraction errors become ``success: False`` replies; the
    caller decides whether to ask again.
    """
    action = request.get("action")
    logger.debug("Received action: %s", action)

    if action == "extractContent":
        extractor = ContentExtractor(config)
        try:
            result = await extractor.extract(source, pdf_extractor)
        except Exception as e:
            logger.warning("Extraction failed: %s", e, exc_info=True)
            return {"success": False, "error": str(e), "content": ""}
        return result.to_reply()

    if action == "checkPDFExtractor":
        initialized = pdf_extractor is not None
        return {"initialized": initialized, "available": initialized}

    if action == "ping":
        return {"success": True}

    logger.warning("Unknown action: %s", action)
    return {"success": False, "error": "Unknown action"}
