"""Tests for the transport-facing message handler."""

import pytest

from page_extract.document import StaticDocumentSource
from page_extract.handler import handle_message
from page_extract.pdf import PdfTextResult
from tests.helpers import ARTICLE_TEXT, FakePdfExtractor

pytestmark = pytest.mark.asyncio

URL = "https://blog.example.com/post"


async def test_extract_content_reply(fast_config, article_html):
    reply = await handle_message(
        {"action": "extractContent"},
        StaticDocumentSource(article_html, url=URL),
        config=fast_config,
    )

    assert reply["success"] is True
    assert ARTICLE_TEXT in reply["content"]
    assert reply["stats"]["charCount"] == len(reply["content"])
    assert reply["stats"]["wordCount"] > 0
    assert reply["metadata"]["domain"] == "blog.example.com"
    assert reply["metadata"]["language"] == "en"
    assert "isPDF" not in reply["metadata"]


async def test_pdf_reply(fast_config, pdf_success):
    reply = await handle_message(
        {"action": "extractContent"},
        StaticDocumentSource("", url=URL),
        pdf_success,
        config=fast_config,
    )

    assert reply["success"] is True
    assert reply["metadata"]["isPDF"] is True
    assert reply["metadata"]["pdfPages"] == 3
    assert reply["stats"] == {"charCount": 999, "wordCount": 77}


async def test_failed_extraction_reply(fast_config):
    pdf = FakePdfExtractor(PdfTextResult(success=False, error="corrupt"))

    reply = await handle_message(
        {"action": "extractContent"},
        StaticDocumentSource("", url=URL),
        pdf,
        config=fast_config,
    )

    assert reply == {"success": False, "error": "corrupt", "content": ""}


async def test_check_pdf_extractor(pdf_success):
    source = StaticDocumentSource("", url=URL)

    assert await handle_message({"action": "checkPDFExtractor"}, source, pdf_success) == {
        "initialized": True,
        "available": True,
    }
    assert await handle_message({"action": "checkPDFExtractor"}, source) == {
        "initialized": False,
        "available": False,
    }


async def test_ping():
    reply = await handle_message({"action": "ping"}, StaticDocumentSource("", url=URL))

    assert reply == {"success": True}


async def test_unknown_action():
    reply = await handle_message({"action": "showSummaryBadge"}, StaticDocumentSource(""))

    assert reply == {"success": False, "error": "Unknown action"}
