"""Shared fixtures for page-extract tests."""

import pytest

from page_extract.config import ExtractionConfig
from page_extract.pdf import PdfPageStats, PdfTextResult
from tests.helpers import ARTICLE_TEXT, FakePdfExtractor


@pytest.fixture
def fast_config():
    """Default config without the readiness wait."""
    return ExtractionConfig(readiness_timeout_ms=0, readiness_poll_interval_ms=1)


@pytest.fixture
def article_html():
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <title>Transit plan approved</title>
  <meta name="description" content="Council backs new transit plan">
  <meta name="author" content="Jane Park">
  <meta name="keywords" content="transit, city council , trams">
</head>
<body>
  <nav>Home | World | Sports</nav>
  <article>
    <h1>Transit plan approved</h1>
    <p>{ARTICLE_TEXT}</p>
    <div class="advertisement">Buy our product now</div>
    <script>window.tracker = true;</script>
  </article>
  <footer>Copyright Example News</footer>
</body>
</html>"""


@pytest.fixture
def pdf_success():
    return FakePdfExtractor(
        PdfTextResult(
            success=True,
            text="Quarterly report text",
            metadata=PdfPageStats(
                extracted_pages=3, total_pages=10, char_count=999, word_count=77
            ),
        )
    )
