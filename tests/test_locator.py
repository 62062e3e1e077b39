"""Tests for content region selection and the readiness wait."""

import pytest

from page_extract.config import ExtractionConfig
from page_extract.document import DocumentSnapshot
from page_extract.extractor import ContentLocator, NoiseFilter
from tests.helpers import ARTICLE_TEXT, FailingSource, SequenceSource


@pytest.fixture
def locator(fast_config):
    return ContentLocator(fast_config, NoiseFilter(fast_config.noise))


class TestLocate:
    def test_first_qualifying_selector_wins(self, locator):
        snapshot = DocumentSnapshot.from_html(
            f"<body><main><p>{ARTICLE_TEXT}</p></main>"
            f"<article><p>{ARTICLE_TEXT} Second copy.</p></article></body>"
        )

        located = locator.locate(snapshot)

        assert located.selector == "article"
        assert "Second copy." in located.text

    def test_skips_region_that_is_short_after_filtering(self, locator):
        snapshot = DocumentSnapshot.from_html(
            f"<body><article><aside>{ARTICLE_TEXT}</aside><p>short</p></article>"
            f"<div class='post'><p>{ARTICLE_TEXT}</p></div></body>"
        )

        located = locator.locate(snapshot)

        assert located.selector == ".post"

    def test_falls_back_to_body(self, locator):
        snapshot = DocumentSnapshot.from_html(
            "<body><div><p>Only a short note.</p></div></body>"
        )

        located = locator.locate(snapshot)

        assert located.selector == "body"
        assert located.text == "Only a short note."

    def test_no_body(self, locator):
        snapshot = DocumentSnapshot.from_html("")

        assert locator.locate(snapshot) is None


@pytest.mark.asyncio
class TestAwaitReadiness:
    async def test_returns_once_content_appears(self):
        config = ExtractionConfig(readiness_timeout_ms=5000, readiness_poll_interval_ms=1)
        locator = ContentLocator(config, NoiseFilter())
        source = SequenceSource(
            "<body><main>Loading...</main></body>",
            "<body><main>Loading...</main></body>",
            f"<body><main>{ARTICLE_TEXT}</main></body>",
        )

        await locator.await_readiness(source)

        assert source.captures == 3

    async def test_times_out_without_error(self):
        config = ExtractionConfig(readiness_timeout_ms=30, readiness_poll_interval_ms=5)
        locator = ContentLocator(config, NoiseFilter())
        source = SequenceSource("<body><p>never ready</p></body>")

        await locator.await_readiness(source)

        assert source.captures >= 2

    async def test_zero_timeout_checks_at_least_once(self, locator):
        source = SequenceSource("<body><p>never ready</p></body>")

        await locator.await_readiness(source)

        assert 1 <= source.captures <= 2

    async def test_keeps_polling_until_timeout_is_exceeded(self, locator, monkeypatch):
        clock = iter([0.0, 0.010, 0.011])
        monkeypatch.setattr("page_extract.extractor.locator.monotonic", lambda: next(clock))
        source = SequenceSource("<body><p>never ready</p></body>")

        await locator.await_readiness(source, timeout_ms=10, poll_interval_ms=1)

        assert source.captures == 2

    async def test_capture_failures_do_not_raise(self):
        config = ExtractionConfig(readiness_timeout_ms=10, readiness_poll_interval_ms=2)
        locator = ContentLocator(config, NoiseFilter())

        await locator.await_readiness(FailingSource())

    async def test_explicit_arguments_override_config(self, locator):
        source = SequenceSource("<body><p>never ready</p></body>")

        await locator.await_readiness(source, timeout_ms=20, poll_interval_ms=5)

        assert source.captures >= 2
