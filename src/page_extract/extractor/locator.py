"""Selection of the main content region."""

import asyncio
import logging
from dataclasses import dataclass
from time import monotonic

from bs4 import Tag

from page_extract.config import ExtractionConfig
from page_extract.document import DocumentSnapshot, DocumentSource
from page_extract.extractor.noise_filter import NoiseFilter

logger = logging.getLogger(__name__)


@dataclass
class LocatedContent:
    """The chosen content region and its filtered text."""

    element: Tag
    selector: str
    text: str


class ContentLocator:
    """Find the element most likely to hold the article.

    Selectors are tried in priority order and the first one whose filtered
    text is long enough wins. There is no scoring beyond that order.
    """

    def __init__(self, config: ExtractionConfig, noise_filter: NoiseFilter):
        self.config = config
        self.noise_filter = noise_filter

    async def await_readiness(
        self,
        source: DocumentSource,
        timeout_ms: int | None = None,
        poll_interval_ms: int | None = None,
    ) -> None:
        """Wait, best effort, for late-rendered content to appear.

        Polls until a readiness selector's text is longer than
        ``min_content_length`` or ``timeout_ms`` has elapsed. Always returns
        normally; the document is checked at least once.
        """
        if timeout_ms is None:
            timeout_ms = self.config.readiness_timeout_ms
        if poll_interval_ms is None:
            poll_interval_ms = self.config.readiness_poll_interval_ms

        start = monotonic()
        while True:
            try:
                snapshot = await source.capture()
            except Exception:
                logger.debug("Snapshot failed while waiting for content", exc_info=True)
            else:
                selector = self._ready_selector(snapshot)
                if selector:
                    logger.debug("Content ready: %s", selector)
                    return

            if (monotonic() - start) * 1000 > timeout_ms:
                logger.debug("Timed out waiting for content after %d ms", timeout_ms)
                return

            await asyncio.sleep(poll_interval_ms / 1000)

    def _ready_selector(self, snapshot: DocumentSnapshot) -> str | None:
        for selector in self.config.readiness_selectors:
            element = snapshot.soup.select_one(selector)
            if element and len(element.get_text()) > self.config.min_content_length:
                return selector
        return None

    def locate(self, snapshot: DocumentSnapshot) -> LocatedContent | None:
        """Pick the content region, falling back to ``<body>``.

        Returns None only when the document has no body.
        """
        for selector in self.config.content_selectors:
            element = snapshot.soup.select_one(selector)
            if element is None:
                continue
            text = self.noise_filter.filter_to_text(element)
            if len(text) > self.config.min_content_length:
                logger.debug("Main content found: %s", selector)
                return LocatedContent(element=element, selector=selector, text=text)

        body = snapshot.body
        if body is None:
            return None
        logger.debug("Falling back to body")
        return LocatedContent(
            element=body, selector="body", text=self.noise_filter.filter_to_text(body)
        )
