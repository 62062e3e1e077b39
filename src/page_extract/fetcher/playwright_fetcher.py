"""Playwright-based fetcher for JavaScript-rendered pages."""

import logging

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from page_extract.config import FetcherConfig
from page_extract.document.playwright_source import PlaywrightDocumentSource
from page_extract.exceptions import FetchError
from page_extract.fetcher.base import BaseFetcher, FetchResult, OpenedPage
from page_extract.utils.url_utils import looks_like_pdf

logger = logging.getLogger(__name__)


class PlaywrightFetcher(BaseFetcher):
    """Open pages in headless Chromium.

    Pages stay open until the fetcher exits so that their sources can keep
    capturing snapshots while content renders.
    """

    def __init__(self, config: FetcherConfig):
        super().__init__(config)
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._pages: list[Page] = []

    async def __aenter__(self):
        """Initialize Playwright browser."""
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(headless=True)
            self._context = await self._browser.new_context(
                user_agent=self.config.user_agent,
                viewport={
                    "width": self.config.viewport_width,
                    "height": self.config.viewport_height,
                },
            )
        except Exception:
            await self.__aexit__(None, None, None)
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close pages and clean up Playwright resources."""
        for page in self._pages:
            try:
                await page.close()
            except PlaywrightError:
                logger.debug("Failed to close page during cleanup", exc_info=True)
        self._pages.clear()
        if self._context:
            await self._context.close()
        if self._browser:
            await self._browser.close()
        if self._playwright:
            await self._playwright.stop()

    async def open(self, url: str) -> OpenedPage:
        """Navigate to a page; PDFs are downloaded instead of rendered."""
        if not self._context:
            raise RuntimeError("Fetcher not initialized. Use 'async with' context manager.")

        if looks_like_pdf(url):
            return await self._open_pdf(url)

        page = await self._context.new_page()
        self._pages.append(page)
        try:
            response = await page.goto(
                url,
                wait_until="domcontentloaded",
                timeout=self.config.timeout_ms,
            )
        except PlaywrightError as e:
            raise FetchError(url, str(e)) from e

        if response is None:
            raise FetchError(url, "No response received")
        if response.status >= 400:
            raise FetchError(url, f"HTTP {response.status}", response.status)

        return OpenedPage(
            url=url,
            final_url=page.url,
            status_code=response.status,
            source=PlaywrightDocumentSource(page),
        )

    async def _open_pdf(self, url: str) -> OpenedPage:
        assert self._context is not None
        try:
            response = await self._context.request.get(url, timeout=self.config.timeout_ms)
            body = await response.body()
        except PlaywrightError as e:
            raise FetchError(url, str(e)) from e

        result = FetchResult(
            url=url,
            final_url=response.url,
            html="",
            content=body,
            content_type=response.headers.get("content-type", ""),
            status_code=response.status,
        )
        if not result.success:
            raise FetchError(url, f"HTTP {result.status_code}", result.status_code)
        return self._opened_from_result(result)
