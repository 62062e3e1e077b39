"""Simple HTTP fetcher for static pages."""

import httpx

from page_extract.config import FetcherConfig
from page_extract.exceptions import FetchError
from page_extract.fetcher.base import BaseFetcher, FetchResult, OpenedPage


class HttpFetcher(BaseFetcher):
    """Simple HTTP fetcher without JavaScript rendering."""

    def __init__(self, config: FetcherConfig):
        super().__init__(config)
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        """Initialize HTTP client."""
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
            timeout=self.config.timeout_ms / 1000,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up HTTP client."""
        if self._client:
            await self._client.aclose()

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a page via HTTP."""
        if not self._client:
            raise RuntimeError("Fetcher not initialized. Use 'async with' context manager.")

        try:
            response = await self._client.get(url)
            content_type = response.headers.get("content-type", "")
            return FetchResult(
                url=url,
                final_url=str(response.url),
                html="" if "application/pdf" in content_type else response.text,
                content=response.content,
                content_type=content_type,
                status_code=response.status_code,
            )

        except httpx.HTTPError as e:
            return FetchResult(
                url=url,
                final_url=url,
                html="",
                status_code=0,
                error=str(e) or type(e).__name__,
            )

    async def open(self, url: str) -> OpenedPage:
        result = await self.fetch(url)
        if not result.success:
            raise FetchError(url, result.error or f"HTTP {result.status_code}", result.status_code)
        return self._opened_from_result(result)
