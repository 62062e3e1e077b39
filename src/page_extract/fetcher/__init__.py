"""Page fetching with optional JavaScript rendering."""

from page_extract.fetcher.base import BaseFetcher, FetchResult, OpenedPage
from page_extract.fetcher.http_fetcher import HttpFetcher
from page_extract.fetcher.playwright_fetcher import PlaywrightFetcher

__all__ = [
    "BaseFetcher",
    "FetchResult",
    "OpenedPage",
    "PlaywrightFetcher",
    "HttpFetcher",
]
