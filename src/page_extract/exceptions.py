"""Exception types raised by the extraction pipeline."""


class PageExtractError(Exception):
    """Base class for page-extract errors."""


class ExtractionError(PageExtractError):
    """Extraction of a page failed."""


class PdfExtractionError(ExtractionError):
    """The PDF collaborator reported a failure or returned no text."""


class FrameAccessError(PageExtractError):
    """An embedded frame's document cannot be read (cross-origin)."""


class FetchError(PageExtractError):
    """A page could not be fetched."""

    def __init__(self, url: str, message: str, status_code: int = 0):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status_code = status_code
