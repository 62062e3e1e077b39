"""URL manipulation utilities."""

from urllib.parse import urljoin, urlparse

_DEFAULT_PORTS = {"http": 80, "https": 443}


def get_hostname(url: str) -> str:
    """Extract the lowercased hostname (without port) from a URL."""
    if not url:
        return ""
    return urlparse(url).hostname or ""


def origin_of(url: str) -> tuple[str, str, int | None]:
    """Return the (scheme, host, port) origin tuple of a URL."""
    parsed = urlparse(url)
    scheme = parsed.scheme.lower()
    try:
        port = parsed.port
    except ValueError:
        port = None
    if port is None:
        port = _DEFAULT_PORTS.get(scheme)
    return scheme, (parsed.hostname or ""), port


def is_same_origin(page_url: str, frame_url: str) -> bool:
    """Check whether a frame URL shares the page's origin.

    ``about:blank`` and ``about:srcdoc`` frames inherit the origin of the
    page that embeds them.
    """
    if not frame_url or frame_url.startswith("about:"):
        return True
    return origin_of(page_url) == origin_of(frame_url)


def make_absolute(base_url: str, href: str) -> str:
    """Convert a potentially relative URL to absolute."""
    if not base_url:
        return href
    return urljoin(base_url, href)


def looks_like_pdf(url: str) -> bool:
    """Check if a URL path points at a PDF document."""
    return urlparse(url).path.lower().endswith(".pdf")
