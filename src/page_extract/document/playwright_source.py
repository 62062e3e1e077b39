"""Document source backed by a live Playwright page."""

import logging

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from page_extract.document.snapshot import (
    DocumentSnapshot,
    DocumentSource,
    FrameSnapshot,
    ShadowRootSnapshot,
)
from page_extract.utils.url_utils import is_same_origin

logger = logging.getLogger(__name__)

# Open shadow roots one level deep, as [hostTagName, innerHTML] pairs.
_SHADOW_ROOTS_JS = """() => {
    const roots = [];
    for (const el of document.querySelectorAll('*')) {
        if (el.shadowRoot) {
            roots.push([el.tagName.toLowerCase(), el.shadowRoot.innerHTML]);
        }
    }
    return roots;
}"""


class PlaywrightDocumentSource(DocumentSource):
    """Capture snapshots from a rendered page without modifying it."""

    def __init__(self, page: Page):
        self.page = page

    async def capture(self) -> DocumentSnapshot:
        url = self.page.url
        html = await self.page.content()
        frames = await self._capture_frames(url)
        shadow_roots = [
            ShadowRootSnapshot(host=host, html=inner)
            for host, inner in await self.page.evaluate(_SHADOW_ROOTS_JS)
        ]
        return DocumentSnapshot(
            url=url,
            soup=BeautifulSoup(html, "lxml"),
            frames=frames,
            shadow_roots=shadow_roots,
        )

    async def _capture_frames(self, page_url: str) -> list[FrameSnapshot]:
        """Read same-origin iframe documents in DOM order."""
        frames = []
        for handle in await self.page.query_selector_all("iframe"):
            frame = await handle.content_frame()
            src = frame.url if frame else (await handle.get_attribute("src") or "")
            frame_html = None
            if frame is not None and is_same_origin(page_url, frame.url):
                try:
                    frame_html = await frame.content()
                except PlaywrightError:
                    logger.debug("Failed to read frame %s", src, exc_info=True)
            frames.append(FrameSnapshot(src=src, html=frame_html))
        return frames
