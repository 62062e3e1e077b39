"""Document snapshots and the sources that capture them."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from page_extract.exceptions import FrameAccessError
from page_extract.utils.url_utils import make_absolute

logger = logging.getLogger(__name__)

_SHADOW_ROOT_ATTRS = ("shadowrootmode", "shadowroot")


def _is_shadow_template(tag: Tag) -> bool:
    return tag.name == "template" and any(tag.has_attr(a) for a in _SHADOW_ROOT_ATTRS)


def _body_text(html: str) -> str:
    soup = BeautifulSoup(html, "lxml")
    body = soup.body
    return body.get_text() if body else ""


@dataclass
class FrameSnapshot:
    """An embedded frame, with its document HTML when it is readable."""

    src: str
    html: str | None = None

    @property
    def accessible(self) -> bool:
        return self.html is not None

    def body_text(self) -> str:
        """Return the raw text of the frame's body.

        Raises:
            FrameAccessError: The frame's document is cross-origin.
        """
        if self.html is None:
            raise FrameAccessError(f"Cannot access frame document: {self.src}")
        return _body_text(self.html)


@dataclass
class ShadowRootSnapshot:
    """A shadow root attached to a host element, serialized as HTML."""

    host: str
    html: str

    def text(self) -> str:
        """Text of this root only; nested shadow roots are not descended."""
        soup = BeautifulSoup(self.html, "lxml")
        for template in soup.find_all(_is_shadow_template):
            if not template.decomposed:
                template.decompose()
        return soup.get_text()


@dataclass
class DocumentSnapshot:
    """A parsed document captured at one point in time."""

    url: str
    soup: BeautifulSoup
    frames: list[FrameSnapshot] = field(default_factory=list)
    shadow_roots: list[ShadowRootSnapshot] = field(default_factory=list)

    @property
    def body(self) -> Tag | None:
        return self.soup.body

    @classmethod
    def from_html(
        cls,
        html: str,
        url: str = "",
        frame_documents: dict[str, str] | None = None,
    ) -> "DocumentSnapshot":
        """Parse an HTML document into a snapshot.

        Declarative shadow roots are detached from the main tree so that
        ordinary queries do not see them. ``srcdoc`` frames are readable;
        ``src`` frames are readable only when ``frame_documents`` maps their
        resolved URL to HTML, otherwise they behave as cross-origin.
        """
        soup = BeautifulSoup(html or "", "lxml")
        shadow_roots = _detach_shadow_roots(soup)

        frame_documents = frame_documents or {}
        frames = []
        for iframe in soup.find_all("iframe"):
            srcdoc = iframe.get("srcdoc")
            src = iframe.get("src") or ""
            if srcdoc is not None:
                frames.append(FrameSnapshot(src=src or "about:srcdoc", html=srcdoc))
                continue
            resolved = make_absolute(url, src) if src else "about:blank"
            frames.append(
                FrameSnapshot(src=resolved, html=frame_documents.get(resolved))
            )

        return cls(url=url, soup=soup, frames=frames, shadow_roots=shadow_roots)


def _detach_shadow_roots(soup: BeautifulSoup) -> list[ShadowRootSnapshot]:
    """Pull top-level declarative shadow roots out of the tree."""
    roots = []
    for template in soup.find_all(_is_shadow_template):
        # Nested roots travel with their enclosing template.
        if template.find_parent(_is_shadow_template):
            continue
        host = template.parent.name if template.parent else ""
        roots.append(ShadowRootSnapshot(host=host, html=template.decode_contents()))
        template.extract()
    return roots


class DocumentSource(ABC):
    """Something that can capture the current state of a document."""

    @abstractmethod
    async def capture(self) -> DocumentSnapshot:
        """Return a snapshot of the document as it is now."""
        pass


class StaticDocumentSource(DocumentSource):
    """A document that never changes, parsed once from HTML."""

    def __init__(
        self,
        html: str,
        url: str = "",
        frame_documents: dict[str, str] | None = None,
    ):
        self.url = url
        self._snapshot = DocumentSnapshot.from_html(html, url, frame_documents)

    async def capture(self) -> DocumentSnapshot:
        return self._snapshot
