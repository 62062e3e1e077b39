"""Text from embedded frames and shadow roots."""

import logging

from page_extract.config import ExtractionConfig
from page_extract.document import DocumentSnapshot
from page_extract.exceptions import FrameAccessError

logger = logging.getLogger(__name__)


class CrossBoundaryAggregator:
    """Collect text that lives outside the main document tree.

    Only a length threshold is applied here; frame and shadow root text is
    not noise filtered.
    """

    def __init__(self, config: ExtractionConfig):
        self.config = config

    def from_frames(self, snapshot: DocumentSnapshot) -> str:
        """Body text of readable frames, in DOM order."""
        contents = []
        for frame in snapshot.frames:
            try:
                text = frame.body_text()
            except FrameAccessError:
                logger.debug("Skipping cross-origin frame %s", frame.src)
                continue
            if len(text) > self.config.min_content_length:
                logger.debug("Frame content found: %s", frame.src)
                contents.append(text)
        return "\n\n".join(contents)

    def from_shadow_roots(self, snapshot: DocumentSnapshot) -> str:
        """Text of top-level shadow roots; nested roots are not descended."""
        contents = []
        for root in snapshot.shadow_roots:
            text = root.text()
            if len(text) > self.config.shadow_min_length:
                logger.debug("Shadow root content found: <%s>", root.host)
                contents.append(text)
        return "\n\n".join(contents)
