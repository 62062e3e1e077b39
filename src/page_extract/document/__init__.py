"""Document snapshots and sources."""

from page_extract.document.snapshot import (
    DocumentSnapshot,
    DocumentSource,
    FrameSnapshot,
    ShadowRootSnapshot,
    StaticDocumentSource,
)

__all__ = [
    "DocumentSnapshot",
    "DocumentSource",
    "FrameSnapshot",
    "ShadowRootSnapshot",
    "StaticDocumentSource",
]
