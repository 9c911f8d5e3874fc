"""
Host pipeline collaborators used while rendering.

The renderer does not capture documents, check access or encode URLs on its
own. It asks an ``IRenderContext`` supplied by the host. ``StaticRenderContext``
is a ready-made in-memory implementation for hosts that already hold every
document they may link to.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence
from urllib.parse import quote, urlsplit

from .models.document import Document, DocumentRef
from .utils.enums import CaptureLevel

logger = logging.getLogger(__name__)


class IRenderContext(ABC):
    """Interface for the host pipeline a table is rendered within."""

    @abstractmethod
    def is_document_accessible(self, ref: DocumentRef) -> bool:
        """Whether the current request may read the referenced document."""

    @abstractmethod
    def capture_document(self, ref: DocumentRef, level: CaptureLevel) -> Optional[Document]:
        """Capture a document, blocking until done. ``None`` when it does not exist."""

    @abstractmethod
    def get_batch_index(self, ref: DocumentRef) -> Optional[int]:
        """Zero-based position of the document in the current rendering batch, if any."""

    @abstractmethod
    def build_address(self, path: str) -> str:
        """Turn a context-relative path (or an external URL) into an encoded address."""

    @abstractmethod
    def new_anchor_id(self, ref: Optional[DocumentRef], raw_id: Optional[str]) -> str:
        """Stable ``id`` attribute for an element of a document."""

    def get_link_css_class(self, node: Any) -> Optional[str]:
        """CSS class for links to ``node``."""
        return getattr(node, "link_css_class", None)


def page_anchor_id(index: Optional[int], raw_id: Optional[str]) -> str:
    """
    Anchor id of an element within a batch of pages.

    Pages in the batch are numbered from one, so ``(1, "login")`` becomes
    ``page2-login`` and ``(1, None)`` addresses the page itself as ``page2``.
    Outside a batch the raw id is used unchanged.
    """
    if index is None:
        if raw_id is None:
            raise ValueError("An anchor id needs a batch index or a raw id")
        return raw_id
    if raw_id is None:
        return f"page{index + 1}"
    return f"page{index + 1}-{raw_id}"


class StaticRenderContext(IRenderContext):
    """
    In-memory render context.

    Args:
        documents: Documents that can be captured
        inaccessible_books: Book prefixes the current request may not read
        batch: Documents rendered together in this pass, in order
        context_path: Prefix for absolute paths, e.g. ``"/app"``
        link_css_classes: Link CSS class by node type
    """

    def __init__(
        self,
        documents: Iterable[Document] = (),
        inaccessible_books: Iterable[str] = (),
        batch: Sequence[DocumentRef] = (),
        context_path: str = "",
        link_css_classes: Optional[Mapping[type, str]] = None,
    ) -> None:
        self.documents: Dict[DocumentRef, Document] = {document.ref: document for document in documents}
        self.inaccessible_books = frozenset(inaccessible_books)
        self.batch = {ref: position for position, ref in enumerate(batch)}
        self.context_path = context_path.rstrip("/")
        self.link_css_classes = dict(link_css_classes or {})
        self.captures = []

    def is_document_accessible(self, ref: DocumentRef) -> bool:
        return ref.book not in self.inaccessible_books

    def capture_document(self, ref: DocumentRef, level: CaptureLevel) -> Optional[Document]:
        self.captures.append((ref, level))
        document = self.documents.get(ref)
        if document is None:
            logger.debug(f"No document to capture for {ref}")
        return document

    def get_batch_index(self, ref: DocumentRef) -> Optional[int]:
        return self.batch.get(ref)

    def build_address(self, path: str) -> str:
        if urlsplit(path).scheme:
            return path
        if path.startswith("/"):
            path = self.context_path + path
        return quote(path, safe="/#?&=;:@!$'()*+,~%")

    def new_anchor_id(self, ref: Optional[DocumentRef], raw_id: Optional[str]) -> str:
        index = self.get_batch_index(ref) if ref is not None else None
        return page_anchor_id(index, raw_id)

    def get_link_css_class(self, node: Any) -> Optional[str]:
        for node_type, css_class in self.link_css_classes.items():
            if isinstance(node, node_type):
                return css_class
        return super().get_link_css_class(node)
