"""
Cross-reference resolution for custom field values.

A custom field may point at another document, or at one element of it. The
resolver captures the target through the render context, validates the
element, picks the address and the label, and writes the anchor.

Addresses come in two forms. A document that is part of the current
rendering batch is linked with an in-page fragment (``#page3-login``), since
the whole batch ends up in one output. Any other document is linked by path.

A target that cannot be captured is a broken link: it is rendered as a
fallback label and never fails the render. A missing or generated element id
on a captured document is an authoring error and is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..config import PasswordTableConfig
from ..exceptions import ElementNotFoundError, GeneratedIdLinkError
from ..models.document import Document, DocumentRef, Element
from ..models.password import CustomField
from ..context import IRenderContext
from ..utils.enums import CaptureLevel
from ..utils.escaping import HtmlWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkResult:
    """A resolvable link: where it goes, what it says and how it is styled."""

    address: str
    label: str
    css_class: Optional[str] = None
    ordinal: Optional[int] = None


@dataclass(frozen=True)
class BrokenLink:
    """A link whose target could not be captured, shown as text only."""

    label: str
    document: DocumentRef


Resolution = Union[LinkResult, BrokenLink]


class LinkResolver:
    """Resolve and write custom field links for one render call."""

    def __init__(self, context: IRenderContext, config: Optional[PasswordTableConfig] = None) -> None:
        self.context = context
        self.config = config or PasswordTableConfig()

    def resolve(self, field: CustomField) -> Resolution:
        """
        Resolve a custom field reference.

        Args:
            field: Field with a document reference

        Returns:
            LinkResult, or BrokenLink when the document cannot be captured and
            the field has no label of its own

        Raises:
            ElementNotFoundError: The element id is not on the target document
            GeneratedIdLinkError: The element id was generated by the system
        """
        if field.document is None:
            raise ValueError("Only document references can be resolved")

        ref = field.document
        element_id = field.element
        # TODO: capture all references of a table in one batch so the host can capture concurrently
        target = self._capture(ref, element_id)
        target_element = self._find_element(target, element_id)

        if target is None and field.value is None:
            label = self.config.broken_link_template.format(path=ref.prefixed_path)
            logger.debug(f"Broken link to {ref}, rendering fallback label {label!r}")
            return BrokenLink(label=label, document=ref)

        index = self.context.get_batch_index(ref)
        return LinkResult(
            address=self._address(ref, element_id, index),
            label=self._label(field, target, target_element),
            css_class=self.context.get_link_css_class(target_element) if target_element is not None else None,
            ordinal=index + 1 if index is not None else None,
        )

    def write(self, out: HtmlWriter, field: CustomField) -> None:
        """Write a custom field value, linking it when it is a reference."""
        if not field.is_reference:
            out.text(field.value)
            return

        resolution = self.resolve(field)
        if isinstance(resolution, BrokenLink):
            out.text(resolution.label)
            return

        out.markup("<a").attribute("href", resolution.address).attribute("class", resolution.css_class)
        out.markup(">").text(resolution.label)
        if resolution.ordinal is not None and self.config.show_batch_ordinal:
            out.markup("<sup>[").text(resolution.ordinal).markup("]</sup>")
        out.markup("</a>")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _capture(self, ref: DocumentRef, element_id: Optional[str]) -> Optional[Document]:
        if not self.context.is_document_accessible(ref):
            logger.debug(f"Document {ref} is not accessible, not capturing")
            return None
        level = CaptureLevel.PAGE if element_id is None else CaptureLevel.META
        return self.context.capture_document(ref, level)

    def _find_element(self, target: Optional[Document], element_id: Optional[str]) -> Optional[Element]:
        if target is None or element_id is None:
            return None
        element = target.get_element_by_id(element_id)
        if element is None:
            logger.debug(f"Element {element_id!r} not found in {target.ref}")
            raise ElementNotFoundError(target.ref, element_id)
        if target.is_generated_id(element_id):
            logger.debug(f"Element {element_id!r} in {target.ref} has a generated id")
            raise GeneratedIdLinkError(target.ref, element_id)
        return element

    def _address(self, ref: DocumentRef, element_id: Optional[str], index: Optional[int]) -> str:
        if index is not None:
            return "#" + self.context.new_anchor_id(ref, element_id)
        path = ref.prefixed_path
        if element_id is not None:
            path = f"{path}#{element_id}"
        return self.context.build_address(path)

    def _label(self, field: CustomField, target: Optional[Document],
               target_element: Optional[Element]) -> str:
        if field.value is not None:
            return field.value
        if target_element is not None:
            return target_element.label
        # resolve() only gets here with a captured target
        return target.title
