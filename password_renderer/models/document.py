"""
Document reference models.

A password table can link custom field values to other documents managed by
the host pipeline. These classes describe such a target: ``DocumentRef``
names it, ``Document`` is what the pipeline hands back after capturing it and
``Element`` is an addressable part of that document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional
from types import MappingProxyType


@dataclass(frozen=True)
class DocumentRef:
    """Reference to a document, as a book prefix plus a path within the book."""

    path: str
    book: str = ""

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Document path must be a non-empty string")

    @property
    def prefixed_path(self) -> str:
        """Routable path of the document, relative to the context path."""
        return f"{self.book}{self.path}"

    def __str__(self) -> str:
        return self.prefixed_path


@dataclass(frozen=True)
class Element:
    """Addressable element inside a captured document."""

    id: str
    label: str = ""
    link_css_class: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """
    Captured view of a referenced document.

    Attributes:
        ref: Reference the document was captured from.
        title: Document title, used as link label fallback.
        elements: Elements by id.
        generated_ids: Ids assigned by the system rather than the author.
    """

    ref: DocumentRef
    title: str = ""
    elements: Mapping[str, Element] = field(default_factory=dict)
    generated_ids: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", MappingProxyType(dict(self.elements)))
        object.__setattr__(self, "generated_ids", frozenset(self.generated_ids))

    @classmethod
    def with_elements(cls, ref: DocumentRef, title: str = "", *elements: Element,
                      generated_ids: FrozenSet[str] = frozenset()) -> "Document":
        return cls(ref, title, {element.id: element for element in elements}, generated_ids)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self.elements.get(element_id)

    def is_generated_id(self, element_id: str) -> bool:
        return element_id in self.generated_ids
