"""
Password model.

Handles a single credential entry with its site, username, custom fields and
secret questions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .document import DocumentRef


@dataclass(frozen=True)
class CustomField:
    """
    Value of a custom password column.

    Either a literal ``value`` or a link to ``document`` (optionally to one of
    its elements), where ``value`` then overrides the link label. Two fields
    are equal when all three parts are equal, which is what row grouping
    compares.
    """

    value: Optional[str] = None
    document: Optional[DocumentRef] = None
    element: Optional[str] = None

    def __post_init__(self) -> None:
        if self.document is None:
            if self.value is None:
                raise ValueError("Custom field requires a value or a document reference")
            if self.element is not None:
                raise ValueError("Custom field element requires a document reference")

    @classmethod
    def literal(cls, value: str) -> "CustomField":
        return cls(value=value)

    @classmethod
    def reference(cls, document: DocumentRef, element: Optional[str] = None,
                  value: Optional[str] = None) -> "CustomField":
        return cls(value=value, document=document, element=element)

    @property
    def is_reference(self) -> bool:
        return self.document is not None


@dataclass(frozen=True)
class PasswordRecord:
    """
    One credential entry.

    Attributes:
        password: Password text, always shown as-is.
        id: Anchor id within the owning document.
        href: Site URL.
        username: Username, when known.
        custom_fields: Extra columns by name, in insertion order.
        secret_questions: Question to answer, in insertion order.
    """

    password: str
    id: Optional[str] = None
    href: Optional[str] = None
    username: Optional[str] = None
    custom_fields: Mapping[str, CustomField] = field(default_factory=dict)
    secret_questions: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.password is None:
            raise ValueError("Password is required")
        fields = {
            name: value if isinstance(value, CustomField) else CustomField.literal(value)
            for name, value in self.custom_fields.items()
        }
        object.__setattr__(self, "custom_fields", MappingProxyType(fields))
        object.__setattr__(self, "secret_questions", MappingProxyType(dict(self.secret_questions)))

    @property
    def row_weight(self) -> int:
        """Number of physical table rows this record occupies, never less than one."""
        return max(1, len(self.secret_questions))
