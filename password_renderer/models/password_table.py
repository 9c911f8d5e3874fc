"""Password table model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .document import DocumentRef
from .password import PasswordRecord


@dataclass(frozen=True)
class PasswordTable:
    """
    Table-level settings of a rendered password table.

    Attributes:
        id: Anchor id of the table within ``document``.
        header: Caption row text.
        style: Inline CSS for the ``<table>`` element.
        children: Records declared on the table itself.
        body: Pre-rendered markup shown below the records.
        document: Document that owns the table, used to build anchor ids.
    """

    id: Optional[str] = None
    header: Optional[str] = None
    style: Optional[str] = None
    children: Tuple[PasswordRecord, ...] = ()
    body: str = ""
    document: Optional[DocumentRef] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def all_records(self, records: Optional[Iterable[PasswordRecord]] = None) -> List[PasswordRecord]:
        """Caller-supplied records followed by the table's own children."""
        combined = list(records) if records is not None else []
        combined.extend(self.children)
        return combined
