"""Rendering of a single password outside of a table."""

from __future__ import annotations

from typing import Optional

from ..context import IRenderContext
from ..models.document import DocumentRef
from ..models.password import PasswordRecord
from ..utils.escaping import HtmlWriter


def write_password(out: HtmlWriter, record: PasswordRecord, context: IRenderContext,
                   document: Optional[DocumentRef] = None) -> None:
    """
    Write ``<span id="…" class="…">password</span>``.

    The ``id`` attribute is only written when the record has an id and the
    document it belongs to is known.
    """
    out.markup("<span")
    if record.id is not None and document is not None:
        out.attribute("id", context.new_anchor_id(document, record.id))
    out.attribute("class", context.get_link_css_class(record))
    out.markup(">").text(record.password).markup("</span>")
