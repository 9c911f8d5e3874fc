"""
Simple high-level API.

Renders to a string instead of a caller-supplied sink. On error nothing is
returned, so there is no partial output to discard.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from .config import PasswordTableConfig
from .context import IRenderContext
from .models.document import DocumentRef
from .models.password import PasswordRecord
from .models.password_table import PasswordTable
from .renderers.password_renderer import write_password
from .renderers.password_table_renderer import PasswordTableRenderer
from .utils.escaping import HtmlWriter


def render_password_table(
    context: IRenderContext,
    table: PasswordTable,
    records: Optional[Iterable[PasswordRecord]] = None,
    style: Optional[str] = None,
    config: Optional[PasswordTableConfig] = None,
) -> str:
    """
    Render a password table to HTML.

    Args:
        context: Host collaborators
        table: Table settings and child records
        records: Records listed before the table's own children
        style: Inline CSS, overriding ``table.style``
        config: Markup settings

    Returns:
        HTML of the ``<table>`` element
    """
    buffer = StringIO()
    PasswordTableRenderer(context, config).write(buffer, table, records, style)
    return buffer.getvalue()


def render_password(context: IRenderContext, record: PasswordRecord,
                    document: Optional[DocumentRef] = None) -> str:
    """Render a single password as an HTML ``<span>``."""
    buffer = StringIO()
    write_password(HtmlWriter(buffer), record, context, document)
    return buffer.getvalue()
