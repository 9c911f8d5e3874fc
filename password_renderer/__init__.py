"""
Password Renderer - HTML tables of passwords with grouped cells and links.

This package renders credential records (site, username, password, custom
fields and secret questions) as a single HTML table:

- Optional columns are shown only when some record uses them
- Equal adjacent site and custom field values share one row-spanning cell
- Custom field values may link to other documents, in-page or by path

Main Components:
- Models: Password records, tables and document references
- Layout: Column planning and row grouping
- Links: Cross-reference resolution
- Renderers: Streaming HTML output
- Context: Interface to the host document pipeline
"""

from .exceptions import (
    PasswordRendererError,
    ConfigurationError,
    RenderingError,
    LinkError,
    ElementNotFoundError,
    GeneratedIdLinkError,
)
from .config import PasswordTableConfig
from .context import IRenderContext, StaticRenderContext, page_anchor_id
from .models import CustomField, Document, DocumentRef, Element, PasswordRecord, PasswordTable
from .renderers import PasswordTableRenderer, write_password, write_password_table
from .api import render_password, render_password_table

__version__ = "1.0.0"

__all__ = [
    "PasswordRendererError",
    "ConfigurationError",
    "RenderingError",
    "LinkError",
    "ElementNotFoundError",
    "GeneratedIdLinkError",
    "PasswordTableConfig",
    "IRenderContext",
    "StaticRenderContext",
    "page_anchor_id",
    "CustomField",
    "Document",
    "DocumentRef",
    "Element",
    "PasswordRecord",
    "PasswordTable",
    "PasswordTableRenderer",
    "write_password",
    "write_password_table",
    "render_password",
    "render_password_table",
]
