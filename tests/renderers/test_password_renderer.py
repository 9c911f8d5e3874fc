"""
Tests for single password rendering.
"""

from io import StringIO

from password_renderer.context import StaticRenderContext
from password_renderer.models import DocumentRef, PasswordRecord
from password_renderer.renderers.password_renderer import write_password
from password_renderer.utils.escaping import HtmlWriter


def _write(record, context, document=None):
    buffer = StringIO()
    write_password(HtmlWriter(buffer), record, context, document)
    return buffer.getvalue()


def test_plain_password(render_context):
    assert _write(PasswordRecord("a<b"), render_context) == "<span>a&lt;b</span>"


def test_id_without_document_is_omitted(render_context):
    assert _write(PasswordRecord("pw", id="root"), render_context) == "<span>pw</span>"


def test_id_and_class(accounts_ref):
    context = StaticRenderContext(link_css_classes={PasswordRecord: "password-link"})

    html = _write(PasswordRecord("pw", id="root"), context, accounts_ref)

    assert html == '<span id="root" class="password-link">pw</span>'


def test_id_in_batch():
    page = DocumentRef("/page.html")
    context = StaticRenderContext(batch=[DocumentRef("/other.html"), page])

    assert _write(PasswordRecord("pw", id="root"), context, page) == '<span id="page2-root">pw</span>'
