"""
Tests for the high-level API.
"""

import pytest

import password_renderer
from password_renderer import (
    CustomField,
    ElementNotFoundError,
    PasswordRecord,
    PasswordTable,
    StaticRenderContext,
    render_password,
    render_password_table,
)


@pytest.mark.integration
class TestRenderPasswordTable:
    """Test cases for render_password_table."""

    def test_returns_complete_table(self, render_context, sample_records):
        html = render_password_table(render_context, PasswordTable(header="Logins"), sample_records)

        assert html.startswith('<table class="thinTable passwordTable">')
        assert html.endswith("</tbody>\n</table>")
        assert html.count("<tr>") == 2 + 4

    def test_records_are_optional(self):
        table = PasswordTable(children=[PasswordRecord("pw", username="u")])

        html = render_password_table(StaticRenderContext(), table)

        assert "<th>Username</th>" in html
        assert "<span>pw</span>" in html

    def test_error_propagates(self, render_context, accounts_ref):
        record = PasswordRecord("pw", custom_fields={"x": CustomField.reference(accounts_ref, "missing")})

        with pytest.raises(ElementNotFoundError):
            render_password_table(render_context, PasswordTable(), [record])


def test_render_password(render_context, accounts_ref):
    assert render_password(render_context, PasswordRecord("pw", id="a"), accounts_ref) == '<span id="a">pw</span>'


def test_package_exports():
    assert password_renderer.__version__
    for name in password_renderer.__all__:
        assert hasattr(password_renderer, name)
