"""Rendering routines for password tables."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from ..config import PasswordTableConfig
from ..context import IRenderContext
from ..layout.column_planner import ColumnPlan, plan_columns
from ..layout.run_grouper import RowSpanTracker
from ..links.link_resolver import LinkResolver
from ..models.password import PasswordRecord
from ..models.password_table import PasswordTable
from ..utils.escaping import HtmlWriter
from .password_renderer import write_password

logger = logging.getLogger(__name__)

_HREF_COLUMN = object()


class PasswordTableRenderer:
    """
    Stream a password table as HTML.

    Output goes to the sink row by row. When a link cannot be resolved the
    error propagates and whatever was written so far must be discarded.
    """

    def __init__(self, context: IRenderContext, config: Optional[PasswordTableConfig] = None) -> None:
        self.context = context
        self.config = config or PasswordTableConfig()

    def write(self, out: TextIO, table: PasswordTable,
              records: Optional[Iterable[PasswordRecord]] = None,
              style: Optional[str] = None) -> None:
        """
        Write the table.

        Args:
            out: Text sink with a ``write`` method
            table: Table settings and child records
            records: Records listed before the table's own children
            style: Inline CSS, overriding ``table.style``
        """
        writer = HtmlWriter(out)
        all_records = table.all_records(records)
        plan = plan_columns(all_records)
        logger.debug(f"Rendering password table with {len(all_records)} records")

        self._write_table_start(writer, table, style)
        self._write_header(writer, table, plan)
        writer.markup("</thead>\n<tbody>\n")
        self._write_body_rows(writer, table, plan, all_records)
        self._write_trailing_body(writer, table, plan)
        writer.markup("</tbody>\n</table>")

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------
    def _write_table_start(self, out: HtmlWriter, table: PasswordTable, style: Optional[str]) -> None:
        out.markup("<table")
        if table.id is not None:
            out.attribute("id", self.context.new_anchor_id(table.document, table.id))
        out.attribute("class", self.config.table_css_class)
        out.attribute("style", style if style is not None else table.style)
        out.markup(">\n<thead>\n")

    def _write_header(self, out: HtmlWriter, table: PasswordTable, plan: ColumnPlan) -> None:
        if table.header is not None:
            out.markup("<tr>\n<th").attribute("class", self.config.header_css_class)
            out.span_attribute("colspan", plan.column_count)
            out.markup("><div>").text(table.header).markup("</div></th>\n</tr>\n")

        if plan.column_count > 1:
            out.markup("<tr>\n")
            for heading in plan.headings(self.config):
                out.markup("<th>").text(heading).markup("</th>\n")
            out.markup("</tr>\n")

    def _write_body_rows(self, out: HtmlWriter, table: PasswordTable, plan: ColumnPlan,
                         records: List[PasswordRecord]) -> None:
        links = LinkResolver(self.context, self.config)
        spans = RowSpanTracker([record.row_weight for record in records])

        for index, record in enumerate(records):
            questions = self._question_rows(record)
            for row in range(record.row_weight):
                out.markup("<tr>\n")
                if row == 0:
                    self._write_primary_cells(out, table, plan, records, index, spans, links)
                if plan.has_secret_question:
                    question, answer = next(questions)
                    out.markup("<td>").text(question).markup("</td>\n")
                    out.markup("<td>").text(answer).markup("</td>\n")
                out.markup("</tr>\n")

    def _write_primary_cells(self, out: HtmlWriter, table: PasswordTable, plan: ColumnPlan,
                             records: List[PasswordRecord], index: int,
                             spans: RowSpanTracker, links: LinkResolver) -> None:
        record = records[index]

        if plan.has_href:
            span = spans.span_at(_HREF_COLUMN, index, lambda i: records[i].href)
            if span is not None:
                out.markup("<td").span_attribute("rowspan", span).markup(">")
                if record.href is not None:
                    out.markup("<a").attribute("href", self.context.build_address(record.href))
                    out.markup(">").text(record.href).markup("</a>")
                out.markup("</td>\n")

        for name in plan.custom_field_names:
            span = spans.span_at(name, index, lambda i: records[i].custom_fields.get(name))
            if span is not None:
                out.markup("<td").span_attribute("rowspan", span).markup(">")
                value = record.custom_fields.get(name)
                if value is not None:
                    links.write(out, value)
                out.markup("</td>\n")

        if plan.has_username:
            out.markup("<td").span_attribute("rowspan", record.row_weight).markup(">")
            out.text(record.username).markup("</td>\n")

        out.markup("<td").span_attribute("rowspan", record.row_weight).markup(">")
        write_password(out, record, self.context, table.document)
        out.markup("</td>\n")

    def _write_trailing_body(self, out: HtmlWriter, table: PasswordTable, plan: ColumnPlan) -> None:
        if not table.body:
            return
        out.markup("<tr><td").attribute("class", self.config.body_css_class)
        out.span_attribute("colspan", plan.column_count)
        out.markup(">").markup(table.body).markup("</td></tr>\n")

    @staticmethod
    def _question_rows(record: PasswordRecord) -> Iterator[Tuple[Optional[str], Optional[str]]]:
        """Secret question pairs in order, then empty pairs forever."""
        yield from record.secret_questions.items()
        while True:
            yield None, None


def write_password_table(context: IRenderContext, out: TextIO, table: PasswordTable,
                         records: Optional[Iterable[PasswordRecord]] = None,
                         style: Optional[str] = None,
                         config: Optional[PasswordTableConfig] = None) -> None:
    """Write ``table`` and ``records`` to ``out`` as an HTML table."""
    PasswordTableRenderer(context, config).write(out, table, records, style)
