"""Visible column detection for password tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..config import PasswordTableConfig
from ..models.password import PasswordRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnPlan:
    """Columns shown by a password table, fixed before any row is written."""

    has_href: bool = False
    custom_field_names: Tuple[str, ...] = ()
    has_username: bool = False
    has_secret_question: bool = False

    @property
    def column_count(self) -> int:
        count = 1  # password
        if self.has_href:
            count += 1
        count += len(self.custom_field_names)
        if self.has_username:
            count += 1
        if self.has_secret_question:
            count += 2
        return count

    def headings(self, config: PasswordTableConfig) -> List[str]:
        """Column headings in output order."""
        headings: List[str] = []
        if self.has_href:
            headings.append(config.site_label)
        headings.extend(self.custom_field_names)
        if self.has_username:
            headings.append(config.username_label)
        headings.append(config.password_label)
        if self.has_secret_question:
            headings.append(config.secret_question_label)
            headings.append(config.secret_answer_label)
        return headings


def plan_columns(records: Iterable[PasswordRecord]) -> ColumnPlan:
    """
    Scan records once and decide which optional columns are needed.

    Custom field names keep the order in which they are first seen.
    """
    has_href = False
    custom_field_names = {}
    has_username = False
    has_secret_question = False
    for record in records:
        if record.href is not None:
            has_href = True
        for name in record.custom_fields:
            custom_field_names.setdefault(name, None)
        if record.username is not None:
            has_username = True
        if record.secret_questions:
            has_secret_question = True

    plan = ColumnPlan(
        has_href=has_href,
        custom_field_names=tuple(custom_field_names),
        has_username=has_username,
        has_secret_question=has_secret_question,
    )
    logger.debug(f"Planned {plan.column_count} columns, custom fields: {list(plan.custom_field_names)}")
    return plan
