"""
Tests for visible column planning.
"""

import itertools

import pytest

from password_renderer.config import PasswordTableConfig
from password_renderer.layout.column_planner import ColumnPlan, plan_columns
from password_renderer.models import PasswordRecord


class TestPlanColumns:
    """Test cases for plan_columns."""

    def test_empty_input_has_only_password_column(self):
        plan = plan_columns([])

        assert plan == ColumnPlan()
        assert plan.column_count == 1

    def test_all_optional_columns(self, sample_records):
        plan = plan_columns(sample_records)

        assert plan.has_href
        assert plan.has_username
        assert plan.has_secret_question
        assert plan.custom_field_names == ("Environment",)
        assert plan.column_count == 1 + 1 + 1 + 1 + 2

    def test_custom_field_names_keep_first_seen_order(self):
        records = [
            PasswordRecord("a", custom_fields={"Zone": "1", "Account": "x"}),
            PasswordRecord("b", custom_fields={"Pin": "9", "Zone": "2"}),
        ]

        plan = plan_columns(records)

        assert plan.custom_field_names == ("Zone", "Account", "Pin")
        assert plan.column_count == 4

    def test_username_only_needs_one_record(self):
        plan = plan_columns([PasswordRecord("a"), PasswordRecord("b", username="root")])

        assert plan.has_username
        assert not plan.has_href
        assert plan.column_count == 2

    def test_accepts_generator(self):
        plan = plan_columns(PasswordRecord(p, href="h") for p in ["a", "b"])

        assert plan.has_href

    def test_column_count_invariant_under_permutation(self, sample_records):
        counts = {plan_columns(order).column_count for order in itertools.permutations(sample_records)}

        assert counts == {6}

    @pytest.mark.parametrize("record, expected", [
        (PasswordRecord("p"), 1),
        (PasswordRecord("p", href="h"), 2),
        (PasswordRecord("p", secret_questions={"q": "a"}), 3),
        (PasswordRecord("p", href="h", username="u", custom_fields={"a": "1", "b": "2"},
                        secret_questions={"q": "a"}), 7),
    ])
    def test_column_count_formula(self, record, expected):
        assert plan_columns([record]).column_count == expected


class TestColumnPlanHeadings:
    """Test cases for ColumnPlan.headings."""

    def test_fixed_order(self, sample_records):
        headings = plan_columns(sample_records).headings(PasswordTableConfig())

        assert headings == [
            "Site", "Environment", "Username", "Password", "Secret Question", "Secret Answer",
        ]

    def test_labels_come_from_config(self):
        config = PasswordTableConfig(password_label="Passwort")

        assert ColumnPlan().headings(config) == ["Passwort"]
