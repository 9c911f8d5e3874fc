"""Table layout: visible column planning and row-span grouping."""

from .column_planner import ColumnPlan, plan_columns
from .run_grouper import RowSpanTracker, RunGroup, group_runs, run_span

__all__ = [
    "ColumnPlan",
    "RowSpanTracker",
    "RunGroup",
    "group_runs",
    "plan_columns",
    "run_span",
]
