"""
Row grouping for spanned table cells.

Adjacent records with an equal value in a column share a single cell that
spans all of their physical rows. A record occupies ``row_weight`` physical
rows (one per secret question, at least one), so the span of a run is the sum
of its members' weights rather than the number of members.

Grouping is computed per column: two columns can break their runs at
different records.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, Iterator, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Equals = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class RunGroup(Generic[T]):
    """First member of a run: its position, value and total row-span."""

    index: int
    value: T
    span: int
    length: int = 1


def run_span(items: Sequence[Tuple[T, int]], start: int,
             equals: Equals = operator.eq) -> Tuple[int, int]:
    """
    Measure the run beginning at ``start``.

    Args:
        items: ``(value, weight)`` pairs
        start: Index of the first member of the run
        equals: Value comparison

    Returns:
        ``(span, length)``: summed weights and number of members
    """
    value, span = items[start]
    end = start + 1
    while end < len(items):
        ahead_value, ahead_weight = items[end]
        if not equals(value, ahead_value):
            break
        span += ahead_weight
        end += 1
    return span, end - start


def group_runs(items: Sequence[Tuple[T, int]],
               equals: Equals = operator.eq) -> Iterator[RunGroup[T]]:
    """
    Partition ``(value, weight)`` pairs into maximal runs of equal values.

    Yields one ``RunGroup`` per run; later members of a run are skipped.
    """
    index = 0
    while index < len(items):
        span, length = run_span(items, index, equals)
        yield RunGroup(index=index, value=items[index][0], span=span, length=length)
        index += length


class RowSpanTracker:
    """
    Per-render bookkeeping of cells already covered by an earlier run.

    The renderer asks for the span of a column at each record as it streams
    rows. The first record of a run gets the run's span; the following
    members get ``None`` and their cell is omitted.
    """

    def __init__(self, weights: Sequence[int], equals: Equals = operator.eq) -> None:
        self.weights = weights
        self.equals = equals
        self._records_left: Dict[Hashable, int] = {}

    def span_at(self, column: Hashable, index: int, values: Callable[[int], Any]) -> Optional[int]:
        """
        Row-span of ``column`` at record ``index``, or ``None`` when covered.

        Args:
            column: Column key
            index: Record position, visited in increasing order
            values: Returns the column value of the record at a position
        """
        left = self._records_left.get(column)
        if left:
            if left == 1:
                del self._records_left[column]
            else:
                self._records_left[column] = left - 1
            return None

        span, length = run_span(_ColumnItems(values, self.weights), index, self.equals)
        if length > 1:
            self._records_left[column] = length - 1
            logger.debug(f"Column {column!r} groups records {index}..{index + length - 1} into {span} rows")
        return span


class _ColumnItems(Sequence):
    """Lazy ``(value, weight)`` view of one column, read only as far as a run reaches."""

    def __init__(self, values: Callable[[int], Any], weights: Sequence[int]) -> None:
        self._values = values
        self._weights = weights

    def __len__(self) -> int:
        return len(self._weights)

    def __getitem__(self, index):
        return self._values(index), self._weights[index]
