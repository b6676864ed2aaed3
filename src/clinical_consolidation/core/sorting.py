# ============================================================================
# src/clinical_consolidation/core/sorting.py
# ============================================================================
"""
Multi-Key Stable Sorter

Orderings over several criteria are built from single-key passes rather
than one combined comparator: sort by the secondary key first, then by the
primary key. `sorted` is guaranteed stable, so the last pass decides the
overall order and earlier passes break its ties.

Example, status dominant with priority inside each status:

    by_priority = sort_by_priority(meds, MEDICATION_PRIORITY_ORDER, "priority")
    by_status = sort_by_priority(by_priority, MEDICATION_STATUS_ORDER, "status")
"""

import logging
from datetime import date
from typing import Any, Callable, List, Optional, Sequence, TypeVar, Union

from .dates import sort_timestamp, to_date
from .priority import get_priority_by_order

logger = logging.getLogger(__name__)

T = TypeVar("T")

FieldGetter = Union[str, Callable[[Any], Any]]


def _getter(key: FieldGetter) -> Callable[[Any], Any]:
    """Accept either an attribute/key name or a callable."""
    if callable(key):
        return key

    def read(record: Any) -> Any:
        if isinstance(record, dict):
            return record.get(key)
        return getattr(record, key, None)

    return read


def sort_by_priority(
    records: Sequence[T],
    order: Sequence[str],
    key: FieldGetter
) -> List[T]:
    """
    Stable sort by rank of one field against a priority order.

    Args:
        records: Records to sort (left untouched)
        order: Lowercase priority tokens, index 0 first
        key: Attribute name, dict key, or callable reading the ranked value

    Returns:
        New list, ascending rank, input order kept for equal ranks
    """
    read = _getter(key)
    return sorted(records, key=lambda record: get_priority_by_order(read(record), order))


def sort_by_priorities(
    records: Sequence[T],
    passes: Sequence[tuple]
) -> List[T]:
    """
    Apply several stable priority passes in sequence.

    Args:
        records: Records to sort
        passes: (order, key) pairs, least significant first; the last
            pair is the primary key

    Returns:
        New sorted list
    """
    result = list(records)
    for order, key in passes:
        result = sort_by_priority(result, order, key)
    return result


def date_distance(value: Any, today: date) -> float:
    """Absolute number of days between a date-like value and today (inf if unparseable)."""
    day = to_date(value)
    if day is None:
        return float("inf")
    return abs((day - today).days)


def sort_by_date_distance(
    records: Sequence[T],
    key: FieldGetter,
    today: Optional[date] = None
) -> List[T]:
    """
    Order records by how close their date is to today, either direction.

    Today comes first, then yesterday and tomorrow, then two days away,
    and so on. Equal distances keep input order; undated records go last.

    Args:
        records: Records to sort
        key: Field holding an ISO date string
        today: Reference day (defaults to the local current date)

    Returns:
        New sorted list
    """
    read = _getter(key)
    reference = today or date.today()
    return sorted(records, key=lambda record: date_distance(read(record), reference))


def sort_by_date(
    records: Sequence[T],
    key: FieldGetter,
    descending: bool = True
) -> List[T]:
    """
    Stable chronological sort, most recent first by default.

    Records whose date cannot be parsed always go last.
    """
    read = _getter(key)
    dated = []
    undated = []
    for record in records:
        if to_date(read(record)) is None:
            undated.append(record)
        else:
            dated.append(record)

    dated = sorted(dated, key=lambda record: sort_timestamp(read(record)), reverse=descending)
    return dated + undated
