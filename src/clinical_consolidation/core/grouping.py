# ============================================================================
# src/clinical_consolidation/core/grouping.py
# ============================================================================
"""
Temporal Grouping

Buckets records by a caller-supplied day key. Grouping never reorders the
records inside a bucket; callers re-sort each group afterwards when a
specific intra-day order is needed.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Generic, List, Sequence, TypeVar

from .dates import sort_timestamp

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class DateGroup(Generic[T]):
    """One calendar day and the records that fall on it."""
    key: str
    items: List[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


def group_by_date(records: Sequence[T], key_fn: Callable[[T], str]) -> List[DateGroup[T]]:
    """
    Group records by day key.

    Args:
        records: Records to group
        key_fn: Maps a record to its day key (e.g. "2024-01-15")

    Returns:
        One DateGroup per distinct key, in first-seen key order, items in
        input order
    """
    groups: Dict[str, DateGroup[T]] = {}
    for record in records:
        day_key = key_fn(record)
        if day_key not in groups:
            groups[day_key] = DateGroup(key=day_key)
        groups[day_key].items.append(record)

    logger.debug(f"Grouped {len(records)} records into {len(groups)} days")
    return list(groups.values())


def sort_groups_by_date(
    groups: Sequence[DateGroup[T]],
    descending: bool = True
) -> List[DateGroup[T]]:
    """Order groups by their day key, most recent day first by default."""
    return sorted(groups, key=lambda group: sort_timestamp(group.key), reverse=descending)


def map_group_items(
    groups: Sequence[DateGroup[T]],
    transform: Callable[[List[T]], List[T]]
) -> List[DateGroup[T]]:
    """Return new groups with `transform` applied to each group's items."""
    return [replace(group, items=transform(list(group.items))) for group in groups]
