# ============================================================================
# src/clinical_consolidation/core/replacement.py
# ============================================================================
"""
Replacement-Chain Resolver

An amended or reissued order declares the ids it replaces. Neither side of
such a relationship is shown: the superseding record and every record it
names are both dropped, so only orders untouched by any revision remain.

A set-membership filter is enough for chains of any length. Every link
after the root has a non-empty `replaces` (drops itself) and every link
before the tip is referenced by its successor (dropped via the id set).
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _record_id(record: Any) -> str:
    return record.id


def _record_replaces(record: Any) -> Optional[Sequence[str]]:
    return getattr(record, "replaces", None)


def collect_replaced_ids(
    records: Iterable[T],
    get_replaces: Callable[[T], Optional[Sequence[str]]] = _record_replaces
) -> set:
    """Union of every id named in any record's replaces field."""
    replaced = set()
    for record in records:
        replaced.update(get_replaces(record) or ())
    return replaced


def filter_replacement_entries(
    records: Sequence[T],
    get_id: Callable[[T], str] = _record_id,
    get_replaces: Callable[[T], Optional[Sequence[str]]] = _record_replaces
) -> List[T]:
    """
    Drop every record that replaces another or is replaced by another.

    Args:
        records: Records with an id and an optional replaces sequence
        get_id: Reads a record's id
        get_replaces: Reads a record's replaces ids (None or empty = none)

    Returns:
        New list of the surviving records in input order
    """
    replaced_ids = collect_replaced_ids(records, get_replaces)

    filtered = [
        record for record in records
        if not get_replaces(record) and get_id(record) not in replaced_ids
    ]

    if len(filtered) != len(records):
        logger.debug(
            f"Replacement filter dropped {len(records) - len(filtered)} "
            f"of {len(records)} records"
        )

    return filtered
