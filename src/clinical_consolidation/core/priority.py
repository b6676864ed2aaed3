# ============================================================================
# src/clinical_consolidation/core/priority.py
# ============================================================================
"""
Priority Ranking

Maps a domain value (severity, order priority, lifecycle status) to its
position in a reference order. Every sorter builds on this one lookup so
that unexpected values always land after recognised ones.
"""

from typing import Optional, Sequence

from clinical_consolidation.constants.priority_orders import SENTINEL_PRIORITY


def get_priority_by_order(value: Optional[str], order: Sequence[str]) -> int:
    """
    Rank a value against an ordered list of lowercase tokens.

    Args:
        value: Domain value in any case; None and "" are unranked
        order: Canonical lowercase tokens, index 0 = highest priority

    Returns:
        0-based index of the case-insensitive match, or SENTINEL_PRIORITY
    """
    if not value:
        return SENTINEL_PRIORITY

    normalized = value.lower()
    for index, token in enumerate(order):
        if token == normalized:
            return index
    return SENTINEL_PRIORITY
