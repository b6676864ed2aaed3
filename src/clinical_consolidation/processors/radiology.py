# ============================================================================
# src/clinical_consolidation/processors/radiology.py
# ============================================================================
"""
Radiology Investigations

- Drops revised orders (both the revision and what it replaced)
- Orders by priority: stat → routine → anything else
- Optionally groups by ordered day, newest day first
"""

import logging
from typing import Any, Dict, List, Sequence

from clinical_consolidation.constants import RADIOLOGY_PRIORITY_ORDER
from clinical_consolidation.core.dates import to_date_key
from clinical_consolidation.core.grouping import (
    DateGroup,
    group_by_date,
    map_group_items,
    sort_groups_by_date,
)
from clinical_consolidation.core.priority import get_priority_by_order
from clinical_consolidation.core.records import RadiologyInvestigation
from clinical_consolidation.core.replacement import filter_replacement_entries
from clinical_consolidation.core.sorting import sort_by_priority
from clinical_consolidation.utils.logging import log_performance
from .base_processor import BaseProcessor

logger = logging.getLogger(__name__)


def get_radiology_priority(priority: str) -> int:
    """Numeric priority for sorting (lower = more urgent)."""
    return get_priority_by_order(priority, RADIOLOGY_PRIORITY_ORDER)


def sort_radiology_investigations_by_priority(
    investigations: Sequence[RadiologyInvestigation]
) -> List[RadiologyInvestigation]:
    """Stable sort stat → routine → unknown; returns a new list."""
    return sort_by_priority(investigations, RADIOLOGY_PRIORITY_ORDER, "priority")


def filter_radiology_replacement_entries(
    investigations: Sequence[RadiologyInvestigation]
) -> List[RadiologyInvestigation]:
    """Remove investigations that replace, or were replaced by, another."""
    return filter_replacement_entries(investigations)


class RadiologyProcessor(BaseProcessor):
    """
    Consolidates a patient's radiology orders.

    Config:
        priority_order: override for RADIOLOGY_PRIORITY_ORDER
    """

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.priority_order = self.config.get('priority_order', RADIOLOGY_PRIORITY_ORDER)

    def get_name(self) -> str:
        return "RadiologyProcessor"

    @log_performance(logger, "Radiology consolidation")
    def process(
        self,
        investigations: Sequence[RadiologyInvestigation]
    ) -> List[RadiologyInvestigation]:
        """Current orders only, most urgent first."""
        current = filter_radiology_replacement_entries(investigations)
        result = sort_by_priority(current, self.priority_order, "priority")
        self.logger.debug(f"{len(investigations)} investigations -> {len(result)} shown")
        return result

    def group_by_date(
        self,
        investigations: Sequence[RadiologyInvestigation]
    ) -> List[DateGroup[RadiologyInvestigation]]:
        """Current orders grouped by ordered day, newest first, urgent first within a day."""
        current = filter_radiology_replacement_entries(investigations)
        groups = sort_groups_by_date(
            group_by_date(current, lambda investigation: to_date_key(investigation.ordered_date))
        )
        return map_group_items(
            groups,
            lambda items: sort_by_priority(items, self.priority_order, "priority"),
        )
