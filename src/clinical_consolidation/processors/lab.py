# ============================================================================
# src/clinical_consolidation/processors/lab.py
# ============================================================================
"""
Lab Investigations

Lab orders are shown one accordion per ordered day, newest day first.
Within a day, urgent tests come first; the rest keep the order the
service returned them in.
"""

import logging
from typing import List, Sequence

from clinical_consolidation.constants import LAB_PRIORITY_ORDER
from clinical_consolidation.core.dates import to_date_key
from clinical_consolidation.core.grouping import (
    DateGroup,
    group_by_date,
    map_group_items,
    sort_groups_by_date,
)
from clinical_consolidation.core.records import LabTest
from clinical_consolidation.core.replacement import filter_replacement_entries
from clinical_consolidation.core.sorting import sort_by_priority
from .base_processor import BaseProcessor

logger = logging.getLogger(__name__)


def sort_lab_tests_by_priority(tests: Sequence[LabTest]) -> List[LabTest]:
    """Urgent tests first, remaining order untouched."""
    return sort_by_priority(tests, LAB_PRIORITY_ORDER, "priority")


def group_lab_tests_by_date(tests: Sequence[LabTest]) -> List[DateGroup[LabTest]]:
    """
    Group current lab tests by ordered day.

    Args:
        tests: Formatted lab tests

    Returns:
        Day groups, newest first, urgent tests leading each group
    """
    current = filter_replacement_entries(tests)
    groups = sort_groups_by_date(
        group_by_date(current, lambda test: to_date_key(test.ordered_date))
    )
    return map_group_items(groups, sort_lab_tests_by_priority)


class LabProcessor(BaseProcessor):

    def get_name(self) -> str:
        return "LabProcessor"

    def process(self, tests: Sequence[LabTest]) -> List[DateGroup[LabTest]]:
        groups = group_lab_tests_by_date(tests)
        self.logger.debug(f"{len(tests)} lab tests in {len(groups)} days")
        return groups
