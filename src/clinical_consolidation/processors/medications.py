# ============================================================================
# src/clinical_consolidation/processors/medications.py
# ============================================================================
"""
Medication Requests

Three views over the same fetched list:

1. All medications: grouped by status (active → on-hold → completed →
   stopped → cancelled → anything else)
2. Active & scheduled: STAT before everything else, start date closest to
   today breaking ties, followed by on-hold medications with STAT first
3. By order date: one group per order day, newest first; within a day
   grouped by status, priority order inside each status

Multi-key orderings are sequential stable passes, primary key last.

Medications are not run through the replacement filter: a renewal points
back to the prescription it renews and both stay visible.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from clinical_consolidation.constants import (
    MEDICATION_PRIORITY_ORDER,
    MEDICATION_STATUS_ORDER,
)
from clinical_consolidation.core.dates import to_date_key
from clinical_consolidation.core.grouping import (
    DateGroup,
    group_by_date,
    map_group_items,
    sort_groups_by_date,
)
from clinical_consolidation.core.priority import get_priority_by_order
from clinical_consolidation.core.records import MedicationRequest
from clinical_consolidation.core.sorting import sort_by_date_distance, sort_by_priority
from clinical_consolidation.utils.logging import log_performance
from .base_processor import BaseProcessor

logger = logging.getLogger(__name__)

ACTIVE = "active"
ON_HOLD = "on-hold"


def sort_medications_by_status(medications: Sequence[MedicationRequest]) -> List[MedicationRequest]:
    return sort_by_priority(medications, MEDICATION_STATUS_ORDER, "status")


def medication_priority_token(medication: MedicationRequest) -> str:
    """Ranked value for a medication: "stat" when flagged immediate, else its own priority."""
    return "stat" if medication.is_immediate else medication.priority


def get_medication_priority(medication: MedicationRequest) -> int:
    """0 for immediate medications, SENTINEL_PRIORITY for the rest."""
    return get_priority_by_order(medication_priority_token(medication), MEDICATION_PRIORITY_ORDER)


def sort_medications_by_priority(medications: Sequence[MedicationRequest]) -> List[MedicationRequest]:
    """Immediate medications first, everything else in input order."""
    return sort_by_priority(medications, MEDICATION_PRIORITY_ORDER, medication_priority_token)


def sort_medications_by_date_distance(
    medications: Sequence[MedicationRequest],
    today: Optional[date] = None
) -> List[MedicationRequest]:
    """Start date closest to today first, in either direction."""
    return sort_by_date_distance(medications, "start_date", today)


class MedicationProcessor(BaseProcessor):
    """
    Consolidates a patient's medication requests.

    Config:
        status_order: override for MEDICATION_STATUS_ORDER
        priority_order: override for MEDICATION_PRIORITY_ORDER
    """

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.status_order = self.config.get('status_order', MEDICATION_STATUS_ORDER)
        self.priority_order = self.config.get('priority_order', MEDICATION_PRIORITY_ORDER)

    def get_name(self) -> str:
        return "MedicationProcessor"

    def _by_status(self, medications: Sequence[MedicationRequest]) -> List[MedicationRequest]:
        return sort_by_priority(medications, self.status_order, "status")

    def _by_priority(self, medications: Sequence[MedicationRequest]) -> List[MedicationRequest]:
        return sort_by_priority(medications, self.priority_order, medication_priority_token)

    @log_performance(logger, "Medication consolidation")
    def process(self, medications: Sequence[MedicationRequest]) -> List[MedicationRequest]:
        return self.all_medications(medications)

    def all_medications(self, medications: Sequence[MedicationRequest]) -> List[MedicationRequest]:
        """Medications grouped by status, input order kept within a status."""
        result = self._by_status(medications)
        self.logger.debug(f"{len(result)} medications sorted by status")
        return result

    def active_and_scheduled(
        self,
        medications: Sequence[MedicationRequest],
        today: Optional[date] = None
    ) -> List[MedicationRequest]:
        """
        Active medications followed by scheduled (on-hold) ones.

        Active: STAT first, start date nearest to today breaks ties.
        Scheduled: STAT first, input order otherwise.
        """
        current = self.all_medications(medications)

        active = [medication for medication in current if medication.status == ACTIVE]
        active = self._by_priority(sort_by_date_distance(active, "start_date", today))

        scheduled = self._by_priority(
            [medication for medication in current if medication.status == ON_HOLD]
        )
        return active + scheduled

    def group_by_date(
        self,
        medications: Sequence[MedicationRequest]
    ) -> List[DateGroup[MedicationRequest]]:
        """Order-day groups, newest first; status then priority inside each day."""
        current = self.all_medications(medications)
        if not current:
            return []

        groups = sort_groups_by_date(
            group_by_date(current, lambda medication: to_date_key(medication.order_date))
        )
        return map_group_items(
            groups,
            lambda items: self._by_status(self._by_priority(items)),
        )
