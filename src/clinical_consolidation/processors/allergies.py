# ============================================================================
# src/clinical_consolidation/processors/allergies.py
# ============================================================================
"""
Allergies - ordered by severity: severe → moderate → mild → unrecorded
"""

from typing import List, Optional, Sequence

from clinical_consolidation.constants import ALLERGY_SEVERITY_ORDER
from clinical_consolidation.core.priority import get_priority_by_order
from clinical_consolidation.core.records import Allergy
from clinical_consolidation.core.sorting import sort_by_priority
from .base_processor import BaseProcessor


def get_severity_priority(severity: Optional[str]) -> int:
    """Numeric priority for sorting (lower = more severe)."""
    return get_priority_by_order(severity, ALLERGY_SEVERITY_ORDER)


def sort_allergies_by_severity(allergies: Sequence[Allergy]) -> List[Allergy]:
    return sort_by_priority(allergies, ALLERGY_SEVERITY_ORDER, "severity")


class AllergyProcessor(BaseProcessor):

    def get_name(self) -> str:
        return "AllergyProcessor"

    def process(self, allergies: Sequence[Allergy]) -> List[Allergy]:
        return sort_allergies_by_severity(allergies)
