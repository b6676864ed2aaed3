# ============================================================================
# src/clinical_consolidation/processors/diagnoses.py
# ============================================================================
"""
Diagnoses - most recently recorded first, undated entries last
"""

from typing import List, Sequence

from clinical_consolidation.core.records import Diagnosis
from clinical_consolidation.core.sorting import sort_by_date
from .base_processor import BaseProcessor


def sort_diagnoses_by_date(diagnoses: Sequence[Diagnosis]) -> List[Diagnosis]:
    return sort_by_date(diagnoses, "recorded_date", descending=True)


class DiagnosisProcessor(BaseProcessor):

    def get_name(self) -> str:
        return "DiagnosisProcessor"

    def process(self, diagnoses: Sequence[Diagnosis]) -> List[Diagnosis]:
        return sort_diagnoses_by_date(diagnoses)
