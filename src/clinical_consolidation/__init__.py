# ============================================================================
# src/clinical_consolidation/__init__.py
# ============================================================================
"""
Clinical Record Consolidation

Turns the raw clinical collections fetched for one patient (radiology and
lab orders, medications, allergies, diagnoses, vital signs) into the
ordered, grouped and de-duplicated views a clinician reads.
"""

__version__ = "0.1.0"

from .core import (
    get_priority_by_order,
    filter_replacement_entries,
    sort_by_priority,
    sort_by_date_distance,
    group_by_date,
)
from .processors import (
    RadiologyProcessor,
    LabProcessor,
    MedicationProcessor,
    AllergyProcessor,
    DiagnosisProcessor,
    VitalFlowSheetProcessor,
)

__all__ = [
    '__version__',
    'get_priority_by_order',
    'filter_replacement_entries',
    'sort_by_priority',
    'sort_by_date_distance',
    'group_by_date',
    'RadiologyProcessor',
    'LabProcessor',
    'MedicationProcessor',
    'AllergyProcessor',
    'DiagnosisProcessor',
    'VitalFlowSheetProcessor',
]
