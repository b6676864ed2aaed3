# ============================================================================
# src/clinical_consolidation/processors/__init__.py
# ============================================================================
"""
Processors Package

One consolidator per clinical table:
- Radiology (replacement filter, priority order, day groups)
- Lab (replacement filter, day groups, urgent first)
- Medications (status / priority / date-distance orderings, day groups)
- Allergies (severity order)
- Diagnoses (recorded date, newest first)
- Vitals (flow sheet rows with combined blood pressure)
"""

from .base_processor import BaseProcessor
from .radiology import (
    RadiologyProcessor,
    get_radiology_priority,
    sort_radiology_investigations_by_priority,
    filter_radiology_replacement_entries,
)
from .lab import LabProcessor, group_lab_tests_by_date, sort_lab_tests_by_priority
from .medications import (
    MedicationProcessor,
    sort_medications_by_status,
    sort_medications_by_priority,
    sort_medications_by_date_distance,
    get_medication_priority,
)
from .allergies import AllergyProcessor, get_severity_priority, sort_allergies_by_severity
from .diagnoses import DiagnosisProcessor, sort_diagnoses_by_date
from .vitals import VitalFlowSheetProcessor, FlowSheet

__all__ = [
    'BaseProcessor',
    'RadiologyProcessor',
    'get_radiology_priority',
    'sort_radiology_investigations_by_priority',
    'filter_radiology_replacement_entries',
    'LabProcessor',
    'group_lab_tests_by_date',
    'sort_lab_tests_by_priority',
    'MedicationProcessor',
    'sort_medications_by_status',
    'sort_medications_by_priority',
    'sort_medications_by_date_distance',
    'get_medication_priority',
    'AllergyProcessor',
    'get_severity_priority',
    'sort_allergies_by_severity',
    'DiagnosisProcessor',
    'sort_diagnoses_by_date',
    'VitalFlowSheetProcessor',
    'FlowSheet',
]
