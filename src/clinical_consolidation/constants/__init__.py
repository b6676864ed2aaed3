# ============================================================================
# src/clinical_consolidation/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .priority_orders import (
    SENTINEL_PRIORITY,
    RADIOLOGY_PRIORITY_ORDER,
    LAB_PRIORITY_ORDER,
    MEDICATION_PRIORITY_ORDER,
    MEDICATION_STATUS_ORDER,
    ALLERGY_SEVERITY_ORDER,
)
from .vital_concepts import (
    SYSTOLIC_BP,
    DIASTOLIC_BP,
    BODY_POSITION,
    BLOOD_PRESSURE_CONCEPTS,
)
