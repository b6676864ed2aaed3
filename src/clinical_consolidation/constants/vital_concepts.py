# ============================================================================
# src/clinical_consolidation/constants/vital_concepts.py
# ============================================================================
"""
Vital Sign Concept Names
- Short concept names as they key the observation matrix
"""

SYSTOLIC_BP = "Sbp"
DIASTOLIC_BP = "DBP"
BODY_POSITION = "Body position"

BLOOD_PRESSURE_CONCEPTS = (SYSTOLIC_BP, DIASTOLIC_BP, BODY_POSITION)
