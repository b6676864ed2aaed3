# ============================================================================
# src/clinical_consolidation/fhir_utils/__init__.py
# ============================================================================
"""
FHIR adapters: translate R4 resources fetched from the clinical data
service into the flat display records the processors consume.
"""

from .bundle import resources_of_type, reference_id, to_iso
from .service_request import (
    parse_service_request,
    format_radiology_investigation,
    format_lab_test,
    is_radiology_order,
    is_lab_order,
)
from .medication_request import parse_medication_request, format_medication_request

__all__ = [
    'resources_of_type',
    'reference_id',
    'to_iso',
    'parse_service_request',
    'format_radiology_investigation',
    'format_lab_test',
    'is_radiology_order',
    'is_lab_order',
    'parse_medication_request',
    'format_medication_request',
]
