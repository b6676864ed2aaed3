# ============================================================================
# src/clinical_consolidation/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the clinical consolidation package.

The consolidation core (ranking, replacement filtering, sorting, grouping,
flow sheet rows) never raises for well-typed input. These exceptions belong
to the edges: configuration loading and FHIR resource translation.
"""


class ClinicalConsolidationError(Exception):
    """Base exception for all clinical consolidation errors."""
    pass


class ConfigurationError(ClinicalConsolidationError):
    """Invalid configuration."""
    pass


class FHIRConversionError(ClinicalConsolidationError):
    """Error converting a FHIR resource into a display record."""
    pass


class FHIRValidationError(FHIRConversionError):
    """FHIR resource failed schema validation."""
    def __init__(self, message: str, resource_type: str, resource_id: str = None):
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnsupportedResourceError(FHIRConversionError):
    """Resource type has no display record mapping."""
    def __init__(self, message: str, resource_type: str):
        super().__init__(message)
        self.resource_type = resource_type
