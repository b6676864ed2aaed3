# ============================================================================
# src/clinical_consolidation/utils/__init__.py
# ============================================================================
"""
Shared utilities: logging setup and the exception hierarchy.
"""

from .exceptions import (
    ClinicalConsolidationError,
    ConfigurationError,
    FHIRConversionError,
    FHIRValidationError,
    UnsupportedResourceError,
)
from .logging import (
    setup_logging,
    setup_logging_from_settings,
    log_performance,
    JsonFormatter,
)

__all__ = [
    'ClinicalConsolidationError',
    'ConfigurationError',
    'FHIRConversionError',
    'FHIRValidationError',
    'UnsupportedResourceError',
    'setup_logging',
    'setup_logging_from_settings',
    'log_performance',
    'JsonFormatter',
]
