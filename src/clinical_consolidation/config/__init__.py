# ============================================================================
# src/clinical_consolidation/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .display_config import DisplaySettings, display_settings
from .logging_config import LoggingSettings, logging_settings
