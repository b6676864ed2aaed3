# ============================================================================
# src/clinical_consolidation/config/display_config.py
# ============================================================================
"""
Display Settings
- Placeholder glyph for unobserved concepts
- Flow sheet column limit
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class DisplaySettings(BaseSettings):
    PLACEHOLDER_GLYPH: str = Field(
        default="—",
        min_length=1,
        description="Shown in a composite cell for a member concept with no observation"
    )
    FLOW_SHEET_LATEST_COUNT: Optional[int] = Field(
        default=None,
        ge=1,
        description="Keep only the N most recent observation times as flow sheet columns (None keeps all)"
    )


display_settings = DisplaySettings()
