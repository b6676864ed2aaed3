# ============================================================================
# src/clinical_consolidation/processors/vitals.py
# ============================================================================
"""
Vital Flow Sheet

Turns the observation matrix into flow sheet rows: one combined row per
concept group present (blood pressure), then one row per remaining
concept, with a cell per observation time, newest first.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from clinical_consolidation.config import display_settings
from clinical_consolidation.flowsheet.concept_groups import CONCEPT_GROUPS
from clinical_consolidation.flowsheet.models import FlowSheetRow, VitalFlowSheetData
from clinical_consolidation.flowsheet.rows import build_flow_sheet_rows
from clinical_consolidation.utils.exceptions import ConfigurationError
from clinical_consolidation.utils.logging import log_performance
from .base_processor import BaseProcessor

logger = logging.getLogger(__name__)


@dataclass
class FlowSheet:
    obs_times: List[str] = field(default_factory=list)
    rows: List[FlowSheetRow] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.obs_times or not self.rows

    def to_dict(self) -> Dict[str, Any]:
        return {
            "obsTimes": list(self.obs_times),
            "rows": [row.to_dict() for row in self.rows],
        }


class VitalFlowSheetProcessor(BaseProcessor):
    """
    Config:
        latest_count: column limit (defaults to FLOW_SHEET_LATEST_COUNT)
        placeholder: glyph for unobserved members (defaults to PLACEHOLDER_GLYPH)
        groups: concept group registry (defaults to CONCEPT_GROUPS)
    """

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.latest_count = self.config.get('latest_count', display_settings.FLOW_SHEET_LATEST_COUNT)
        if self.latest_count is not None and self.latest_count < 1:
            raise ConfigurationError(f"latest_count must be at least 1, got {self.latest_count}")
        self.placeholder = self.config.get('placeholder', display_settings.PLACEHOLDER_GLYPH)
        self.groups = self.config.get('groups', CONCEPT_GROUPS)

    def get_name(self) -> str:
        return "VitalFlowSheetProcessor"

    @log_performance(logger, "Vital flow sheet build")
    def process(
        self,
        vitals_data: Optional[Union[VitalFlowSheetData, Dict[str, Any]]]
    ) -> FlowSheet:
        """
        Args:
            vitals_data: VitalFlowSheetData or the raw camelCase payload

        Returns:
            FlowSheet with column timestamps and rows
        """
        if isinstance(vitals_data, dict):
            vitals_data = VitalFlowSheetData.from_dict(vitals_data)

        obs_times, rows = build_flow_sheet_rows(
            vitals_data,
            latest_count=self.latest_count,
            groups=self.groups,
            placeholder=self.placeholder,
        )
        return FlowSheet(obs_times=obs_times, rows=rows)
