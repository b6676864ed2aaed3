# ============================================================================
# src/clinical_consolidation/processors/base_processor.py
# ============================================================================
"""
Base Processor Class

Every clinical table consolidator (radiology, lab, medications, allergies,
diagnoses, vitals) inherits from this.

A processor takes an already-fetched collection and returns a new,
display-ready structure. Processors hold configuration only, never records,
so one instance can serve any number of callers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict
import logging


class BaseProcessor(ABC):
    """
    Abstract base class for all record processors.

    Subclasses must implement:
    - get_name(): Processor identifier
    - process(): Main consolidation for the processor's table
    """

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self.logger = logging.getLogger(f"{__name__}.{self.get_name()}")

    @abstractmethod
    def get_name(self) -> str:
        """Return processor name (e.g., 'RadiologyProcessor')"""
        pass

    @abstractmethod
    def process(self, records: Any) -> Any:
        """
        Consolidate a fetched collection for display.

        Args:
            records: Records as delivered by the data-access layer

        Returns:
            New ordered (or grouped) structure; the input is not modified
        """
        pass
