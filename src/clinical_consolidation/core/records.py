# ============================================================================
# src/clinical_consolidation/core/records.py
# ============================================================================
"""
Display records
- Flat, already-translated clinical records consumed by the consolidators
- Built fresh on every fetch and never mutated afterwards
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RadiologyInvestigation:
    id: str
    test_name: str
    priority: str = ""
    ordered_by: str = ""
    ordered_date: str = ""  # ISO 8601
    # Ids of earlier orders this one supersedes
    replaces: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LabTest:
    id: str
    test_name: str
    priority: str = ""
    status: str = ""
    ordered_by: str = ""
    ordered_date: str = ""
    replaces: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MedicationRequest:
    id: str
    name: str
    status: str = ""
    priority: str = ""
    order_date: str = ""
    start_date: str = ""
    ordered_by: str = ""
    dosage: str = ""
    quantity: str = ""
    instructions: str = ""
    is_immediate: bool = False  # STAT tag
    as_needed: bool = False  # PRN tag


@dataclass(frozen=True)
class Allergy:
    id: str
    display: str
    severity: Optional[str] = None
    category: Optional[str] = None
    status: str = ""
    recorder: str = ""
    recorded_date: str = ""


@dataclass(frozen=True)
class Diagnosis:
    id: str
    display: str
    certainty: str = ""
    recorder: str = ""
    recorded_date: str = ""
