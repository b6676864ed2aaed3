# ============================================================================
# src/clinical_consolidation/flowsheet/models.py
# ============================================================================
"""
Vital flow sheet data structures
- Observation matrix: timestamp -> concept name -> observed value
- Concept metadata with normal ranges
- Combined cells and display rows
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class ObservationValue:
    """One observed concept at one timestamp, as flagged by the backend."""
    value: str
    abnormal: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ObservationValue":
        return cls(value=str(data.get("value", "")), abnormal=bool(data.get("abnormal", False)))


@dataclass(frozen=True)
class ConceptDetail:
    name: str
    full_name: str = ""
    units: str = ""
    hi_normal: Optional[float] = None
    low_normal: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConceptDetail":
        """Build from the backend's camelCase payload."""
        return cls(
            name=data["name"],
            full_name=data.get("fullName") or data["name"],
            units=data.get("units") or "",
            hi_normal=data.get("hiNormal"),
            low_normal=data.get("lowNormal"),
        )


ObservationMatrix = Dict[str, Dict[str, ObservationValue]]


@dataclass
class VitalFlowSheetData:
    tabular_data: ObservationMatrix = field(default_factory=dict)
    concept_details: List[ConceptDetail] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "VitalFlowSheetData":
        """
        Build from a flow sheet payload:
        {"tabularData": {time: {concept: {"value", "abnormal"}}}, "conceptDetails": [...]}
        """
        if not data:
            return cls()

        tabular = {}
        for obs_time, observations in (data.get("tabularData") or {}).items():
            tabular[obs_time] = {
                concept: ObservationValue.from_dict(obs)
                for concept, obs in (observations or {}).items()
                if obs is not None
            }

        return cls(
            tabular_data=tabular,
            concept_details=[
                ConceptDetail.from_dict(detail)
                for detail in data.get("conceptDetails") or []
            ],
        )

    def find_concept(self, name: str) -> Optional[ConceptDetail]:
        return find_concept_detail(self.concept_details, name)


def find_concept_detail(
    concept_details: Optional[List[ConceptDetail]],
    name: str
) -> Optional[ConceptDetail]:
    for detail in concept_details or []:
        if detail.name == name:
            return detail
    return None


@dataclass(frozen=True)
class MemberReading:
    """
    One member concept inside a combined cell.

    abnormal is None when the member could not be evaluated (no observation
    or no metadata), which is not the same as a known-normal False.
    """
    value: str
    abnormal: Optional[bool] = None


@dataclass(frozen=True)
class CombinedObservation:
    value: str
    abnormal: bool
    complex_data: Dict[str, Any] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "abnormal": self.abnormal,
            "complexData": {
                key: asdict(part) if isinstance(part, MemberReading) else part
                for key, part in self.complex_data.items()
            },
        }


FlowSheetCell = Optional[Union[ObservationValue, CombinedObservation]]


@dataclass
class FlowSheetRow:
    id: str
    vital_sign: str
    row_type: str  # "group" or "concept"
    units: str = ""
    group_name: Optional[str] = None
    concept_detail: Optional[ConceptDetail] = None
    # One cell per observation time, newest first
    cells: List[FlowSheetCell] = field(default_factory=list)

    @property
    def is_group(self) -> bool:
        return self.row_type == "group"

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into the obs_0 ... obs_n keyed shape the table renderer expects."""
        row: Dict[str, Any] = {
            "id": self.id,
            "vitalSign": self.vital_sign,
            "units": self.units,
            "type": self.row_type,
        }
        if self.group_name is not None:
            row["groupName"] = self.group_name

        for index, cell in enumerate(self.cells):
            if cell is None:
                row[f"obs_{index}"] = None
            elif isinstance(cell, CombinedObservation):
                row[f"obs_{index}"] = cell.to_dict()
            else:
                row[f"obs_{index}"] = asdict(cell)
        return row
