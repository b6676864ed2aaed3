# ============================================================================
# src/clinical_consolidation/flowsheet/concept_groups.py
# ============================================================================
"""
Concept Group Combiner

Some vital sign concepts only make sense together: systolic and diastolic
pressure are read as one blood pressure, annotated with the body position
it was taken in. A ConceptGroupDefinition binds those member concepts to a
combine function that turns their values at one timestamp into a single
cell with one abnormal flag.

Groups are registered in CONCEPT_GROUPS, keyed by ConceptGroupId.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from clinical_consolidation.config import display_settings
from clinical_consolidation.constants.vital_concepts import (
    SYSTOLIC_BP,
    DIASTOLIC_BP,
    BODY_POSITION,
    BLOOD_PRESSURE_CONCEPTS,
)
from .models import (
    CombinedObservation,
    ConceptDetail,
    MemberReading,
    ObservationValue,
    find_concept_detail,
)

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")

MemberValues = Mapping[str, Optional[ObservationValue]]
CombineFn = Callable[[MemberValues, List[ConceptDetail], str], CombinedObservation]


class ConceptGroupId(str, Enum):
    BLOOD_PRESSURE = "blood-pressure"


@dataclass(frozen=True)
class ConceptGroupDefinition:
    group_id: ConceptGroupId
    name_key: str  # label key for the renderer's translations
    display_name: str
    units: str
    members: Tuple[str, ...]
    combine_fn: CombineFn

    def claims(self, concept_name: str) -> bool:
        return concept_name in self.members

    def combine(
        self,
        values: MemberValues,
        concept_details: Optional[List[ConceptDetail]] = None,
        placeholder: Optional[str] = None
    ) -> CombinedObservation:
        return self.combine_fn(
            values,
            concept_details or [],
            placeholder or display_settings.PLACEHOLDER_GLYPH,
        )


def parse_numeric(value: str) -> Optional[float]:
    """
    Leading number of an observation value, None for free text.

    "120", "37.5" and "120 mmHg" all read as numbers.
    """
    match = _LEADING_NUMBER.match(str(value))
    return float(match.group(1)) if match else None


def is_outside_normal_range(numeric: float, detail: ConceptDetail) -> bool:
    """
    True when the value falls outside [low_normal, hi_normal].

    A missing bound leaves that side unchecked.
    """
    if detail.hi_normal is not None and numeric > detail.hi_normal:
        return True
    if detail.low_normal is not None and numeric < detail.low_normal:
        return True
    return False


def evaluate_member(
    observation: Optional[ObservationValue],
    detail: Optional[ConceptDetail],
    placeholder: str
) -> MemberReading:
    """
    Display value and abnormal flag for one member concept.

    - not observed: placeholder, abnormal None
    - observed, no metadata: raw value, abnormal None
    - observed, non-numeric: raw value, abnormal False
    - observed, numeric: raw value, abnormal by normal range
    """
    if observation is None:
        return MemberReading(value=placeholder, abnormal=None)

    if detail is None:
        return MemberReading(value=observation.value, abnormal=None)

    numeric = parse_numeric(observation.value)
    if numeric is None:
        return MemberReading(value=observation.value, abnormal=False)

    return MemberReading(
        value=observation.value,
        abnormal=is_outside_normal_range(numeric, detail),
    )


def combine_abnormal(readings: List[MemberReading]) -> bool:
    """OR over evaluable members; False when nothing could be evaluated."""
    return any(reading.abnormal is True for reading in readings)


def combine_blood_pressure(
    values: MemberValues,
    concept_details: List[ConceptDetail],
    placeholder: str
) -> CombinedObservation:
    systolic = evaluate_member(
        values.get(SYSTOLIC_BP),
        find_concept_detail(concept_details, SYSTOLIC_BP),
        placeholder,
    )
    diastolic = evaluate_member(
        values.get(DIASTOLIC_BP),
        find_concept_detail(concept_details, DIASTOLIC_BP),
        placeholder,
    )
    position = values.get(BODY_POSITION)
    position_value = position.value if position is not None else placeholder

    if values.get(SYSTOLIC_BP) is None and values.get(DIASTOLIC_BP) is None:
        display = placeholder
    else:
        display = f"{systolic.value}/{diastolic.value}"

    return CombinedObservation(
        value=display,
        abnormal=combine_abnormal([systolic, diastolic]),
        complex_data={
            "systolic": systolic,
            "diastolic": diastolic,
            "position": position_value,
        },
    )


CONCEPT_GROUPS: Dict[ConceptGroupId, ConceptGroupDefinition] = {
    ConceptGroupId.BLOOD_PRESSURE: ConceptGroupDefinition(
        group_id=ConceptGroupId.BLOOD_PRESSURE,
        name_key="VITAL_SIGNS_BLOOD_PRESSURE",
        display_name="Blood Pressure",
        units="mmHg",
        members=BLOOD_PRESSURE_CONCEPTS,
        combine_fn=combine_blood_pressure,
    ),
}

