# src/clinical_consolidation/flowsheet/__init__.py

from .models import (
    ObservationValue,
    ConceptDetail,
    VitalFlowSheetData,
    MemberReading,
    CombinedObservation,
    FlowSheetRow,
    find_concept_detail,
)
from .concept_groups import (
    ConceptGroupId,
    ConceptGroupDefinition,
    CONCEPT_GROUPS,
    combine_blood_pressure,
    evaluate_member,
)
from .rows import (
    get_sorted_observation_times,
    categorize_concepts_into_groups,
    create_group_rows,
    create_concept_rows,
    build_flow_sheet_rows,
)

__all__ = [
    "ObservationValue",
    "ConceptDetail",
    "VitalFlowSheetData",
    "MemberReading",
    "CombinedObservation",
    "FlowSheetRow",
    "find_concept_detail",
    "ConceptGroupId",
    "ConceptGroupDefinition",
    "CONCEPT_GROUPS",
    "combine_blood_pressure",
    "evaluate_member",
    "get_sorted_observation_times",
    "categorize_concepts_into_groups",
    "create_group_rows",
    "create_concept_rows",
    "build_flow_sheet_rows",
]
