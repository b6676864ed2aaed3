# ============================================================================
# src/clinical_consolidation/flowsheet/rows.py
# ============================================================================
"""
Flow sheet row construction.

Observation times become columns (newest first). Concepts claimed by a
concept group collapse into one group row per group; every other concept
keeps its own row with the raw per-timestamp value.
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from clinical_consolidation.core.dates import sort_timestamp
from .concept_groups import CONCEPT_GROUPS, ConceptGroupDefinition, ConceptGroupId
from .models import ConceptDetail, FlowSheetRow, VitalFlowSheetData

logger = logging.getLogger(__name__)

GroupRegistry = Mapping[ConceptGroupId, ConceptGroupDefinition]


def get_sorted_observation_times(
    vitals_data: Optional[VitalFlowSheetData],
    latest_count: Optional[int] = None
) -> List[str]:
    """
    Observation timestamps, most recent first.

    Args:
        vitals_data: Flow sheet data, or None before anything was fetched
        latest_count: Keep only this many of the newest timestamps (>= 1)

    Returns:
        Sorted timestamp keys; unparseable timestamps go last

    Raises:
        ValueError: latest_count is below 1
    """
    if latest_count is not None and latest_count < 1:
        raise ValueError(f"latest_count must be at least 1, got {latest_count}")

    if vitals_data is None or not vitals_data.tabular_data:
        return []

    times = sorted(vitals_data.tabular_data, key=sort_timestamp, reverse=True)
    if latest_count is not None:
        times = times[:latest_count]
    return times


def categorize_concepts_into_groups(
    concept_details: List[ConceptDetail],
    groups: GroupRegistry = CONCEPT_GROUPS
) -> Tuple[Dict[ConceptGroupId, List[ConceptDetail]], List[ConceptDetail]]:
    """
    Split concepts into those claimed by a group and the rest.

    Returns:
        (group id -> claimed concepts in input order, unclaimed concepts)
        Groups appear in the order their first member was seen.
    """
    grouped: Dict[ConceptGroupId, List[ConceptDetail]] = {}
    ungrouped: List[ConceptDetail] = []

    for concept in concept_details:
        claimed = False
        for group_id, definition in groups.items():
            if definition.claims(concept.name):
                grouped.setdefault(group_id, []).append(concept)
                claimed = True
        if not claimed:
            ungrouped.append(concept)

    return grouped, ungrouped


def create_group_rows(
    grouped_concepts: Dict[ConceptGroupId, List[ConceptDetail]],
    obs_times: List[str],
    vitals_data: VitalFlowSheetData,
    groups: GroupRegistry = CONCEPT_GROUPS,
    placeholder: Optional[str] = None
) -> List[FlowSheetRow]:
    """One combined row per group that has at least one member concept."""
    rows = []

    for group_id, concepts in grouped_concepts.items():
        definition = groups[group_id]
        row = FlowSheetRow(
            id=f"group-{definition.group_id.value}",
            vital_sign=definition.display_name,
            row_type="group",
            units=definition.units,
            group_name=definition.display_name,
        )

        for obs_time in obs_times:
            observations = vitals_data.tabular_data.get(obs_time) or {}
            values = {concept.name: observations.get(concept.name) for concept in concepts}
            row.cells.append(
                definition.combine(values, vitals_data.concept_details, placeholder)
            )

        rows.append(row)

    return rows


def create_concept_rows(
    ungrouped_concepts: List[ConceptDetail],
    obs_times: List[str],
    vitals_data: VitalFlowSheetData
) -> List[FlowSheetRow]:
    """One row per unclaimed concept; unobserved cells are None."""
    rows = []

    for concept in ungrouped_concepts:
        row = FlowSheetRow(
            id=concept.name,
            vital_sign=concept.full_name or concept.name,
            row_type="concept",
            units=concept.units,
            concept_detail=concept,
        )
        for obs_time in obs_times:
            observations = vitals_data.tabular_data.get(obs_time) or {}
            row.cells.append(observations.get(concept.name))
        rows.append(row)

    return rows


def build_flow_sheet_rows(
    vitals_data: Optional[VitalFlowSheetData],
    latest_count: Optional[int] = None,
    groups: GroupRegistry = CONCEPT_GROUPS,
    placeholder: Optional[str] = None
) -> Tuple[List[str], List[FlowSheetRow]]:
    """
    Build the complete flow sheet.

    Returns:
        (column timestamps newest first, group rows followed by concept rows)
    """
    if vitals_data is None:
        return [], []

    obs_times = get_sorted_observation_times(vitals_data, latest_count)
    grouped, ungrouped = categorize_concepts_into_groups(vitals_data.concept_details, groups)

    rows = create_group_rows(grouped, obs_times, vitals_data, groups, placeholder)
    rows.extend(create_concept_rows(ungrouped, obs_times, vitals_data))

    logger.debug(
        f"Flow sheet: {len(obs_times)} columns, {len(grouped)} group rows, "
        f"{len(ungrouped)} concept rows"
    )
    return obs_times, rows
