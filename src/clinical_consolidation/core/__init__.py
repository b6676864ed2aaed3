# src/clinical_consolidation/core/__init__.py

from .priority import get_priority_by_order
from .replacement import filter_replacement_entries, collect_replaced_ids
from .sorting import (
    sort_by_priority,
    sort_by_priorities,
    sort_by_date_distance,
    sort_by_date,
    date_distance,
)
from .grouping import DateGroup, group_by_date, sort_groups_by_date, map_group_items
from .dates import parse_datetime, to_date, to_date_key
from .records import (
    RadiologyInvestigation,
    LabTest,
    MedicationRequest,
    Allergy,
    Diagnosis,
)

__all__ = [
    "get_priority_by_order",
    "filter_replacement_entries",
    "collect_replaced_ids",
    "sort_by_priority",
    "sort_by_priorities",
    "sort_by_date_distance",
    "sort_by_date",
    "date_distance",
    "DateGroup",
    "group_by_date",
    "sort_groups_by_date",
    "map_group_items",
    "parse_datetime",
    "to_date",
    "to_date_key",
    "RadiologyInvestigation",
    "LabTest",
    "MedicationRequest",
    "Allergy",
    "Diagnosis",
]
