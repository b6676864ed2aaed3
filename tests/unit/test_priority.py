# ============================================================================
# FILE: tests/unit/test_priority.py
# ============================================================================
"""
Unit tests for priority ranking
"""

import pytest
from clinical_consolidation.constants import (
    ALLERGY_SEVERITY_ORDER,
    RADIOLOGY_PRIORITY_ORDER,
    SENTINEL_PRIORITY,
)
from clinical_consolidation.core.priority import get_priority_by_order
from clinical_consolidation.processors.allergies import get_severity_priority
from clinical_consolidation.processors.radiology import get_radiology_priority


def test_rank_is_index_in_order():
    """Test listed values rank by position"""
    assert get_priority_by_order("stat", RADIOLOGY_PRIORITY_ORDER) == 0
    assert get_priority_by_order("routine", RADIOLOGY_PRIORITY_ORDER) == 1


def test_rank_is_case_insensitive():
    """Test mixed-case values match lowercase tokens"""
    assert get_priority_by_order("STAT", RADIOLOGY_PRIORITY_ORDER) == 0
    assert get_priority_by_order("Routine", RADIOLOGY_PRIORITY_ORDER) == 1
    assert get_priority_by_order("SEVERE", ALLERGY_SEVERITY_ORDER) == 0


@pytest.mark.parametrize("value", ["urgent", "", None, "unknown"])
def test_unlisted_values_get_sentinel(value):
    """Test unknown, empty and missing values rank last"""
    assert get_priority_by_order(value, RADIOLOGY_PRIORITY_ORDER) == SENTINEL_PRIORITY


def test_sentinel_exceeds_every_listed_rank():
    """Test the sentinel sorts after any real index"""
    assert SENTINEL_PRIORITY == 999
    assert SENTINEL_PRIORITY > len(ALLERGY_SEVERITY_ORDER)


def test_empty_order_ranks_everything_last():
    """Test an empty order gives the sentinel for any value"""
    assert get_priority_by_order("stat", []) == SENTINEL_PRIORITY


def test_radiology_priority_helper():
    """Test radiology priority lookup"""
    assert get_radiology_priority("stat") == 0
    assert get_radiology_priority("routine") == 1
    assert get_radiology_priority("URGENT") == 999


def test_severity_priority_helper():
    """Test allergy severity lookup"""
    assert get_severity_priority("severe") == 0
    assert get_severity_priority("moderate") == 1
    assert get_severity_priority("mild") == 2
    assert get_severity_priority(None) == 999
