# ============================================================================
# FILE: tests/unit/test_replacement.py
# ============================================================================
"""
Unit tests for the replacement-chain filter
"""

import pytest
from clinical_consolidation.core.records import RadiologyInvestigation
from clinical_consolidation.core.replacement import (
    collect_replaced_ids,
    filter_replacement_entries,
)


def _order(order_id, replaces=()):
    return RadiologyInvestigation(id=order_id, test_name=f"Test {order_id}", replaces=tuple(replaces))


def test_drops_both_sides_of_a_replacement():
    """Test the replacing and the replaced record are both removed"""
    records = [_order("A"), _order("B", ["A"]), _order("C")]

    result = filter_replacement_entries(records)

    assert [record.id for record in result] == ["C"]


def test_chain_of_any_length_is_removed():
    """Test every link of A <- B <- C is removed"""
    records = [_order("A"), _order("B", ["A"]), _order("C", ["B"]), _order("D")]

    result = filter_replacement_entries(records)

    assert [record.id for record in result] == ["D"]


def test_no_replacements_keeps_everything_in_order():
    """Test records without replaces pass through unchanged"""
    records = [_order("X"), _order("Y"), _order("Z")]

    result = filter_replacement_entries(records)

    assert result == records
    assert result is not records


def test_empty_replaces_counts_as_none():
    """Test an empty replaces sequence does not drop the record"""
    records = [_order("A", []), _order("B")]

    assert len(filter_replacement_entries(records)) == 2


def test_unknown_replaced_id_still_drops_replacer():
    """Test a record replacing an absent id is dropped itself"""
    records = [_order("A", ["missing"]), _order("B")]

    assert [record.id for record in filter_replacement_entries(records)] == ["B"]


def test_filter_is_idempotent():
    """Test filtering twice gives the same result"""
    records = [_order("A"), _order("B", ["A"]), _order("C"), _order("D", ["E"]), _order("E")]

    once = filter_replacement_entries(records)
    twice = filter_replacement_entries(once)

    assert once == twice


def test_input_is_not_mutated():
    """Test the input list is left untouched"""
    records = [_order("A"), _order("B", ["A"])]
    snapshot = list(records)

    filter_replacement_entries(records)

    assert records == snapshot


def test_empty_input():
    """Test empty input gives empty output"""
    assert filter_replacement_entries([]) == []


def test_custom_accessors_on_dicts():
    """Test dict records with custom id and replaces getters"""
    records = [
        {"uuid": "1"},
        {"uuid": "2", "supersedes": ["1"]},
        {"uuid": "3", "supersedes": None},
    ]

    result = filter_replacement_entries(
        records,
        get_id=lambda record: record["uuid"],
        get_replaces=lambda record: record.get("supersedes"),
    )

    assert result == [{"uuid": "3", "supersedes": None}]


def test_collect_replaced_ids():
    """Test replaced ids are unioned across records"""
    records = [_order("A", ["1", "2"]), _order("B", ["2", "3"]), _order("C")]

    assert collect_replaced_ids(records) == {"1", "2", "3"}
