# ============================================================================
# FILE: tests/unit/test_concept_groups.py
# ============================================================================
"""
Unit tests for the concept group combiner (blood pressure)
"""

import pytest
from clinical_consolidation.config import display_settings
from clinical_consolidation.flowsheet.concept_groups import (
    CONCEPT_GROUPS,
    ConceptGroupId,
    combine_blood_pressure,
    evaluate_member,
    is_outside_normal_range,
    parse_numeric,
)
from clinical_consolidation.flowsheet.models import (
    ConceptDetail,
    MemberReading,
    ObservationValue,
)

PLACEHOLDER = "-"


@pytest.fixture
def bp_details():
    """Normal ranges for systolic and diastolic pressure"""
    return [
        ConceptDetail(name="Sbp", full_name="Systolic", units="mmHg", hi_normal=140, low_normal=100),
        ConceptDetail(name="DBP", full_name="Diastolic", units="mmHg", hi_normal=90, low_normal=60),
    ]


def test_blood_pressure_group_registered():
    """Test the blood pressure group and its members"""
    group = CONCEPT_GROUPS[ConceptGroupId.BLOOD_PRESSURE]

    assert group.members == ("Sbp", "DBP", "Body position")
    assert group.claims("DBP")
    assert not group.claims("Pulse")
    assert group.units == "mmHg"


def test_high_systolic_is_abnormal(bp_details):
    """Test 160/80 is flagged abnormal"""
    values = {
        "Sbp": ObservationValue("160"),
        "DBP": ObservationValue("80"),
        "Body position": ObservationValue("Sitting"),
    }

    cell = combine_blood_pressure(values, bp_details, PLACEHOLDER)

    assert cell.value == "160/80"
    assert cell.abnormal is True
    assert cell.complex_data["systolic"] == MemberReading("160", True)
    assert cell.complex_data["diastolic"] == MemberReading("80", False)
    assert cell.complex_data["position"] == "Sitting"


def test_normal_reading(bp_details):
    """Test 120/80 is not abnormal"""
    values = {"Sbp": ObservationValue("120"), "DBP": ObservationValue("80")}

    cell = combine_blood_pressure(values, bp_details, PLACEHOLDER)

    assert cell.value == "120/80"
    assert cell.abnormal is False
    assert cell.complex_data["position"] == PLACEHOLDER


def test_low_diastolic_is_abnormal(bp_details):
    """Test a value under the low bound is flagged"""
    values = {"Sbp": ObservationValue("110"), "DBP": ObservationValue("50")}

    cell = combine_blood_pressure(values, bp_details, PLACEHOLDER)

    assert cell.abnormal is True
    assert cell.complex_data["diastolic"].abnormal is True


def test_both_members_absent(bp_details):
    """Test placeholder cell with unknown member flags"""
    cell = combine_blood_pressure({}, bp_details, PLACEHOLDER)

    assert cell.value == PLACEHOLDER
    assert cell.abnormal is False
    assert cell.complex_data["systolic"] == MemberReading(PLACEHOLDER, None)
    assert cell.complex_data["diastolic"] == MemberReading(PLACEHOLDER, None)


def test_one_member_absent(bp_details):
    """Test the missing side shows the placeholder"""
    values = {"Sbp": ObservationValue("150"), "DBP": None}

    cell = combine_blood_pressure(values, bp_details, PLACEHOLDER)

    assert cell.value == f"150/{PLACEHOLDER}"
    assert cell.abnormal is True
    assert cell.complex_data["diastolic"].abnormal is None


def test_missing_concept_details():
    """Test members without metadata are not evaluated"""
    values = {"Sbp": ObservationValue("200"), "DBP": ObservationValue("120")}

    cell = combine_blood_pressure(values, [], PLACEHOLDER)

    assert cell.value == "200/120"
    assert cell.abnormal is False
    assert cell.complex_data["systolic"].abnormal is None


def test_non_numeric_value_is_not_abnormal(bp_details):
    """Test free-text readings are shown but never flagged"""
    reading = evaluate_member(ObservationValue("n/a"), bp_details[0], PLACEHOLDER)

    assert reading == MemberReading("n/a", False)


def test_missing_bound_is_unchecked():
    """Test only the present bound is applied"""
    only_high = ConceptDetail(name="Sbp", hi_normal=140)
    only_low = ConceptDetail(name="DBP", low_normal=60)

    assert is_outside_normal_range(150, only_high) is True
    assert is_outside_normal_range(10, only_high) is False
    assert is_outside_normal_range(40, only_low) is True
    assert is_outside_normal_range(400, only_low) is False


def test_boundaries_are_normal():
    """Test values equal to a bound are normal"""
    detail = ConceptDetail(name="Sbp", hi_normal=140, low_normal=100)

    assert is_outside_normal_range(140, detail) is False
    assert is_outside_normal_range(100, detail) is False


def test_parse_numeric():
    """Test decimal values parse and text does not"""
    assert parse_numeric("120") == 120.0
    assert parse_numeric(" 37.5 ") == 37.5
    assert parse_numeric("high") is None


def test_parse_numeric_reads_leading_number():
    """Test values carrying units still read as numbers"""
    assert parse_numeric("120 mmHg") == 120.0
    assert parse_numeric("-3.5C") == -3.5
    assert parse_numeric("mmHg 120") is None


def test_value_with_units_is_flagged(bp_details):
    """Test a reading with units is compared against the normal range"""
    reading = evaluate_member(ObservationValue("160 mmHg"), bp_details[0], PLACEHOLDER)

    assert reading == MemberReading("160 mmHg", True)


def test_group_combine_defaults_placeholder():
    """Test the definition falls back to the configured placeholder"""
    group = CONCEPT_GROUPS[ConceptGroupId.BLOOD_PRESSURE]

    cell = group.combine({})

    assert cell.value == display_settings.PLACEHOLDER_GLYPH
    assert cell.abnormal is False
