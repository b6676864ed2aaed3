# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from datetime import date

from clinical_consolidation.core.records import (
    Allergy,
    Diagnosis,
    LabTest,
    MedicationRequest,
    RadiologyInvestigation,
)
from clinical_consolidation.flowsheet.models import VitalFlowSheetData


@pytest.fixture
def today():
    """Fixed reference day for date-distance ordering"""
    return date(2024, 3, 10)


@pytest.fixture
def sample_radiology_investigations():
    """Radiology orders with one revision chain (ri-1 replaced by ri-2)"""
    return [
        RadiologyInvestigation(
            id="ri-1", test_name="Chest X-Ray", priority="routine",
            ordered_by="Dr. Smith", ordered_date="2024-03-01T09:00:00Z",
        ),
        RadiologyInvestigation(
            id="ri-2", test_name="Chest X-Ray PA/Lateral", priority="stat",
            ordered_by="Dr. Smith", ordered_date="2024-03-01T09:30:00Z",
            replaces=("ri-1",),
        ),
        RadiologyInvestigation(
            id="ri-3", test_name="CT Head", priority="routine",
            ordered_by="Dr. Jones", ordered_date="2024-03-02T14:00:00Z",
        ),
        RadiologyInvestigation(
            id="ri-4", test_name="MRI Knee", priority="STAT",
            ordered_by="Dr. Jones", ordered_date="2024-03-01T11:00:00Z",
        ),
        RadiologyInvestigation(
            id="ri-5", test_name="Ultrasound Abdomen", priority="",
            ordered_by="Dr. Lee", ordered_date="2024-03-02T08:00:00Z",
        ),
    ]


@pytest.fixture
def sample_lab_tests():
    """Lab orders over two days, one urgent per day"""
    return [
        LabTest(id="lab-1", test_name="CBC", priority="routine", status="active",
                ordered_date="2024-03-01T08:00:00Z"),
        LabTest(id="lab-2", test_name="Lipid Panel", priority="routine", status="active",
                ordered_date="2024-03-02T08:00:00Z"),
        LabTest(id="lab-3", test_name="Troponin", priority="urgent", status="active",
                ordered_date="2024-03-02T09:00:00Z"),
        LabTest(id="lab-4", test_name="HbA1c", priority="routine", status="active",
                ordered_date="2024-03-02T10:00:00Z"),
        LabTest(id="lab-5", test_name="Potassium", priority="Urgent", status="active",
                ordered_date="2024-03-01T12:00:00Z"),
    ]


@pytest.fixture
def sample_medications():
    """Medication requests covering every status ordering case"""
    return [
        MedicationRequest(id="med-1", name="Paracetamol", status="completed", priority="routine",
                          order_date="2024-03-01T10:00:00Z", start_date="2024-03-01"),
        MedicationRequest(id="med-2", name="Amoxicillin", status="active", priority="routine",
                          order_date="2024-03-08T10:00:00Z", start_date="2024-03-08"),
        MedicationRequest(id="med-3", name="Morphine", status="active", priority="stat",
                          order_date="2024-03-10T07:00:00Z", start_date="2024-03-10",
                          is_immediate=True),
        MedicationRequest(id="med-4", name="Metformin", status="on-hold", priority="routine",
                          order_date="2024-03-08T11:00:00Z", start_date="2024-03-12"),
        MedicationRequest(id="med-5", name="Ibuprofen", status="active", priority="routine",
                          order_date="2024-03-10T08:00:00Z", start_date="2024-03-11",
                          as_needed=True),
        MedicationRequest(id="med-6", name="Warfarin", status="stopped", priority="routine",
                          order_date="2024-03-01T12:00:00Z", start_date="2024-03-01"),
        MedicationRequest(id="med-7", name="Heparin", status="on-hold", priority="stat",
                          order_date="2024-03-10T09:00:00Z", start_date="2024-03-15",
                          is_immediate=True),
    ]


@pytest.fixture
def sample_allergies():
    return [
        Allergy(id="al-1", display="Dust", severity="mild"),
        Allergy(id="al-2", display="Penicillin", severity="severe"),
        Allergy(id="al-3", display="Latex", severity=None),
        Allergy(id="al-4", display="Peanuts", severity="Moderate"),
        Allergy(id="al-5", display="Sulfa", severity="severe"),
    ]


@pytest.fixture
def sample_diagnoses():
    return [
        Diagnosis(id="dx-1", display="Hypertension", recorded_date="2023-06-01T10:00:00Z"),
        Diagnosis(id="dx-2", display="Type 2 Diabetes", recorded_date="2024-01-15T10:00:00Z"),
        Diagnosis(id="dx-3", display="Asthma", recorded_date=""),
        Diagnosis(id="dx-4", display="Migraine", recorded_date="2023-11-20"),
    ]


@pytest.fixture
def sample_vitals_payload():
    """Flow sheet payload in the backend's camelCase shape"""
    return {
        "tabularData": {
            "2024-03-01 08:00:00": {
                "Sbp": {"value": "120", "abnormal": False},
                "DBP": {"value": "80", "abnormal": False},
                "Body position": {"value": "Sitting", "abnormal": False},
                "Pulse": {"value": "72", "abnormal": False},
            },
            "2024-03-03 08:00:00": {
                "Sbp": {"value": "160", "abnormal": True},
                "DBP": {"value": "80", "abnormal": False},
                "Temperature": {"value": "38.5", "abnormal": True},
            },
            "2024-03-02 08:00:00": {
                "Pulse": {"value": "88", "abnormal": False},
            },
        },
        "conceptDetails": [
            {"name": "Sbp", "fullName": "Systolic blood pressure", "units": "mmHg",
             "hiNormal": 140, "lowNormal": 100},
            {"name": "DBP", "fullName": "Diastolic blood pressure", "units": "mmHg",
             "hiNormal": 90, "lowNormal": 60},
            {"name": "Body position", "fullName": "Body position", "units": ""},
            {"name": "Pulse", "fullName": "Pulse", "units": "/min",
             "hiNormal": 100, "lowNormal": 60},
            {"name": "Temperature", "fullName": "Temperature", "units": "C",
             "hiNormal": 37.5, "lowNormal": 36},
        ],
    }


@pytest.fixture
def sample_vitals_data(sample_vitals_payload):
    return VitalFlowSheetData.from_dict(sample_vitals_payload)
