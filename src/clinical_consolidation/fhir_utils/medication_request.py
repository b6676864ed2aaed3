# ============================================================================
# src/clinical_consolidation/fhir_utils/medication_request.py
# ============================================================================
"""
FHIR MedicationRequest → MedicationRequest display record.

A STAT request (priority "stat") is flagged immediate; the medication table
ranks on that flag alone.
"""

from typing import Any, Dict, Union
import logging

from pydantic import ValidationError
from fhir.resources.R4B.medicationrequest import MedicationRequest as FHIRMedicationRequest

from clinical_consolidation.core.records import MedicationRequest
from clinical_consolidation.utils.exceptions import FHIRValidationError, UnsupportedResourceError
from .bundle import to_iso

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "MedicationRequest"

MedicationRequestLike = Union[FHIRMedicationRequest, Dict[str, Any]]


def parse_medication_request(data: MedicationRequestLike) -> FHIRMedicationRequest:
    """
    Validate a MedicationRequest.

    Raises:
        UnsupportedResourceError: resourceType is not MedicationRequest
        FHIRValidationError: the resource does not match the R4B schema
    """
    if isinstance(data, FHIRMedicationRequest):
        return data

    resource_type = data.get("resourceType")
    if resource_type != RESOURCE_TYPE:
        raise UnsupportedResourceError(
            f"Expected {RESOURCE_TYPE}, got {resource_type}", resource_type=str(resource_type)
        )

    try:
        return FHIRMedicationRequest.model_validate(data)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Invalid MedicationRequest {data.get('id')}: {e}")
        raise FHIRValidationError(
            f"Invalid MedicationRequest: {e}", resource_type=RESOURCE_TYPE, resource_id=data.get("id")
        ) from e


def format_quantity(quantity: Any) -> str:
    """'500 mg' style text from a Quantity, '' when absent."""
    if quantity is None or quantity.value is None:
        return ""
    unit = quantity.unit or quantity.code or ""
    return f"{quantity.value} {unit}".strip()


def _medication_name(request: FHIRMedicationRequest) -> str:
    concept = request.medicationCodeableConcept
    if concept is not None:
        if concept.text:
            return concept.text
        for coding in concept.coding or []:
            if coding.display:
                return coding.display
    if request.medicationReference is not None:
        return request.medicationReference.display or ""
    return ""


def _first_dosage(request: FHIRMedicationRequest):
    return request.dosageInstruction[0] if request.dosageInstruction else None


def _dose(dosage) -> str:
    if dosage is None:
        return ""
    for dose_and_rate in dosage.doseAndRate or []:
        if dose_and_rate.doseQuantity is not None:
            return format_quantity(dose_and_rate.doseQuantity)
    return ""


def _start_date(request: FHIRMedicationRequest, dosage) -> str:
    timing = dosage.timing if dosage is not None else None
    if timing is not None:
        repeat = timing.repeat
        if repeat is not None and repeat.boundsPeriod is not None and repeat.boundsPeriod.start:
            return to_iso(repeat.boundsPeriod.start)
        if timing.event:
            return to_iso(timing.event[0])
    return to_iso(request.authoredOn)


def _instructions(dosage) -> str:
    if dosage is None:
        return ""
    if dosage.text:
        return dosage.text
    for instruction in dosage.additionalInstruction or []:
        if instruction.text:
            return instruction.text
    return ""


def format_medication_request(data: MedicationRequestLike) -> MedicationRequest:
    request = parse_medication_request(data)
    dosage = _first_dosage(request)
    priority = request.priority or ""

    dispense = request.dispenseRequest
    quantity = format_quantity(dispense.quantity) if dispense is not None else ""

    return MedicationRequest(
        id=request.id,
        name=_medication_name(request),
        status=request.status or "",
        priority=priority,
        order_date=to_iso(request.authoredOn),
        start_date=_start_date(request, dosage),
        ordered_by=(request.requester.display or "") if request.requester else "",
        dosage=_dose(dosage),
        quantity=quantity,
        instructions=_instructions(dosage),
        is_immediate=priority.lower() == "stat",
        as_needed=bool(dosage.asNeededBoolean) if dosage is not None else False,
    )
