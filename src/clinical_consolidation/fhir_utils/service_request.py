# ============================================================================
# src/clinical_consolidation/fhir_utils/service_request.py
# ============================================================================
"""
FHIR ServiceRequest → display records (radiology and lab orders).

Uses the fhir.resources R4B models, matching the R4 payloads served by the
clinical backend.
"""

from typing import Any, Dict, Union
import logging

from pydantic import ValidationError
from fhir.resources.R4B.servicerequest import ServiceRequest

from clinical_consolidation.core.records import LabTest, RadiologyInvestigation
from clinical_consolidation.utils.exceptions import FHIRValidationError, UnsupportedResourceError
from .bundle import reference_id, to_iso

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "ServiceRequest"

ServiceRequestLike = Union[ServiceRequest, Dict[str, Any]]


def parse_service_request(data: ServiceRequestLike) -> ServiceRequest:
    """
    Validate a ServiceRequest.

    Raises:
        UnsupportedResourceError: resourceType is not ServiceRequest
        FHIRValidationError: the resource does not match the R4B schema
    """
    if isinstance(data, ServiceRequest):
        return data

    resource_type = data.get("resourceType")
    if resource_type != RESOURCE_TYPE:
        raise UnsupportedResourceError(
            f"Expected {RESOURCE_TYPE}, got {resource_type}", resource_type=str(resource_type)
        )

    try:
        return ServiceRequest.model_validate(data)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Invalid ServiceRequest {data.get('id')}: {e}")
        raise FHIRValidationError(
            f"Invalid ServiceRequest: {e}", resource_type=RESOURCE_TYPE, resource_id=data.get("id")
        ) from e


def _category_labels(request: ServiceRequest):
    for category in request.category or []:
        if category.text:
            yield category.text.lower()
        for coding in category.coding or []:
            if coding.display:
                yield coding.display.lower()


def is_radiology_order(request: ServiceRequestLike) -> bool:
    request = parse_service_request(request)
    return any("radiology" in label for label in _category_labels(request))


def is_lab_order(request: ServiceRequestLike) -> bool:
    request = parse_service_request(request)
    return any("lab" in label for label in _category_labels(request))


def _test_name(request: ServiceRequest) -> str:
    code = request.code
    if code is None:
        return ""
    if code.text:
        return code.text
    for coding in code.coding or []:
        if coding.display:
            return coding.display
    return ""


def _ordered_date(request: ServiceRequest) -> str:
    if request.occurrencePeriod is not None and request.occurrencePeriod.start is not None:
        return to_iso(request.occurrencePeriod.start)
    if request.occurrenceDateTime is not None:
        return to_iso(request.occurrenceDateTime)
    return to_iso(request.authoredOn)


def _requester(request: ServiceRequest) -> str:
    return (request.requester.display or "") if request.requester else ""


def _replaces(request: ServiceRequest) -> tuple:
    ids = (reference_id(ref.reference) for ref in request.replaces or [])
    return tuple(ref_id for ref_id in ids if ref_id)


def format_radiology_investigation(data: ServiceRequestLike) -> RadiologyInvestigation:
    request = parse_service_request(data)
    return RadiologyInvestigation(
        id=request.id,
        test_name=_test_name(request),
        priority=request.priority or "",
        ordered_by=_requester(request),
        ordered_date=_ordered_date(request),
        replaces=_replaces(request),
    )


def format_lab_test(data: ServiceRequestLike) -> LabTest:
    request = parse_service_request(data)
    return LabTest(
        id=request.id,
        test_name=_test_name(request),
        priority=request.priority or "",
        status=request.status or "",
        ordered_by=_requester(request),
        ordered_date=_ordered_date(request),
        replaces=_replaces(request),
    )
