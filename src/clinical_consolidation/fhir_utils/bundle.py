# ============================================================================
# src/clinical_consolidation/fhir_utils/bundle.py
# ============================================================================
"""
Helpers for walking a FHIR searchset Bundle as returned by the clinical
data service.
"""

from typing import Any, Dict, List, Optional


def resources_of_type(bundle: Optional[Dict[str, Any]], resource_type: str) -> List[Dict[str, Any]]:
    """
    Raw resources of one type from a Bundle's entries.

    Args:
        bundle: Bundle JSON (dict); None or an entry-less bundle gives []
        resource_type: e.g. "ServiceRequest"

    Returns:
        Resource dicts in entry order
    """
    if not bundle:
        return []

    resources = []
    for entry in bundle.get("entry") or []:
        resource = (entry or {}).get("resource")
        if resource and resource.get("resourceType") == resource_type:
            resources.append(resource)
    return resources


def reference_id(reference: Optional[str]) -> Optional[str]:
    """Bare id from a relative reference: "ServiceRequest/abc" -> "abc"."""
    if not reference:
        return None
    return reference.rstrip("/").split("/")[-1] or None


def to_iso(value: Any) -> str:
    """ISO 8601 text for a FHIR date/dateTime, whatever the model parsed it into."""
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
