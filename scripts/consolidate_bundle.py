#!/usr/bin/env python3
"""
Bundle Consolidation Script

Reads a FHIR searchset Bundle exported for one patient and prints the
consolidated clinical tables:
1. Radiology investigations (current orders, most urgent first)
2. Lab investigations (grouped by ordered day, urgent first)
3. Medications (grouped by order day, status then priority)

Optionally renders a vital flow sheet payload alongside.

Usage:
    python scripts/consolidate_bundle.py patient_bundle.json
    python scripts/consolidate_bundle.py patient_bundle.json --json
    python scripts/consolidate_bundle.py patient_bundle.json --vitals flowsheet.json --latest 5
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from clinical_consolidation.fhir_utils import (
    format_lab_test,
    format_medication_request,
    format_radiology_investigation,
    is_lab_order,
    is_radiology_order,
    resources_of_type,
)
from clinical_consolidation.processors import (
    LabProcessor,
    MedicationProcessor,
    RadiologyProcessor,
    VitalFlowSheetProcessor,
)
from clinical_consolidation.utils import ConfigurationError, FHIRConversionError, setup_logging_from_settings

logger = logging.getLogger("consolidate_bundle")


def load_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _convert(resources: List[Dict[str, Any]], formatter) -> List[Any]:
    """Format every resource, skipping (and logging) the ones that fail validation."""
    records = []
    for resource in resources:
        try:
            records.append(formatter(resource))
        except FHIRConversionError as e:
            logger.warning(f"Skipping {resource.get('resourceType')}/{resource.get('id')}: {e}")
    return records


def consolidate(bundle: Dict[str, Any]) -> Dict[str, Any]:
    radiology_orders = []
    lab_orders = []
    for resource in resources_of_type(bundle, "ServiceRequest"):
        try:
            if is_radiology_order(resource):
                radiology_orders.append(resource)
            elif is_lab_order(resource):
                lab_orders.append(resource)
        except FHIRConversionError as e:
            logger.warning(f"Skipping ServiceRequest/{resource.get('id')}: {e}")

    radiology = _convert(radiology_orders, format_radiology_investigation)
    labs = _convert(lab_orders, format_lab_test)
    medications = _convert(
        resources_of_type(bundle, "MedicationRequest"),
        format_medication_request,
    )

    return {
        "radiology": RadiologyProcessor().process(radiology),
        "lab": LabProcessor().process(labs),
        "medications": MedicationProcessor().group_by_date(medications),
    }


def to_jsonable(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


def print_tables(result: Dict[str, Any]) -> None:
    print(f"\n{'='*60}")
    print("RADIOLOGY")
    print(f"{'='*60}")
    for investigation in result["radiology"]:
        print(f"  [{investigation.priority or '-':8}] {investigation.test_name} "
              f"({investigation.ordered_date[:10]}, {investigation.ordered_by})")

    print(f"\n{'='*60}")
    print("LAB")
    print(f"{'='*60}")
    for group in result["lab"]:
        print(f"  {group.key}")
        for test in group.items:
            print(f"    [{test.priority or '-':8}] {test.test_name} ({test.status})")

    print(f"\n{'='*60}")
    print("MEDICATIONS")
    print(f"{'='*60}")
    for group in result["medications"]:
        print(f"  {group.key}")
        for medication in group.items:
            tags = " ".join(
                tag for tag, on in (("STAT", medication.is_immediate), ("PRN", medication.as_needed)) if on
            )
            print(f"    [{medication.status:10}] {medication.name} {medication.dosage} {tags}".rstrip())

    flow_sheet = result.get("vitals")
    if flow_sheet is not None:
        print(f"\n{'='*60}")
        print("VITALS")
        print(f"{'='*60}")
        if flow_sheet.is_empty:
            print("  No vitals recorded")
        else:
            print(f"  {'':20} " + " | ".join(flow_sheet.obs_times))
            for row in flow_sheet.rows:
                cells = [cell.value if cell is not None else "" for cell in row.cells]
                print(f"  {row.vital_sign:20} " + " | ".join(cells))

    print(f"{'='*60}\n")


def main():
    parser = argparse.ArgumentParser(description="Consolidate a patient's FHIR Bundle into display tables")
    parser.add_argument("bundle", type=str, help="Path to a FHIR Bundle JSON file")
    parser.add_argument("--vitals", type=str, help="Path to a vital flow sheet JSON payload")
    parser.add_argument("--latest", type=int, help="Only show the N most recent vitals columns")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")

    args = parser.parse_args()

    setup_logging_from_settings()

    bundle_path = Path(args.bundle)
    if not bundle_path.exists():
        print(f"ERROR: Bundle not found: {bundle_path}")
        sys.exit(1)

    result = consolidate(load_json(bundle_path))

    if args.vitals:
        config = {"latest_count": args.latest} if args.latest is not None else {}
        try:
            processor = VitalFlowSheetProcessor(config)
        except ConfigurationError as e:
            print(f"ERROR: {e}")
            sys.exit(1)
        result["vitals"] = processor.process(load_json(Path(args.vitals)))

    if args.json:
        print(json.dumps(to_jsonable(result), indent=2))
    else:
        print_tables(result)


if __name__ == "__main__":
    main()
