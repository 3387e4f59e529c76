"""Duplicate selection and schema-friendly report output."""

from __future__ import annotations

from typing import Any

from .models import Aggregate, ScanResult, VersionRecord

REPORT_VERSION = "1"


def select_duplicates(versions: Aggregate) -> Aggregate:
    """Keep only dependencies declared with more than one distinct version.

    Each surviving list is passed through untouched, so its head is still the
    highest version and the remaining order is arrival order.
    """
    return {name: records for name, records in versions.items() if len(records) > 1}


def _version_entry(record: VersionRecord) -> dict[str, str]:
    return {"version": record.version, "origin": record.origin}


def build_report(result: ScanResult) -> dict[str, Any]:
    """Turn a scan result into a dict matching the duplicates report schema.

    Dependencies are listed by name; versions keep the aggregated order.
    """
    dependencies: list[dict[str, Any]] = []
    for name in sorted(result.duplicates):
        records = result.duplicates[name]
        dependencies.append(
            {
                "name": name,
                "uniqueVersions": len(records),
                "highest": _version_entry(records[0]),
                "versions": [_version_entry(r) for r in records],
            }
        )

    report: dict[str, Any] = {
        "version": REPORT_VERSION,
        "hasDuplicates": bool(dependencies),
        "root": result.root,
        "dependencies": dependencies,
        "totals": {
            "manifests": len(result.manifests),
            "ignoredManifests": len(result.ignored_manifests),
            "duplicates": len(dependencies),
        },
    }

    return report
