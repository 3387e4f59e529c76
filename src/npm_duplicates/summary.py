"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of duplicated dependencies."""
    totals = report.get("totals", {})
    dependencies = report.get("dependencies", [])

    lines = []
    lines.append("# npm-duplicates Summary")
    lines.append("")
    lines.append(
        f"Manifests scanned: {totals.get('manifests', 0)} | "
        f"Ignored: {totals.get('ignoredManifests', 0)} | "
        f"Duplicates: {totals.get('duplicates', 0)}"
    )
    lines.append("")
    lines.append("| Package | Unique versions | Highest | Versions |")
    lines.append("| --- | --- | --- | --- |")

    for dep in dependencies:
        name = dep.get("name", "")
        highest = (dep.get("highest") or {}).get("version", "")
        versions = ", ".join(
            f"{v.get('version', '')} ({v.get('origin', '')})" for v in dep.get("versions") or []
        )
        lines.append(f"| {name} | {dep.get('uniqueVersions', 0)} | {highest} | {versions} |")

    if not dependencies:
        lines.append("| (none) | No duplicate dependencies | n/a | n/a |")

    return "\n".join(lines) + "\n"
