"""Merge dependency declarations from many manifests into per-name version lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from .models import Aggregate, VersionRecord
from .versioning import is_newer, normalize_version

log = structlog.get_logger("npm_duplicates.aggregator")

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


class DependencyAggregator:
    """Accumulate version records manifest by manifest.

    Each dependency name maps to a list of distinct normalised versions. A new
    version is compared against the current head of its list only: when it is
    strictly greater it becomes the new head, otherwise it is appended. The head
    is therefore always the highest version seen so far, but the rest of the
    list keeps arrival order rather than a full sort.
    """

    def __init__(self) -> None:
        self._versions: Aggregate = {}

    def add_manifest(self, origin: str, document: Mapping[str, Any]) -> None:
        added = 0
        for section in DEPENDENCY_SECTIONS:
            deps = document.get(section)
            if not isinstance(deps, Mapping):
                continue
            for name, declared in deps.items():
                if isinstance(declared, (int, float)) and not isinstance(declared, bool):
                    declared = str(declared)
                if not isinstance(declared, str):
                    continue
                if self.add(str(name), declared, origin):
                    added += 1
        log.debug("manifest aggregated", origin=origin, new_versions=added)

    def add(self, name: str, declared: str, origin: str) -> bool:
        """Record one declaration; return False when the version is already known."""
        version = normalize_version(declared)
        records = self._versions.setdefault(name, [])

        if any(record.version == version for record in records):
            return False

        record = VersionRecord(name=name, version=version, origin=origin)
        if not records or is_newer(version, records[0].version):
            records.insert(0, record)
        else:
            records.append(record)
        return True

    def result(self) -> Aggregate:
        return {name: list(records) for name, records in self._versions.items()}


def aggregate(manifests: Iterable[tuple[str, Mapping[str, Any]]]) -> Aggregate:
    """Build the per-name version history for ``(origin, document)`` pairs, in order."""
    aggregator = DependencyAggregator()
    for origin, document in manifests:
        aggregator.add_manifest(origin, document)
    return aggregator.result()
