"""Scan result model."""

from __future__ import annotations

from dataclasses import dataclass, field

from .version_record import VersionRecord

Aggregate = dict[str, list[VersionRecord]]


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one directory tree for duplicate dependencies."""

    root: str
    manifests: tuple[str, ...]
    ignored_manifests: tuple[str, ...] = ()
    duplicates: Aggregate = field(default_factory=dict)

    @property
    def duplicate_count(self) -> int:
        """Return the number of dependency names with conflicting versions."""
        return len(self.duplicates)
