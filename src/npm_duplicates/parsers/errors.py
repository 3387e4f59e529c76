"""Errors raised while loading manifests."""

from __future__ import annotations

from pathlib import Path


class ManifestError(RuntimeError):
    """Base error for manifest loading failures."""


class UnreadableManifestError(ManifestError):
    """Raised when a manifest cannot be read or decoded into a mapping."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read manifest {self.path}: {reason}")
