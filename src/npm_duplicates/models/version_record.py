"""Version record model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionRecord:
    """One distinct normalised version of a dependency and where it was first seen."""

    name: str
    version: str
    origin: str
