"""Data models for duplicate dependency scans."""

from __future__ import annotations

from .scan_result import Aggregate, ScanResult
from .version_record import VersionRecord

__all__ = [
    "Aggregate",
    "ScanResult",
    "VersionRecord",
]
