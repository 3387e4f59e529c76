"""Shared fixtures for npm-duplicates tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def write_manifest():
    """Write a package.json under ``root/rel`` and return its path."""

    def _write(root: Path, rel: str, data: dict) -> Path:
        path = root / rel / "package.json" if rel else root / "package.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
