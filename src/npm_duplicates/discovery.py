"""Manifest discovery utilities."""

from __future__ import annotations

from pathlib import Path

import structlog

from .parsers import MANIFEST_LOADERS

log = structlog.get_logger("npm_duplicates.discovery")

EXCLUDES = {"node_modules", ".git", ".venv"}


class ScanRootError(ValueError):
    """Raised when the directory to scan does not exist or is not a directory."""


def discover_manifests(root: Path) -> list[Path]:
    """Find manifests recursively under root (excluding vendor dirs).

    Targets include: package.json, package.yaml

    The result is sorted so that repeated scans of the same tree see the
    manifests in the same order.
    """
    if not root.exists():
        raise ScanRootError(f"Scan root does not exist: {root}")
    if not root.is_dir():
        raise ScanRootError(f"Scan root is not a directory: {root}")

    root = root.resolve()
    found: list[Path] = []

    def should_skip(p: Path) -> bool:
        parts = set(p.parts)
        return any(ex in parts for ex in EXCLUDES)

    for path in root.rglob("*"):
        if path.name not in MANIFEST_LOADERS:
            continue
        if should_skip(path.relative_to(root)):
            continue
        if not path.is_file():
            continue
        found.append(path)

    found.sort(key=lambda p: p.relative_to(root).as_posix())
    log.debug("manifests discovered", root=str(root), count=len(found))
    return found


def display_path(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` in POSIX form, e.g. ``packages/a/package.json``."""
    return path.relative_to(root.resolve()).as_posix()
