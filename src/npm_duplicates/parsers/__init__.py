"""Manifest loaders keyed by file name."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any, TypeAlias

from .errors import ManifestError, UnreadableManifestError
from .package_json import parse as parse_package_json
from .package_yaml import parse as parse_package_yaml

LoadFunction: TypeAlias = Callable[[Path], dict[str, Any]]

MANIFEST_LOADERS: dict[str, LoadFunction] = {
    "package.json": parse_package_json,
    "package.yaml": parse_package_yaml,
}


def load_manifest(path: Path) -> dict[str, Any]:
    """Load a manifest with the loader registered for its file name."""
    loader = MANIFEST_LOADERS.get(path.name)
    if loader is None:
        raise UnreadableManifestError(path, "unsupported manifest file name")
    return loader(path)


class LazyManifest(Mapping[str, Any]):
    """Manifest document that is read from disk on first access.

    Manifests skipped by path are never opened, so an unreadable file under an
    ignored directory cannot abort a scan.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            self._data = load_manifest(self.path)
        return self._data

    def __getitem__(self, key: str) -> Any:
        return self._load()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._load())

    def __len__(self) -> int:
        return len(self._load())


__all__ = [
    "LazyManifest",
    "MANIFEST_LOADERS",
    "ManifestError",
    "UnreadableManifestError",
    "load_manifest",
]
