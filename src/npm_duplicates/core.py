"""Core scanning entrypoints.

This module holds no presentation logic so it can be used both by the CLI and
as a library.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog

from .aggregator import aggregate
from .discovery import discover_manifests, display_path
from .ignore import DEFAULT_IGNORE_FILENAME, IgnoreFilter, load_ignore_file
from .models import Aggregate, ScanResult
from .parsers import LazyManifest
from .report import select_duplicates

log = structlog.get_logger("npm_duplicates.core")


def find_duplicates(
    manifests: Iterable[tuple[str, Mapping[str, Any]]],
    ignore: IgnoreFilter | None = None,
) -> Aggregate:
    """Return the dependencies declared with more than one version.

    ``manifests`` are ``(origin, document)`` pairs in the order they should be
    merged. Manifests whose origin matches an ignored path fragment are skipped
    without their document being looked at; ignored names are removed after
    merging.
    """
    ignore = ignore or IgnoreFilter()
    kept = ((origin, doc) for origin, doc in manifests if not ignore.is_path_ignored(origin))
    merged = aggregate(kept)
    return select_duplicates(ignore.filter_names(merged))


def scan_repository(
    root: Path,
    ignore: IgnoreFilter | None = None,
    ignore_file: str | None = DEFAULT_IGNORE_FILENAME,
) -> ScanResult:
    """Scan a directory tree for duplicate dependency versions.

    Params:
        root: directory to scan
        ignore: extra ignore rules, merged with those read from ``ignore_file``
        ignore_file: name of the ignore file inside ``root``; None skips it

    Raises:
        ScanRootError: ``root`` is missing or not a directory
        UnreadableManifestError: any manifest fails to load; nothing is returned
    """
    manifest_paths = discover_manifests(root)
    root = root.resolve()

    rules = load_ignore_file(root, ignore_file) if ignore_file else IgnoreFilter()
    if ignore is not None:
        rules = rules.merge(names=ignore.names, path_fragments=ignore.path_fragments)

    origins = [display_path(path, root) for path in manifest_paths]
    skipped = [origin for origin in origins if rules.is_path_ignored(origin)]
    for origin in skipped:
        log.info("manifest ignored by path", origin=origin)

    duplicates = find_duplicates(
        ((origin, LazyManifest(root / origin)) for origin in origins), rules
    )
    log.info(
        "scan complete",
        root=str(root),
        manifests=len(origins) - len(skipped),
        ignored=len(skipped),
        duplicates=len(duplicates),
    )

    return ScanResult(
        root=str(root),
        manifests=tuple(o for o in origins if o not in skipped),
        ignored_manifests=tuple(skipped),
        duplicates=duplicates,
    )
