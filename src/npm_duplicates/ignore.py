"""Ignore rules: manifest paths skipped before reading, names dropped after merging.

An ignore file lists one entry per line. An entry that starts or ends with a
path separator is a path fragment; every other entry is a dependency name to
drop from the results. Path fragments are matched as substrings against
manifest paths, so ``packages/legacy/`` keeps that whole subtree out of the
scan. A scoped name such as ``@acme/ui`` contains a separator but neither
starts nor ends with one, so it only ever drops the dependency. Bare words are
never used as path fragments: ``react`` must not hide every manifest under a
directory that happens to be called ``react``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog

from .models import Aggregate

log = structlog.get_logger("npm_duplicates.ignore")

DEFAULT_IGNORE_FILENAME = ".duplicatesignore"
PATH_SEPARATORS = ("/", "\\")


def parse_ignore_text(text: str) -> frozenset[str]:
    """Return the trimmed, non-blank lines of ``text``."""
    return frozenset(line.strip() for line in text.splitlines() if line.strip())


def _has_separator(fragment: str) -> bool:
    return any(sep in fragment for sep in PATH_SEPARATORS)


def _is_path_entry(entry: str) -> bool:
    return entry.startswith(PATH_SEPARATORS) or entry.endswith(PATH_SEPARATORS)


@dataclass(slots=True, frozen=True)
class IgnoreFilter:
    """Dependency names and manifest path fragments to leave out of a scan."""

    names: frozenset[str] = frozenset()
    path_fragments: frozenset[str] = frozenset()

    @classmethod
    def from_text(cls, text: str) -> IgnoreFilter:
        """Split ignore file lines into path fragments and dependency names."""
        entries = parse_ignore_text(text)
        paths = frozenset(e for e in entries if _is_path_entry(e))
        return cls(names=entries - paths, path_fragments=paths)

    def merge(
        self,
        *,
        names: Iterable[str] = (),
        path_fragments: Iterable[str] = (),
    ) -> IgnoreFilter:
        return IgnoreFilter(
            names=self.names | {n.strip() for n in names if n.strip()},
            path_fragments=self.path_fragments
            | {p.strip() for p in path_fragments if p.strip()},
        )

    @property
    def active_path_fragments(self) -> tuple[str, ...]:
        """Fragments that take part in path matching, with ``\\`` folded to ``/``."""
        return tuple(
            sorted(f.replace("\\", "/") for f in self.path_fragments if _has_separator(f))
        )

    def is_path_ignored(self, path: str) -> bool:
        """Match ``path`` with ``\\`` folded to ``/`` and a leading ``/`` added when missing.

        ``packages/a/package.json`` and ``/packages/a/package.json`` are treated alike,
        so a fragment such as ``/a/`` also matches a manifest directly under the root.
        """
        candidate = path.replace("\\", "/")
        if not candidate.startswith("/"):
            candidate = "/" + candidate
        return any(fragment in candidate for fragment in self.active_path_fragments)

    def filter_names(self, versions: Aggregate) -> Aggregate:
        """Return ``versions`` without the ignored dependency names."""
        dropped = sorted(name for name in versions if name in self.names)
        if dropped:
            log.debug("dependencies ignored by name", names=dropped)
        return {name: records for name, records in versions.items() if name not in self.names}


def load_ignore_file(root: Path, filename: str = DEFAULT_IGNORE_FILENAME) -> IgnoreFilter:
    """Read ``root/filename`` into an :class:`IgnoreFilter`.

    A missing or unreadable file is not an error: scanning continues with no
    ignore rules.
    """
    path = root / filename
    if not path.is_file():
        log.debug("no ignore file", path=str(path))
        return IgnoreFilter()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("ignore file unreadable, continuing without it", path=str(path), error=str(exc))
        return IgnoreFilter()

    ignore = IgnoreFilter.from_text(text)
    log.debug(
        "ignore file loaded",
        path=str(path),
        names=len(ignore.names),
        path_fragments=len(ignore.active_path_fragments),
    )
    return ignore
