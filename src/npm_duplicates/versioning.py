"""Version string normalisation and numeric comparison.

Declared versions are reduced to their digits and dots before being compared:

- ``"^1.2.3"`` -> ``"1.2.3"``
- ``">=2.1"`` -> ``"2.1"``
- ``"~1.0.0 || 2"`` -> ``"1.0.02"`` (ranges are not interpreted)

Comparison reads at most three numeric components (major, minor, patch).
"""

from __future__ import annotations

_KEPT_CHARACTERS = frozenset("0123456789.")
_MAX_COMPONENT = 2**32 - 1

VersionKey = tuple[int, int, int]


def normalize_version(raw: str) -> str:
    """Return ``raw`` with everything except ASCII digits and ``.`` dropped."""
    return "".join(ch for ch in raw if ch in _KEPT_CHARACTERS)


def _component(part: str) -> int:
    if not part or not part.isdigit() or not part.isascii():
        return 0
    value = int(part)
    if value > _MAX_COMPONENT:
        return 0
    return value


def version_key(version: str) -> VersionKey:
    """Return ``(major, minor, patch)`` for a normalised version.

    Missing or unreadable components count as ``0``; this never raises.
    """
    parts = version.split(".")
    padded = (parts + ["", "", ""])[:3]
    major, minor, patch = (_component(p) for p in padded)
    return major, minor, patch


def compare_versions(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts below, equal to or above ``b``."""
    ka, kb = version_key(a), version_key(b)
    if ka > kb:
        return 1
    if ka < kb:
        return -1
    return 0


def is_newer(candidate: str, current: str) -> bool:
    return version_key(candidate) > version_key(current)
