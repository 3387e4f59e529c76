"""Terminal rendering of duplicate dependencies."""

from __future__ import annotations

from .models import Aggregate

STYLES = ("short", "default", "full")

RED = "\033[31m"
GREEN = "\033[32m"
RESET = "\033[0m"


def _paint(text: str, colour: str, enabled: bool) -> str:
    return f"{colour}{text}{RESET}" if enabled else text


def format_duplicates(duplicates: Aggregate, style: str = "default", color: bool = True) -> str:
    """Render duplicates as text.

    ``short`` prints one line per dependency with its unique version count,
    ``default`` adds the manifests each version came from and ``full`` also
    lists the versions themselves.
    """
    if style not in STYLES:
        raise ValueError(f"Unknown style format: {style}")

    out: list[str] = []
    for name, records in duplicates.items():
        out.append(
            f"{_paint(name, RED, color)}, Unique versions: {_paint(str(len(records)), RED, color)}\n"
        )
        if style == "short":
            continue
        locations = "\n".join(r.origin for r in records)
        out.append(_paint("Locations:\n", GREEN, color) + locations + "\n\n")
        if style == "default":
            continue
        versions = "\n".join(r.version for r in records)
        out.append(_paint("Versions:\n", GREEN, color) + versions + "\n\n")

    return "".join(out)


def format_totals(duplicates: Aggregate) -> str:
    return f"Total duplicates: {len(duplicates)}\n"
