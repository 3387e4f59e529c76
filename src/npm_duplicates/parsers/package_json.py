"""Parse package.json into its top-level mapping."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import UnreadableManifestError


def parse(path: Path) -> dict[str, Any]:
    """Return the decoded document.

    Raises:
        UnreadableManifestError: the file cannot be read, is not valid JSON, or
            its top level is not an object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableManifestError(path, str(exc)) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise UnreadableManifestError(path, f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise UnreadableManifestError(path, "top level must be a JSON object")

    return data
