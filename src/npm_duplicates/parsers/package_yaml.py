"""Parse pnpm's package.yaml manifest format."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import UnreadableManifestError

_NUMERIC_TAGS = {"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"}


class _VersionTextLoader(yaml.SafeLoader):
    """SafeLoader that leaves unquoted numbers as text, so ``lodash: 4.10`` stays ``"4.10"``."""


_VersionTextLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _NUMERIC_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse(path: Path) -> dict[str, Any]:
    """Return the decoded document; an empty file decodes to ``{}``."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableManifestError(path, str(exc)) from exc

    try:
        data = yaml.load(content, Loader=_VersionTextLoader)
    except yaml.YAMLError as exc:
        raise UnreadableManifestError(path, f"invalid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise UnreadableManifestError(path, "top level must be a mapping")

    return data
