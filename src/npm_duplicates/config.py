"""Settings loader for duplicate scans.

Reads optional settings from a JSON file and validates the structure. All keys
are optional:

- ``ignoreFile``: name of the ignore file inside the scan root
- ``ignorePaths``: extra manifest path fragments to skip
- ``ignore``: extra dependency names to drop from the results
- ``style``: text output style (``short``, ``default`` or ``full``)
- ``silent``: exit with status 0 even when duplicates are found

Validation is done by hand rather than with a JSON Schema validator.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .formatter import STYLES
from .ignore import DEFAULT_IGNORE_FILENAME

CONFIG_PATH_ENV_VAR = "NPM_DUPLICATES_CONFIG"
DEFAULT_CONFIG_FILENAME = ".duplicates.json"


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be loaded or is invalid."""


def _string_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be an array of strings")
    return tuple(value)


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    ignore_file: str = DEFAULT_IGNORE_FILENAME
    ignore_paths: tuple[str, ...] = ()
    ignore: tuple[str, ...] = ()
    style: str = "default"
    silent: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a decoded settings document, validating each field."""
        ignore_file = data.get("ignoreFile", DEFAULT_IGNORE_FILENAME)
        if not isinstance(ignore_file, str) or not ignore_file:
            raise ConfigError("'ignoreFile' must be a non-empty string")

        style = data.get("style", "default")
        if style not in STYLES:
            raise ConfigError(f"'style' must be one of: {', '.join(STYLES)}")

        silent = data.get("silent", False)
        if not isinstance(silent, bool):
            raise ConfigError("'silent' must be a boolean")

        return cls(
            ignore_file=ignore_file,
            ignore_paths=_string_list(data, "ignorePaths"),
            ignore=_string_list(data, "ignore"),
            style=style,
            silent=silent,
        )


def _resolve_config_path(root: Path, path: Path | str | None = None) -> Path | None:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. NPM_DUPLICATES_CONFIG environment variable
    3. .duplicates.json in the scan root, when present
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidate = root / DEFAULT_CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    return None


def load_settings(root: Path, path: Path | str | None = None) -> Settings:
    """Load and validate settings for a scan of ``root``.

    Returns default Settings when no settings file is configured or found.

    Raises:
        ConfigError: If an explicitly configured file is missing or any file
            contains invalid data.
    """
    config_path = _resolve_config_path(root, path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return Settings.from_dict(data)
