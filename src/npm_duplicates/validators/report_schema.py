"""Check duplicates reports against the packaged JSON schema."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "duplicates-report.schema.json"


class ReportSchemaError(ValueError):
    """Raised when a report does not match the schema; ``problems`` lists each violation."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Report does not match schema:\n" + "\n".join(problems))


@lru_cache(maxsize=None)
def _validator(schema_path: Path) -> Draft202012Validator:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_report(report: dict[str, Any], schema_path: Path = SCHEMA_PATH) -> None:
    """Raise ReportSchemaError unless ``report`` matches the schema."""
    errors = sorted(_validator(schema_path).iter_errors(report), key=lambda e: list(e.path))
    if errors:
        raise ReportSchemaError(
            [f"- {'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors]
        )
