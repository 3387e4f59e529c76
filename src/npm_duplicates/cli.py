"""Find duplicate npm dependencies declared across a project tree."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

import structlog

from .config import STYLES, ConfigError, load_settings
from .core import scan_repository
from .discovery import ScanRootError
from .formatter import format_duplicates, format_totals
from .ignore import IgnoreFilter
from .logging_config import configure_logging
from .parsers import ManifestError
from .report import build_report
from .summary import render_summary
from .validators.report_schema import ReportSchemaError, validate_report

log = structlog.get_logger("npm_duplicates.cli")

SILENT_ENV_VAR = "NPM_DUPLICATES_SILENT"
EXIT_ERROR = 2
MAX_EXIT_STATUS = 255

_TRUTHY = {"1", "true", "yes", "y"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="npm-duplicates", description=__doc__)
    parser.add_argument(
        "-f",
        "--folder",
        type=Path,
        default=Path("."),
        help="Folder to scan",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Exit with zero code when duplicates are found",
    )
    parser.add_argument("--style", choices=STYLES, default=None, help="Text output verbosity")
    parser.add_argument("--format", dest="output_format", choices=("text", "json"), default="text")
    parser.add_argument("--ignore-file", default=None, help="Ignore file name inside the folder")
    parser.add_argument(
        "--ignore-path",
        action="append",
        default=[],
        metavar="FRAGMENT",
        help="Skip manifests whose path contains FRAGMENT (must contain a separator)",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Leave dependency NAME out of the results",
    )
    parser.add_argument("--summary", type=Path, default=None, help="Write a Markdown summary here")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _exit_status(duplicates: int, silent: bool) -> int:
    if silent:
        return 0
    return min(duplicates, MAX_EXIT_STATUS)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(level="DEBUG" if args.verbose else None)

    try:
        settings = load_settings(args.folder, args.config)
        ignore = IgnoreFilter().merge(
            names=[*settings.ignore, *args.ignore],
            path_fragments=[*settings.ignore_paths, *args.ignore_path],
        )
        result = scan_repository(
            args.folder,
            ignore=ignore,
            ignore_file=args.ignore_file or settings.ignore_file,
        )
    except (ScanRootError, ManifestError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ConfigError as exc:
        print(f"ERROR: Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    report = build_report(result)

    if args.output_format == "json":
        try:
            validate_report(report)
        except ReportSchemaError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return EXIT_ERROR
        print(json.dumps(report, indent=2))
    else:
        color = not args.no_color and "NO_COLOR" not in os.environ
        style = args.style or settings.style
        sys.stdout.write(format_duplicates(result.duplicates, style=style, color=color))
        sys.stdout.write(format_totals(result.duplicates))

    summary_path = args.summary or (
        Path(os.environ["GITHUB_STEP_SUMMARY"]) if os.getenv("GITHUB_STEP_SUMMARY") else None
    )
    if summary_path is not None:
        try:
            with summary_path.open("a", encoding="utf-8") as fh:
                fh.write(render_summary(report))
        except OSError as exc:
            print(f"ERROR: Failed to write summary {summary_path}: {exc}", file=sys.stderr)
            return EXIT_ERROR
        log.debug("summary written", path=str(summary_path))

    silent_env = os.getenv(SILENT_ENV_VAR, "").strip().lower()
    silent = args.silent or settings.silent or silent_env in _TRUTHY
    return _exit_status(result.duplicate_count, silent)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
