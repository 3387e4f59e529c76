#!/usr/bin/env python3
"""Local entrypoint to run the scanner from a checkout.

Usage:
  python scripts/scan.py --folder . [--style full] [--format json] [--silent]

This calls the same CLI as the installed ``npm-duplicates`` command.
"""

from __future__ import annotations

from npm_duplicates.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
