"""npm-duplicates core package.

Finds npm dependencies declared with more than one version across the
manifests of a project tree. The scanning logic is callable from the
command line and as a library.
"""

from .core import find_duplicates, scan_repository

__all__ = [
    "core",
    "find_duplicates",
    "scan_repository",
]
