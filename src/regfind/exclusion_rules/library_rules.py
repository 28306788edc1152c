"""Exclusion of version-control and dependency directories."""

from typing import Tuple

from regfind.entry import Entry

from .base_rules import BaseExclusionRules

# Substrings identifying directories that are never descended into
SKIP_SET: Tuple[str, ...] = (".git", "node_modules", "venv")


class LibraryExclusionRules(BaseExclusionRules):
    """Exclude entries whose base name contains a SKIP_SET substring.

    Matching is by substring, not by exact name: ``my-venv-backup`` is excluded
    because it contains ``venv``, and ``project.git`` because it contains
    ``.git``. This heuristic is intentional and must not be narrowed to exact
    path-segment matching.

    Example:
        >>> from regfind.types import EntryType
        >>> rules = LibraryExclusionRules()
        >>> rules.exclude(Entry("/p/my-venv-backup", "my-venv-backup", EntryType.DIRECTORY, depth=1))
        True
        >>> rules.exclude(Entry("/p/src", "src", EntryType.DIRECTORY, depth=1))
        False
    """

    def exclude(self, entry: Entry) -> bool:
        return any(substring in entry.name for substring in SKIP_SET)
