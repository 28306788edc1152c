"""Exclusion of hidden entries."""

from regfind.entry import Entry

from .base_rules import BaseExclusionRules


class HiddenExclusionRules(BaseExclusionRules):
    """Exclude entries whose base name starts with a dot.

    Only the base name is inspected. A hidden root is therefore still walked,
    because the root is never offered to the rules; its hidden children are not.

    Example:
        >>> from regfind.types import EntryType
        >>> rules = HiddenExclusionRules()
        >>> rules.exclude(Entry("/p/.cache", ".cache", EntryType.DIRECTORY, depth=1))
        True
        >>> rules.exclude(Entry("/p/.hidden/src", "src", EntryType.DIRECTORY, depth=1))
        False
    """

    def exclude(self, entry: Entry) -> bool:
        return entry.name.startswith(".")
