"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from regfind.entry import Entry

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    An entry is excluded if ANY of the constituent rules excludes it. Rules are
    evaluated in order and evaluation stops at the first rule that excludes, so
    cheap name checks should come before rules that touch the filesystem.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from regfind.exclusion_rules.hidden_rules import HiddenExclusionRules
        >>> from regfind.exclusion_rules.library_rules import LibraryExclusionRules
        >>> from regfind.types import EntryType
        >>> composite = CompositeExclusionRules([HiddenExclusionRules(), LibraryExclusionRules()])
        >>> composite.exclude(Entry("/p/node_modules", "node_modules", EntryType.DIRECTORY, depth=1))
        True
        >>> composite.exclude(Entry("/p/.env", ".env", EntryType.FILE, depth=1))
        True
        >>> composite.exclude(Entry("/p/lib", "lib", EntryType.DIRECTORY, depth=1))
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, entry: Entry) -> bool:
        return any(rule.exclude(entry) for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Append another exclusion rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)
