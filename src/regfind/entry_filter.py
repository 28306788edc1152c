"""Pruning policy applied by the walkers before they yield or descend."""

import logging
from typing import Optional

from regfind.entry import Entry
from regfind.exclusion_rules.base_rules import BaseExclusionRules
from regfind.exclusion_rules.composite_rules import CompositeExclusionRules
from regfind.exclusion_rules.git_rules import GitIgnoreExclusionRules
from regfind.exclusion_rules.hidden_rules import HiddenExclusionRules
from regfind.exclusion_rules.library_rules import LibraryExclusionRules
from regfind.types import PathType

logger = logging.getLogger(__name__)


class EntryFilter:
    """Decide which entries are pruned from a walk.

    The filter is the walkers' pruning callback. It combines the hidden-name
    rule and the library-name rule with a logical OR, optionally followed by the
    .gitignore rule. The walk root (depth 0) is never pruned.

    Attributes:
        rules (BaseExclusionRules): The combined exclusion rules.

    Example:
        >>> from regfind.types import EntryType
        >>> entry_filter = EntryFilter()
        >>> entry_filter.should_prune(Entry("/p/.git", ".git", EntryType.DIRECTORY, depth=1))
        True
        >>> entry_filter.should_prune(Entry("/p/.git", ".git", EntryType.DIRECTORY, depth=0))
        False
        >>> entry_filter.should_prune(Entry("/p/src", "src", EntryType.DIRECTORY, depth=1))
        False
    """

    def __init__(self, rules: Optional[BaseExclusionRules] = None) -> None:
        if rules is None:
            rules = CompositeExclusionRules([HiddenExclusionRules(), LibraryExclusionRules()])
        self.rules = rules

    @classmethod
    def create(cls, root: PathType, respect_gitignore: bool = False) -> "EntryFilter":
        """Build the standard filter for a walk of ``root``.

        Args:
            root: The walk root, used to locate .gitignore files.
            respect_gitignore: Whether .gitignore files also prune entries.
        """
        rules = CompositeExclusionRules([HiddenExclusionRules(), LibraryExclusionRules()])
        if respect_gitignore:
            rules.add_rule_object(GitIgnoreExclusionRules(root))
        return cls(rules)

    def should_prune(self, entry: Entry) -> bool:
        if entry.depth == 0:
            return False
        if self.rules.exclude(entry):
            logger.debug("Pruned %s", entry.path)
            return True
        return False

    __call__ = should_prune
