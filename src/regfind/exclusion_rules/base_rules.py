from abc import ABC, abstractmethod

from regfind.entry import Entry


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Concrete rules decide, one entry at a time, whether the entry should be
    pruned from a walk. Pruning a directory also removes everything beneath it,
    so rules are consulted before the walk descends.

    Example:
        >>> from regfind.types import EntryType
        >>> class TmpExclusionRules(BaseExclusionRules):
        ...     def exclude(self, entry: Entry) -> bool:
        ...         return entry.name.endswith(".tmp")
        >>> rules = TmpExclusionRules()
        >>> rules.exclude(Entry("build/x.tmp", "x.tmp", EntryType.FILE, depth=2))
        True
        >>> rules.exclude(Entry("main.py", "main.py", EntryType.FILE, depth=1))
        False
    """

    @abstractmethod
    def exclude(self, entry: Entry) -> bool:
        """
        Determine if an entry should be pruned.

        Args:
            entry (Entry): The entry to check. The walk root is never passed in.

        Returns:
            bool: True if the entry (and, for a directory, its subtree) should be
                pruned, False if it should be kept.
        """
        pass
