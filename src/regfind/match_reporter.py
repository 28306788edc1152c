"""Include/exclude pattern matching and emission of matching paths."""

from typing import Callable, Optional, Pattern

from regfind.entry import Entry
from regfind.types import MatchSubject


class MatchReporter:
    """Apply the include and exclude patterns to entries that survived pruning.

    The include pattern is searched (unanchored) in the entry's base name, or
    in its full path when ``subject`` is ``MatchSubject.PATH``. The exclude
    pattern, when configured, is always searched in the full path and takes
    precedence over the include pattern.

    The reporter holds no state besides the compiled patterns, so one instance
    can be shared freely between threads.

    Attributes:
        include (Pattern[str]): Pattern a reported entry must satisfy.
        exclude (Optional[Pattern[str]]): Pattern suppressing otherwise matching entries.
        subject (MatchSubject): What the include pattern is matched against.

    Example:
        >>> import re
        >>> from regfind.types import EntryType
        >>> reporter = MatchReporter(re.compile(r"\\.txt$"), re.compile("b"))
        >>> reporter.matches(Entry("/root/a.txt", "a.txt", EntryType.FILE, depth=1))
        True
        >>> reporter.matches(Entry("/root/b.txt", "b.txt", EntryType.FILE, depth=1))
        False
        >>> reporter.matches(Entry("/root/a.md", "a.md", EntryType.FILE, depth=1))
        False
    """

    def __init__(
        self,
        include: Pattern[str],
        exclude: Optional[Pattern[str]] = None,
        subject: MatchSubject = MatchSubject.NAME,
    ) -> None:
        self.include = include
        self.exclude = exclude
        self.subject = subject

    def matches(self, entry: Entry) -> bool:
        """Check an entry against the include and exclude patterns.

        Args:
            entry: An entry that was not pruned.

        Returns:
            True if the entry should be reported.
        """
        text = entry.path if self.subject is MatchSubject.PATH else entry.name
        if not self.include.search(text):
            return False
        if self.exclude is not None and self.exclude.search(entry.path):
            return False
        return True

    def report(self, entry: Entry, emit: Callable[[str], None]) -> bool:
        """Emit the entry's path as one output line if it matches.

        Args:
            entry: An entry that was not pruned.
            emit: Callable receiving the complete line, newline included.

        Returns:
            True if the entry matched and was emitted.
        """
        if not self.matches(entry):
            return False
        emit(entry.path + "\n")
        return True
