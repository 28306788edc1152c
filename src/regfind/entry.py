"""Immutable traversal results."""

import os
import stat
from dataclasses import dataclass

from regfind.types import EntryType


@dataclass(frozen=True)
class Entry:
    """One filesystem node discovered during a walk.

    Entries are produced by the walkers and consumed once by the match reporter.
    The ``path`` is built by joining the root, exactly as given, with the names
    of every directory on the way down, so reported paths are absolute whenever
    the root is.

    Attributes:
        path: Path of the entry as produced by the walk.
        name: Base name of the entry.
        entry_type: Classification of the entry.
        depth: Distance from the root; the root itself has depth 0.

    Example:
        >>> entry = Entry("/src/main.py", "main.py", EntryType.FILE, depth=1)
        >>> entry.is_dir
        False
        >>> entry.name
        'main.py'
    """

    path: str
    name: str
    entry_type: EntryType
    depth: int = 0

    @property
    def is_dir(self) -> bool:
        """True if the entry is a directory the walk may descend into."""
        return self.entry_type is EntryType.DIRECTORY

    @classmethod
    def from_dir_entry(cls, dir_entry: "os.DirEntry[str]", depth: int, follow_symlinks: bool = False) -> "Entry":
        """Build an Entry from an ``os.scandir`` result.

        Raises:
            OSError: If the entry cannot be classified (e.g. it vanished).
        """
        if dir_entry.is_symlink() and not follow_symlinks:
            entry_type = EntryType.SYMLINK
        elif dir_entry.is_dir():
            entry_type = EntryType.DIRECTORY
        elif dir_entry.is_file():
            entry_type = EntryType.FILE
        else:
            entry_type = EntryType.OTHER
        return cls(dir_entry.path, dir_entry.name, entry_type, depth=depth)

    @classmethod
    def from_path(cls, path: str, depth: int = 0) -> "Entry":
        """Build an Entry for a path named directly, such as the walk root.

        Symbolic links given this way are always followed.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        st = os.stat(path)
        if stat.S_ISDIR(st.st_mode):
            entry_type = EntryType.DIRECTORY
        elif stat.S_ISREG(st.st_mode):
            entry_type = EntryType.FILE
        else:
            entry_type = EntryType.OTHER
        name = os.path.basename(os.path.normpath(path)) or path
        return cls(path, name, entry_type, depth=depth)
