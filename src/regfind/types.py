from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryType(Enum):
    """Enumeration of entry types encountered during traversal.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory (or a followed symlink to one)
        SYMLINK: Symbolic link that is not followed
        OTHER: Sockets, FIFOs, device nodes and anything else
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class MatchSubject(str, Enum):
    """Which part of an entry the include pattern is matched against.

    Values:
        NAME: The entry's base name (default)
        PATH: The entry's full path as produced by the walk
    """

    NAME = "name"
    PATH = "path"
