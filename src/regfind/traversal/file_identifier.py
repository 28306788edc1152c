"""File identifier for uniquely identifying directories by device and inode."""

import os
from typing import Any


class FileIdentifier:
    """Identify a file or directory by its device and inode numbers.

    Used for symlink loop detection while following symbolic links: a directory
    whose identifier already appears among its ancestors has been reached
    through a cycle.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.

    Example:
        >>> FileIdentifier(1, 42) == FileIdentifier(1, 42)
        True
        >>> FileIdentifier(1, 42) in {FileIdentifier(2, 42)}
        False
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def of(cls, path: str) -> "FileIdentifier":
        """Stat ``path`` (following symlinks) and return its identifier.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        stat_info = os.stat(path)
        return cls(stat_info.st_dev, stat_info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
