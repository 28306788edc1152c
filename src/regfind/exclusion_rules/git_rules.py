"""Implementation of exclusion rules using .gitignore files found during the walk."""

import logging
import os
from threading import Lock
from typing import Dict, Iterator, Optional

from pathspec import GitIgnoreSpec

from regfind.entry import Entry
from regfind.types import PathType

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules read from the .gitignore files of the walked tree.

    Each directory between the walk root and an entry's parent may hold a
    ``.gitignore`` file. The patterns of every such file are matched, using the
    pathspec library and Git's own wildmatch semantics, against the entry's path
    relative to the directory that holds the file. Directory entries are matched
    with a trailing slash so that patterns like ``build/`` apply to them.

    As in Git, the nearest file with a pattern matching the entry decides, so a
    negation (``!keep.log``) in a subdirectory re-includes an entry that a file
    higher up the tree ignores. An entry below an ignored directory cannot be
    re-included, since the walk never descends into that directory.

    Parsed files are cached per directory. The cache is lock-guarded so one
    instance can serve several walker threads.

    Attributes:
        root (str): The walk root the entry paths are built from.

    Example:
        >>> import tempfile, os
        >>> from regfind.types import EntryType
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     with open(os.path.join(tmpdir, ".gitignore"), "w") as f:
        ...         _ = f.write("*.log\\nbuild/\\n")
        ...     rules = GitIgnoreExclusionRules(tmpdir)
        ...     log = Entry(os.path.join(tmpdir, "app.log"), "app.log", EntryType.FILE, depth=1)
        ...     build = Entry(os.path.join(tmpdir, "build"), "build", EntryType.DIRECTORY, depth=1)
        ...     main = Entry(os.path.join(tmpdir, "main.py"), "main.py", EntryType.FILE, depth=1)
        ...     (rules.exclude(log), rules.exclude(build), rules.exclude(main))
        (True, True, False)
    """

    IGNORE_FILE = ".gitignore"

    def __init__(self, root: PathType):
        self.root = os.fspath(root)
        self._specs: Dict[str, Optional[GitIgnoreSpec]] = {}
        self._lock = Lock()

    def exclude(self, entry: Entry) -> bool:
        # Nearest .gitignore first; the first file with a matching pattern decides
        for directory in reversed(list(self._ancestor_directories(entry.path))):
            spec = self._spec_for(directory)
            if spec is None:
                continue
            relative = os.path.relpath(entry.path, directory).replace(os.sep, "/")
            if entry.is_dir:
                relative += "/"
            ignored = spec.check_file(relative).include
            if ignored is None:
                continue
            if ignored:
                logger.debug("%s ignored by %s", entry.path, os.path.join(directory, self.IGNORE_FILE))
            return ignored
        return False

    def _ancestor_directories(self, path: str) -> Iterator[str]:
        """Yield the root and every directory below it that contains ``path``."""
        parts = os.path.relpath(path, self.root).split(os.sep)
        directory = self.root
        yield directory
        for part in parts[:-1]:
            directory = os.path.join(directory, part)
            yield directory

    def _spec_for(self, directory: str) -> Optional[GitIgnoreSpec]:
        with self._lock:
            if directory in self._specs:
                return self._specs[directory]

        spec = self._load(os.path.join(directory, self.IGNORE_FILE))

        with self._lock:
            return self._specs.setdefault(directory, spec)

    def _load(self, rules_file: str) -> Optional[GitIgnoreSpec]:
        if not os.path.isfile(rules_file):
            return None
        try:
            with open(rules_file, "r") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", rules_file, e)
            return None
        return GitIgnoreSpec.from_lines(lines)
