"""Sequential depth-first directory walker."""

import logging
import os
from typing import Callable, FrozenSet, Iterator, List, Optional, Tuple, Union

from regfind.entry import Entry
from regfind.exceptions import RootNotFoundError, TraversalError
from regfind.traversal.file_identifier import FileIdentifier
from regfind.types import PathType

logger = logging.getLogger(__name__)

PruneCallback = Callable[[Entry], bool]
WalkResult = Union[Entry, TraversalError]
Ancestors = FrozenSet[FileIdentifier]


class Walker:
    """Lazily enumerate every entry reachable from a root directory.

    The walk is depth-first and pre-order: the root is yielded first, then each
    child in sorted name order, each directory immediately followed by its own
    contents. Only one directory listing is held in memory per level of depth,
    so arbitrarily large trees can be walked.

    Pruning:
        The ``prune`` callback is invoked on every entry except the root before
        it is yielded. When it returns True the entry is dropped, and for a
        directory nothing below it is ever listed.

    Error Handling:
        A directory that cannot be listed, an entry that cannot be classified,
        or a symlink loop produces a TraversalError in the output sequence and
        the walk continues with the remaining entries. The only exception raised
        out of ``walk()`` is RootNotFoundError for a missing root.

    Symbolic Link Behavior:
        By default symlinks are reported as SYMLINK entries and never descended.
        With ``follow_symlinks`` symlinked directories are walked like ordinary
        ones; a directory whose device/inode already occurs among its ancestors
        yields a loop error instead of being walked again.

    Attributes:
        root (str): The walk root, exactly as given.
        prune (Optional[PruneCallback]): Pruning callback.
        follow_symlinks (bool): Whether to descend into symlinked directories.

    Example:
        >>> import tempfile, os
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     os.mkdir(os.path.join(tmpdir, "src"))
        ...     open(os.path.join(tmpdir, "src", "main.py"), "w").close()
        ...     [os.path.relpath(e.path, tmpdir) for e in Walker(tmpdir).walk()]
        ['.', 'src', 'src/main.py']
    """

    def __init__(
        self,
        root: PathType,
        prune: Optional[PruneCallback] = None,
        follow_symlinks: bool = False,
    ) -> None:
        self.root = os.fspath(root)
        self.prune = prune
        self.follow_symlinks = follow_symlinks

    def walk(self) -> Iterator[WalkResult]:
        """Yield the root, then every non-pruned entry below it, depth-first.

        Yields:
            Entry objects, interleaved with TraversalError objects for entries
            that could not be read.

        Raises:
            RootNotFoundError: If the root does not exist.
        """
        root_entry = self._root_entry()
        yield root_entry
        if not root_entry.is_dir:
            return

        pending: List[Tuple[Iterator[WalkResult], Ancestors]] = [
            (self._scan(root_entry), self._root_ancestors(root_entry))
        ]
        while pending:
            children, ancestors = pending[-1]
            item = next(children, None)
            if item is None:
                pending.pop()
                continue

            yield item
            if isinstance(item, Entry) and item.is_dir:
                descent = self._descend(item, ancestors)
                if isinstance(descent, TraversalError):
                    yield descent
                else:
                    pending.append((self._scan(item), descent))

    def _root_entry(self) -> Entry:
        try:
            return Entry.from_path(self.root)
        except FileNotFoundError:
            raise RootNotFoundError(self.root)

    def _root_ancestors(self, root_entry: Entry) -> Ancestors:
        if not self.follow_symlinks:
            return frozenset()
        try:
            return frozenset({FileIdentifier.of(root_entry.path)})
        except OSError:
            return frozenset()

    def _scan(self, directory: Entry) -> Iterator[WalkResult]:
        """List one directory and yield its surviving children in name order."""
        try:
            with os.scandir(directory.path) as iterator:
                dir_entries = sorted(iterator, key=lambda d: d.name)
        except OSError as e:
            yield TraversalError(directory.path, e)
            return

        for dir_entry in dir_entries:
            try:
                entry = Entry.from_dir_entry(dir_entry, directory.depth + 1, self.follow_symlinks)
            except OSError as e:
                yield TraversalError(dir_entry.path, e)
                continue
            if self.prune is not None and self.prune(entry):
                continue
            yield entry

    def _descend(self, directory: Entry, ancestors: Ancestors) -> Union[Ancestors, TraversalError]:
        """Return the ancestor set for the children of ``directory``.

        Loop detection is only needed, and only paid for, when following symlinks.
        """
        if not self.follow_symlinks:
            return ancestors
        try:
            identifier = FileIdentifier.of(directory.path)
        except OSError as e:
            return TraversalError(directory.path, e)
        if identifier in ancestors:
            logger.debug("Symlink loop at %s", directory.path)
            return TraversalError(directory.path, message="filesystem loop detected, not descending")
        return ancestors | {identifier}
