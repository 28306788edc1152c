"""Search orchestration.

This module ties the walker, the entry filter and the match reporter together
for one run described by a FinderConfig.
"""

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Optional

from regfind.config import FinderConfig
from regfind.entry import Entry
from regfind.entry_filter import EntryFilter
from regfind.exceptions import TraversalError
from regfind.match_reporter import MatchReporter
from regfind.traversal.parallel_walker import ParallelWalker
from regfind.traversal.walker import Walker
from regfind.types import EntryType

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[TraversalError], None]


@dataclass
class FinderCounts:
    """Counters collected during one run.

    The root itself is counted among the directories. ``pruned`` counts the
    entries the filter removed, not the descendants that were never listed.
    """

    directories: int = 0
    files: int = 0
    symlinks: int = 0
    pruned: int = 0
    matched: int = 0
    errors: int = 0
    elapsed: float = 0.0


def _log_error(error: TraversalError) -> None:
    logger.warning("%s", error)


class Finder:
    """Run one search and stream the matching paths.

    Example:
        >>> import tempfile, os
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     for name in ("a.txt", "b.txt", ".c.txt"):
        ...         open(os.path.join(tmpdir, name), "w").close()
        ...     config = FinderConfig.create(r"\\.txt$", root=tmpdir, ignore="b")
        ...     lines = []
        ...     counts = Finder(config).run(lines.append)
        ...     [os.path.basename(line.rstrip()) for line in lines], counts.matched
        (['a.txt'], 1)
    """

    def __init__(
        self,
        config: FinderConfig,
        *,
        on_error: Optional[ErrorCallback] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        """Initialize a Finder.

        Args:
            config: The run configuration.
            on_error: Called once for every per-entry traversal error. Defaults to
                logging a warning.
            should_stop: Polled before each entry is handled; the walk ends as
                soon as it returns True. Used for interruption by signals.
        """
        self.config = config
        self.on_error = on_error if on_error is not None else _log_error
        self.should_stop = should_stop
        self.entry_filter = EntryFilter.create(config.root, respect_gitignore=config.respect_gitignore)
        self.reporter = MatchReporter(config.include, config.exclude, config.match_subject)
        self.counts = FinderCounts()
        self._lock = Lock()

    def _prune(self, entry: Entry) -> bool:
        pruned = self.entry_filter.should_prune(entry)
        if pruned:
            # May run on walker threads
            with self._lock:
                self.counts.pruned += 1
        return pruned

    def _create_walker(self) -> Walker:
        if self.config.threads > 1:
            return ParallelWalker(
                self.config.root,
                prune=self._prune,
                follow_symlinks=self.config.follow_symlinks,
                threads=self.config.threads,
            )
        return Walker(self.config.root, prune=self._prune, follow_symlinks=self.config.follow_symlinks)

    def _count(self, entry: Entry) -> None:
        if entry.entry_type is EntryType.DIRECTORY:
            self.counts.directories += 1
        elif entry.entry_type is EntryType.SYMLINK:
            self.counts.symlinks += 1
        else:
            self.counts.files += 1

    def run(self, emit: Callable[[str], None]) -> FinderCounts:
        """Walk the configured root and emit every matching path.

        Args:
            emit: Receives each matching path as one line, newline included, in
                the order entries come out of the walker.

        Returns:
            The counts for this run.

        Raises:
            RootNotFoundError: If the root disappeared after configuration.
            BrokenPipeError: If ``emit`` raises it; the walk stops immediately.
        """
        self.counts = FinderCounts()
        started = time.monotonic()
        walk = self._create_walker().walk()
        try:
            for item in walk:
                if self.should_stop is not None and self.should_stop():
                    logger.debug("Stop requested, ending walk of %s", self.config.root)
                    break
                if isinstance(item, TraversalError):
                    self.counts.errors += 1
                    self.on_error(item)
                    continue
                self._count(item)
                if self.reporter.report(item, emit):
                    self.counts.matched += 1
        finally:
            # Cancels outstanding tasks of a parallel walk
            walk.close()
            self.counts.elapsed = time.monotonic() - started
        return self.counts
