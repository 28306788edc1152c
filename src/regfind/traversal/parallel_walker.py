"""Directory walker that lists directories on a pool of worker threads."""

import logging
import queue
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from threading import Event
from typing import Any, Iterator, Optional, Tuple

from regfind.entry import Entry
from regfind.exceptions import TraversalError
from regfind.traversal.walker import Ancestors, PruneCallback, Walker, WalkResult
from regfind.types import PathType

logger = logging.getLogger(__name__)

DEFAULT_PARALLEL_THREADS = 6


class _Message(Enum):
    RESULT = "result"
    DESCEND = "descend"
    FAILED = "failed"
    DONE = "done"


class ParallelWalker(Walker):
    """Walker that scans directories concurrently.

    Each task lists one directory, applies the prune callback to its children
    and reports back through a queue; the consuming thread schedules a new task
    for every directory worth descending into. The prune callback therefore runs
    on worker threads and must be thread-safe. Results are yielded on the thread
    iterating ``walk()``, which is the only place output needs to be produced.

    Every entry is yielded exactly once, but the order varies between runs.
    Closing the generator early cancels all outstanding tasks.

    Attributes:
        threads (int): Number of worker threads.

    Example:
        >>> import tempfile, os
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     for name in ("a", "b", "c"):
        ...         os.mkdir(os.path.join(tmpdir, name))
        ...     sorted(os.path.relpath(e.path, tmpdir) for e in ParallelWalker(tmpdir, threads=3).walk())
        ['.', 'a', 'b', 'c']
    """

    def __init__(
        self,
        root: PathType,
        prune: Optional[PruneCallback] = None,
        follow_symlinks: bool = False,
        threads: int = DEFAULT_PARALLEL_THREADS,
    ) -> None:
        super().__init__(root, prune=prune, follow_symlinks=follow_symlinks)
        if threads < 1:
            raise ValueError(f"threads must be at least 1, got {threads}")
        self.threads = threads

    def walk(self) -> Iterator[WalkResult]:
        root_entry = self._root_entry()
        yield root_entry
        if not root_entry.is_dir:
            return

        results: "queue.Queue[Tuple[_Message, Any]]" = queue.Queue()
        cancelled = Event()
        executor = ThreadPoolExecutor(max_workers=self.threads, thread_name_prefix="regfind-walker")
        logger.debug("Walking %s with %d threads", self.root, self.threads)
        try:
            executor.submit(self._scan_task, root_entry, self._root_ancestors(root_entry), results, cancelled)
            outstanding = 1
            while outstanding:
                message, payload = results.get()
                if message is _Message.RESULT:
                    yield payload
                elif message is _Message.DESCEND:
                    directory, ancestors = payload
                    executor.submit(self._scan_task, directory, ancestors, results, cancelled)
                    outstanding += 1
                elif message is _Message.FAILED:
                    raise payload
                else:
                    outstanding -= 1
        finally:
            cancelled.set()
            executor.shutdown(wait=True, cancel_futures=True)

    def _scan_task(
        self,
        directory: Entry,
        ancestors: Ancestors,
        results: "queue.Queue[Tuple[_Message, Any]]",
        cancelled: Event,
    ) -> None:
        """List one directory, posting results and descent requests to ``results``.

        A DONE message is always posted last, after any DESCEND messages, so the
        consumer's count of outstanding tasks never reaches zero early.
        """
        try:
            for item in self._scan(directory):
                if cancelled.is_set():
                    return
                results.put((_Message.RESULT, item))
                if isinstance(item, Entry) and item.is_dir:
                    descent = self._descend(item, ancestors)
                    if isinstance(descent, TraversalError):
                        results.put((_Message.RESULT, descent))
                    else:
                        results.put((_Message.DESCEND, (item, descent)))
        except Exception as e:
            results.put((_Message.FAILED, e))
        finally:
            results.put((_Message.DONE, None))
