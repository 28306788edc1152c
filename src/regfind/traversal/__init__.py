"""Directory traversal producing entries and per-entry errors."""

from .parallel_walker import ParallelWalker
from .walker import PruneCallback, Walker, WalkResult

__all__ = [
    "ParallelWalker",
    "PruneCallback",
    "Walker",
    "WalkResult",
]
