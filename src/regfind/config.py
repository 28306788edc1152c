"""Run configuration for regfind.

The configuration is built once at startup: the root default is resolved from
the current working directory, the patterns are compiled and the root is
checked. The resulting FinderConfig is immutable and passed down to every
component; nothing re-reads the process environment afterwards.
"""

import os
import re
from dataclasses import dataclass
from typing import Optional, Pattern

from regfind.exceptions import InvalidPatternError, RootNotFoundError
from regfind.types import MatchSubject, PathType

DEFAULT_THREADS = 1


def compile_pattern(pattern: str, option: str) -> Pattern[str]:
    """Compile a user-supplied regular expression.

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression.

    Example:
        >>> compile_pattern(r"\\.py$", "PATTERN").search("main.py") is not None
        True
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, e, option=option) from e


@dataclass(frozen=True)
class FinderConfig:
    """Immutable settings for one run.

    Attributes:
        root: Directory (or single file) to walk.
        include: Compiled include pattern.
        exclude: Compiled exclude pattern, or None when exclusion is disabled.
        match_subject: Whether the include pattern sees the base name or the full path.
        follow_symlinks: Whether symlinked directories are descended into.
        respect_gitignore: Whether .gitignore files prune entries.
        threads: Number of walker threads; 1 selects the sequential walker.
    """

    root: str
    include: Pattern[str]
    exclude: Optional[Pattern[str]] = None
    match_subject: MatchSubject = MatchSubject.NAME
    follow_symlinks: bool = False
    respect_gitignore: bool = False
    threads: int = DEFAULT_THREADS

    @classmethod
    def create(
        cls,
        pattern: str,
        root: Optional[PathType] = None,
        ignore: Optional[str] = "",
        *,
        match_subject: MatchSubject = MatchSubject.NAME,
        follow_symlinks: bool = False,
        respect_gitignore: bool = False,
        threads: int = DEFAULT_THREADS,
    ) -> "FinderConfig":
        """Resolve defaults, compile the patterns and validate the root.

        Args:
            pattern: Include regular expression.
            root: Root directory; defaults to the current working directory.
            ignore: Exclude regular expression; empty or None disables exclusion.
            match_subject: Whether to match the include pattern against name or path.
            follow_symlinks: Whether to descend into symlinked directories.
            respect_gitignore: Whether .gitignore files prune entries.
            threads: Number of walker threads, at least 1.

        Raises:
            InvalidPatternError: If either pattern does not compile.
            RootNotFoundError: If the root does not exist.
            ValueError: If threads is less than 1.
        """
        include = compile_pattern(pattern, "PATTERN")
        exclude = compile_pattern(ignore, "--ignore") if ignore else None

        if threads < 1:
            raise ValueError(f"threads must be at least 1, got {threads}")

        resolved_root = os.fspath(root) if root is not None else os.getcwd()
        if not os.path.exists(resolved_root):
            raise RootNotFoundError(resolved_root)

        return cls(
            root=resolved_root,
            include=include,
            exclude=exclude,
            match_subject=MatchSubject(match_subject),
            follow_symlinks=follow_symlinks,
            respect_gitignore=respect_gitignore,
            threads=threads,
        )
