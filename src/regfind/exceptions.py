from typing import Optional


class RegfindError(Exception):
    """Base class for all errors raised by regfind."""


class InvalidPatternError(RegfindError):
    """
    Exception raised when a user-supplied regular expression does not compile.

    This is a fatal configuration error: it is raised while the configuration is
    being built, before any traversal starts.

    Attributes:
        pattern (str): The pattern text that failed to compile.
        option (str): Name of the option that supplied the pattern.
        cause (re.error): The underlying compilation error.

    Example:
        >>> import re
        >>> try:
        ...     re.compile("[a-")
        ... except re.error as e:
        ...     error = InvalidPatternError("[a-", e, option="PATTERN")
        >>> str(error).startswith("Invalid regular expression for PATTERN '[a-'")
        True
    """

    def __init__(self, pattern: str, cause: Exception, option: str = "PATTERN") -> None:
        self.pattern = pattern
        self.option = option
        self.cause = cause
        super().__init__(f"Invalid regular expression for {option} '{pattern}': {cause}")


class RootNotFoundError(RegfindError, FileNotFoundError):
    """
    Exception raised when the search root does not exist.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        'Root path does not exist: /no/such/dir'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f"Root path does not exist: {root}")


class TraversalError(RegfindError):
    """
    A failure confined to a single entry of the walk.

    Walkers yield instances of this class in place of the entry they could not
    read; they never raise it. The walk carries on with every other entry.

    Attributes:
        path (str): Path of the entry that could not be read.
        cause (Optional[BaseException]): The underlying error, if any.

    Example:
        >>> error = TraversalError("/tmp/locked", PermissionError(13, "Permission denied"))
        >>> str(error)
        '/tmp/locked: [Errno 13] Permission denied'
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None, message: Optional[str] = None) -> None:
        self.path = path
        self.cause = cause
        if message is None:
            message = str(cause) if cause is not None else "unreadable entry"
        super().__init__(f"{path}: {message}")
