"""Signal-aware, line-atomic output for the regfind CLI."""

import errno
import os
import types
from threading import Lock
from typing import Optional, Type

from regfind.cli.signal_handler import signal_handler


class SafeWriter:
    """Write output lines to a file descriptor with signal awareness.

    Each call to ``write`` is serialized with a lock and issued as a single
    ``os.write`` loop, so lines from different threads never interleave.

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, fd: int):
        """Initialize the safe writer.

        Args:
            fd: An open file descriptor, typically ``sys.stdout.fileno()``.

        Raises:
            TypeError: If fd is not an int.
        """
        if not isinstance(fd, int):
            raise TypeError(f"Expected int file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self._closed = False
        self._lock = Lock()

    def write(self, data: str) -> None:
        """Write one chunk of output, normally a complete line.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If any other I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8", "surrogateescape")
        with self._lock:
            try:
                while payload:
                    written = os.write(self.fd, payload)
                    payload = payload[written:]
            except OSError as e:
                if e.errno == errno.EPIPE:
                    raise BrokenPipeError()
                raise

    def close(self) -> None:
        """Mark the writer closed. The descriptor belongs to the caller and stays open."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
