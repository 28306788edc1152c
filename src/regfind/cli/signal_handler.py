"""Interrupt tracking for a regfind run.

A search over a large tree can be cut short two ways: the reader of stdout
goes away (``regfind ... | head``) or the user presses Ctrl+C. Neither should
end in a traceback. The handlers here only record what happened; the Finder
polls ``interrupted()`` between entries and main() turns the recorded signal
into the shell's usual exit status.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional


class SignalHandler:
    """Records SIGPIPE and SIGINT so the walk can stop at the next entry.

    Each handler restores the previous disposition after the first delivery,
    so a second Ctrl+C during a slow shutdown kills the process outright.

    Attributes:
        sigpipe_received: Set once stdout's reader has gone away.
        sigint_received: Set once the user has interrupted the search.
        original_sigpipe_handler: SIGPIPE disposition before setup.
        original_sigint_handler: SIGINT disposition before setup.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Return True once the search should stop; usable as ``should_stop``."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Return the exit status for the recorded interruption, if any.

        A closed pipe takes precedence: 141 (128 + SIGPIPE), then 130
        (128 + SIGINT). None means the run was not interrupted.
        """
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


# Shared by main(), SafeWriter and the Finder's stop check
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the recording handlers; called once at CLI startup."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interrupted search.

    The interpreter flushes sys.stdout at exit; with the reader gone that flush
    would print a second broken-pipe error after regfind has already stopped.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
