"""Unit tests for the signal handler module in the regfind CLI."""

import os
import signal
import sys
from unittest.mock import MagicMock, patch

import pytest

from regfind.cli.signal_handler import SignalHandler, cleanup, setup_signal_handling, signal_handler


@pytest.fixture
def mock_signal():
    """Create a mock for the signal module."""
    with patch("signal.signal", autospec=True) as mock:
        yield mock


@pytest.fixture
def mock_os():
    """Create a mock for os module functions used in signal handling."""
    with patch("regfind.cli.signal_handler.os", autospec=True) as mock:
        mock.open.return_value = 123
        mock.dup2 = MagicMock()
        mock.devnull = "/dev/null"
        mock.O_WRONLY = os.O_WRONLY
        yield mock


@pytest.fixture
def fresh_signal_handler():
    """Create a fresh SignalHandler instance so the singleton is left alone."""
    return SignalHandler()


@pytest.fixture
def singleton_state():
    """Save and restore the flags of the singleton handler."""
    sigpipe = signal_handler.sigpipe_received.is_set()
    sigint = signal_handler.sigint_received.is_set()
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()
    yield signal_handler
    for event, was_set in ((signal_handler.sigpipe_received, sigpipe), (signal_handler.sigint_received, sigint)):
        if was_set:
            event.set()
        else:
            event.clear()


def test_signal_handler_initialization():
    with patch("signal.getsignal") as mock_getsignal:
        mock_getsignal.side_effect = [
            lambda sig, frame: None,
            lambda sig, frame: None,
        ]

        handler = SignalHandler()

        assert mock_getsignal.call_count == 2
        mock_getsignal.assert_any_call(signal.SIGPIPE)
        mock_getsignal.assert_any_call(signal.SIGINT)
        assert not handler.sigpipe_received.is_set()
        assert not handler.sigint_received.is_set()
        assert not handler.interrupted()
        assert handler.exit_code() is None


def test_handle_sigpipe(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, MagicMock())

    assert fresh_signal_handler.sigpipe_received.is_set()
    mock_signal.assert_called_once_with(signal.SIGPIPE, fresh_signal_handler.original_sigpipe_handler)


def test_handle_sigint(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle_sigint(signal.SIGINT, MagicMock())

    assert fresh_signal_handler.sigint_received.is_set()
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


@pytest.mark.parametrize(
    "sigpipe,sigint,interrupted,exit_code",
    [
        (False, False, False, None),
        (True, False, True, 141),
        (False, True, True, 130),
        (True, True, True, 141),
    ],
)
def test_interrupted_and_exit_code(fresh_signal_handler, sigpipe, sigint, interrupted, exit_code):
    if sigpipe:
        fresh_signal_handler.sigpipe_received.set()
    if sigint:
        fresh_signal_handler.sigint_received.set()

    assert fresh_signal_handler.interrupted() is interrupted
    assert fresh_signal_handler.exit_code() == exit_code


def test_setup_signal_handling(mock_signal):
    setup_signal_handling()

    assert mock_signal.call_count == 2
    mock_signal.assert_any_call(signal.SIGPIPE, signal_handler.handle_sigpipe)
    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)


def test_cleanup_with_no_signals(mock_os, singleton_state):
    cleanup()

    mock_os.open.assert_not_called()
    mock_os.dup2.assert_not_called()


@pytest.mark.parametrize("event_name", ["sigpipe_received", "sigint_received"])
def test_cleanup_after_signal(mock_os, singleton_state, event_name):
    getattr(singleton_state, event_name).set()

    with patch.object(sys, "stdout") as mock_stdout:
        mock_stdout.fileno.return_value = 1
        cleanup()

    mock_os.open.assert_called_once_with(os.devnull, os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)


def test_singleton_instance():
    assert isinstance(signal_handler, SignalHandler)
    assert hasattr(signal_handler, "original_sigpipe_handler")
    assert hasattr(signal_handler, "original_sigint_handler")


def test_atexit_registration():
    with patch("atexit.register") as mock_register:
        from importlib import reload

        from regfind.cli import signal_handler as test_module

        reload(test_module)
        mock_register.assert_called_once_with(test_module.cleanup)
