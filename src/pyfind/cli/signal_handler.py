"""Signal handling utilities for the pyfind CLI.

SIGPIPE and SIGINT are recorded rather than allowed to kill the process, so that
the walk can stop at the next write and exit with the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional


class SignalHandler:
    """Records SIGPIPE and SIGINT and turns them into the process exit status.

    Each handler restores the original disposition after the first signal, so a
    second Ctrl+C terminates the process immediately.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigpipe_handler: Disposition of SIGPIPE before install().
        original_sigint_handler: Disposition of SIGINT before install().

    Example:
        >>> handler = SignalHandler()
        >>> handler.exit_status(1)
        1
        >>> handler.sigint_received.set()
        >>> handler.exit_status(1)
        130
    """

    # 128 + signal number, as a shell reports a process killed by the signal
    SIGPIPE_EXIT_STATUS = 141
    SIGINT_EXIT_STATUS = 130

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def install(self) -> None:
        """Route SIGPIPE and SIGINT to this handler."""
        signal.signal(signal.SIGPIPE, self.handle_sigpipe)
        signal.signal(signal.SIGINT, self.handle_sigint)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Return whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_status(self, status: int) -> int:
        """Return the status the process should exit with.

        A received signal overrides whatever the walk produced; SIGPIPE wins over
        SIGINT because output was already lost.

        Args:
            status: The status of the completed (or abandoned) walk.
        """
        if self.sigpipe_received.is_set():
            return self.SIGPIPE_EXIT_STATUS
        if self.sigint_received.is_set():
            return self.SIGINT_EXIT_STATUS
        return status


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the application's handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Point stdout at the null device if the walk was interrupted.

    The interpreter flushes stdout during shutdown; after SIGPIPE that flush
    would fail and print a traceback.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
