"""
Cancellation and deadline token for network-bound calls.

A Context is created by the caller and passed to every client operation
that performs I/O. Cancelling it (or letting its deadline pass) makes the
operation in flight return promptly with a TransportError.
"""

import threading
import time

CANCELLED = "context cancelled"
DEADLINE_EXCEEDED = "context deadline exceeded"


class Context:
    def __init__(self, timeout=None):
        """Create a context, optionally expiring `timeout` seconds from now."""
        self._cancelled = threading.Event()
        self.deadline = None
        if timeout is not None:
            self.deadline = time.monotonic() + timeout

    @classmethod
    def background(cls):
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, timeout):
        return cls(timeout=timeout)

    def cancel(self):
        self._cancelled.set()

    @property
    def cancelled(self):
        return self._cancelled.is_set()

    @property
    def expired(self):
        return self.deadline is not None and time.monotonic() >= self.deadline

    def done(self):
        return self.cancelled or self.expired

    def reason(self):
        """Why the context is done, or None while it is still live."""
        if self.cancelled:
            return CANCELLED
        if self.expired:
            return DEADLINE_EXCEEDED
        return None

    def remaining(self):
        """Seconds left before the deadline, or None when there is none."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def wait(self, timeout=None):
        """Block until cancelled or `timeout` elapses. Returns True if cancelled."""
        return self._cancelled.wait(timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cancel()
        return False
