"""Turns termination signals into a quit request for the application."""

from __future__ import annotations

import logging
import signal
from collections.abc import Callable
from types import FrameType
from typing import Any

logger = logging.getLogger(__name__)


class QuitSignalHandler:
    """Calls the connected callbacks when SIGINT or SIGTERM arrives."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], Any]] = []

    def install(self) -> dict[int, Any]:
        """Route SIGINT and SIGTERM here and ignore SIGPIPE where it exists.

        Returns the handlers that were in place before.
        """
        previous = {}
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[int(signum)] = signal.signal(signum, self.handle)
        sigpipe = getattr(signal, "SIGPIPE", None)
        if sigpipe is not None:
            previous[int(sigpipe)] = signal.signal(sigpipe, signal.SIG_IGN)
        return previous

    def connect(self, callback: Callable[[], Any]) -> None:
        """Register a callback run on every quit signal."""
        self._callbacks.append(callback)

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        logger.warning("[SignalHandler] Signal received: %d", signum)
        for callback in list(self._callbacks):
            callback()