"""Centralized unhandled exception tracking and point set errors."""

from __future__ import annotations

import signal
import sys
import traceback
from typing import Callable, Optional

from utils.logger import Logger


class PointSetError(Exception):
    """Base class for point set related errors."""


class DirectoryOpenError(PointSetError):
    """Raised when the point set directory cannot be opened."""


class PointFileOpenError(PointSetError):
    """Raised when a point file cannot be opened or read."""


class HeaderValidationError(PointSetError):
    """Raised when a header line fails its positional rule."""

    def __init__(self, line_index: int, reason: str) -> None:
        super().__init__(f"header line {line_index}: {reason}")
        self.line_index = line_index
        self.reason = reason


class PointCountMismatchError(PointSetError):
    """Raised when the parsed point count differs from the declared one."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Points count mismatch (expected {expected}, got {actual})."
        )
        self.expected = expected
        self.actual = actual


class ErrorTracker:
    """Installable global exception hook that logs uncaught errors."""

    logger = Logger.get_logger("utils.error_tracker")
    _installed = False
    _orig_hook: Optional[Callable[..., None]] = None

    @classmethod
    def install_excepthook(cls) -> None:
        """Log unhandled exceptions through the project logger."""
        if cls._installed:
            return

        cls._orig_hook = sys.excepthook

        def _hook(exc_type, exc, tb) -> None:
            message = "".join(traceback.format_exception(exc_type, exc, tb))
            cls.logger.error(f"Unhandled exception:\n{message}")
            if cls._orig_hook:
                cls._orig_hook(exc_type, exc, tb)

        sys.excepthook = _hook
        cls._installed = True
        cls.logger.debug("Global exception hook installed")

    @classmethod
    def uninstall_excepthook(cls) -> None:
        """Restore the interpreter's original exception hook."""
        if not cls._installed:
            return
        sys.excepthook = cls._orig_hook or sys.__excepthook__
        cls._orig_hook = None
        cls._installed = False

    @classmethod
    def install_signal_handlers(cls) -> None:
        """Shutdown gracefully on SIGINT or SIGTERM."""

        def _handler(signum, frame) -> None:
            cls.logger.info(f"Received signal {signum}")
            raise SystemExit(1)

        signal.signal(signal.SIGINT, _handler)
        signal.signal(signal.SIGTERM, _handler)
