"""Shared helper modules used across the project.

The :mod:`utils` package contains lightweight helpers for logging, CLI
dispatching, configuration and error tracking. These utilities are used by
the :mod:`pointsets` core and the :mod:`cli` front-end.
"""

from .logger import Logger, LoggerType
from .settings import (
    HEADER_KEYWORDS,
    POINT_EXT,
    paths,
    logging,
    point_sets,
)
from .error_tracker import (
    ErrorTracker,
    PointSetError,
    DirectoryOpenError,
    PointFileOpenError,
    HeaderValidationError,
    PointCountMismatchError,
)

__all__ = [
    "Logger",
    "LoggerType",
    "HEADER_KEYWORDS",
    "POINT_EXT",
    "paths",
    "logging",
    "point_sets",
    "ErrorTracker",
    "PointSetError",
    "DirectoryOpenError",
    "PointFileOpenError",
    "HeaderValidationError",
    "PointCountMismatchError",
]
