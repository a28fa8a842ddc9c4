"""Header rules for ``.pt`` point files.

A point file starts with four fixed lines::

    VERSION <int>
    FORMAT x y z            (or FORMAT x y z r g b)
    POINTS <int>
    DATA ascii

Every rule is a pure function over one line so it can be checked without
touching the filesystem. :func:`parse_header` applies them positionally and
stops at the first failing line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from utils.error_tracker import HeaderValidationError
from utils.settings import HEADER_KEYWORDS, POINT_EXT

HEADER_SIZE = 4

_VERSION_RE = re.compile(r"^\s*VERSION\s+([+-]?\d+)\s*$")
# Only the leading integer is read, trailing content is not checked.
_POINTS_RE = re.compile(r"^\s*POINTS\s+([+-]?\d+)")

# Header integers must fit a 32-bit signed int.
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


class PointFormat(Enum):
    XYZ = "x y z"
    XYZRGB = "x y z r g b"


class DataEncoding(Enum):
    ASCII = "ascii"


@dataclass(frozen=True)
class FileHeader:
    """Parsed header of a point file."""

    version: int
    format: PointFormat
    declared_points: int
    encoding: DataEncoding = DataEncoding.ASCII


def _fits_int(token: str) -> bool:
    return INT_MIN <= int(token) <= INT_MAX


def check_file_extension(filename: str) -> bool:
    return filename.endswith(POINT_EXT)


def check_version(line: str) -> bool:
    """``VERSION <int>`` with nothing after the integer."""
    match = _VERSION_RE.match(line)
    return match is not None and _fits_int(match.group(1))


def check_format(line: str) -> PointFormat | None:
    """Return the declared format for an exact ``FORMAT ...`` line."""
    for fmt in PointFormat:
        if line == f"FORMAT {fmt.value}":
            return fmt
    return None


def check_points_count(line: str) -> int | None:
    """Return the declared point count, or ``None`` if not strictly positive."""
    match = _POINTS_RE.match(line)
    if match is None or not _fits_int(match.group(1)):
        return None
    count = int(match.group(1))
    return count if count > 0 else None


def check_data(line: str) -> bool:
    return line == f"DATA {DataEncoding.ASCII.value}"


def is_header_line(line: str) -> bool:
    """Return True if any header keyword occurs anywhere in ``line``."""
    return any(keyword in line for keyword in HEADER_KEYWORDS)


def strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def _version_value(line: str) -> int:
    return int(line.split()[1])


def parse_header(lines: Iterable[str]) -> FileHeader:
    """
    Validate the first four non-blank lines of ``lines`` and build a header.

    Args:
        lines: Header lines, with or without line terminators. Lines past the
            fourth non-blank one are ignored.

    Returns:
        The parsed :class:`FileHeader`.

    Raises:
        HeaderValidationError: at the first line that breaks its rule, or at
            the first missing line when fewer than four are available.
    """
    header_lines: list[str] = []
    for raw in lines:
        line = strip_terminator(raw)
        if not line.strip():
            continue
        header_lines.append(line)
        if len(header_lines) == HEADER_SIZE:
            break
    return _validate_header_lines(header_lines)


def _validate_header_lines(header_lines: list[str]) -> FileHeader:
    def line_at(index: int, expected: str) -> str:
        if index >= len(header_lines):
            raise HeaderValidationError(
                index, f"Missing header line, expected {expected}."
            )
        return header_lines[index]

    version_line = line_at(0, "'VERSION <integer>'")
    if not check_version(version_line):
        raise HeaderValidationError(0, "Invalid version format.")

    fmt = check_format(line_at(1, "'FORMAT x y z'"))
    if fmt is None:
        raise HeaderValidationError(
            1, "Invalid format, should be 'x y z' or 'x y z r g b'."
        )

    count = check_points_count(line_at(2, "'POINTS <integer>'"))
    if count is None:
        raise HeaderValidationError(2, "Invalid points count.")

    if not check_data(line_at(3, "'DATA ascii'")):
        raise HeaderValidationError(3, "Data type must be 'ascii'.")

    return FileHeader(
        version=_version_value(version_line),
        format=fmt,
        declared_points=count,
        encoding=DataEncoding.ASCII,
    )
