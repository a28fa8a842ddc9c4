"""Validation and geometric analysis of ASCII ``.pt`` point sets."""

from .point import Point
from .header import (
    DataEncoding,
    FileHeader,
    PointFormat,
    check_data,
    check_file_extension,
    check_format,
    check_points_count,
    check_version,
    is_header_line,
    parse_header,
)
from .loader import PointFile, load_point_file, parse_point_file, parse_point_line
from .analyzer import (
    BoundingCube,
    PairExtremes,
    PointPair,
    average_distance,
    bounding_cube,
    closest_and_farthest,
    format_point,
    points_in_sphere,
)
from .catalog import CatalogReport, FileCatalog, FileIssue, IssueKind

__all__ = [
    "Point",
    "DataEncoding",
    "FileHeader",
    "PointFormat",
    "check_data",
    "check_file_extension",
    "check_format",
    "check_points_count",
    "check_version",
    "is_header_line",
    "parse_header",
    "PointFile",
    "load_point_file",
    "parse_point_file",
    "parse_point_line",
    "BoundingCube",
    "PairExtremes",
    "PointPair",
    "average_distance",
    "bounding_cube",
    "closest_and_farthest",
    "format_point",
    "points_in_sphere",
    "CatalogReport",
    "FileCatalog",
    "FileIssue",
    "IssueKind",
]
