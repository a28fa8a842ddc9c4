import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
import pytest

from pointsets.header import (
    PointFormat,
    check_data,
    check_file_extension,
    check_format,
    check_points_count,
    check_version,
    is_header_line,
    parse_header,
)
from utils.error_tracker import HeaderValidationError

VALID = ["VERSION 1", "FORMAT x y z", "POINTS 2", "DATA ascii"]


def test_version_rules():
    assert check_version("VERSION 1")
    assert check_version("VERSION 12   ")
    assert not check_version("VERSION 1 extra")
    assert not check_version("VERSION one")
    assert not check_version("VERSIONS 1")
    assert not check_version("VERSION 1.5")


def test_format_is_string_exact():
    assert check_format("FORMAT x y z") is PointFormat.XYZ
    assert check_format("FORMAT x y z r g b") is PointFormat.XYZRGB
    assert check_format("FORMAT x y z ") is None
    assert check_format("FORMAT  x y z") is None
    assert check_format("format x y z") is None


def test_points_count_must_be_positive():
    assert check_points_count("POINTS 3") == 3
    assert check_points_count("POINTS 0") is None
    assert check_points_count("POINTS -4") is None
    assert check_points_count("POINTS many") is None
    assert check_points_count("COUNT 3") is None


def test_data_rule():
    assert check_data("DATA ascii")
    assert not check_data("DATA binary")
    assert not check_data("DATA ascii ")


def test_file_extension():
    assert check_file_extension("cloud.pt")
    assert not check_file_extension("cloud.pts")
    assert not check_file_extension("cloud.txt")
    assert not check_file_extension("pt")


def test_header_keyword_heuristic():
    assert is_header_line("VIEWPOINT 0 0 0 1 0 0 0")
    assert is_header_line("# FIELDS x y z")
    assert not is_header_line("1.0 2.0 3.0")


def test_parse_header_valid():
    header = parse_header(VALID)
    assert header.version == 1
    assert header.format is PointFormat.XYZ
    assert header.declared_points == 2


def test_parse_header_skips_blank_lines_and_terminators():
    lines = [
        "\n",
        "VERSION 3\r\n",
        "FORMAT x y z r g b\n",
        "\n",
        "POINTS 7\n",
        "DATA ascii\n",
    ]
    header = parse_header(lines)
    assert header.version == 3
    assert header.format is PointFormat.XYZRGB
    assert header.declared_points == 7


@pytest.mark.parametrize(
    "index, bad_line",
    [
        (0, "VERSION 1 extra"),
        (1, "FORMAT x y z "),
        (2, "POINTS 0"),
        (3, "DATA binary"),
    ],
)
def test_parse_header_reports_failing_line(index, bad_line):
    lines = list(VALID)
    lines[index] = bad_line
    with pytest.raises(HeaderValidationError) as info:
        parse_header(lines)
    assert info.value.line_index == index


def test_parse_header_short_circuits_at_first_failure():
    lines = ["VERSION x", "FORMAT bogus", "POINTS 0", "DATA binary"]
    with pytest.raises(HeaderValidationError) as info:
        parse_header(lines)
    assert info.value.line_index == 0
    assert "version" in info.value.reason


def test_parse_header_missing_lines():
    with pytest.raises(HeaderValidationError) as info:
        parse_header(["VERSION 1", "FORMAT x y z"])
    assert info.value.line_index == 2
    assert "Missing" in info.value.reason


def test_header_integers_must_fit_32_bits():
    assert check_version("VERSION 2147483647")
    assert not check_version("VERSION 99999999999999999999")
    assert check_points_count("POINTS 2147483647") == 2147483647
    assert check_points_count("POINTS 2147483648") is None
