import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import io

import pytest

from cli.point_sets import (
    PointSetMenu,
    create_dispatcher,
    parse_center,
    parse_diameter,
)
from pointsets.catalog import FileCatalog
from pointsets.point import Point

GOOD = "VERSION 1\nFORMAT x y z\nPOINTS 2\nDATA ascii\n0 0 0\n1 1 1\n"
SPHERE = "VERSION 1\nFORMAT x y z\nPOINTS 3\nDATA ascii\n0 0 0\n1 0 0\n2 0 0"
SHORT = "VERSION 1\nFORMAT x y z\nPOINTS 3\nDATA ascii\n0 0 0\n1 1 1\n"


def scripted(answers):
    it = iter(answers)

    def _input(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return _input


def make_menu(directory, answers=()):
    out = io.StringIO()
    menu = PointSetMenu(FileCatalog(directory), input_fn=scripted(answers), out=out)
    return menu, out


def test_parse_center_and_diameter():
    assert parse_center("1 2 3") == Point(1, 2, 3)
    with pytest.raises(ValueError):
        parse_center("1 2")
    assert parse_diameter(" 2.5 ") == 2.5
    with pytest.raises(ValueError):
        parse_diameter("-1")


def test_validate_reports_mismatch(tmp_path):
    (tmp_path / "good.pt").write_text(GOOD)
    (tmp_path / "short.pt").write_text(SHORT)
    menu, out = make_menu(tmp_path)
    assert menu.validate() is False
    text = out.getvalue()
    assert "File good.pt is suitable." in text
    assert "Error in file short.pt: Points count mismatch (expected 3, got 2)." in text
    assert "Point files are not suitable in format." in text


def test_closest_farthest_output(tmp_path):
    (tmp_path / "good.pt").write_text(GOOD)
    menu, out = make_menu(tmp_path)
    menu.closest_farthest()
    text = out.getvalue()
    assert "Closest points: (0.000, 0.000, 0.000) and (1.000, 1.000, 1.000)" in text
    assert "distance 1.732" in text
    assert "Farthest points:" in text


def test_cube_and_average_output(tmp_path):
    (tmp_path / "good.pt").write_text(GOOD)
    menu, out = make_menu(tmp_path)
    menu.cube_corners()
    menu.average()
    text = out.getvalue()
    assert "Corner points of the smallest cube for good.pt:" in text
    assert text.count("  (") == 8
    assert "Average distance between points in good.pt: 1.732" in text


def test_sphere_prompts_once_for_all_files(tmp_path):
    (tmp_path / "a.pt").write_text(SPHERE)
    (tmp_path / "b.pt").write_text(SPHERE)
    menu, out = make_menu(tmp_path, ["0 0 0", "2"])
    menu.sphere()
    text = out.getvalue()
    assert text.count(": 2\n") == 2
    assert "(2.000, 0.000, 0.000)" not in text


def test_sphere_rejects_bad_input(tmp_path):
    menu, out = make_menu(tmp_path, ["0 0", "2"])
    menu.sphere()
    assert "Invalid sphere input" in out.getvalue()


def test_menu_loop(tmp_path):
    (tmp_path / "good.pt").write_text(GOOD)
    menu, out = make_menu(tmp_path, ["7", "abc", "0", "y", "9"])
    menu.run()
    text = out.getvalue()
    assert text.count("Invalid choice. Please try again.") == 2
    assert "good.pt" in text
    assert text.count("Menu:") == 4
    assert text.rstrip().endswith("Exiting the program.")


def test_menu_stops_on_no(tmp_path):
    menu, out = make_menu(tmp_path, ["5", "n"])
    menu.run()
    assert out.getvalue().count("Menu:") == 1


def test_menu_stops_on_end_of_input(tmp_path):
    menu, out = make_menu(tmp_path, [])
    menu.run()
    assert out.getvalue().count("Menu:") == 1


def test_dispatcher_sphere_command(tmp_path, capsys):
    (tmp_path / "s.pt").write_text(SPHERE)
    create_dispatcher().run(
        [
            "--dir",
            str(tmp_path),
            "--config",
            str(tmp_path / "missing.yaml"),
            "sphere",
            "--center",
            "0",
            "0",
            "0",
            "--diameter",
            "2",
        ],
        track_exceptions=False,
    )
    text = capsys.readouterr().out
    assert "in s.pt: 2" in text
    assert "(1.000, 0.000, 0.000)" in text


def test_dispatcher_validate_exit_code(tmp_path):
    (tmp_path / "short.pt").write_text(SHORT)
    with pytest.raises(SystemExit) as info:
        create_dispatcher().run(
            [
                "--dir",
                str(tmp_path),
                "--config",
                str(tmp_path / "none.yaml"),
                "validate",
            ],
            track_exceptions=False,
        )
    assert info.value.code == 1
