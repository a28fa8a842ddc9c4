# cli/point_sets.py
"""Interactive menu and subcommands for validating and analyzing point sets."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from pointsets.analyzer import (
    average_distance,
    bounding_cube,
    closest_and_farthest,
    format_point,
    points_in_sphere,
)
from pointsets.catalog import FileCatalog
from pointsets.loader import PointFile
from pointsets.point import Point
from utils.cli import Command, CommandDispatcher
from utils.config import Config
from utils.logger import Logger, LoggerType
from utils.settings import paths
from utils.settings import point_sets as POINTCFG

MENU_TEXT = (
    "Menu:\n"
    "0. List files present\n"
    "1. Check if point files are suitable in format\n"
    "2. Check the closest and farthest two points in each file\n"
    "3. Identify corner points of the smallest cube for all points\n"
    "4. Specify sphere and find points within sphere\n"
    "5. Calculate average distance between points\n"
    "9. Exit"
)
EXIT_CHOICE = 9


def parse_center(text: str) -> Point:
    """Parse ``"x y z"`` into a point."""
    tokens = text.split()
    if len(tokens) != 3:
        raise ValueError(f"expected three coordinates, got {len(tokens)}")
    return Point.from_sequence([float(tok) for tok in tokens])


def parse_diameter(text: str) -> float:
    diameter = float(text.strip())
    if diameter < 0:
        raise ValueError("diameter must be non-negative")
    return diameter


class PointSetMenu:
    """Console front-end over :class:`FileCatalog` and the analyzer functions."""

    def __init__(
        self,
        catalog: FileCatalog,
        input_fn: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
        precision: int = POINTCFG.precision,
        logger: LoggerType | None = None,
    ) -> None:
        self.catalog = catalog
        self.input_fn = input_fn
        self.out = out or sys.stdout
        self.precision = precision
        self.logger = logger or Logger.get_logger("cli.point_sets")
        self.actions: dict[int, Callable[[], None]] = {
            0: self.list_files,
            1: self.validate,
            2: self.closest_farthest,
            3: self.cube_corners,
            4: self.sphere,
            5: self.average,
        }

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _ask(self, prompt: str) -> str | None:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def _fmt(self, point: Point) -> str:
        return format_point(point, self.precision)

    def _suitable_files(self) -> list[PointFile]:
        files = self.catalog.load_suitable()
        if not files:
            self._print("No suitable point files found.")
        return files

    def list_files(self) -> None:
        names = self.catalog.list_files()
        if not names:
            self._print(f"No files found in {self.catalog.directory}.")
        for name in names:
            self._print(name)

    def validate(self) -> bool:
        report = self.catalog.scan()
        lines = {pf.name: f"File {pf.name} is suitable." for pf in report.suitable}
        for issue in report.issues:
            lines[issue.filename] = f"Error in file {issue.filename}: {issue.message}"
        for name in sorted(lines):
            self._print(lines[name])
        if report.all_suitable:
            self._print("Point files are suitable in format.")
        else:
            self._print("Point files are not suitable in format.")
        return report.all_suitable

    def closest_farthest(self) -> None:
        files = self._suitable_files()
        if not files:
            return
        extremes = closest_and_farthest(files)
        if extremes is None:
            self._print("No file holds two or more points.")
            return
        pairs = (("Closest", extremes.closest), ("Farthest", extremes.farthest))
        for label, pair in pairs:
            self._print(
                f"{label} points: {self._fmt(pair.first)} and {self._fmt(pair.second)} "
                f"in {pair.source}, distance {pair.distance:.{self.precision}f}"
            )

    def cube_corners(self) -> None:
        for pf in self._suitable_files():
            cube = bounding_cube(pf)
            if cube is None:
                self._print(f"File {pf.name} has no points.")
                continue
            self._print(f"Corner points of the smallest cube for {pf.name}:")
            for corner in cube.corners():
                self._print(f"  {self._fmt(corner)}")

    def sphere(
        self, center: Point | None = None, diameter: float | None = None
    ) -> None:
        if center is None or diameter is None:
            try:
                center = parse_center(self._ask("Enter sphere center (x y z): ") or "")
                diameter = parse_diameter(self._ask("Enter sphere diameter: ") or "")
            except ValueError as exc:
                self._print(f"Invalid sphere input: {exc}")
                return
        files = self._suitable_files()
        for pf in files:
            inside = points_in_sphere(pf, center, diameter)
            self._print(
                f"Points within sphere {self._fmt(center)}, diameter "
                f"{diameter:.{self.precision}f} in {pf.name}: {len(inside)}"
            )
            for point in inside:
                self._print(f"  {self._fmt(point)}")

    def average(self) -> None:
        for pf in self._suitable_files():
            avg = average_distance(pf)
            self._print(
                f"Average distance between points in {pf.name}: "
                f"{avg:.{self.precision}f}"
            )

    def _repeat(self) -> bool:
        answer = self._ask("\nWould you like to see the menu again? (y/n): ")
        return answer is not None and answer.strip()[:1] in ("y", "Y")

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while True:
            self._print(MENU_TEXT)
            raw = self._ask("Enter your choice: ")
            if raw is None:
                self.logger.info("Input closed, leaving menu")
                return
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = None
            if choice == EXIT_CHOICE:
                self._print("Exiting the program.")
                return
            action = self.actions.get(choice)
            if action is None:
                self._print("Invalid choice. Please try again.")
                continue
            action()
            if not self._repeat():
                return


def _add_global_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--dir", type=str, help="Point set directory")
    parser.add_argument(
        "--config", type=str, default=str(paths.CONFIG_FILE), help="YAML config file"
    )
    parser.add_argument("--log-level", type=str, help="Override log level")


def _add_sphere_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--center", type=float, nargs=3, required=True, metavar=("X", "Y", "Z")
    )
    parser.add_argument("--diameter", type=float, required=True)


def build_menu(args: argparse.Namespace) -> PointSetMenu:
    """Resolve configuration for ``args`` and return a ready menu."""
    Config.load(args.config, force_reload=True)
    if args.log_level:
        Logger.configure(level=args.log_level)
    directory = args.dir or Config.get("point_sets.directory", str(POINTCFG.directory))
    precision = int(Config.get("point_sets.precision", POINTCFG.precision))
    return PointSetMenu(FileCatalog(Path(directory)), precision=precision)


def _menu(args: argparse.Namespace) -> None:
    build_menu(args).run()


def _list(args: argparse.Namespace) -> None:
    build_menu(args).list_files()


def _validate(args: argparse.Namespace) -> None:
    if not build_menu(args).validate():
        raise SystemExit(1)


def _closest(args: argparse.Namespace) -> None:
    build_menu(args).closest_farthest()


def _cube(args: argparse.Namespace) -> None:
    build_menu(args).cube_corners()


def _sphere(args: argparse.Namespace) -> None:
    if args.diameter < 0:
        raise SystemExit("--diameter must be non-negative")
    build_menu(args).sphere(Point.from_sequence(args.center), args.diameter)


def _average(args: argparse.Namespace) -> None:
    build_menu(args).average()


def create_dispatcher() -> CommandDispatcher:
    return CommandDispatcher(
        description="Validate and analyze ASCII .pt point sets.",
        commands=[
            Command("menu", _menu, help="Interactive menu (default)"),
            Command("list", _list, help="List files in the point set directory"),
            Command("validate", _validate, help="Check every file is suitable"),
            Command("closest", _closest, help="Closest and farthest point pairs"),
            Command("cube", _cube, help="Bounding cube corners per file"),
            Command(
                "sphere",
                _sphere,
                _add_sphere_arguments,
                help="Points inside a sphere per file",
            ),
            Command("average", _average, help="Average pairwise distance per file"),
        ],
        add_global_arguments=_add_global_arguments,
        default_command="menu",
    )


def main(argv: Optional[list[str]] = None) -> None:
    create_dispatcher().run(argv)


if __name__ == "__main__":
    main()
