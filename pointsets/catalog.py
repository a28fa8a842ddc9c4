"""Directory scanning for point files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pointsets.header import check_file_extension
from pointsets.loader import PointFile, load_point_file
from utils.error_tracker import (
    DirectoryOpenError,
    HeaderValidationError,
    PointCountMismatchError,
    PointFileOpenError,
)
from utils.logger import Logger, LoggerType
from utils.settings import point_sets as POINTCFG


class IssueKind(Enum):
    EXTENSION = "extension"
    OPEN = "open"
    HEADER = "header"
    COUNT = "count"


@dataclass(frozen=True)
class FileIssue:
    """Reason a catalog entry was excluded."""

    filename: str
    kind: IssueKind
    message: str


@dataclass
class CatalogReport:
    """Outcome of validating every entry of a directory."""

    directory: Path
    directory_ok: bool = True
    suitable: list[PointFile] = field(default_factory=list)
    issues: list[FileIssue] = field(default_factory=list)

    @property
    def all_suitable(self) -> bool:
        return self.directory_ok and not self.issues


class FileCatalog:
    """Lists a point set directory and sorts entries into suitable or not."""

    def __init__(
        self,
        directory: str | Path = POINTCFG.directory,
        logger: LoggerType | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.logger = logger or Logger.get_logger("pointsets.catalog")

    def _entries(self) -> list[str]:
        try:
            with os.scandir(self.directory) as it:
                names = [entry.name for entry in it]
        except OSError as exc:
            raise DirectoryOpenError(
                f"Error opening directory {self.directory}: {exc}"
            ) from exc
        return sorted(name for name in names if not name.startswith("."))

    def list_files(self) -> list[str]:
        """Return visible entry names, or an empty list if the directory fails."""
        try:
            return self._entries()
        except DirectoryOpenError as exc:
            self.logger.error(str(exc))
            return []

    def scan(self) -> CatalogReport:
        """Validate every visible entry and load the suitable ones."""
        report = CatalogReport(directory=self.directory)
        try:
            names = self._entries()
        except DirectoryOpenError as exc:
            self.logger.error(str(exc))
            report.directory_ok = False
            return report

        for name in Logger.progress(names, desc="Validating", total=len(names)):
            issue = self._check(name, report)
            if issue is not None:
                self.logger.warning(f"{issue.filename}: {issue.message}")
                report.issues.append(issue)

        self.logger.info(
            f"{len(report.suitable)} of {len(names)} entries in "
            f"{self.directory} are suitable"
        )
        return report

    def _check(self, name: str, report: CatalogReport) -> FileIssue | None:
        if not check_file_extension(name):
            return FileIssue(
                name,
                IssueKind.EXTENSION,
                f"does not have a {POINTCFG.extension} extension "
                "and will not be analyzed.",
            )
        try:
            point_file = load_point_file(self.directory / name)
        except PointFileOpenError as exc:
            return FileIssue(name, IssueKind.OPEN, str(exc))
        except HeaderValidationError as exc:
            return FileIssue(name, IssueKind.HEADER, exc.reason)
        except PointCountMismatchError as exc:
            return FileIssue(name, IssueKind.COUNT, str(exc))
        report.suitable.append(point_file)
        return None

    def load_suitable(self) -> list[PointFile]:
        """Rescan the directory and return the suitable point files."""
        return self.scan().suitable
