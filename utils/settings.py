"""Project wide configuration dataclasses and default values."""

from dataclasses import dataclass
from pathlib import Path

# Root dir
BASE_DIR = Path(__file__).resolve().parent.parent

# Extension a point file must carry to be analyzed
POINT_EXT = ".pt"

# Header keywords recognised when skipping header remnants in the data body
HEADER_KEYWORDS = (
    "VERSION",
    "FIELDS",
    "SIZE",
    "TYPE",
    "COUNT",
    "WIDTH",
    "HEIGHT",
    "VIEWPOINT",
    "POINTS",
    "DATA",
    "FORMAT",
)


@dataclass(frozen=True)
class Paths:
    """
    Dataclass aggregating the filesystem paths used in the project.
    """

    CONF_DIR: Path = BASE_DIR / "conf"
    CONFIG_FILE: Path = CONF_DIR / "app.yaml"
    LOG_DIR: Path = Path(".logs")


paths = Paths()


@dataclass(frozen=True)
class LoggingCfg:
    """
    Logging configuration for the project.

    - level: Log level ("INFO", "DEBUG", etc.)
    - json: Enable/disable structured JSON logging.
    - log_dir: Directory where log files are stored.
    - log_format: Console log output format.
    - log_file_format: File log output format.
    - progress_bar_format: TQDM progress bar format.
    """

    level: str = "INFO"
    json: bool = True
    log_dir: Path = paths.LOG_DIR
    log_format: str = (
        "<green>{time:MM-DD HH:mm:ss}</green>"
        "[<level>{level:.3}</level>]"
        "[<cyan>{extra[module]:.16}</cyan>:<cyan>{line:<3}</cyan>]"
        "<level>{message}</level>"
    )
    log_file_format: str = "{time:YYYY-MM-DD HH:mm:ss}[{level}][{file}:{line}]{message}"
    progress_bar_format: str = (
        "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]"
    )


logging = LoggingCfg()


@dataclass(frozen=True)
class PointSetsCfg:
    """
    Point set catalog defaults.

    - directory: folder scanned (non-recursively) for point files.
    - extension: required file suffix.
    - precision: decimals used when printing coordinates.
    """

    directory: Path = Path("point_sets")
    extension: str = POINT_EXT
    precision: int = 3


point_sets = PointSetsCfg()
