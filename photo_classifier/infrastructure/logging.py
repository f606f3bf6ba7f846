"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path
import sys

from loguru import logger

LOG_FILE_PATTERN = "classifier_{time:YYYYMMDD}.log"


def get_log_directory() -> str:
    """Get the default log directory path."""
    return str(Path.home() / ".photo_classifier" / "logs")


def init_logging(log_dir: str | None = None, level: str = "INFO") -> Path:
    """Initialize rotating file logging plus stderr output.

    Returns the directory holding the log files.
    """
    log_path = Path(log_dir or get_log_directory())
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, level="WARNING", format="{level}: {message}")
    logger.add(
        str(log_path / LOG_FILE_PATTERN),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        level=level.upper(),
    )
    return log_path


def find_latest_log_file(log_dir: str | None = None) -> Path | None:
    """Find the most recently modified log file in the directory."""
    log_path = Path(log_dir or get_log_directory())
    try:
        if not log_path.exists():
            return None
        log_files = list(log_path.glob("classifier_*.log"))
        if not log_files:
            return None
        return max(log_files, key=lambda p: p.stat().st_mtime)
    except OSError:
        return None
