"""
Logging setup: console output plus an optional daily-rotating log file.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    log_file_prefix: str = "accounts",
    backup_count: int = 14,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: level name, e.g. "DEBUG"
        log_dir: directory for log files; console only when None
        log_file_prefix: file name stem, rotated daily (accounts.log.2026-10-19)
        backup_count: number of rotated files to keep
    """
    root = logging.getLogger()
    root.setLevel(log_level.upper())

    # Re-running setup (tests, reload) must not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            path / f"{log_file_prefix}.log",
            when="midnight",
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # SQL echo is controlled by settings.debug, keep the engine logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
