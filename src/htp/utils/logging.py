"""
Logging for the htp command line.

The parsing engine never logs. The CLI calls setup_logging() once, after the
configuration is loaded, so diagnostics go to stderr and stdout carries only
the resolved datetime (or the clue JSON).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# "2026-01-20 15:30:45 | DEBUG    | htp.cli | Resolving 'now' against 2026-01-20T15:30:45+01:00"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# One CLI run writes a handful of lines; 1MB x 3 keeps months of history
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUPS = 3


def setup_logging(log_level: str = "WARNING", log_file: str | None = None) -> None:
    """
    Route htp's log records to stderr and, optionally, a rotating file.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), any case
        log_file: Path of a log file (HTP_LOG_FILE). "~" is expanded and
                  missing parent directories are created.

    Raises:
        ValueError: If log_level is not a logging level name

    Example:
        >>> setup_logging(log_level="DEBUG")
        >>> logging.getLogger("htp.cli").debug("Parsed clue Now(kind='now')")
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Repeated main() calls (tests, embedding) must not stack handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("htp.logging").debug(f"Logging to stderr at {log_level.upper()}, file={log_file}")
