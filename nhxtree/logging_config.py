"""
Logging configuration for command-line use.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Attach console and optional file handlers to the package logger.

    Handlers:
        - Console handler: Human-readable output on stderr
        - File handler: Rotating log file (1 MiB, 3 backups) when ``log_file`` is given

    Args:
        level: Level for the package logger and the console handler
        log_file: Optional path of the rotating log file

    Returns:
        The configured "nhxtree" logger
    """
    package_logger = logging.getLogger("nhxtree")
    package_logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S"))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=1_000_000,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(file_handler)

    package_logger.propagate = False
    package_logger.debug(f"Logging configured at level {level}")
    return package_logger
