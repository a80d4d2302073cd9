"""
Logging setup.

The terminal belongs to the renderer while a game runs, so log records go
to a file only.
"""
import logging
from pathlib import Path

from .config_loader import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def setup_logging(config: LoggingConfig) -> logging.Handler:
    """
    Route the package's log records to the configured file.

    Args:
        config: Level and log file path

    Returns:
        The installed file handler
    """
    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("termsnake")
    # One log file per process; a repeated setup replaces the previous one
    for existing in list(package_logger.handlers):
        if isinstance(existing, logging.FileHandler):
            package_logger.removeHandler(existing)
            existing.close()
    package_logger.setLevel(config.level.upper())
    package_logger.addHandler(handler)
    # Keep records away from the root logger's stderr handler
    package_logger.propagate = False
    return handler
