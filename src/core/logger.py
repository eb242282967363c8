"""
Centralized logging setup for the question search application.

Console output plus an optional rotating log file, configured from
config.json. Noisy third-party loggers (Streamlit's file watcher,
openpyxl's reader) are lowered to WARNING so per-query DEBUG output
stays readable.

Handlers installed here are named, so they can be removed again when a
different config is loaded (search_cli.py --config) without touching
handlers that Streamlit or pytest attached to the root logger.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable

from .exceptions import ConfigurationError


LOG_FILENAME = "question_search.log"

DEFAULT_QUIET_LOGGERS = ("streamlit", "openpyxl", "watchdog", "urllib3")

HANDLER_PREFIX = "question_search."

_logger_initialized = False


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    logs_directory: Path = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    quiet_loggers: Iterable[str] = DEFAULT_QUIET_LOGGERS,
    log_filename: str = LOG_FILENAME
) -> None:
    """
    Initialize the root logger with console and optional file handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format string for log messages.
        logs_directory: Directory for log files. If None, file logging disabled.
        max_file_size_mb: Maximum size of each log file in MB.
        backup_count: Number of backup files to keep.
        quiet_loggers: Third-party logger names capped at WARNING.
        log_filename: Name of the log file inside logs_directory.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(HANDLER_PREFIX + "console")
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if logs_directory:
        logs_directory = Path(logs_directory)
        logs_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_directory / log_filename,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logger_initialized = True


def configure_logging(config) -> None:
    """
    Set up logging from a loaded Config.

    Args:
        config: Config whose logging and paths sections are used.
    """
    setup_logging(
        log_level=config.logging.level,
        log_format=config.logging.format,
        logs_directory=config.paths.logs_directory,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        quiet_loggers=config.logging.quiet_loggers,
        log_filename=config.logging.filename
    )


def reset_logging() -> None:
    """Remove the handlers installed by setup_logging and allow a new setup."""
    global _logger_initialized

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()

    _logger_initialized = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Initializes logging from config on first call, falling back to
    console-only defaults when no config file can be found.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured Logger instance.
    """
    if not _logger_initialized:
        from .config_loader import get_config
        try:
            configure_logging(get_config())
        except ConfigurationError:
            setup_logging()

    return logging.getLogger(name)


if __name__ == "__main__":
    setup_logging(log_level="DEBUG")

    logger = get_logger(__name__)
    logger.debug("Debug message")
    logger.info("Corpus loaded")
    logger.warning("Unknown level 'B3' ignored")

    reset_logging()
    setup_logging(log_level="WARNING")
    get_logger(__name__).info("Hidden after reconfiguration")
