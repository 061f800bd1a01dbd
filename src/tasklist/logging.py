"""Logging configuration for tasklist."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from . import __version__

# Chatty libraries that only log below WARNING at -vv
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure logging based on verbosity level and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        # No logging requested
        return

    # Determine log level; file-only logging runs at INFO
    level = logging.DEBUG if verbose >= 2 else logging.INFO

    # Configure root logger for tasklist namespace
    logger = logging.getLogger("tasklist")
    logger.setLevel(level)
    # Calling twice (tests, re-entry) must not double every line
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Detailed format: timestamp - module - level - message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Add stderr handler if verbose
    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    # Add file handler if log_file specified
    if log_file is not None:
        # Ensure parent directory exists
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Quiet the HTTP client unless debugging
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose >= 2 else logging.WARNING)

    # Log startup delimiter with version and timestamp
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("")
    logger.info("=" * 60)
    logger.info(
        "tasklist %s starting | %s | level=%s",
        __version__,
        timestamp,
        logging.getLevelName(level),
    )
    logger.info("=" * 60)
