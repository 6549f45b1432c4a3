"""Logging for the notion2github command line tool.

Progress is written to the console as one line per event. A copy can also be
appended to a log file when a log directory is given, either with --log-dir
or through NOTION2GITHUB_LOG_DIR.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

LOGGER_NAME = "notion2github"
LOG_FILE = "notion2github.log"
LOG_DIR_ENV_VAR = "NOTION2GITHUB_LOG_DIR"
LOG_LEVEL_ENV_VAR = "NOTION2GITHUB_LOG_LEVEL"

CONSOLE_FORMAT = "%(levelname)-7s %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Credentials that can show up in GitHub error bodies or echoed headers.
_SECRET_PATTERNS = (
    (re.compile(r"\bgh[pousr]_[A-Za-z0-9]{36,}"), "[GITHUB_TOKEN]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{22,}"), "[GITHUB_TOKEN]"),
    (re.compile(r"Bearer [A-Za-z0-9._-]+"), "Bearer [REDACTED]"),
)


def setup_logging(
    log_dir: str | Path | None = None,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the package logger for one run.

    Args:
        log_dir: Directory to append notion2github.log to. Falls back to
            NOTION2GITHUB_LOG_DIR; without either, nothing is written to disk.
        level: Log level name. Falls back to NOTION2GITHUB_LOG_LEVEL, then INFO.
        console: Whether to log to stderr.

    Returns:
        The notion2github logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if log_dir is None:
        log_dir = os.environ.get(LOG_DIR_ENV_VAR) or None
    if log_dir is not None:
        log_path = Path(log_dir) / LOG_FILE
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            # Logging to disk is optional; the import still runs.
            logger.warning("Cannot write log file %s (%s), logging to console only", log_path, e)
        else:
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)

    return logger


def truncate_output(output: str, max_length: int = 500) -> str:
    """Shorten a response body for use in an error message."""
    if len(output) <= max_length:
        return output
    return f"{output[:max_length]}... [{len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Redact GitHub tokens from text."""
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text
