#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/logging_utils.py
"""Logging setup for doxy2md entry points.

The library itself only creates module loggers under the ``doxy2md``
namespace. Entry points call :func:`configure_logging` to decide where those
diagnostics go; loggers of other packages are left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "doxy2md"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_level(log_level: int | str, verbose: bool = False) -> int:
    """Return the numeric level, lowered to INFO when verbose notes are wanted."""
    if isinstance(log_level, int):
        level = log_level
    else:
        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            level = logging.WARNING
    return min(level, logging.INFO) if verbose else level


def configure_logging(
    log_level: int | str = "WARNING",
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    verbose: bool = False,
) -> logging.Logger:
    """Send doxy2md diagnostics to stderr and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str, default "WARNING"
        Numeric logging level or level name
    log_file : str, optional
        File receiving a copy of the diagnostics
    trace_mode : bool, default False
        Prefix records with timestamps and logger names
    verbose : bool, default False
        Show the INFO notes about content that is not rendered

    Returns
    -------
    logging.Logger
        The ``doxy2md`` package logger

    """
    level = resolve_level(log_level, verbose)
    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning(f"Could not open log file {log_file}: {exc}")
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug(f"Logging to file {log_file}")

    return package_logger
