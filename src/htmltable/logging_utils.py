"""Logging setup for the htmltable command line tool.

Library modules only create module loggers under the ``htmltable``
namespace; handlers are attached here, by entry points, to that package
logger rather than to the root logger of the host application.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from htmltable.exceptions import ValidationError

PACKAGE_LOGGER = "htmltable"

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as "debug" or a number into a logging level.

    Raises
    ------
    ValidationError
        If the name is not a standard logging level

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValidationError(
            f"Unknown log level {log_level!r}",
            parameter_name="log_level",
            parameter_value=log_level,
        )
    return level


def create_formatter(trace_mode: bool = False) -> logging.Formatter:
    """Build the formatter; trace mode adds timestamps and logger names."""
    if trace_mode:
        return logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send htmltable log messages to stderr and, optionally, a file.

    Handlers installed by an earlier call are closed and replaced, so the
    function can be called once per command invocation.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO").
    log_file : str, optional
        Append log messages to this file as well.
    trace_mode : bool, default False
        Emit timestamps and logger names.

    Returns
    -------
    logging.Logger
        The configured ``htmltable`` logger.

    """
    level = resolve_log_level(log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = create_formatter(trace_mode)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if log_file and len(handlers) > 1:
        package_logger.info("Logging to file: %s", log_file)
    return package_logger
