#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for applications embedding vbcode.

The library only emits records through module-level loggers under the
``vbcode`` namespace (renderer diagnostics are logged at WARNING). Hosts that
want them printed call ``configure_logging``; it touches only the ``vbcode``
logger, never the root logger. Once configured, ``vbcode`` records no
longer propagate to the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LIBRARY_LOGGER_NAME = "vbcode"

# Marks handlers installed here so reconfiguring replaces only our own
_HANDLER_MARKER = "_vbcode_handler"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a numeric level or a level name (e.g. "info") into a logging level."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str = logging.WARNING,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach handlers to the ``vbcode`` logger.

    Parameters
    ----------
    log_level : int | str, default logging.WARNING
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    stream : TextIO, optional
        Stream for the console handler. Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The configured ``vbcode`` logger.

    Notes
    -----
    Propagation to ancestor loggers is turned off, so handlers the host has
    attached to the root logger no longer receive ``vbcode`` records.

    """
    resolved_level = resolve_log_level(log_level)

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(resolved_level)
    library_logger.propagate = False
    for handler in list(library_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            library_logger.removeHandler(handler)
            handler.close()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            library_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        library_logger.addHandler(handler)

    return library_logger


__all__ = ["LIBRARY_LOGGER_NAME", "configure_logging", "resolve_log_level"]
