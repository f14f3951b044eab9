#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the blockdown command line.

Library modules only create their loggers with ``logging.getLogger(__name__)``;
handlers are installed here, and only by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str = "WARNING", verbose: bool = False, trace: bool = False) -> int:
    """Combine the CLI logging switches into one numeric level.

    ``trace`` wins over ``verbose``, which only lowers the default level;
    an explicit ``log_level`` other than WARNING is kept as given.

    Examples
    --------
        >>> resolve_log_level("INFO")
        20
        >>> resolve_log_level("WARNING", verbose=True)
        10

    """
    if trace:
        return logging.DEBUG
    resolved = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.WARNING)
    if verbose and resolved == logging.WARNING:
        return logging.DEBUG
    return resolved


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optional file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file receiving a copy of the log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
