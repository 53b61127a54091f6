#!/usr/bin/env python3
"""
logging_setup.py
================
Configures the root logger with a console handler and a rotating file
handler (``scorer.log``, 1 MB, 2 backups).

Call :func:`setup_logging` once at startup, before the first score is
computed.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import config


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[str] = None,
    engine_debug: bool = False,
) -> None:
    """Apply a unified log format to both console and file output.

    Parameters
    ----------
    level : int
        Minimum severity level (e.g. ``logging.DEBUG``, ``logging.INFO``).
    log_dir : str or None
        Directory for the log files; no file handlers when *None*.
    engine_debug : bool
        Also write the per-tick ``engine`` trace to
        ``engine_debug.log`` regardless of *level*.
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(config.LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)

    root.handlers.clear()
    root.addHandler(ch)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        fh = RotatingFileHandler(
            os.path.join(log_dir, config.LOG_FILE),
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
        )
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # ── Dedicated debug file for the engine tick trace ────────────────
    engine_logger = logging.getLogger("engine")
    for handler in list(engine_logger.handlers):
        engine_logger.removeHandler(handler)
        handler.close()
    if engine_debug:
        engine_logger.setLevel(logging.DEBUG)
        dfh = RotatingFileHandler(
            os.path.join(log_dir or ".", config.ENGINE_DEBUG_LOG_FILE),
            maxBytes=config.ENGINE_DEBUG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
        )
        dfh.setLevel(logging.DEBUG)
        dfh.setFormatter(fmt)
        engine_logger.addHandler(dfh)
    else:
        engine_logger.setLevel(logging.NOTSET)
