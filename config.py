#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf: it never imports from
other project packages.
"""

# ── Logging defaults ─────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILE: str = "scorer.log"
LOG_MAX_BYTES: int = 1_000_000
LOG_BACKUP_COUNT: int = 2

# ── Engine debug trace (per-tick detail, opt-in) ─────────────────────────────
ENGINE_DEBUG_LOG_FILE: str = "engine_debug.log"
ENGINE_DEBUG_MAX_BYTES: int = 5_000_000

# ── Environment variable names ───────────────────────────────────────────────
ENV_LOG_LEVEL: str = "SCORER_LOG_LEVEL"
ENV_LOG_DIR: str = "SCORER_LOG_DIR"
ENV_ENGINE_DEBUG: str = "SCORER_ENGINE_DEBUG"

# ── Batch report ─────────────────────────────────────────────────────────────
REPORT_COLUMNS = (
    "schedule", "network", "score", "finished", "cars", "status", "error",
)
