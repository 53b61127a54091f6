"""
batch/report.py
===============
Tabulates batch outcomes with pandas: one row per pair, columns from
:data:`config.REPORT_COLUMNS`.
"""

from typing import Sequence

import pandas as pd

import config
from batch.runner import PairOutcome


def outcomes_frame(outcomes: Sequence[PairOutcome]) -> pd.DataFrame:
    """One row per pair; failed pairs score 0 and carry their error."""
    rows = [
        {
            "schedule": o.schedule,
            "network": o.network,
            "score": o.score,
            "finished": o.result.finished if o.ok else 0,
            "cars": o.result.cars if o.ok else 0,
            "status": "ok" if o.ok else "failed",
            "error": o.error or "",
        }
        for o in outcomes
    ]
    return pd.DataFrame(rows, columns=list(config.REPORT_COLUMNS))


def total_score(frame: pd.DataFrame) -> int:
    """Sum of the ``score`` column (0 for an empty frame)."""
    return int(frame["score"].sum())


def format_total(total: int) -> str:
    return f"Total score: {total:,}"


def write_csv(frame: pd.DataFrame, path: str) -> None:
    """Write the report to *path* (CSV, no index)."""
    frame.to_csv(path, index=False)
