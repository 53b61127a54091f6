"""
batch: Multi-pair orchestration
================================

Modules
-------
runner
    :func:`run_batch` evaluates (network, schedule) file pairs in order.
report
    pandas tabulation of the outcomes, total and CSV export.
"""

from .runner import PairOutcome, evaluate_pair, run_batch
from .report import format_total, outcomes_frame, total_score, write_csv

__all__ = [
    "PairOutcome",
    "evaluate_pair",
    "run_batch",
    "format_total",
    "outcomes_frame",
    "total_score",
    "write_csv",
]
