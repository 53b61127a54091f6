"""
batch/runner.py
===============
Evaluates one or more (network, schedule) file pairs.

Pairs are independent: each is parsed, compiled and simulated on its own.
For every pair the schedule is parsed first because it is the cheaper
document and the more likely one to be broken.  A failing pair either
aborts the batch (default) or, with ``keep_going``, is recorded and the
next pair runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from documents.errors import DocumentError
from documents.parser import load_network, load_schedule
from sim.engine import SimulationResult, score_documents
from sim.errors import ScoringError

log = logging.getLogger("batch")

# Errors that only invalidate the pair being evaluated
PAIR_ERRORS = (DocumentError, ScoringError, OSError)


@dataclass
class PairOutcome:
    """Result or failure of one pair."""

    network: str
    schedule: str
    result: Optional[SimulationResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    @property
    def score(self) -> int:
        return self.result.score if self.result is not None else 0


def evaluate_pair(network_path: str, schedule_path: str) -> SimulationResult:
    """Parse both documents and score the schedule."""
    schedule = load_schedule(schedule_path)
    network = load_network(network_path)
    return score_documents(network, schedule)


def run_batch(
    pairs: Iterable[Tuple[str, str]],
    keep_going: bool = False,
    on_outcome: Optional[Callable[[PairOutcome], None]] = None,
) -> List[PairOutcome]:
    """Evaluate every ``(network_path, schedule_path)`` pair in order.

    Parameters
    ----------
    pairs : iterable of (str, str)
        Network and schedule file paths.
    keep_going : bool
        Record pair failures instead of re-raising the first one.
    on_outcome : callable or None
        Called with each outcome as soon as it is known.
    """
    outcomes: List[PairOutcome] = []
    for network_path, schedule_path in pairs:
        try:
            result = evaluate_pair(network_path, schedule_path)
        except PAIR_ERRORS as exc:
            if not keep_going:
                raise
            log.error("%s: %s", schedule_path, exc)
            outcome = PairOutcome(network_path, schedule_path, error=str(exc))
        else:
            outcome = PairOutcome(network_path, schedule_path, result=result)
        if on_outcome is not None:
            on_outcome(outcome)
        outcomes.append(outcome)
    return outcomes
