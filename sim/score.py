"""
sim/score.py
============
Points awarded for completed routes.

A car whose arrival is detected at zero-indexed tick ``t`` arrives at time
``t + 1``; it earns ``bonus + (duration - (t + 1))`` when that time is within
the horizon and nothing otherwise.  Cars never finished earn nothing.
"""

from __future__ import annotations

from typing import Iterable, Optional

from sim.entities import CarTracker, Tick


def car_points(finished_at: Optional[Tick], duration: int, bonus: int) -> int:
    """Points for one car finishing at *finished_at* (``None`` = never)."""
    if finished_at is None:
        return 0
    arrival = finished_at + 1
    if arrival > duration:
        return 0
    return bonus + (duration - arrival)


def total_score(cars: Iterable[CarTracker], duration: int, bonus: int) -> int:
    """Sum of :func:`car_points` over the terminal state of *cars*."""
    return sum(car_points(car.finished_at, duration, bonus) for car in cars)
