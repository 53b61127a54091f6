"""
sim/entities.py
===============
Entity types shared by the schedule compiler, the route planner and the
engine.

* :class:`Street`: immutable interned street (integer id, endpoints, length).
* :class:`Drive` / :class:`Wait`: the two variants of a car's action program.
* :class:`CarTracker`: mutable per-car simulation state.

A car is *waiting* while the front of its program is a :class:`Wait`,
*driving* while it is a :class:`Drive`, and *finished* once the program is
empty.  Those three states are mutually exclusive by construction.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple, Union

StreetId = int
CarId = int
Tick = int

# offset, duration, period
LightSchedule = Tuple[int, int, int]


@dataclass(frozen=True)
class Street:
    """A directed street, interned once when the network is loaded.

    Attributes
    ----------
    id : int
        Position of the street in the network document.
    start, end : int
        Origin and destination intersection ids.
    length : int
        Ticks needed to drive from one end to the other.
    name : str
        Only used to cross-reference the two input documents.
    """

    id: StreetId
    start: int
    end: int
    length: int
    name: str


@dataclass(frozen=True)
class Drive:
    """Drive across *street*, which takes *length* ticks."""

    street: StreetId
    length: int


@dataclass(frozen=True)
class Wait:
    """Wait at the far end of *street* for a green light."""

    street: StreetId


Action = Union[Drive, Wait]


@dataclass
class CarTracker:
    """Mutable simulation state of one car.

    Attributes
    ----------
    id : int
        Position of the car in the network document.
    program : deque of Drive | Wait
        Remaining actions, consumed from the left.
    distance : int
        Ticks already spent on the street currently being driven.
    finished_at : int or None
        Tick at which the car reached the end of its last street.
    """

    id: CarId
    program: Deque[Action] = field(default_factory=deque)
    distance: int = 0
    finished_at: Optional[Tick] = None

    @property
    def current(self) -> Optional[Action]:
        """Front action of the program, ``None`` when the program is empty."""
        return self.program[0] if self.program else None

    @property
    def is_driving(self) -> bool:
        return bool(self.program) and isinstance(self.program[0], Drive)

    @property
    def is_waiting(self) -> bool:
        return bool(self.program) and isinstance(self.program[0], Wait)

    @property
    def is_finished(self) -> bool:
        return self.finished_at is not None
