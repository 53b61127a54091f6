"""
sim/errors.py
=============
Structural errors raised while a (network, schedule) pair is compiled.

Both are fatal for the pair being scored: they are raised before the tick
loop starts and no partial score is ever produced.
"""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for every structural error raised by :mod:`sim`."""


class UnknownStreet(ScoringError, KeyError):
    """A route or a schedule names a street the network never declared.

    Parameters
    ----------
    name : str
        The offending street name.
    context : str
        Where the name was found (e.g. ``"route of car 3"``).
    """

    def __init__(self, name: str, context: str = "") -> None:
        self.name = name
        self.context = context
        super().__init__(name)

    def __str__(self) -> str:
        where = f" in {self.context}" if self.context else ""
        return f"unknown street {self.name!r}{where}"


class UnknownIntersection(ScoringError):
    """A schedule block targets an intersection id outside the network."""

    def __init__(self, intersection_id: int, intersections: int) -> None:
        self.intersection_id = intersection_id
        self.intersections = intersections
        super().__init__(
            f"intersection {intersection_id} does not exist "
            f"(network has {intersections} intersections)"
        )
