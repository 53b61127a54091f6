"""
sim/route_plan.py
=================
Turns every car path into an action program and seeds the street queues.

A path ``[s0, s1, ..., sn]`` becomes::

    Wait(s0), Drive(s1), Wait(s1), ..., Drive(sn)

The car starts queued at the end of ``s0``.  The trailing ``Wait(sn)`` is
dropped because entering the last street and reaching its end is the
completion, not a new wait.  A single-street path therefore yields an empty
program: the car is already where it wants to be and is not queued.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Sequence

from documents.model import NetworkDocument
from sim.entities import Action, CarId, CarTracker, Drive, StreetId, Wait
from sim.network import RoadNetwork


@dataclass
class RoutePlan:
    """Trackers of every car plus the initial FIFO queue of each street."""

    cars: List[CarTracker] = field(default_factory=list)
    queues: Dict[StreetId, Deque[CarId]] = field(default_factory=dict)


def build_program(
    street_names: Sequence[str],
    network: RoadNetwork,
    context: str = "",
) -> Deque[Action]:
    """Return the action program of one path.

    Raises
    ------
    UnknownStreet
        A name in *street_names* is not part of *network*.
    """
    ids = [network.street_id(name, context) for name in street_names]
    program: Deque[Action] = deque([Wait(ids[0])])
    for street_id in ids[1:]:
        program.append(Drive(street_id, network.length(street_id)))
        program.append(Wait(street_id))
    program.pop()
    return program


def plan_routes(document: NetworkDocument, network: RoadNetwork) -> RoutePlan:
    """Build one :class:`CarTracker` per car path, in document order.

    Cars whose program starts with a ``Wait`` are appended to that street's
    queue in car-id order, which fixes the FIFO order of cars sharing a
    starting street.
    """
    plan = RoutePlan()
    for car_id, path in enumerate(document.car_paths):
        program = build_program(path.street_names, network, f"route of car {car_id}")
        plan.cars.append(CarTracker(id=car_id, program=program))
        if program:
            first = program[0]
            plan.queues.setdefault(first.street, deque()).append(car_id)
    return plan
