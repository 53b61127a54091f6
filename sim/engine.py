"""
sim/engine.py
=============
Discrete-time replay of every car under a compiled light schedule.

Each tick runs four phases in a fixed order:

1. **advance**: every driving car moves one unit along its street;
2. **cleanup**: empty street queues are dropped;
3. **release**: every street with a waiting car and a green light lets its
   queue head through (one car per street per tick, strict FIFO); the car
   is already one unit into its next street;
4. **arrive**: driving cars that reached the end of their street either
   join the queue there or, on their last street, finish and score.

Streets are visited in ascending id and cars in ascending id so that two
runs over the same inputs are identical.  Intersections never share state,
so that order only matters for reproducibility.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Mapping, Optional

from documents.model import NetworkDocument, ScheduleDocument
from sim.entities import CarId, CarTracker, Drive, LightSchedule, StreetId, Tick, Wait
from sim.light_schedule import compile_schedule, is_green
from sim.metrics import RunMetrics
from sim.network import RoadNetwork
from sim.route_plan import RoutePlan, plan_routes
from sim.score import car_points

log = logging.getLogger("engine")


@dataclass
class SimulationResult:
    """Outcome of one complete run.

    Attributes
    ----------
    score : int
        Total points.
    finish_ticks : list of int or None
        Completion tick of every car, ``None`` for cars still on the road.
    metrics : dict
        Snapshot of :class:`~sim.metrics.RunMetrics`.
    """

    score: int
    finish_ticks: List[Optional[Tick]] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def cars(self) -> int:
        return len(self.finish_ticks)

    @property
    def finished(self) -> int:
        return sum(1 for t in self.finish_ticks if t is not None)


class Simulation:
    """Tick-by-tick engine for one (network, schedule) pair.

    Parameters
    ----------
    light_schedules : mapping
        ``street id -> (offset, duration, period)`` from
        :func:`~sim.light_schedule.compile_schedule`.
    plan : RoutePlan
        Car trackers and initial queues from :func:`~sim.route_plan.plan_routes`.
    duration : int
        Number of ticks to simulate.
    bonus : int
        Fixed reward for every car finishing within *duration*.
    """

    def __init__(
        self,
        light_schedules: Mapping[StreetId, LightSchedule],
        plan: RoutePlan,
        duration: int,
        bonus: int,
    ) -> None:
        self.light_schedules = dict(light_schedules)
        self.cars: List[CarTracker] = plan.cars
        self.queues: Dict[StreetId, Deque[CarId]] = plan.queues
        self.duration = duration
        self.bonus = bonus
        self.score = 0
        self.metrics = RunMetrics()
        self._tick: Tick = 0

        for queue in self.queues.values():
            self.metrics.observe_queue(len(queue))
        # Cars planned with an empty program already stand on their last street.
        for car in self.cars:
            if not car.program:
                self._finish(car, 0)
        self._active: List[CarTracker] = [c for c in self.cars if not c.is_finished]

    @classmethod
    def from_documents(
        cls,
        network_doc: NetworkDocument,
        schedule_doc: ScheduleDocument,
    ) -> "Simulation":
        """Intern, compile and plan a document pair.

        Every structural error (``UnknownStreet``, ``UnknownIntersection``)
        is raised here, before any tick runs.
        """
        network = RoadNetwork.from_document(network_doc)
        light_schedules = compile_schedule(schedule_doc, network)
        plan = plan_routes(network_doc, network)
        return cls(
            light_schedules,
            plan,
            duration=network_doc.header.simulation_duration,
            bonus=network_doc.header.bonus,
        )

    # ── queries ───────────────────────────────────────────────────────────

    @property
    def tick(self) -> Tick:
        """Index of the next tick to simulate."""
        return self._tick

    def is_finished(self) -> bool:
        return self._tick >= self.duration

    def queue_of(self, street_id: StreetId) -> List[CarId]:
        """Cars waiting at the end of *street_id*, head first."""
        return list(self.queues.get(street_id, ()))

    # ── main loop ─────────────────────────────────────────────────────────

    def run(self) -> SimulationResult:
        """Simulate every remaining tick and return the result."""
        while not self.is_finished():
            self.step()
        log.info(
            "simulated %d ticks: %d/%d cars finished, score %d",
            self.duration, self.metrics.finished, len(self.cars), self.score,
        )
        log.debug("run metrics: %s", self.metrics.report())
        return SimulationResult(
            score=self.score,
            finish_ticks=[car.finished_at for car in self.cars],
            metrics=self.metrics.report(),
        )

    def step(self) -> None:
        """Advance the simulation by exactly one tick."""
        tick = self._tick
        self._advance_drivers()
        self._drop_empty_queues()
        released = self._release(tick)
        finished = self._arrive(tick)
        if finished:
            self._active = [c for c in self._active if not c.is_finished]
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "tick %d: released=%d finished=%d waiting_streets=%d score=%d",
                tick, released, finished, len(self.queues), self.score,
            )
        self._tick += 1
        self.metrics.ticks = self._tick

    # ── phases ────────────────────────────────────────────────────────────

    def _advance_drivers(self) -> None:
        for car in self._active:
            if car.is_driving:
                car.distance += 1

    def _drop_empty_queues(self) -> None:
        for street_id in [s for s, q in self.queues.items() if not q]:
            del self.queues[street_id]

    def _release(self, tick: Tick) -> int:
        released = 0
        for street_id in sorted(self.queues):
            queue = self.queues[street_id]
            schedule = self.light_schedules.get(street_id)
            if not queue or schedule is None or not is_green(tick, schedule):
                continue
            car = self.cars[queue.popleft()]
            car.program.popleft()
            car.distance = 1
            released += 1
        self.metrics.released += released
        return released

    def _arrive(self, tick: Tick) -> int:
        finished = 0
        for car in self._active:
            action = car.current
            if isinstance(action, Wait):
                continue
            if isinstance(action, Drive):
                if car.distance < action.length:
                    continue
                car.distance = 0
                car.program.popleft()
                if self._enter_next(car, tick):
                    finished += 1
            else:
                raise TypeError(f"car {car.id}: unexpected action {action!r}")
        return finished

    def _enter_next(self, car: CarTracker, tick: Tick) -> bool:
        """Dispatch on the action following a completed drive.

        Returns True when the car has just finished its route.
        """
        action = car.current
        if action is None:
            self._finish(car, tick)
            return True
        if isinstance(action, Wait):
            queue = self.queues.setdefault(action.street, deque())
            queue.append(car.id)
            self.metrics.arrived += 1
            self.metrics.observe_queue(len(queue))
            return False
        raise TypeError(f"car {car.id}: {action!r} cannot follow a drive")

    def _finish(self, car: CarTracker, tick: Tick) -> None:
        car.finished_at = tick
        self.score += car_points(tick, self.duration, self.bonus)
        self.metrics.finished += 1


def score_documents(
    network_doc: NetworkDocument,
    schedule_doc: ScheduleDocument,
) -> SimulationResult:
    """Score *schedule_doc* against *network_doc*."""
    return Simulation.from_documents(network_doc, schedule_doc).run()
