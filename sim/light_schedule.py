"""
sim/light_schedule.py
=====================
Compiles a schedule document into per-street periodic green windows.

Each listed street gets a ``(offset, duration, period)`` triple where
*period* is the full cycle of its intersection and *offset* the total green
time of the streets listed before it.  Windows of one intersection are
therefore contiguous and never overlap.  A street that appears in no block
has no entry and stays red forever.

:func:`is_green` is the only primitive the engine uses to decide releases.
"""

from __future__ import annotations

import logging
from typing import Dict

from documents.model import ScheduleDocument
from sim.entities import LightSchedule, StreetId, Tick
from sim.errors import UnknownIntersection
from sim.network import RoadNetwork

log = logging.getLogger("light_schedule")


def is_green(tick: Tick, schedule: LightSchedule) -> bool:
    """True iff ``tick mod period`` lies in ``[offset, offset + duration)``."""
    offset, duration, period = schedule
    phase = tick % period
    return offset <= phase < offset + duration


def compile_schedule(
    document: ScheduleDocument,
    network: RoadNetwork,
) -> Dict[StreetId, LightSchedule]:
    """Resolve every scheduled street and compute its green window.

    Parameters
    ----------
    document : ScheduleDocument
        Parsed schedule.
    network : RoadNetwork
        Interned network the schedule refers to.

    Returns
    -------
    dict
        ``street id -> (offset, duration, period)``.

    Raises
    ------
    UnknownStreet
        A block names a street the network never declared.
    UnknownIntersection
        A block targets an intersection id outside the network.
    """
    schedules: Dict[StreetId, LightSchedule] = {}
    for block in document.intersections:
        if block.intersection_id >= network.intersections:
            raise UnknownIntersection(block.intersection_id, network.intersections)
        period = block.period
        offset = 0
        context = f"schedule of intersection {block.intersection_id}"
        for light in block.lights:
            street_id = network.street_id(light.street_name, context)
            if network.street(street_id).end != block.intersection_id:
                log.warning(
                    "street %r ends at intersection %d but is scheduled at %d",
                    light.street_name, network.street(street_id).end,
                    block.intersection_id,
                )
            schedules[street_id] = (offset, light.duration, period)
            offset += light.duration
    log.debug("compiled %d green windows", len(schedules))
    return schedules
