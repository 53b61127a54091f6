"""
sim/network.py
==============
Road-network topology for the schedule scorer.

:class:`RoadNetwork` interns every street name to a small integer id once,
when the network document is loaded.  From then on the schedule compiler,
the route planner and the engine only handle ids; names are looked up
exclusively through :meth:`RoadNetwork.street_id`, which raises
:class:`~sim.errors.UnknownStreet` for undeclared names.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from documents.model import NetworkDocument
from sim.entities import Street, StreetId
from sim.errors import UnknownStreet


class RoadNetwork:
    """Directed graph of intersections connected by streets.

    Parameters
    ----------
    streets : sequence of Street
        Streets indexed by id (``streets[i].id == i``).
    intersections : int
        Number of intersections; ids are ``0 .. intersections - 1``.
    """

    def __init__(self, streets: Sequence[Street], intersections: int) -> None:
        self.streets: List[Street] = list(streets)
        self.intersections = intersections

        self._ids: Dict[str, StreetId] = {}
        # Pre-compute incoming streets per intersection, in id order
        self._incoming: Dict[int, List[StreetId]] = {}
        for street in self.streets:
            self._ids[street.name] = street.id
            self._incoming.setdefault(street.end, []).append(street.id)

    @classmethod
    def from_document(cls, document: NetworkDocument) -> "RoadNetwork":
        """Intern the streets of a parsed network document."""
        streets = [
            Street(
                id=idx,
                start=spec.intersection_start,
                end=spec.intersection_end,
                length=spec.length,
                name=spec.name,
            )
            for idx, spec in enumerate(document.streets)
        ]
        return cls(streets, document.header.intersections)

    # ── queries ───────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.streets)

    def street_id(self, name: str, context: str = "") -> StreetId:
        """Return the id of street *name*.

        Raises
        ------
        UnknownStreet
            If the network never declared *name*.
        """
        try:
            return self._ids[name]
        except KeyError:
            raise UnknownStreet(name, context) from None

    def street(self, street_id: StreetId) -> Street:
        return self.streets[street_id]

    def length(self, street_id: StreetId) -> int:
        return self.streets[street_id].length

    def incoming(self, intersection_id: int) -> List[StreetId]:
        """Ids of the streets ending at *intersection_id*."""
        return list(self._incoming.get(intersection_id, ()))
