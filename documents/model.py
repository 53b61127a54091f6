"""
documents/model.py
==================
Validated representations of the two input documents.

The simulation core only ever consumes these models; it never sees raw
text.  Every model is frozen once built.  Per-line constraints that depend
on the header (street endpoints must name existing intersections) read the
intersection count from the pydantic validation *context*.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ── Network document ──────────────────────────────────────────────────────────


class InputHeader(_Frozen):
    """First line of the network document."""
    simulation_duration: int = Field(ge=0)
    intersections: int = Field(ge=0)
    streets: int = Field(ge=0)
    cars: int = Field(ge=0)
    bonus: int = Field(ge=0)


class StreetSpec(_Frozen):
    """One directed street line."""
    intersection_start: int = Field(ge=0)
    intersection_end: int = Field(ge=0)
    name: str = Field(min_length=1)
    length: int = Field(ge=1)

    @field_validator("intersection_start", "intersection_end")
    @classmethod
    def _known_intersection(cls, value: int, info: ValidationInfo) -> int:
        intersections = (info.context or {}).get("intersections")
        if intersections is not None and value >= intersections:
            raise ValueError(
                f"intersection {value} out of range (network has {intersections})"
            )
        return value


class CarPath(_Frozen):
    """Ordered street names one car intends to drive."""
    street_names: List[str] = Field(min_length=1)


class NetworkDocument(_Frozen):
    """Header, streets and car paths of a network document."""
    header: InputHeader
    streets: List[StreetSpec]
    car_paths: List[CarPath]

    @model_validator(mode="after")
    def _check_counts(self) -> "NetworkDocument":
        if len(self.streets) != self.header.streets:
            raise ValueError(
                f"header declares {self.header.streets} streets, got {len(self.streets)}"
            )
        if len(self.car_paths) != self.header.cars:
            raise ValueError(
                f"header declares {self.header.cars} cars, got {len(self.car_paths)}"
            )
        seen = set()
        for street in self.streets:
            if street.name in seen:
                raise ValueError(f"street {street.name!r} declared twice")
            seen.add(street.name)
        return self


# ── Schedule document ─────────────────────────────────────────────────────────


class GreenLight(_Frozen):
    """One ``<street_name> <duration>`` line of a schedule block."""
    street_name: str = Field(min_length=1)
    duration: int = Field(ge=1)


class IntersectionSchedule(_Frozen):
    """Cyclic green order of one intersection.

    A block without lights is valid; every street of that intersection
    stays red.
    """
    intersection_id: int = Field(ge=0)
    lights: List[GreenLight]

    @model_validator(mode="after")
    def _unique_streets(self) -> "IntersectionSchedule":
        names = [light.street_name for light in self.lights]
        if len(set(names)) != len(names):
            raise ValueError(
                f"intersection {self.intersection_id} lists a street more than once"
            )
        return self

    @property
    def period(self) -> int:
        return sum(light.duration for light in self.lights)


class ScheduleDocument(_Frozen):
    """Every scheduled intersection, in document order."""
    intersections: List[IntersectionSchedule]

    @model_validator(mode="after")
    def _unique_intersections(self) -> "ScheduleDocument":
        seen = set()
        for block in self.intersections:
            if block.intersection_id in seen:
                raise ValueError(
                    f"intersection {block.intersection_id} scheduled twice"
                )
            seen.add(block.intersection_id)
        return self
