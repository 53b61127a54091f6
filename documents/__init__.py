"""
documents: Input document model and parser
===========================================

Modules
-------
model
    Pydantic models for the network and schedule documents.
parser
    Line-oriented parser producing fully validated models.
errors
    :class:`DocumentError` raised on malformed input.
"""

from .errors import DocumentError
from .model import (
    CarPath,
    GreenLight,
    InputHeader,
    IntersectionSchedule,
    NetworkDocument,
    ScheduleDocument,
    StreetSpec,
)
from .parser import load_network, load_schedule, parse_network, parse_schedule

__all__ = [
    "DocumentError",
    "CarPath",
    "GreenLight",
    "InputHeader",
    "IntersectionSchedule",
    "NetworkDocument",
    "ScheduleDocument",
    "StreetSpec",
    "load_network",
    "load_schedule",
    "parse_network",
    "parse_schedule",
]
