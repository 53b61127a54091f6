"""
documents/parser.py
===================
Parser for the two line-oriented input formats.

Network document::

    <simulation_duration> <intersections> <streets> <cars> <bonus>
    <intersection_start> <intersection_end> <street_name> <street_length>
    ...
    <n_streets> <street_name_1> ... <street_name_n>
    ...

Schedule document::

    <n_scheduled_intersections>
    <intersection_id>
    <n_incoming_streets_with_light>
    <street_name> <duration>
    ...

Fields are separated by exactly one space.  Any structural problem raises
:class:`~documents.errors.DocumentError` carrying the file, the 1-based line
and the field; a partially valid document is never returned.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from documents.errors import DocumentError
from documents.model import (
    CarPath,
    GreenLight,
    InputHeader,
    IntersectionSchedule,
    NetworkDocument,
    ScheduleDocument,
    StreetSpec,
)

log = logging.getLogger("parser")

_NUMBER = re.compile(r"[0-9]+")

# Error location meaning "the line consumed last".
_CURRENT = -1

M = TypeVar("M", bound=BaseModel)


class _LineReader:
    """Sequential access to the lines of one document with error helpers."""

    def __init__(self, text: str, path: str) -> None:
        self.path = path
        self._lines = text.split("\n")
        # The final newline terminates the last line, it does not open a new one.
        if self._lines and self._lines[-1] == "":
            self._lines.pop()
        self._index = 0

    @property
    def line_no(self) -> int:
        """1-based number of the line returned by the last :meth:`fields` call."""
        return self._index

    def error(self, reason: str, field: Optional[str] = None,
              line: Optional[int] = _CURRENT) -> DocumentError:
        return DocumentError(
            reason, path=self.path, line=self.line_no if line == _CURRENT else line,
            field=field,
        )

    def fields(self, what: str, count: Optional[int] = None) -> List[str]:
        """Consume the next line and split it into fields."""
        if self._index >= len(self._lines):
            raise self.error(
                f"unexpected end of document, expected {what}", line=self._index + 1,
            )
        line = self._lines[self._index].rstrip("\r")
        self._index += 1
        tokens = line.split(" ")
        if "" in tokens:
            raise self.error(
                "empty field (fields are separated by exactly one space)", field=what,
            )
        if count is not None and len(tokens) != count:
            raise self.error(f"expected {count} fields, got {len(tokens)}", field=what)
        return tokens

    def number(self, token: str, field: str) -> int:
        if not _NUMBER.fullmatch(token):
            raise self.error(f"{token!r} is not a non-negative integer", field=field)
        return int(token)

    def build(self, model: Type[M], data: Dict[str, Any], what: str,
              context: Optional[Dict[str, Any]] = None,
              line: Optional[int] = _CURRENT) -> M:
        """Validate *data* into *model*, mapping the first pydantic error to a line."""
        try:
            return model.model_validate(data, context=context)
        except ValidationError as exc:
            first = exc.errors()[0]
            loc = ".".join(str(part) for part in first["loc"])
            raise self.error(first["msg"], field=loc or what, line=line) from exc

    def finish(self) -> None:
        """Reject any non-blank content after the last expected line."""
        for offset, line in enumerate(self._lines[self._index:]):
            if line.strip():
                raise self.error(
                    "unexpected content after the end of the document",
                    line=self._index + offset + 1,
                )


# ── Network document ──────────────────────────────────────────────────────────


def _parse_header(reader: _LineReader) -> InputHeader:
    names = ("simulation_duration", "intersections", "streets", "cars", "bonus")
    tokens = reader.fields("header", count=len(names))
    values = {name: reader.number(token, name) for name, token in zip(names, tokens)}
    return reader.build(InputHeader, values, "header")


def _parse_street(reader: _LineReader, intersections: int) -> StreetSpec:
    start, end, name, length = reader.fields("street", count=4)
    return reader.build(
        StreetSpec,
        {
            "intersection_start": reader.number(start, "intersection_start"),
            "intersection_end": reader.number(end, "intersection_end"),
            "name": name,
            "length": reader.number(length, "street_length"),
        },
        "street",
        context={"intersections": intersections},
    )


def _parse_car_path(reader: _LineReader) -> CarPath:
    tokens = reader.fields("car path")
    n_streets = reader.number(tokens[0], "n_streets")
    names = tokens[1:]
    if len(names) != n_streets:
        raise reader.error(
            f"car path declares {n_streets} streets, got {len(names)}", field="car path",
        )
    return reader.build(CarPath, {"street_names": names}, "car path")


def parse_network(text: str, path: str = "<string>") -> NetworkDocument:
    """Parse a network document.

    Parameters
    ----------
    text : str
        Full document content.
    path : str
        Name used in error messages.

    Raises
    ------
    DocumentError
        On any structural problem.
    """
    reader = _LineReader(text, path)
    header = _parse_header(reader)
    streets = [_parse_street(reader, header.intersections) for _ in range(header.streets)]
    car_paths = [_parse_car_path(reader) for _ in range(header.cars)]
    reader.finish()
    document = reader.build(
        NetworkDocument,
        {"header": header, "streets": streets, "car_paths": car_paths},
        "network",
        line=None,
    )
    log.debug(
        "%s: %d streets, %d cars, %d ticks",
        path, len(document.streets), len(document.car_paths),
        header.simulation_duration,
    )
    return document


# ── Schedule document ─────────────────────────────────────────────────────────


def _parse_block(reader: _LineReader) -> IntersectionSchedule:
    (id_token,) = reader.fields("intersection_id", count=1)
    intersection_id = reader.number(id_token, "intersection_id")
    block_line = reader.line_no
    (n_token,) = reader.fields("n_incoming_streets", count=1)
    n_lights = reader.number(n_token, "n_incoming_streets")
    lights = []
    for _ in range(n_lights):
        name, duration = reader.fields("light schedule", count=2)
        lights.append(reader.build(
            GreenLight,
            {"street_name": name, "duration": reader.number(duration, "duration")},
            "light schedule",
        ))
    return reader.build(
        IntersectionSchedule,
        {"intersection_id": intersection_id, "lights": lights},
        "intersection schedule",
        line=block_line,
    )


def parse_schedule(text: str, path: str = "<string>") -> ScheduleDocument:
    """Parse a schedule document; see :func:`parse_network` for conventions."""
    reader = _LineReader(text, path)
    (count_token,) = reader.fields("n_scheduled_intersections", count=1)
    count = reader.number(count_token, "n_scheduled_intersections")
    blocks = [_parse_block(reader) for _ in range(count)]
    reader.finish()
    document = reader.build(
        ScheduleDocument, {"intersections": blocks}, "schedule", line=None,
    )
    log.debug("%s: %d scheduled intersections", path, len(document.intersections))
    return document


# ── File helpers ──────────────────────────────────────────────────────────────


def _read(path: str) -> str:
    log.info("parsing %s", path)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return fh.read()
    except UnicodeDecodeError as exc:
        raise DocumentError(f"not valid UTF-8: {exc.reason}", path=str(path)) from exc


def load_network(path: str) -> NetworkDocument:
    """Read and parse the network document at *path*."""
    return parse_network(_read(path), path=str(path))


def load_schedule(path: str) -> ScheduleDocument:
    """Read and parse the schedule document at *path*."""
    return parse_schedule(_read(path), path=str(path))
