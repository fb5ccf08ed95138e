"""Text schedule files.

Format (whitespace separated)::

    4
    A
    B
    C
    D
    1 2 100 50.0
    2 3 100 50.0

An integer city count, that many city names, then any number of
``source destination distance price`` tuples using 1-based city positions.
Each tuple stands for a pair of reciprocal routes.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Set, Tuple
import logging

from airnet.errors import ScheduleFormatError
from airnet.models import Route, Schedule


logger = logging.getLogger(__name__)


def parse_schedule(text: str) -> Schedule:
    tokens = text.split()
    if not tokens:
        raise ScheduleFormatError("Empty schedule")

    try:
        n = int(tokens[0])
    except ValueError as e:
        raise ScheduleFormatError(f"Invalid city count: {tokens[0]!r}") from e
    if n < 0 or len(tokens) < 1 + n:
        raise ScheduleFormatError(f"Expected {n} city name(s), found {max(0, len(tokens) - 1)}")

    cities = tokens[1:1 + n]
    rest = tokens[1 + n:]
    if len(rest) % 4:
        raise ScheduleFormatError(f"Trailing tokens after routes: {rest[-(len(rest) % 4):]}")

    routes: List[Route] = []
    for i in range(0, len(rest), 4):
        s, d, dist, price = rest[i:i + 4]
        try:
            si, di = int(s) - 1, int(d) - 1
            distance, cost = int(dist), float(price)
        except ValueError as e:
            raise ScheduleFormatError(f"Invalid route tuple {rest[i:i + 4]}") from e
        if not (0 <= si < n and 0 <= di < n):
            raise ScheduleFormatError(f"City position out of range in route {rest[i:i + 4]}")
        forward = Route(cities[si], cities[di], distance, cost)
        routes.append(forward)
        routes.append(forward.reversed())

    return Schedule(cities=cities, routes=routes)


def read_schedule(path: str) -> Schedule:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Schedule not found: {p}")
    schedule = parse_schedule(p.read_text(encoding="utf-8"))
    logger.debug("read %d cities, %d routes from %s", len(schedule.cities), len(schedule.routes), p)
    return schedule


def format_schedule(schedule: Schedule) -> str:
    """Inverse of :func:`parse_schedule`.

    Reciprocal pairs collapse back into a single tuple. A route whose reverse
    was deleted is still written, and so loads back as a pair.
    """
    pos = {c: i + 1 for i, c in enumerate(schedule.cities)}
    lines = [str(len(schedule.cities))]
    lines.extend(schedule.cities)

    written: Set[Tuple[str, str, int, float]] = set()
    for r in schedule.routes:
        key = (r.source, r.destination, r.distance, r.price)
        if key in written:
            continue
        written.add(key)
        written.add((r.destination, r.source, r.distance, r.price))
        lines.append(f"{pos[r.source]} {pos[r.destination]} {r.distance} {r.price}")
    return "\n".join(lines) + "\n"


def write_schedule(schedule: Schedule, path: str) -> None:
    Path(path).write_text(format_schedule(schedule), encoding="utf-8")
