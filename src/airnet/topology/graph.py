from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from airnet.models import Route


logger = logging.getLogger(__name__)


class Graph:
    """Adjacency-list digraph of cities and the routes flying out of them.

    Nodes: city names, each bound to an opaque handle that never changes or
    gets reused, so deleting a city does not disturb any other city.
    Edges: directed routes; ``adjacency[h]`` only holds routes whose source is
    the city behind ``h``.
    """

    def __init__(self) -> None:
        self._handles: Dict[str, int] = {}
        self._names: Dict[int, str] = {}
        self._adj: Dict[int, List[Route]] = {}
        self._next_handle = 0

    @classmethod
    def from_routes(cls, cities: Iterable[str], routes: Iterable[Route]) -> "Graph":
        g = cls()
        for c in cities:
            g.add_city(c)
        for r in routes:
            g.add_edge(r)
        return g

    @property
    def cities(self) -> List[str]:
        """City names in insertion order."""
        return [self._names[h] for h in self._adj]

    @property
    def route_count(self) -> int:
        return sum(len(routes) for routes in self._adj.values())

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, city: object) -> bool:
        return city in self._handles

    def __iter__(self) -> Iterator[str]:
        return iter(self.cities)

    def handle(self, city: str) -> int:
        return self._handles[city]

    def name(self, handle: int) -> str:
        return self._names[handle]

    def add_city(self, city: str) -> int:
        city = city.strip()
        if not city:
            raise ValueError("City name must not be empty")
        if city in self._handles:
            raise ValueError(f"Duplicate city name: {city!r}")
        h = self._next_handle
        self._next_handle += 1
        self._handles[city] = h
        self._names[h] = city
        self._adj[h] = []
        return h

    def add_edge(self, route: Route) -> None:
        """Append ``route`` to its source's adjacency list.

        A second route for the same ordered pair is kept, but logged: only one
        active route per direction is expected.
        """
        bucket = self._adj[self._handles[route.source]]
        if route.destination not in self._handles:
            raise KeyError(route.destination)
        if any(r.destination == route.destination for r in bucket):
            logger.warning("Duplicate route %s -> %s added", route.source, route.destination)
        bucket.append(route)

    def neighbors(self, city: str) -> Tuple[Route, ...]:
        """Routes out of ``city`` in insertion order (a snapshot, safe to mutate after)."""
        return tuple(self._adj[self._handles[city]])

    def routes(self) -> List[Route]:
        """Every directed route, grouped by source in city order."""
        out: List[Route] = []
        for bucket in self._adj.values():
            out.extend(bucket)
        return out

    def find_route(self, source: str, destination: str) -> Optional[Route]:
        for r in self._adj[self._handles[source]]:
            if r.destination == destination:
                return r
        return None

    def delete_directed_edge(self, source: str, destination: str) -> bool:
        """Remove only source->destination; the reverse route is left alone."""
        bucket = self._adj[self._handles[source]]
        for i, r in enumerate(bucket):
            if r.destination == destination:
                del bucket[i]
                return True
        return False

    def delete_edge(self, source: str, destination: str) -> bool:
        """Remove source->destination and destination->source, each if present.

        Returns True when at least one of the two directions was removed.
        """
        forward = self.delete_directed_edge(source, destination)
        backward = self.delete_directed_edge(destination, source)
        return forward or backward

    def delete_vertex(self, city: str) -> None:
        """Drop ``city`` and its outgoing routes.

        Routes *into* the city live in other adjacency lists; callers remove
        them first.
        """
        h = self._handles.pop(city)
        del self._names[h]
        del self._adj[h]
