from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Set
import logging

from airnet.models import Itinerary, Route
from airnet.topology.graph import Graph


logger = logging.getLogger(__name__)


def _tree_path(parent_route: Dict[str, Route], city: str) -> List[Route]:
    path: List[Route] = []
    while city in parent_route:
        r = parent_route[city]
        path.append(r)
        city = r.source
    path.reverse()
    return path


def trips_within(graph: Graph, source: str, budget: float) -> List[Itinerary]:
    """All simple itineraries out of ``source`` costing at most ``budget``.

    Breadth-first from ``source``. Each city keeps the cost and the route it
    was first discovered by (first-discovered path wins, costs are never
    revised). A route to an undiscovered city yields the tree path to it; a
    route to a city already discovered but not on the current tree path
    yields the current tree path extended by that route. The source is never
    an intermediate stop.
    """
    if budget < 0:
        raise ValueError(f"Budget must be non-negative, got {budget}")

    cost_to: Dict[str, float] = {source: 0.0}
    parent_route: Dict[str, Route] = {}
    queue = deque([source])

    found: List[Itinerary] = []
    seen: Set[Itinerary] = set()

    def emit(path: List[Route]) -> None:
        trip = tuple(path)
        if trip not in seen:
            seen.add(trip)
            found.append(trip)

    while queue:
        current = queue.popleft()
        back: Optional[Route] = parent_route.get(current)
        for r in graph.neighbors(current):
            neighbor = r.destination
            if neighbor in (source, current) or (back is not None and neighbor == back.source):
                continue
            cost = cost_to[current] + r.price
            if cost > budget:
                continue

            if neighbor not in cost_to:
                cost_to[neighbor] = cost
                parent_route[neighbor] = r
                queue.append(neighbor)
                emit(_tree_path(parent_route, neighbor))
                continue

            path = _tree_path(parent_route, current)
            if any(hop.source == neighbor for hop in path):
                continue
            emit(path + [r])

    logger.debug("trips from %s within $%.2f: %d", source, budget, len(found))
    return found


def trips_within_all(graph: Graph, budget: float) -> List[Itinerary]:
    """Budget trips out of every city, deduplicated, in city order."""
    found: List[Itinerary] = []
    seen: Set[Itinerary] = set()
    for city in graph.cities:
        for trip in trips_within(graph, city, budget):
            if trip not in seen:
                seen.add(trip)
                found.append(trip)
    return found
