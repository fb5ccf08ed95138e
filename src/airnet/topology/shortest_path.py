"""Cheapest (price-weighted) paths with Dijkstra's algorithm.

Every run returns its own immutable :class:`ShortestPathResult`; a second run
from another source never overwrites the first, which is what transit routing
relies on.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Tuple
import heapq
import logging

from airnet.models import Itinerary, Route
from airnet.topology.graph import Graph


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortestPathResult:
    source: str
    cost_to: Mapping[str, float]
    edge_to: Mapping[str, str]
    visited: FrozenSet[str]

    def reachable(self, city: str) -> bool:
        return city in self.visited

    def cost(self, city: str) -> float:
        return self.cost_to.get(city, float("inf"))


def shortest_paths(graph: Graph, source: str) -> ShortestPathResult:
    """Single-source Dijkstra over route prices.

    Relaxation is strict, and the heap breaks cost ties by discovery order, so
    among equal-cost paths the first one found is kept.
    """
    cost_to: Dict[str, float] = {source: 0.0}
    edge_to: Dict[str, str] = {}
    visited = set()

    tie = 0
    pq: List[Tuple[float, int, str]] = [(0.0, tie, source)]

    while pq:
        d, _, u = heapq.heappop(pq)
        if u in visited:
            continue
        visited.add(u)
        for r in graph.neighbors(u):
            v = r.destination
            if v in visited:
                continue
            nd = d + r.price
            if nd < cost_to.get(v, float("inf")):
                cost_to[v] = nd
                edge_to[v] = u
                tie += 1
                heapq.heappush(pq, (nd, tie, v))

    logger.debug("dijkstra from %s reached %d/%d cities", source, len(visited), len(graph))
    return ShortestPathResult(
        source=source,
        cost_to=MappingProxyType(cost_to),
        edge_to=MappingProxyType(edge_to),
        visited=frozenset(visited),
    )


def reconstruct(graph: Graph, result: ShortestPathResult, destination: str) -> Itinerary:
    """Turn predecessor links into the concrete routes source -> destination.

    ``edge_to`` only records cities, so each hop is resolved to the route out
    of the previous city's adjacency list. Empty when unreachable or when
    destination is the source itself.
    """
    if destination == result.source or not result.reachable(destination):
        return ()

    stops = [destination]
    cur = destination
    while cur != result.source:
        cur = result.edge_to[cur]
        stops.append(cur)
    stops.reverse()

    hops: List[Route] = []
    for a, b in zip(stops, stops[1:]):
        candidates = [r for r in graph.neighbors(a) if r.destination == b]
        if not candidates:
            # graph mutated after the result was computed
            raise LookupError(f"No route {a} -> {b}; shortest path result is stale")
        hops.append(min(candidates, key=lambda r: r.price))
    return tuple(hops)


def cheapest_itinerary(graph: Graph, source: str, destination: str) -> List[Itinerary]:
    """Zero or one cheapest itinerary from source to destination."""
    if source == destination:
        return []
    result = shortest_paths(graph, source)
    if not result.reachable(destination):
        return []
    return [reconstruct(graph, result, destination)]


def cheapest_itinerary_via(
    graph: Graph,
    source: str,
    transit: str,
    destination: str,
) -> List[Itinerary]:
    """Cheapest itinerary forced through ``transit``.

    Each leg gets its own Dijkstra run and is rebuilt from that run's result
    before the legs are joined.
    """
    from_source = shortest_paths(graph, source)
    if not from_source.reachable(transit):
        return []
    from_transit = shortest_paths(graph, transit)
    if not from_transit.reachable(destination):
        return []

    path = reconstruct(graph, from_source, transit) + reconstruct(graph, from_transit, destination)
    if not path:
        return []
    return [path]

