from __future__ import annotations

from collections import deque
from typing import Dict, FrozenSet, List, Set, Tuple
import heapq
import logging

from airnet.models import Route
from airnet.topology.graph import Graph
from airnet.topology.union_find import UnionFind


logger = logging.getLogger(__name__)


def minimum_spanning_forest(graph: Graph) -> List[FrozenSet[Route]]:
    """Kruskal over route distances, one tree per connected component.

    Cities are walked breadth-first, component by component, and every route
    met on the way goes into a heap keyed by (distance, insertion order), so
    equal-distance routes always come out in the same order. Isolated cities
    have no edges and yield no tree.
    """
    cities = graph.cities
    if not cities:
        return []

    pos: Dict[str, int] = {c: i for i, c in enumerate(cities)}
    uf = UnionFind(len(cities))

    tie = 0
    pq: List[Tuple[int, int, Route]] = []
    seen: Set[str] = set()
    for start in cities:
        if start in seen:
            continue
        seen.add(start)
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for r in graph.neighbors(u):
                heapq.heappush(pq, (r.distance, tie, r))
                tie += 1
                if r.destination not in seen:
                    seen.add(r.destination)
                    queue.append(r.destination)

    chosen: List[Route] = []
    while uf.count > 1 and pq:
        _, _, r = heapq.heappop(pq)
        p, q = pos[r.source], pos[r.destination]
        if not uf.connected(p, q):
            chosen.append(r)
            uf.union(p, q)

    trees: Dict[int, Set[Route]] = {}
    for r in chosen:
        trees.setdefault(uf.find(pos[r.source]), set()).add(r)

    # trees come back in the order their first city was loaded
    forest: List[FrozenSet[Route]] = []
    for i in range(len(cities)):
        root = uf.find(i)
        if root in trees:
            forest.append(frozenset(trees.pop(root)))

    logger.debug("kruskal: %d edge(s) in %d tree(s)", len(chosen), len(forest))
    return forest
