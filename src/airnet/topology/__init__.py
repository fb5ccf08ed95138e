from .graph import Graph
from .union_find import UnionFind
from .shortest_path import (
    ShortestPathResult,
    cheapest_itinerary,
    cheapest_itinerary_via,
    reconstruct,
    shortest_paths,
)
from .spanning import minimum_spanning_forest
from .budget import trips_within, trips_within_all

__all__ = [
    "Graph",
    "UnionFind",
    "ShortestPathResult",
    "shortest_paths",
    "reconstruct",
    "cheapest_itinerary",
    "cheapest_itinerary_via",
    "minimum_spanning_forest",
    "trips_within",
    "trips_within_all",
]
