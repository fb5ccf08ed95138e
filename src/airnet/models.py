from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class Route:
    """Directed non-stop connection between two cities.

    Routes are loaded in reciprocal pairs (A->B and B->A) but each direction is
    its own value and can be deleted on its own.
    """

    source: str
    destination: str
    distance: int
    price: float

    def __post_init__(self) -> None:
        if self.distance < 0:
            raise ValueError(f"Negative distance on {self.source}->{self.destination}: {self.distance}")
        if self.price < 0:
            raise ValueError(f"Negative price on {self.source}->{self.destination}: {self.price}")

    def reversed(self) -> "Route":
        return Route(self.destination, self.source, self.distance, self.price)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "distance": self.distance,
            "price": self.price,
        }

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination} ({self.distance} mi, ${self.price:.2f})"


# One trip: routes in travel order, first one leaving the origin.
Itinerary = Tuple[Route, ...]


def itinerary_price(itinerary: Iterable[Route]) -> float:
    return sum(r.price for r in itinerary)


def itinerary_distance(itinerary: Iterable[Route]) -> int:
    return sum(r.distance for r in itinerary)


def itinerary_cities(itinerary: Itinerary) -> List[str]:
    """City names visited by an itinerary, origin included."""
    if not itinerary:
        return []
    return [itinerary[0].source] + [r.destination for r in itinerary]


@dataclass
class Schedule:
    """Plain in-memory form of a schedule file: city names plus directed routes."""

    cities: List[str] = field(default_factory=list)
    routes: List[Route] = field(default_factory=list)
