from __future__ import annotations

from typing import FrozenSet, List, Optional
import logging

from airnet.errors import CityNotFoundError, ScheduleFormatError
from airnet.io.schedule_file import read_schedule, write_schedule
from airnet.models import Itinerary, Route, Schedule
from airnet.topology import (
    Graph,
    cheapest_itinerary,
    cheapest_itinerary_via,
    minimum_spanning_forest,
    trips_within,
    trips_within_all,
)


logger = logging.getLogger(__name__)


class AirlineSystem:
    """Route-planning queries over one airline schedule.

    Owns the :class:`Graph` and hands it to each algorithm. Every query that
    names a city checks it first and raises :class:`CityNotFoundError` when it
    is unknown; anything else that finds nothing returns an empty result.
    """

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = graph if graph is not None else Graph()

    @classmethod
    def from_schedule(cls, schedule: Schedule) -> "AirlineSystem":
        return cls(Graph.from_routes(schedule.cities, schedule.routes))

    def to_schedule(self) -> Schedule:
        return Schedule(cities=self.graph.cities, routes=self.graph.routes())

    def load_routes(self, path: str) -> bool:
        """Replace the current schedule with the one in ``path``; False on failure."""
        try:
            schedule = read_schedule(path)
            graph = Graph.from_routes(schedule.cities, schedule.routes)
        except (OSError, ScheduleFormatError, ValueError, KeyError) as e:
            logger.warning("Could not load schedule %s: %s", path, e)
            return False
        self.graph = graph
        return True

    def save_routes(self, path: str) -> bool:
        try:
            write_schedule(self.to_schedule(), path)
        except OSError as e:
            logger.warning("Could not save schedule %s: %s", path, e)
            return False
        return True

    def _require(self, *cities: str) -> None:
        for c in cities:
            if c not in self.graph:
                raise CityNotFoundError(c)

    def city_names(self) -> List[str]:
        return self.graph.cities

    def direct_routes_from(self, city: str) -> List[Route]:
        self._require(city)
        return list(self.graph.neighbors(city))

    def cheapest_itinerary(
        self,
        source: str,
        destination: str,
        transit: Optional[str] = None,
    ) -> List[Itinerary]:
        """Zero or one cheapest itinerary, optionally forced through ``transit``."""
        if transit is None:
            self._require(source, destination)
            return cheapest_itinerary(self.graph, source, destination)
        self._require(source, transit, destination)
        return cheapest_itinerary_via(self.graph, source, transit, destination)

    def minimum_spanning_trees(self) -> List[FrozenSet[Route]]:
        return minimum_spanning_forest(self.graph)

    def trips_within(self, budget: float, city: Optional[str] = None) -> List[Itinerary]:
        """Trips costing at most ``budget``, out of ``city`` or out of any city."""
        if city is None:
            return trips_within_all(self.graph, budget)
        self._require(city)
        return trips_within(self.graph, city, budget)

    def delete_route(self, source: str, destination: str) -> bool:
        self._require(source, destination)
        removed = self.graph.delete_edge(source, destination)
        if not removed:
            logger.info("No route between %s and %s to delete", source, destination)
        return removed

    def delete_city(self, city: str) -> None:
        self._require(city)
        for other in self.graph.cities:
            if other != city:
                self.graph.delete_edge(other, city)
        self.graph.delete_vertex(city)
        logger.debug("deleted city %s; %d left", city, len(self.graph))
