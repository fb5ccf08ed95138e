from pathlib import Path

import pytest

from airnet.airline import AirlineSystem
from airnet.models import Route
from airnet.topology import Graph


SCENARIO = Path(__file__).parent / "data" / "scenario.txt"


def pair(a, b, distance, price):
    r = Route(a, b, distance, price)
    return [r, r.reversed()]


def build_graph(cities, legs):
    """legs: (a, b, distance, price) tuples, each loaded as a reciprocal pair."""
    routes = []
    for leg in legs:
        routes.extend(pair(*leg))
    return Graph.from_routes(cities, routes)


@pytest.fixture
def scenario_path():
    return SCENARIO


@pytest.fixture
def scenario_graph():
    # A-B 100mi $50, B-C 100mi $50, A-C 300mi $200, C-D 50mi $25
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 100, 50.0), ("B", "C", 100, 50.0), ("A", "C", 300, 200.0), ("C", "D", 50, 25.0)],
    )


@pytest.fixture
def airline(scenario_graph):
    return AirlineSystem(scenario_graph)


@pytest.fixture
def make_graph():
    return build_graph
