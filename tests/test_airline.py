import pytest

from airnet.airline import AirlineSystem
from airnet.errors import CityNotFoundError
from airnet.models import itinerary_price


def test_load_and_city_names(scenario_path):
    airline = AirlineSystem()
    assert airline.load_routes(str(scenario_path)) is True
    assert airline.city_names() == ["A", "B", "C", "D"]
    assert {r.destination for r in airline.direct_routes_from("C")} == {"A", "B", "D"}


def test_load_failure_is_reported_as_false(tmp_path, airline):
    assert airline.load_routes(str(tmp_path / "missing.txt")) is False
    bad = tmp_path / "bad.txt"
    bad.write_text("2\nA\nB\n1 3 10 5.0\n", encoding="utf-8")
    assert airline.load_routes(str(bad)) is False
    # the previous schedule is untouched
    assert airline.city_names() == ["A", "B", "C", "D"]


def test_unknown_city_raises_with_name(airline):
    with pytest.raises(CityNotFoundError) as exc:
        airline.direct_routes_from("Z")
    assert exc.value.city == "Z"

    with pytest.raises(CityNotFoundError) as exc:
        airline.cheapest_itinerary("A", "Q")
    assert exc.value.city == "Q"

    with pytest.raises(CityNotFoundError) as exc:
        airline.cheapest_itinerary("A", "D", transit="T")
    assert exc.value.city == "T"

    with pytest.raises(CityNotFoundError):
        airline.trips_within(100, city="Z")
    with pytest.raises(CityNotFoundError):
        airline.delete_route("A", "Z")
    with pytest.raises(CityNotFoundError):
        airline.delete_city("Z")


def test_cheapest_queries(airline):
    found = airline.cheapest_itinerary("A", "C")
    assert itinerary_price(found[0]) == 100.0
    assert airline.cheapest_itinerary("A", "A") == []

    via = airline.cheapest_itinerary("A", "C", transit="D")
    assert itinerary_price(via[0]) == 125.0 + 25.0


def test_mst_and_trips(airline):
    forest = airline.minimum_spanning_trees()
    assert len(forest) == 1 and len(forest[0]) == 3
    assert len(airline.trips_within(100, city="A")) == 2
    assert airline.trips_within(0) == []


def test_delete_route_then_no_path(make_graph):
    airline = AirlineSystem(make_graph(["A", "B", "C"], [("A", "B", 100, 50.0), ("B", "C", 10, 5.0)]))
    assert airline.delete_route("A", "B") is True
    assert airline.delete_route("A", "B") is False
    assert airline.cheapest_itinerary("A", "B") == []


def test_delete_city_removes_every_incident_route(airline):
    airline.delete_city("B")
    assert airline.city_names() == ["A", "C", "D"]
    for c in airline.city_names():
        for r in airline.direct_routes_from(c):
            assert "B" not in (r.source, r.destination)
    # A-C is now the only way to C
    assert itinerary_price(airline.cheapest_itinerary("A", "C")[0]) == 200.0
    with pytest.raises(CityNotFoundError):
        airline.cheapest_itinerary("A", "B")


def test_save_then_load_round_trip(tmp_path, airline):
    airline.delete_route("A", "C")
    out = tmp_path / "saved.txt"
    assert airline.save_routes(str(out)) is True

    again = AirlineSystem()
    assert again.load_routes(str(out)) is True
    assert again.city_names() == airline.city_names()
    assert set(again.graph.routes()) == set(airline.graph.routes())


def test_save_failure_is_reported_as_false(tmp_path, airline):
    assert airline.save_routes(str(tmp_path / "no" / "such" / "dir.txt")) is False
