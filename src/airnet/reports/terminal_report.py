from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from airnet.models import Itinerary, Route, itinerary_cities, itinerary_distance, itinerary_price


def _routes_table(title: str, routes: Iterable[Route]) -> Table:
    table = Table(title=title)
    table.add_column("From", style="bold")
    table.add_column("To", style="bold")
    table.add_column("Distance (mi)", justify="right")
    table.add_column("Price ($)", justify="right")
    for r in routes:
        table.add_row(r.source, r.destination, str(r.distance), f"{r.price:.2f}")
    return table


def print_cities(cities: Sequence[str], console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Cities")
    table.add_column("#", justify="right")
    table.add_column("City", style="bold")
    for i, c in enumerate(cities, start=1):
        table.add_row(str(i), c)
    console.print(table)


def print_routes(title: str, routes: Iterable[Route], console: Optional[Console] = None) -> None:
    console = console or Console()
    routes = list(routes)
    if not routes:
        console.print(f"[yellow]{title}: no routes[/yellow]")
        return
    console.print(_routes_table(title, routes))


def print_itineraries(
    title: str,
    itineraries: List[Itinerary],
    console: Optional[Console] = None,
) -> None:
    """One row per itinerary: stops, hop count, total distance and price."""
    console = console or Console()
    if not itineraries:
        console.print(f"[yellow]{title}: nothing found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Stops", style="bold")
    table.add_column("Hops", justify="right")
    table.add_column("Distance (mi)", justify="right")
    table.add_column("Price ($)", justify="right")
    for trip in itineraries:
        stops = " -> ".join(itinerary_cities(trip))
        table.add_row(
            stops,
            str(len(trip)),
            str(itinerary_distance(trip)),
            f"{itinerary_price(trip):.2f}",
        )
    console.print(table)


def print_forest(forest: List[frozenset], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not forest:
        console.print("[yellow]No spanning trees: the schedule has no routes[/yellow]")
        return
    for i, tree in enumerate(forest, start=1):
        edges = sorted(tree, key=lambda r: (r.distance, r.source, r.destination))
        total = sum(r.distance for r in edges)
        console.print(_routes_table(f"Spanning tree {i} ({total} mi)", edges))
