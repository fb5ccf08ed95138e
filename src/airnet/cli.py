import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from airnet.airline import AirlineSystem
from airnet.errors import CityNotFoundError
from airnet.models import itinerary_price
from airnet.reports.csv_report import write_itineraries_csv
from airnet.reports.json_report import JSONReporter
from airnet.reports.terminal_report import print_cities, print_forest, print_itineraries, print_routes
from airnet.viz import plot_network


app = typer.Typer(add_completion=False, help="Plan trips over an airline route schedule.")
console = Console()


SCHEDULE_OPTION = typer.Option(
    "routes.txt", "--schedule", "-s",
    envvar="AIRNET_SCHEDULE",
    help="Schedule file: city count, city names, then 'src dst distance price' tuples (1-based).",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log algorithm details.")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(schedule: str, verbose: bool) -> AirlineSystem:
    _setup_logging(verbose)
    airline = AirlineSystem()
    if not airline.load_routes(schedule):
        raise typer.BadParameter(f"Could not load schedule: {schedule}", param_hint="--schedule")
    return airline


def _city_not_found(e: CityNotFoundError) -> typer.Exit:
    console.print(f"[red]City not found. Please choose from the list and check spelling: {e.city}[/red]")
    return typer.Exit(code=1)


def _save(airline: AirlineSystem, out: str) -> None:
    if not airline.save_routes(out):
        console.print(f"[red]Could not save schedule to {out}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] Schedule saved to: {out}")


@app.command()
def cities(schedule: str = SCHEDULE_OPTION, verbose: bool = VERBOSE_OPTION):
    """List the cities in the schedule, in load order."""
    airline = _load(schedule, verbose)
    print_cities(airline.city_names(), console=console)


@app.command()
def routes(
    city: str = typer.Argument(..., help="City to list non-stop routes out of."),
    schedule: str = SCHEDULE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Show the non-stop routes out of a city."""
    airline = _load(schedule, verbose)
    try:
        direct = airline.direct_routes_from(city)
    except CityNotFoundError as e:
        raise _city_not_found(e)
    print_routes(f"Routes from {city}", direct, console=console)


@app.command()
def cheapest(
    source: str = typer.Argument(..., help="Departure city."),
    destination: str = typer.Argument(..., help="Arrival city."),
    via: Optional[str] = typer.Option(None, "--via", help="Transit city the trip must pass through."),
    out_json: str = typer.Option(None, "--out-json", help="Output JSON path for the itinerary."),
    schedule: str = SCHEDULE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Cheapest itinerary between two cities, optionally through a transit city."""
    airline = _load(schedule, verbose)
    try:
        found = airline.cheapest_itinerary(source, destination, transit=via)
    except CityNotFoundError as e:
        raise _city_not_found(e)

    title = f"Cheapest {source} -> {destination}" + (f" via {via}" if via else "")
    print_itineraries(title, found, console=console)
    if found:
        console.print(f"Total price: ${itinerary_price(found[0]):.2f}")
    if out_json:
        JSONReporter().itineraries(title, found, out_json)
        console.print(f"[green]✓[/green] JSON report saved to: {out_json}")


@app.command()
def mst(
    out_json: str = typer.Option(None, "--out-json", help="Output JSON path for the spanning trees."),
    schedule: str = SCHEDULE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Minimum spanning tree (by distance) of every connected component."""
    airline = _load(schedule, verbose)
    forest = airline.minimum_spanning_trees()
    print_forest(forest, console=console)
    if out_json:
        JSONReporter().forest(forest, out_json)
        console.print(f"[green]✓[/green] JSON report saved to: {out_json}")


@app.command()
def trips(
    budget: float = typer.Argument(..., min=0.0, help="Maximum total price in dollars."),
    origin: Optional[str] = typer.Option(None, "--from", help="Only trips out of this city (default: any city)."),
    out_csv: str = typer.Option(None, "--out-csv", help="Output CSV path, one row per trip."),
    out_json: str = typer.Option(None, "--out-json", help="Output JSON path."),
    schedule: str = SCHEDULE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """All trips within a budget, out of one city or out of every city."""
    airline = _load(schedule, verbose)
    try:
        found = airline.trips_within(budget, city=origin)
    except CityNotFoundError as e:
        raise _city_not_found(e)

    title = f"Trips within ${budget:.2f}" + (f" from {origin}" if origin else "")
    print_itineraries(title, found, console=console)
    if out_csv:
        n = write_itineraries_csv(found, out_csv)
        console.print(f"[green]✓[/green] {n} trip(s) saved to: {out_csv}")
    if out_json:
        JSONReporter().itineraries(title, found, out_json)
        console.print(f"[green]✓[/green] JSON report saved to: {out_json}")


@app.command("delete-route")
def delete_route(
    source: str = typer.Argument(...),
    destination: str = typer.Argument(...),
    out: str = typer.Option(None, "--out", help="Where to save the updated schedule (default: overwrite --schedule)."),
    schedule: str = SCHEDULE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Delete the non-stop route between two cities (both directions)."""
    airline = _load(schedule, verbose)
    try:
        removed = airline.delete_route(source, destination)
    except CityNotFoundError as e:
        raise _city_not_found(e)
    if not removed:
        console.print(f"[yellow]No route between {source} and {destination}[/yellow]")
        return
    console.print(f"[green]✓[/green] Deleted route {source} <-> {destination}")
    _save(airline, out or schedule)


@app.command("delete-city")
def delete_city(
    city: str = typer.Argument(...),
    out: str = typer.Option(None, "--out", help="Where to save the updated schedule (default: overwrite --schedule)."),
    schedule: str = SCHEDULE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Delete a city and every route into or out of it."""
    airline = _load(schedule, verbose)
    try:
        airline.delete_city(city)
    except CityNotFoundError as e:
        raise _city_not_found(e)
    console.print(f"[green]✓[/green] Deleted {city}; {len(airline.city_names())} city(ies) left")
    _save(airline, out or schedule)


@app.command()
def plot(
    out_png: str = typer.Argument("network.png", help="Output PNG path."),
    show_mst: bool = typer.Option(False, "--mst", help="Highlight the minimum spanning forest."),
    source: Optional[str] = typer.Option(None, "--source", help="Highlight the cheapest trip from this city..."),
    destination: Optional[str] = typer.Option(None, "--destination", help="...to this city."),
    schedule: str = SCHEDULE_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """Draw the route network as a PNG."""
    airline = _load(schedule, verbose)
    highlight = []
    title = "Route Network"
    if show_mst:
        for tree in airline.minimum_spanning_trees():
            highlight.extend(tree)
        title = "Minimum Spanning Forest"
    elif source or destination:
        if not (source and destination):
            raise typer.BadParameter("--source and --destination go together")
        try:
            found = airline.cheapest_itinerary(source, destination)
        except CityNotFoundError as e:
            raise _city_not_found(e)
        if found:
            highlight.extend(found[0])
        title = f"Cheapest {source} -> {destination}"

    plot_network(airline.graph, Path(out_png), highlight=highlight, title=title)
    console.print(f"[green]✓[/green] Network PNG: {out_png}")


if __name__ == "__main__":
    app()
