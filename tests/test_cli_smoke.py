import json
import shutil
from pathlib import Path

from typer.testing import CliRunner

from airnet.cli import app


runner = CliRunner()


def _schedule(tmp_path: Path, scenario_path: Path) -> str:
    dst = tmp_path / "routes.txt"
    shutil.copy(scenario_path, dst)
    return str(dst)


def test_cli_cities_and_routes(tmp_path, scenario_path):
    schedule = _schedule(tmp_path, scenario_path)
    r = runner.invoke(app, ["cities", "--schedule", schedule])
    assert r.exit_code == 0, r.output
    assert "Cities" in r.output

    r = runner.invoke(app, ["routes", "C", "-s", schedule])
    assert r.exit_code == 0, r.output
    assert "Routes from C" in r.output


def test_cli_cheapest_json(tmp_path, scenario_path):
    schedule = _schedule(tmp_path, scenario_path)
    out_json = tmp_path / "cheapest.json"
    r = runner.invoke(app, ["cheapest", "A", "C", "-s", schedule, "--out-json", str(out_json)])
    assert r.exit_code == 0, r.output
    assert "Total price: $100.00" in r.output
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["total"] == 1
    assert [h["destination"] for h in data["itineraries"][0]["routes"]] == ["B", "C"]


def test_cli_unknown_city_exits_1(tmp_path, scenario_path):
    schedule = _schedule(tmp_path, scenario_path)
    r = runner.invoke(app, ["cheapest", "A", "Nowhere", "-s", schedule])
    assert r.exit_code == 1
    assert "Nowhere" in r.output


def test_cli_missing_schedule(tmp_path):
    r = runner.invoke(app, ["cities", "-s", str(tmp_path / "missing.txt")])
    assert r.exit_code != 0


def test_cli_trips_csv_and_mst(tmp_path, scenario_path):
    schedule = _schedule(tmp_path, scenario_path)
    out_csv = tmp_path / "trips.csv"
    r = runner.invoke(app, ["trips", "100", "--from", "A", "-s", schedule, "--out-csv", str(out_csv)])
    assert r.exit_code == 0, r.output
    assert "2 trip(s)" in r.output
    assert out_csv.exists()

    r = runner.invoke(app, ["mst", "-s", schedule])
    assert r.exit_code == 0, r.output
    assert "250 mi" in r.output


def test_cli_delete_route_and_city(tmp_path, scenario_path):
    schedule = _schedule(tmp_path, scenario_path)
    r = runner.invoke(app, ["delete-route", "A", "C", "-s", schedule])
    assert r.exit_code == 0, r.output
    assert "1 3 " not in Path(schedule).read_text(encoding="utf-8")

    out = tmp_path / "smaller.txt"
    r = runner.invoke(app, ["delete-city", "D", "-s", schedule, "--out", str(out)])
    assert r.exit_code == 0, r.output
    assert out.read_text(encoding="utf-8").splitlines()[:4] == ["3", "A", "B", "C"]


def test_cli_schedule_from_env(tmp_path, scenario_path):
    schedule = _schedule(tmp_path, scenario_path)
    r = runner.invoke(app, ["trips", "50"], env={"AIRNET_SCHEDULE": schedule})
    assert r.exit_code == 0, r.output


def test_cli_plot(tmp_path, scenario_path):
    schedule = _schedule(tmp_path, scenario_path)
    out_png = tmp_path / "net.png"
    r = runner.invoke(app, ["plot", str(out_png), "--mst", "-s", schedule])
    assert r.exit_code == 0, r.output
    assert out_png.exists()
