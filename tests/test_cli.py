import pytest
import typer
import yaml
from typer.testing import CliRunner

from solversettings.cli import app, parse_pairs

runner = CliRunner()


def test_resolve_prints_settings_as_yaml() -> None:
    result = runner.invoke(
        app, ["resolve", "-f", "run.txt", "-s", "CFL=0.3", "-s", "t end=10.0"]
    )
    assert result.exit_code == 0, result.output

    data = yaml.safe_load(result.stdout)
    assert data["input_file"] == "run.txt"
    assert data["cfl"] == 0.3
    assert data["t_end"] == 10.0
    assert data["limiter"] == "MinMod2"
    assert data["max_dt"] == float("inf")
    assert data["sponge_layer"] is False


def test_resolve_fatal_error_exits_nonzero() -> None:
    result = runner.invoke(app, ["resolve", "-f", "run.txt", "-s", "cfl=0.9", "-s", "t end=1"])
    assert result.exit_code == 1
    assert "run.txt" in result.output
    assert "(0,0.5]" in result.output


def test_resolve_without_t_end_fails() -> None:
    result = runner.invoke(app, ["resolve"])
    assert result.exit_code == 1
    assert "'t end' must be specified" in result.output


def test_resolve_rejects_entry_without_equals() -> None:
    result = runner.invoke(app, ["resolve", "-s", "cfl 0.3"])
    assert result.exit_code == 2


def test_defaults_command() -> None:
    result = runner.invoke(app, ["defaults"])
    assert result.exit_code == 0
    data = yaml.safe_load(result.stdout)
    assert data["limiter"] == "MinMod2"
    assert data["tile_buffer"] == 3
    assert "t_end" not in data


def test_limiters_command() -> None:
    result = runner.invoke(app, ["limiters"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 6
    assert any(line.startswith("albada") and "van Albada" in line for line in lines)
    assert any("(default)" in line for line in lines if line.startswith("minmod2"))


def test_parse_pairs_splits_on_first_equals() -> None:
    assert parse_pairs(["initial condition = a=b", " cfl=0.2"]) == [
        ("initial condition", "a=b"),
        ("cfl", "0.2"),
    ]


def test_parse_pairs_requires_equals() -> None:
    with pytest.raises(typer.BadParameter):
        parse_pairs(["t end"])
