"""
Console entry point tests through click's CliRunner: real prompts on a
fake stdin, option/env handling, and startup failures.
"""
import json

import pytest
from click.testing import CliRunner

from car_rental.cli import main

# every CliRunner session must end with a confirmed exit
SEED_SESSION = "1\nZed\nB7\n1\nn\n5\ny\n"


@pytest.fixture
def runner():
    return CliRunner()


def test_full_session_over_stdin(runner):
    session = "\n".join(["1", "Alice", "c001", "3", "y", "4", "5", "y"]) + "\n"
    result = runner.invoke(main, [], input=session)
    assert result.exit_code == 0, result.output
    assert "Enter your choice: " in result.output
    assert "Total Price: $180.00" in result.output
    assert "Total Earnings: $180.00" in result.output
    assert "Thank you for using the Car Rental System!" in result.output


def test_report_without_rentals(runner):
    result = runner.invoke(main, [], input="3\n5\ny\n")
    assert result.exit_code == 0
    assert "No ongoing rentals right now." in result.output


def test_seed_option_and_env(runner, tmp_path):
    seed = tmp_path / "fleet.json"
    seed.write_text(json.dumps([{"id": "B7", "brand": "BMW", "model": "i3", "rate": 80}]))

    result = runner.invoke(main, ["--seed", str(seed)], input=SEED_SESSION)
    assert "B7 - BMW i3" in result.output
    assert "C001" not in result.output

    result = runner.invoke(main, [], input=SEED_SESSION, env={"FLEET_SEED": str(seed)})
    assert "B7 - BMW i3" in result.output


def test_bad_seed_file_is_reported(runner, tmp_path):
    seed = tmp_path / "broken.json"
    seed.write_text("[{")
    result = runner.invoke(main, ["--seed", str(seed)])
    assert result.exit_code == 1
    assert "not valid JSON" in result.output
    assert "Error: Error:" not in result.output


def test_unknown_timezone_rejected(runner):
    result = runner.invoke(main, ["--tz", "Nowhere/City"])
    assert result.exit_code == 2
    assert "unknown timezone" in result.output


def test_verbose_emits_tagged_diagnostics(runner):
    result = runner.invoke(main, ["-v"], input="5\ny\n")
    assert result.exit_code == 0
    assert "[Seed] Loaded 3 vehicles from built-in fleet" in result.output


def test_non_finite_seed_rate_is_reported(runner, tmp_path):
    seed = tmp_path / "nan.json"
    seed.write_text('[{"id": "C1", "brand": "A", "model": "B", "rate": NaN}]')
    result = runner.invoke(main, ["--seed", str(seed)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "finite" in result.output
