import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from datetime import datetime, timezone

import pytest

from car_rental import create_app
from car_rental.seeds import seed_fleet
from car_rental.services.fleet_ledger import FleetLedger
from car_rental.utils import log

FIXED_NOW = datetime(2030, 1, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture(autouse=True)
def quiet_log():
    """Every test starts with diagnostics off, whatever the previous one set."""
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture
def ledger():
    """A fresh ledger seeded with the built-in demo fleet and a fixed clock."""
    led = FleetLedger(clock=lambda: FIXED_NOW)
    seed_fleet(led)
    return led


class ScriptedInput:
    """Feeds prepared answers to the shell; raises EOFError when they run out."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def run_shell(capsys):
    """
    Run a freshly seeded shell over the given input lines.
    Returns (shell, stdout text).
    """

    def _run(*lines, config=None):
        reader = ScriptedInput(lines)
        shell = create_app(config, reader=reader, clock=lambda: FIXED_NOW)
        code = shell.run()
        assert code == 0
        out = capsys.readouterr().out
        return shell, out

    return _run
