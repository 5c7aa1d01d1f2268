"""
Bootstrap fleet data.

With no seed file the ledger starts with the three demo cars below.
A JSON seed file replaces them and must hold a list of objects:

    [{"id": "C001", "brand": "Toyota", "model": "Camry", "rate": 60}, ...]
"""
from __future__ import annotations

import json
import os
from typing import Optional

from .exceptions import DuplicateVehicleError, InvalidRateError, SeedDataError
from .models import Vehicle
from .services.fleet_ledger import FleetLedger
from .utils import log

DEFAULT_FLEET = (
    {"id": "C001", "brand": "Toyota", "model": "Camry", "rate": "60.0"},
    {"id": "C002", "brand": "Honda", "model": "Accord", "rate": "70.0"},
    {"id": "C003", "brand": "Mahindra", "model": "Thar", "rate": "150.0"},
)
REQUIRED_KEYS = ("id", "brand", "model", "rate")


def load_seed_file(path: str | os.PathLike) -> list[dict]:
    """Read a JSON seed file; raise SeedDataError on missing file or bad shape."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SeedDataError(f"Error: cannot read seed file {path}: {e.strerror or e}")
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Error: seed file {path} is not valid JSON ({e.msg}, line {e.lineno})")

    if not isinstance(data, list):
        raise SeedDataError(f"Error: seed file {path} must contain a list of vehicles")
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise SeedDataError(f"Error: seed entry #{i + 1} is not an object")
        missing = [k for k in REQUIRED_KEYS if k not in entry]
        if missing:
            raise SeedDataError(f"Error: seed entry #{i + 1} is missing {', '.join(missing)}")
    return data


def seed_fleet(ledger: FleetLedger, path: Optional[str | os.PathLike] = None) -> int:
    """
    Add the seed vehicles to the ledger and return how many were added.
    Bad rates and duplicate IDs in the seed are reported as SeedDataError.
    """
    entries = load_seed_file(path) if path else list(DEFAULT_FLEET)
    source = str(path) if path else "built-in fleet"

    for entry in entries:
        try:
            ledger.add_vehicle(Vehicle(
                vehicle_id=entry["id"],
                brand=str(entry["brand"]),
                model=str(entry["model"]),
                daily_rate=entry["rate"],
            ))
        except (InvalidRateError, DuplicateVehicleError) as e:
            raise SeedDataError(f"{e.message} (in {source})")

    log.info("Seed", f"Loaded {len(entries)} vehicles from {source}")
    return len(entries)
