from .fleet_ledger import FleetLedger

__all__ = [
    "FleetLedger",
]
