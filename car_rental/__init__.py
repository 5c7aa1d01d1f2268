from .controllers.shell import Shell
from .seeds import seed_fleet
from .services.fleet_ledger import FleetLedger
from .utils import log
from .utils.constants import DEFAULT_CUSTOMER_PREFIX, DEFAULT_TIMEZONE

DEFAULT_CONFIG = {
    "SEED_PATH": None,  # None -> built-in demo fleet
    "TIMEZONE": DEFAULT_TIMEZONE,
    "VERBOSE": False,
    "CUSTOMER_PREFIX": DEFAULT_CUSTOMER_PREFIX,
}


def create_app(config=None, reader=None, clock=None):
    """Build a seeded ledger and the shell that drives it."""
    cfg = dict(DEFAULT_CONFIG)
    cfg.update({k: v for k, v in (config or {}).items() if v is not None})

    log.set_verbose(cfg["VERBOSE"])
    ledger = FleetLedger(customer_prefix=cfg["CUSTOMER_PREFIX"], clock=clock)
    seed_fleet(ledger, cfg["SEED_PATH"])

    return Shell(ledger, reader=reader, config=cfg)
