import sys

import click
import pytz

from . import create_app
from .exceptions import SeedDataError
from .utils.constants import DEFAULT_TIMEZONE


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--seed", "seed_path", envvar="FLEET_SEED", type=click.Path(dir_okay=False),
              help="JSON file with the starting fleet (default: built-in demo cars).")
@click.option("--tz", "tz_name", envvar="FLEET_TZ", default=DEFAULT_TIMEZONE, show_default=True,
              help="Timezone used when showing rental start times.")
@click.option("-v", "--verbose", is_flag=True, help="Print ledger diagnostics to stderr.")
def main(seed_path, tz_name, verbose):
    """Interactive car rental desk."""
    if tz_name not in pytz.all_timezones_set:
        raise click.BadParameter(f"unknown timezone '{tz_name}'", param_hint="--tz")
    try:
        shell = create_app({
            "SEED_PATH": seed_path,
            "TIMEZONE": tz_name,
            "VERBOSE": verbose,
        })
    except SeedDataError as e:
        raise click.ClickException(e.message.removeprefix("Error: "))
    sys.exit(shell.run())


if __name__ == "__main__":
    main()
