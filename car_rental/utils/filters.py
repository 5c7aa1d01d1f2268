"""Money and timestamp formatting helpers."""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

import pytz

from .constants import DEFAULT_TIMEZONE, DISPLAY_FMT

CENTS = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """
    Convert a rate/price to Decimal without going through binary float noise.
    Raises InvalidOperation (or TypeError) on values that are not numbers.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, (int, str)):
        return Decimal(str(value).strip())
    raise TypeError(f"Unsupported amount: {value!r}")


def round2(x) -> Decimal:
    return to_decimal(x).quantize(CENTS, rounding=ROUND_HALF_UP)


def fmt_money(value: Decimal) -> str:
    """Render an amount as $X.XX (two decimals, half-up)."""
    return f"${round2(value)}"


def fmt_iso_local(dt: datetime, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """Format a datetime in the given pytz zone; naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(pytz.timezone(tz_name)).strftime(DISPLAY_FMT)
