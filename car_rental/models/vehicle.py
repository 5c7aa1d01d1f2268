from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from ..exceptions import InvalidRateError
from ..utils.filters import to_decimal


def normalize_id(value) -> str:
    """Vehicle IDs are compared case-insensitively; store them uppercase."""
    return str(value or "").strip().upper()


@dataclass(eq=False)
class Vehicle:
    """
    A rentable asset. The daily rate is fixed for the vehicle's lifetime;
    only the availability flag changes (rent -> False, return -> True).
    Equality is identity: two records with the same fields are still two cars.
    """
    vehicle_id: str
    brand: str
    model: str
    daily_rate: Decimal
    available: bool = field(default=True)

    def __post_init__(self):
        self.vehicle_id = normalize_id(self.vehicle_id)
        try:
            self.daily_rate = to_decimal(self.daily_rate)
        except (InvalidOperation, TypeError):
            raise InvalidRateError(f"Error: daily rate {self.daily_rate!r} is not a number")
        if not self.daily_rate.is_finite():
            raise InvalidRateError(f"Error: daily rate for '{self.vehicle_id}' must be a finite number")
        if self.daily_rate < 0:
            raise InvalidRateError(f"Error: daily rate for '{self.vehicle_id}' cannot be negative")

    @property
    def label(self) -> str:
        return f"{self.brand} {self.model}".strip()

    def price(self, days: int) -> Decimal:
        """Price for the rental length; callers guarantee days > 0."""
        return self.daily_rate * days

    def rent(self) -> None:
        # no double-rent guard here; the ledger checks availability first
        self.available = False

    def return_vehicle(self) -> None:
        self.available = True
