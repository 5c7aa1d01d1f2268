from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .customer import Customer
from .vehicle import Vehicle
from ..utils.filters import fmt_money


@dataclass(frozen=True, eq=False)
class RentalAgreement:
    """
    Links one vehicle and one customer for a number of days.
    Lives in the ledger's active set only until the vehicle is returned.
    """
    vehicle: Vehicle
    customer: Customer
    days: int
    total_price: Decimal
    created_at: datetime

    def summary(self) -> str:
        return (
            f"{self.customer.name} rented {self.vehicle.label} "
            f"for {self.days} days, total {fmt_money(self.total_price)}"
        )
