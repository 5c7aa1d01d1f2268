"""Fleet ledger: owns vehicles, customers, active rentals, and earnings."""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional

from ..exceptions import DuplicateVehicleError, RentalNotFoundError, VehicleNotFoundError
from ..models import Customer, RentalAgreement, Vehicle
from ..models.vehicle import normalize_id
from ..utils import log
from ..utils.constants import DEFAULT_CUSTOMER_PREFIX, Messages
from ..utils.filters import fmt_money

TAG = "Ledger"


def _utcnow() -> datetime:
    """Wrapper for easier testing/mocking."""
    return datetime.now(timezone.utc)


class FleetLedger:
    """
    In-memory aggregate for one running shell.
    - Vehicles keyed by normalized ID (insertion order kept)
    - Customers in creation order
    - Active rentals keyed by vehicle ID (creation order kept)
    - Running total of earnings, never reduced on return
    """

    def __init__(self, customer_prefix: str = DEFAULT_CUSTOMER_PREFIX,
                 clock: Optional[Callable[[], datetime]] = None):
        self.customer_prefix = customer_prefix
        self.clock = clock or _utcnow
        self._vehicles: dict[str, Vehicle] = {}
        self._customers: list[Customer] = []
        self._rentals: dict[str, RentalAgreement] = {}
        self.total_earnings = Decimal("0")

    # ---------- Registration ----------
    def add_vehicle(self, vehicle: Vehicle) -> None:
        if vehicle.vehicle_id in self._vehicles:
            raise DuplicateVehicleError(f"Error: vehicle '{vehicle.vehicle_id}' already exists")
        self._vehicles[vehicle.vehicle_id] = vehicle
        log.info(TAG, f"Added vehicle {vehicle.vehicle_id} ({vehicle.label}, {fmt_money(vehicle.daily_rate)}/day)")

    def add_customer(self, customer: Customer) -> None:
        self._customers.append(customer)

    def new_customer(self, name: str) -> Customer:
        """Create and record a customer with the next sequential ID."""
        customer = Customer.create(name, len(self._customers) + 1, self.customer_prefix)
        self.add_customer(customer)
        log.info(TAG, f"Registered customer {customer.customer_id} ({customer.name})")
        return customer

    # ---------- Queries ----------
    def vehicles(self) -> tuple[Vehicle, ...]:
        return tuple(self._vehicles.values())

    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers)

    def active_rentals(self) -> tuple[RentalAgreement, ...]:
        """Active agreements in the order they were created."""
        return tuple(self._rentals.values())

    def available_vehicles(self) -> tuple[Vehicle, ...]:
        return tuple(v for v in self._vehicles.values() if v.available)

    def find_available_vehicle(self, vehicle_id: str) -> Vehicle:
        """Return the available vehicle with this ID or raise VehicleNotFoundError."""
        vehicle = self._vehicles.get(normalize_id(vehicle_id))
        if vehicle is None or not vehicle.available:
            raise VehicleNotFoundError(Messages.INVALID_SELECTION)
        return vehicle

    def find_rented_vehicle(self, vehicle_id: str) -> Vehicle:
        """Return the currently rented vehicle with this ID or raise VehicleNotFoundError."""
        vehicle = self._vehicles.get(normalize_id(vehicle_id))
        if vehicle is None or vehicle.available:
            raise VehicleNotFoundError(Messages.NOT_RENTED)
        return vehicle

    def find_active_rental(self, vehicle: Vehicle) -> RentalAgreement:
        """Return the active agreement for exactly this vehicle object."""
        rental = self._rentals.get(vehicle.vehicle_id)
        if rental is None or rental.vehicle is not vehicle:
            raise RentalNotFoundError(Messages.RENTAL_MISSING)
        return rental

    def quote(self, vehicle: Vehicle, days: int) -> Decimal:
        return vehicle.price(days)

    # ---------- Commands ----------
    def rent_vehicle(self, vehicle: Vehicle, customer: Customer, days: int):
        """
        Rent an available vehicle.

        Returns:
            (ok: bool, message: str, rental: Optional[RentalAgreement])
        An unavailable vehicle is reported, not raised, and nothing changes.
        """
        if not vehicle.available:
            log.info(TAG, f"Rejected rental of {vehicle.vehicle_id}: not available")
            return False, Messages.NOT_AVAILABLE, None

        total_price = vehicle.price(days)
        vehicle.rent()
        rental = RentalAgreement(
            vehicle=vehicle,
            customer=customer,
            days=days,
            total_price=total_price,
            created_at=self.clock(),
        )
        self._rentals[vehicle.vehicle_id] = rental
        self.total_earnings += total_price
        log.info(TAG, f"{customer.customer_id} rented {vehicle.vehicle_id} for {days} days "
                      f"({fmt_money(total_price)}); earnings now {fmt_money(self.total_earnings)}")
        return True, Messages.RENTED_OK, rental

    def return_vehicle(self, vehicle: Vehicle) -> Optional[RentalAgreement]:
        """
        Mark the vehicle available and close its active agreement.
        Earnings are not refunded. The vehicle is freed even when no agreement
        matches; that case is reported as a warning and returns None.
        """
        vehicle.return_vehicle()
        rental = self._rentals.get(vehicle.vehicle_id)
        if rental is None or rental.vehicle is not vehicle:
            log.warn(TAG, f"Vehicle {vehicle.vehicle_id} marked available without an active rental")
            return None
        del self._rentals[vehicle.vehicle_id]
        log.info(TAG, f"Closed rental of {vehicle.vehicle_id} by {rental.customer.customer_id}")
        return rental

    # ---------- Consistency ----------
    def check_invariants(self) -> list[str]:
        """
        List every inconsistency between availability flags, active agreements
        and earnings. An empty list means the ledger is consistent.
        """
        problems = []
        for vid, vehicle in self._vehicles.items():
            rental = self._rentals.get(vid)
            has_rental = rental is not None and rental.vehicle is vehicle
            if vehicle.available and has_rental:
                problems.append(f"{vid} is available but has an active rental")
            if not vehicle.available and not has_rental:
                problems.append(f"{vid} is rented but has no active rental")
        for vid in self._rentals:
            if vid not in self._vehicles:
                problems.append(f"active rental references unknown vehicle {vid}")
        active_sum = sum((r.total_price for r in self._rentals.values()), Decimal("0"))
        if self.total_earnings < active_sum:
            problems.append("total earnings are below the value of active rentals")
        return problems
