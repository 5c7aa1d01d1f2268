"""Interactive menu loop: reads a line, validates it, calls the ledger, prints the result."""
from __future__ import annotations

import re
from typing import Callable, Optional

import click

from ..exceptions import InvalidCustomerError, RentalNotFoundError, VehicleNotFoundError
from ..services.fleet_ledger import FleetLedger
from ..utils import log
from ..utils.constants import CONFIRM_YES, DEFAULT_TIMEZONE, DAYS_PATTERN, MENU_PATTERN, MenuChoice, Messages
from ..utils.filters import fmt_iso_local, fmt_money

Reader = Callable[[str], str]


def prompt_line(text: str) -> str:
    """Read one raw line; an empty answer is returned as ''."""
    return click.prompt(text, default="", show_default=False, prompt_suffix=": ")


class Shell:
    """
    Console front-end for a FleetLedger.
    The reader is injectable so tests can script the conversation; it raises
    EOFError (or click.Abort) when input runs out. `config` is the app config
    built by create_app (only TIMEZONE is read here).
    """

    def __init__(self, ledger: FleetLedger, reader: Optional[Reader] = None,
                 config: Optional[dict] = None):
        self.ledger = ledger
        self.read = reader or prompt_line
        self.config = dict(config or {})
        self.handlers = {
            MenuChoice.RENT: self.rent,
            MenuChoice.RETURN: self.return_car,
            MenuChoice.CURRENT_RENTALS: self.show_rentals,
            MenuChoice.EARNINGS: self.show_earnings,
            MenuChoice.EXIT: self.confirm_exit,
        }

    @staticmethod
    def say(text: str = "") -> None:
        click.echo(text)

    # ---------- Loop ----------
    def run(self) -> int:
        """Loop until exit is confirmed or input ends; return the exit code."""
        try:
            while True:
                self.show_menu()
                choice = self.read("Enter your choice")
                if not re.fullmatch(MENU_PATTERN, choice):
                    self.say(Messages.INVALID_CHOICE)
                    continue
                if self.handlers[choice]():
                    break
        except (EOFError, click.Abort):
            log.info("Shell", "Input closed; leaving menu")
            self.say()
        return 0

    def show_menu(self) -> None:
        self.say()
        self.say(Messages.TITLE)
        for line in Messages.MENU:
            self.say(line)

    # ---------- Actions (return True to leave the loop) ----------
    def rent(self) -> bool:
        self.say()
        self.say(Messages.RENT_HEADER)
        self.say()

        name = self.read("Enter your name").strip()
        while not name:
            self.say(Messages.EMPTY_NAME)
            name = self.read("Enter your name").strip()

        available = self.ledger.available_vehicles()
        self.say()
        self.say("Available Cars:")
        if not available:
            self.say(Messages.NO_CARS)
            return False
        for v in available:
            self.say(f"{v.vehicle_id} - {v.label}")

        self.say()
        vehicle_id = self.read("Enter the car ID you want to rent").upper()
        raw_days = self.read("Enter the number of days for rental").strip()
        if not re.fullmatch(DAYS_PATTERN, raw_days):
            self.say(Messages.INVALID_DAYS)
            return False
        days = int(raw_days)
        if days <= 0:
            self.say(Messages.NON_POSITIVE_DAYS)
            return False

        # Recorded before confirmation and kept even if the rental is canceled
        try:
            customer = self.ledger.new_customer(name)
        except InvalidCustomerError as e:
            self.say(e.message)
            return False

        try:
            vehicle = self.ledger.find_available_vehicle(vehicle_id)
        except VehicleNotFoundError as e:
            self.say()
            self.say(e.message)
            return False

        self.say()
        self.say(Messages.RENTAL_INFO_HEADER)
        self.say()
        self.say(f"Customer ID: {customer.customer_id}")
        self.say(f"Customer Name: {customer.name}")
        self.say(f"Car: {vehicle.label}")
        self.say(f"Rental Days: {days}")
        self.say(f"Total Price: {fmt_money(self.ledger.quote(vehicle, days))}")

        self.say()
        confirm = self.read("Confirm rental (Y/N)").strip()
        self.say()
        if confirm.upper() == CONFIRM_YES:
            _, msg, _ = self.ledger.rent_vehicle(vehicle, customer, days)
            self.say(msg)
        else:
            self.say(Messages.RENT_CANCELED)
        return False

    def return_car(self) -> bool:
        self.say()
        self.say(Messages.RETURN_HEADER)
        self.say()
        vehicle_id = self.read("Enter the car ID you want to return").upper()

        try:
            vehicle = self.ledger.find_rented_vehicle(vehicle_id)
            rental = self.ledger.find_active_rental(vehicle)
        except (VehicleNotFoundError, RentalNotFoundError) as e:
            self.say(e.message)
            return False

        self.ledger.return_vehicle(vehicle)
        self.say(Messages.RETURNED_OK.format(name=rental.customer.name))
        return False

    def show_rentals(self) -> bool:
        rentals = self.ledger.active_rentals()
        self.say()
        if not rentals:
            self.say(Messages.NO_RENTALS)
            return False
        tz_name = self.config.get("TIMEZONE", DEFAULT_TIMEZONE)
        self.say(Messages.RENTALS_HEADER)
        for r in rentals:
            self.say(r.summary())
            self.say(f"  since {fmt_iso_local(r.created_at, tz_name)}")
        return False

    def show_earnings(self) -> bool:
        self.say()
        self.say(f"Total Earnings: {fmt_money(self.ledger.total_earnings)}")
        return False

    def confirm_exit(self) -> bool:
        self.say()
        answer = self.read(Messages.EXIT_CONFIRM).strip()
        if answer.upper() == CONFIRM_YES:
            self.say()
            self.say(Messages.GOODBYE)
            return True
        return False
