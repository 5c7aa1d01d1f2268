# car_rental/utils/constants.py

"""
Global constants for menu choices, user-facing messages, and defaults.
These constants are imported by both the ledger and the shell.
"""

DEFAULT_CUSTOMER_PREFIX = "CUS"
DEFAULT_TIMEZONE = "UTC"

# Date format used when showing when a rental started
DISPLAY_FMT = "%d/%m/%Y %H:%M"


class MenuChoice:
    RENT = "1"
    RETURN = "2"
    CURRENT_RENTALS = "3"
    EARNINGS = "4"
    EXIT = "5"


MENU_PATTERN = r"[1-5]"
DAYS_PATTERN = r"[+-]?[0-9]+"
CONFIRM_YES = "Y"


class Messages:
    TITLE = "===== Car Rental System ====="
    MENU = (
        "1. Rent a Car",
        "2. Return a Car",
        "3. View Current Rentals",
        "4. View Total Earnings",
        "5. Exit",
    )
    INVALID_CHOICE = "Invalid choice. Please enter a number between 1-5."

    # Rent
    RENT_HEADER = "== Rent a Car =="
    EMPTY_NAME = "Name cannot be empty. Please enter a valid name."
    NO_CARS = "No cars available right now."
    INVALID_DAYS = "Invalid number of days."
    NON_POSITIVE_DAYS = "Rental days must be greater than 0."
    RENTAL_INFO_HEADER = "== Rental Information =="
    NOT_AVAILABLE = "Car is not available for rent."
    RENTED_OK = "Car rented successfully."
    RENT_CANCELED = "Rental canceled."
    INVALID_SELECTION = "Invalid car selection or car not available for rent."

    # Return
    RETURN_HEADER = "== Return a Car =="
    NOT_RENTED = "Invalid car ID or car is not rented."
    RENTAL_MISSING = "Car was not rented or rental information is missing."
    RETURNED_OK = "Car returned successfully by {name}"

    # Reports
    NO_RENTALS = "No ongoing rentals right now."
    RENTALS_HEADER = "== Current Rentals =="

    # Exit
    EXIT_CONFIRM = "Are you sure you want to exit? (Y/N)"
    GOODBYE = "Thank you for using the Car Rental System!"
