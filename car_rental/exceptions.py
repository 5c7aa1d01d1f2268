"""
Custom exception classes for the Car Rental console app.

These exceptions provide precise error types that the shell can catch
to print friendly messages instead of tracebacks.
"""


class VehicleNotFoundError(Exception):
    """Raised when a vehicle ID cannot be matched in the fleet."""

    def __init__(self, message: str = "Error: vehicle not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class RentalNotFoundError(Exception):
    """Raised when no active rental agreement exists for a vehicle."""

    def __init__(self, message: str = "Error: rental not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class DuplicateVehicleError(Exception):
    """Raised when a vehicle ID is already registered in the fleet."""

    def __init__(self, message: str = "Error: vehicle already exists") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidRateError(Exception):
    """Raised when a daily rate is negative or not a number."""

    def __init__(self, message: str = "Error: invalid daily rate") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidCustomerError(Exception):
    """Raised when a customer name is empty."""

    def __init__(self, message: str = "Error: customer name cannot be empty") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class SeedDataError(Exception):
    """Raised when bootstrap fleet data cannot be read or is malformed."""

    def __init__(self, message: str = "Error: invalid seed data") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
