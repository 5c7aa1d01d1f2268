from .customer import Customer
from .rental import RentalAgreement
from .vehicle import Vehicle

__all__ = [
    "Vehicle",
    "Customer",
    "RentalAgreement",
]
