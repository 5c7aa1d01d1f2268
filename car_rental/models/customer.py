from dataclasses import dataclass

from ..exceptions import InvalidCustomerError
from ..utils.constants import DEFAULT_CUSTOMER_PREFIX


@dataclass(frozen=True)
class Customer:
    """A renter. One record is created per rent attempt; names are not deduplicated."""
    customer_id: str
    name: str

    def __post_init__(self):
        name = (self.name or "").strip()
        if not name:
            raise InvalidCustomerError()
        # frozen dataclass: write the stripped name through object.__setattr__
        object.__setattr__(self, "name", name)

    @classmethod
    def create(cls, name: str, sequence: int, prefix: str = DEFAULT_CUSTOMER_PREFIX) -> "Customer":
        """Build a customer whose ID is the prefix followed by the sequence number."""
        return cls(customer_id=f"{prefix}{sequence}", name=name)
