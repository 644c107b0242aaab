"""
GasEstimate value object - Gas price paired with a unit limit.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GasEstimate:
    """
    Gas price (wei per unit) and gas limit (units).

    Used for the pre-flight affordability check only; the limit attached
    to the submitted transaction is carried by TransactionAuthorization.
    """

    price: int
    limit: int

    def __post_init__(self):
        """Validate estimate on creation."""
        if self.price < 0:
            raise ValueError(f"Gas price cannot be negative: {self.price}")

        if self.limit <= 0:
            raise ValueError(f"Gas limit must be positive: {self.limit}")

    @property
    def cost(self) -> int:
        """Maximum fee in wei."""
        return self.price * self.limit

    def is_affordable(self, balance: int) -> bool:
        """Return True if balance covers the maximum fee."""
        return balance >= self.cost
