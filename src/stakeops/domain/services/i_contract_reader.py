"""
Contract Reader interface.

Read-only calls against the deployed stake token contract.
"""

from abc import ABC, abstractmethod


class IContractReader(ABC):
    """Abstract interface for read-only stake contract calls."""

    @abstractmethod
    async def balance_of(self, address: str) -> int:
        """
        Get token balance of address.

        Args:
            address: Account address

        Returns:
            Token balance in base units

        Raises:
            NetworkError: If contract call fails
        """
