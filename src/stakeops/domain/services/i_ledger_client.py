"""
Ledger Client interface.

Defines account-level queries against the ledger node.
"""

from abc import ABC, abstractmethod


class ILedgerClient(ABC):
    """
    Abstract interface for ledger node queries.

    Clean Architecture: Domain layer defines interface,
    Infrastructure layer implements concrete RPC calls.
    """

    @abstractmethod
    async def get_pending_nonce(self, address: str) -> int:
        """
        Get next nonce for address, including pending transactions.

        Args:
            address: Account address

        Returns:
            Pending nonce

        Raises:
            NetworkError: If RPC call fails
        """

    @abstractmethod
    async def suggest_gas_price(self) -> int:
        """
        Get gas price suggested by the node.

        Returns:
            Gas price in wei per unit

        Raises:
            NetworkError: If RPC call fails
        """

    @abstractmethod
    async def get_balance(self, address: str) -> int:
        """
        Get native currency balance of address.

        Args:
            address: Account address

        Returns:
            Balance in wei

        Raises:
            NetworkError: If RPC call fails
        """
