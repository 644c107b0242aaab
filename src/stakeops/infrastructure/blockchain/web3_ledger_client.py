"""
Web3 ledger client implementation.

Account queries (nonce, gas price, native balance) over an AsyncWeb3
JSON-RPC connection. No retries: every failure surfaces as NetworkError.
"""

from web3 import AsyncWeb3

from stakeops.domain.exceptions.blockchain import NetworkError
from stakeops.domain.services.i_ledger_client import ILedgerClient


class Web3LedgerClient(ILedgerClient):
    """Ledger client backed by an AsyncWeb3 instance."""

    def __init__(self, w3: AsyncWeb3):
        """
        Initialize ledger client.

        Args:
            w3: Connected AsyncWeb3 instance
        """
        self.w3 = w3

    async def get_pending_nonce(self, address: str) -> int:
        """Get nonce including pending transactions."""
        try:
            return await self.w3.eth.get_transaction_count(address, "pending")
        except Exception as e:
            raise NetworkError("pending_nonce", str(e)) from e

    async def suggest_gas_price(self) -> int:
        """Get node's suggested gas price (wei)."""
        try:
            return await self.w3.eth.gas_price
        except Exception as e:
            raise NetworkError("gas_price", str(e)) from e

    async def get_balance(self, address: str) -> int:
        """Get native balance at latest block (wei)."""
        try:
            return await self.w3.eth.get_balance(address)
        except Exception as e:
            raise NetworkError("balance", str(e)) from e
