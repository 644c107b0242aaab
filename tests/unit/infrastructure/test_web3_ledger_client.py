"""
Unit tests for Web3LedgerClient.

Usage:
    pytest tests/unit/infrastructure/test_web3_ledger_client.py
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from stakeops.domain.exceptions import NetworkError
from stakeops.infrastructure.blockchain.web3_ledger_client import (
    Web3LedgerClient,
)

ADDRESS = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"


async def _value(value):
    return value


async def _raise(error):
    raise error


@pytest.fixture
def w3() -> MagicMock:
    return MagicMock()


class TestWeb3LedgerClient:
    """Unit tests for Web3LedgerClient."""

    @pytest.mark.asyncio
    async def test_pending_nonce(self, w3):
        w3.eth.get_transaction_count = AsyncMock(return_value=12)

        nonce = await Web3LedgerClient(w3).get_pending_nonce(ADDRESS)

        assert nonce == 12
        w3.eth.get_transaction_count.assert_awaited_once_with(ADDRESS, "pending")

    @pytest.mark.asyncio
    async def test_gas_price(self, w3):
        w3.eth.gas_price = _value(25_000_000_000)

        assert await Web3LedgerClient(w3).suggest_gas_price() == 25_000_000_000

    @pytest.mark.asyncio
    async def test_balance(self, w3):
        w3.eth.get_balance = AsyncMock(return_value=10**18)

        balance = await Web3LedgerClient(w3).get_balance(ADDRESS)

        assert balance == 10**18
        w3.eth.get_balance.assert_awaited_once_with(ADDRESS)

    # ================================================================
    # Failures map to NetworkError
    # ================================================================

    @pytest.mark.asyncio
    async def test_nonce_failure(self, w3):
        w3.eth.get_transaction_count = AsyncMock(
            side_effect=ConnectionError("connection refused")
        )

        with pytest.raises(NetworkError) as exc_info:
            await Web3LedgerClient(w3).get_pending_nonce(ADDRESS)

        assert exc_info.value.operation == "pending_nonce"
        assert "connection refused" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_gas_price_failure(self, w3):
        w3.eth.gas_price = _raise(TimeoutError("timed out"))

        with pytest.raises(NetworkError) as exc_info:
            await Web3LedgerClient(w3).suggest_gas_price()

        assert exc_info.value.operation == "gas_price"

    @pytest.mark.asyncio
    async def test_balance_failure(self, w3):
        w3.eth.get_balance = AsyncMock(side_effect=ValueError("rpc error"))

        with pytest.raises(NetworkError) as exc_info:
            await Web3LedgerClient(w3).get_balance(ADDRESS)

        assert exc_info.value.operation == "balance"
