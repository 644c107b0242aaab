"""
Test fixtures and configuration.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from stakeops.application.use_cases.deposit_stake import DepositStake
from stakeops.domain.services.i_contract_binder import IContractBinder
from stakeops.domain.services.i_contract_reader import IContractReader
from stakeops.domain.services.i_contract_transactor import (
    IContractTransactor,
)
from stakeops.domain.services.i_ledger_client import ILedgerClient
from stakeops.domain.value_objects.submission_result import SubmissionResult
from stakeops.infrastructure.crypto.eth_key_manager import EthKeyManager
from stakeops.infrastructure.monitoring.system_reporter import SystemReporter

# Well-known test key (eth-account documentation), never funded
TEST_PRIVATE_KEY = (
    "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
)
TEST_ADDRESS = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"
TEST_CONTRACT_ADDRESS = "0x0ba45a8b5d5575935b8158a88c631e9f9c95a2e5"
TEST_TX_HASH = "0x" + "ab" * 32


@pytest.fixture
def private_key() -> str:
    """Provide test private key."""
    return TEST_PRIVATE_KEY


@pytest.fixture
def address() -> str:
    """Provide address derived from the test private key."""
    return TEST_ADDRESS


@pytest.fixture
def contract_address() -> str:
    """Provide test stake contract address."""
    return TEST_CONTRACT_ADDRESS


@pytest.fixture
def ledger_client() -> AsyncMock:
    """Ledger client funded well above the default fee estimate."""
    client = AsyncMock(spec=ILedgerClient)
    client.get_pending_nonce.return_value = 7
    client.suggest_gas_price.return_value = 1
    client.get_balance.return_value = 10_000_000
    return client


@pytest.fixture
def contract_reader() -> AsyncMock:
    """Contract reader holding enough tokens to stake."""
    reader = AsyncMock(spec=IContractReader)
    reader.balance_of.return_value = 2000
    return reader


@pytest.fixture
def contract_binder(contract_reader) -> MagicMock:
    """Binder resolving to the contract_reader fixture."""
    binder = MagicMock(spec=IContractBinder)
    binder.bind.return_value = contract_reader
    return binder


@pytest.fixture
def contract_transactor() -> AsyncMock:
    """Transactor accepting every deposit."""
    transactor = AsyncMock(spec=IContractTransactor)
    transactor.contract_address = TEST_CONTRACT_ADDRESS
    transactor.deposit_stake.return_value = SubmissionResult(tx_hash=TEST_TX_HASH)
    return transactor


@pytest.fixture
def reporter() -> MagicMock:
    """Reporter mock for asserting log calls."""
    return MagicMock(spec=SystemReporter)


@pytest.fixture
def use_case(
    ledger_client,
    contract_binder,
    contract_transactor,
    reporter,
) -> DepositStake:
    """DepositStake wired to mocks and the real key manager."""
    return DepositStake(
        ledger_client=ledger_client,
        contract_binder=contract_binder,
        contract_transactor=contract_transactor,
        key_manager=EthKeyManager(),
        reporter=reporter,
    )
