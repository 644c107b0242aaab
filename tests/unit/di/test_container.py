"""
Unit tests for DIContainer wiring.

Usage:
    pytest tests/unit/di/test_container.py
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from stakeops.application.use_cases.deposit_stake import DepositStake
from stakeops.config.settings import Settings
from stakeops.di.container import DIContainer
from stakeops.infrastructure.blockchain.web3_contract_client import (
    Web3ContractBinder,
    Web3ContractTransactor,
)
from stakeops.infrastructure.blockchain.web3_ledger_client import (
    Web3LedgerClient,
)
from stakeops.infrastructure.crypto.eth_key_manager import EthKeyManager
from stakeops.infrastructure.monitoring.system_reporter import SystemReporter

CONTRACT = "0x0ba45a8b5d5575935b8158a88c631e9f9c95a2e5"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        APP_NAME="stakeops-test-container",
        PRIVATE_KEY="0x" + "11" * 32,
        CONTRACT_ADDRESS=CONTRACT,
        STAKE_MINIMUM_BALANCE=5,
    )


class TestDIContainer:
    """Unit tests for DIContainer."""

    def test_deposit_stake_wiring(self, settings):
        container = DIContainer(settings)

        use_case = container.get_deposit_stake()

        assert isinstance(use_case, DepositStake)
        assert isinstance(use_case.ledger_client, Web3LedgerClient)
        assert isinstance(use_case.contract_binder, Web3ContractBinder)
        assert isinstance(use_case.contract_transactor, Web3ContractTransactor)
        assert isinstance(use_case.key_manager, EthKeyManager)
        assert isinstance(use_case.reporter, SystemReporter)
        assert use_case.policy.minimum_stake_balance == 5
        assert use_case.contract_transactor.contract_address == CONTRACT
        container.reporter.close()

    def test_services_are_cached(self, settings):
        container = DIContainer(settings)

        assert container.ledger_client is container.ledger_client
        assert container.web3 is container.web3
        assert container.get_deposit_stake() is not container.get_deposit_stake()
        container.reporter.close()

    @pytest.mark.asyncio
    async def test_shutdown_disconnects_provider(self, settings):
        w3 = MagicMock()
        w3.provider.disconnect = AsyncMock()

        with patch("stakeops.di.container.create_web3", return_value=w3):
            container = DIContainer(settings)
            container.get_deposit_stake()
            await container.shutdown()

        w3.provider.disconnect.assert_awaited_once()
        assert container.reporter.logger.handlers == []

    @pytest.mark.asyncio
    async def test_shutdown_without_connections(self, settings):
        await DIContainer(settings).shutdown()
