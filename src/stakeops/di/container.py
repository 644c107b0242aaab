"""
Dependency Injection Container for stakeops.

Builds the deposit stake use case and its collaborators from settings.
"""

from typing import Optional

from web3 import AsyncWeb3

from stakeops.application.use_cases.deposit_stake import DepositStake
from stakeops.config.settings import Settings, get_settings
from stakeops.domain.services.i_contract_binder import IContractBinder
from stakeops.domain.services.i_contract_transactor import (
    IContractTransactor,
)
from stakeops.domain.services.i_key_manager import IKeyManager
from stakeops.domain.services.i_ledger_client import ILedgerClient
from stakeops.infrastructure.blockchain.web3_contract_client import (
    Web3ContractBinder,
    Web3ContractTransactor,
)
from stakeops.infrastructure.blockchain.web3_factory import create_web3
from stakeops.infrastructure.blockchain.web3_ledger_client import (
    Web3LedgerClient,
)
from stakeops.infrastructure.crypto.eth_key_manager import EthKeyManager
from stakeops.infrastructure.monitoring.system_reporter import SystemReporter


class DIContainer:
    """
    Dependency Injection Container.

    Lazily creates one instance of each collaborator. Use cases are built
    fresh on every access.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize container.

        Args:
            settings: Settings to wire from (global settings if None)
        """
        self._settings = settings

        # Infrastructure
        self._web3: Optional[AsyncWeb3] = None
        self._reporter: Optional[SystemReporter] = None

        # Domain Services
        self._ledger_client: Optional[ILedgerClient] = None
        self._contract_binder: Optional[IContractBinder] = None
        self._contract_transactor: Optional[IContractTransactor] = None
        self._key_manager: Optional[IKeyManager] = None

    @property
    def settings(self) -> Settings:
        """Get settings instance."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._web3 is not None:
            await self._web3.provider.disconnect()

        if self._reporter is not None:
            self._reporter.close()

    # Infrastructure Getters

    @property
    def web3(self) -> AsyncWeb3:
        """Get AsyncWeb3 instance."""
        if self._web3 is None:
            self._web3 = create_web3(
                self.settings.NODE_URL,
                timeout=self.settings.RPC_TIMEOUT,
            )
        return self._web3

    @property
    def reporter(self) -> SystemReporter:
        """Get reporter instance."""
        if self._reporter is None:
            self._reporter = SystemReporter(
                name=self.settings.APP_NAME,
                log_dir=self.settings.LOG_DIR,
                level=self.settings.LOG_LEVEL,
                verbose=self.settings.LOG_VERBOSE,
            )
        return self._reporter

    # Domain Service Getters

    @property
    def ledger_client(self) -> ILedgerClient:
        """Get ledger client instance."""
        if self._ledger_client is None:
            self._ledger_client = Web3LedgerClient(self.web3)
        return self._ledger_client

    @property
    def contract_binder(self) -> IContractBinder:
        """Get contract binder instance."""
        if self._contract_binder is None:
            self._contract_binder = Web3ContractBinder(self.web3)
        return self._contract_binder

    @property
    def contract_transactor(self) -> IContractTransactor:
        """Get contract transactor instance."""
        if self._contract_transactor is None:
            self._contract_transactor = Web3ContractTransactor(
                self.web3,
                self.settings.CONTRACT_ADDRESS,
            )
        return self._contract_transactor

    @property
    def key_manager(self) -> IKeyManager:
        """Get key manager instance."""
        if self._key_manager is None:
            self._key_manager = EthKeyManager()
        return self._key_manager

    # Use Case Factories

    def get_deposit_stake(self) -> DepositStake:
        """Create DepositStake use case."""
        return DepositStake(
            ledger_client=self.ledger_client,
            contract_binder=self.contract_binder,
            contract_transactor=self.contract_transactor,
            key_manager=self.key_manager,
            reporter=self.reporter,
            policy=self.settings.stake_policy(),
        )
