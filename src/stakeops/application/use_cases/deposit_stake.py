"""
Deposit Stake use case.

Deposits stake tokens into the ledger contract so the signing account
becomes eligible to mine. Runs a strictly linear pre-flight pipeline;
every step short-circuits on failure and nothing is retried.

NOT safe to run concurrently for the same key: the pending nonce is
fetched once and used verbatim.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Optional

from stakeops.domain.exceptions import (
    ContractResolutionError,
    InsufficientFundsError,
    KeyDerivationError,
    NetworkError,
    StakeOpsException,
    TransactionSubmissionError,
)
from stakeops.domain.services.i_contract_binder import IContractBinder
from stakeops.domain.services.i_contract_reader import IContractReader
from stakeops.domain.services.i_contract_transactor import (
    IContractTransactor,
)
from stakeops.domain.services.i_key_manager import IKeyManager
from stakeops.domain.services.i_ledger_client import ILedgerClient
from stakeops.domain.value_objects.gas_estimate import GasEstimate
from stakeops.domain.value_objects.stake_policy import StakePolicy
from stakeops.domain.value_objects.transaction_authorization import (
    TransactionAuthorization,
)
from stakeops.infrastructure.monitoring.system_reporter import SystemReporter

CONTEXT = "DepositStake"


class DepositStatus(str, Enum):
    """Outcome of a deposit that did not fail."""

    SUBMITTED = "submitted"
    INSUFFICIENT_STAKE_BALANCE = "insufficient_stake_balance"


@dataclass
class DepositResult:
    """
    Result of deposit stake operation.

    Attributes:
        status: SUBMITTED, or INSUFFICIENT_STAKE_BALANCE for the soft abort
        address: Signing account address
        token_balance: Token balance seen before submission
        tx_hash: Transaction hash (only when submitted)
    """

    status: DepositStatus
    address: str
    token_balance: int
    tx_hash: Optional[str] = None

    @property
    def submitted(self) -> bool:
        """True if a deposit transaction was sent."""
        return self.status == DepositStatus.SUBMITTED


class DepositStake:
    """
    Deposit stake tokens for the account derived from a private key.

    Business rules:
    - Malformed key fails before any RPC call
    - Native balance must cover gas price x affordability gas limit
    - Transaction carries the submission gas limit, never the estimate
    - Token balance below the minimum stake is a soft abort (warning, no error)
    - Submission is not followed by confirmation monitoring
    """

    def __init__(
        self,
        ledger_client: ILedgerClient,
        contract_binder: IContractBinder,
        contract_transactor: IContractTransactor,
        key_manager: IKeyManager,
        reporter: SystemReporter,
        policy: Optional[StakePolicy] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            ledger_client: Node queries (nonce, gas price, balance)
            contract_binder: Resolves the deployed stake contract
            contract_transactor: Submits the depositStake call
            key_manager: Derives signing account from key material
            reporter: Logger scoped to this operation
            policy: Gas and stake thresholds (defaults if None)
        """
        self.ledger_client = ledger_client
        self.contract_binder = contract_binder
        self.contract_transactor = contract_transactor
        self.key_manager = key_manager
        self.reporter = reporter
        self.policy = policy or StakePolicy()

    async def execute(
        self,
        private_key: str,
        contract_address: str,
    ) -> DepositResult:
        """
        Execute deposit stake pipeline.

        Args:
            private_key: Hex-encoded private key from configuration
            contract_address: Stake contract address from configuration

        Returns:
            DepositResult (submitted or soft-aborted)

        Raises:
            KeyDerivationError: If private key is invalid
            NetworkError: If a nonce/gas/balance/token query fails
            InsufficientFundsError: If native balance cannot cover the fee
            ContractResolutionError: If contract handle cannot be built or
                the transactor targets a different contract
            TransactionSubmissionError: If the deposit is rejected
        """
        # 1. Derive signing account
        try:
            account = self.key_manager.derive_account(private_key)
        except StakeOpsException as e:
            self.reporter.error(f"Problem getting private key: {e}", context=CONTEXT)
            raise
        except Exception as e:
            # Exception text may echo key material
            self.reporter.error(
                f"Problem getting private key: {type(e).__name__}",
                context=CONTEXT,
            )
            raise KeyDerivationError(type(e).__name__) from e

        address = account.address
        self.reporter.debug(
            f"Signing account: {account.truncated()}", context=CONTEXT
        )

        # 2-4. Account state from ledger
        nonce = await self._query(
            "pending_nonce",
            self.ledger_client.get_pending_nonce(address),
        )
        gas_price = await self._query(
            "gas_price",
            self.ledger_client.suggest_gas_price(),
        )
        balance = await self._query(
            "balance",
            self.ledger_client.get_balance(address),
        )

        # 5. Affordability check uses the estimate limit only
        estimate = GasEstimate(
            price=gas_price,
            limit=self.policy.affordability_gas_limit,
        )
        if not estimate.is_affordable(balance):
            self.reporter.error(
                f"Insufficient funds: {balance} < {estimate.cost}",
                context=CONTEXT,
            )
            raise InsufficientFundsError(balance=balance, cost=estimate.cost)

        # 6. Authorization carries the submission limit
        authorization = TransactionAuthorization(
            signer=account,
            nonce=nonce,
            gas_limit=self.policy.submission_gas_limit,
            gas_price=gas_price,
        )

        # 7. Resolve contract handle
        contract = self._bind_contract(contract_address)

        # 8. Token balance
        token_balance = await self._query(
            "token_balance",
            contract.balance_of(address),
        )
        self.reporter.info(f"Token balance: {token_balance}", context=CONTEXT)

        # 9. Soft abort below minimum stake
        if token_balance < self.policy.minimum_stake_balance:
            self.reporter.warning(
                f"Insufficient token balance: {token_balance} < "
                f"{self.policy.minimum_stake_balance}, deposit skipped",
                context=CONTEXT,
            )
            return DepositResult(
                status=DepositStatus.INSUFFICIENT_STAKE_BALANCE,
                address=address,
                token_balance=token_balance,
            )

        # 10. Submit
        try:
            submission = await self.contract_transactor.deposit_stake(authorization)
        except StakeOpsException as e:
            self.reporter.error(f"Could not deposit stake: {e}", context=CONTEXT)
            raise
        except Exception as e:
            self.reporter.error(f"Could not deposit stake: {e}", context=CONTEXT)
            raise TransactionSubmissionError(str(e)) from e

        # 11. Report identifier; inclusion is not awaited
        self.reporter.info(f"tx sent: {submission.tx_hash}", context=CONTEXT)

        return DepositResult(
            status=DepositStatus.SUBMITTED,
            address=address,
            token_balance=token_balance,
            tx_hash=submission.tx_hash,
        )

    async def _query(self, operation: str, call: Awaitable[int]) -> int:
        """
        Await a single RPC query, mapping failures to NetworkError.

        Args:
            operation: Query name used in logs and errors
            call: Pending capability call

        Returns:
            Query result
        """
        try:
            return await call
        except StakeOpsException as e:
            self.reporter.error(f"Problem getting {operation}: {e}", context=CONTEXT)
            raise
        except Exception as e:
            self.reporter.error(f"Problem getting {operation}: {e}", context=CONTEXT)
            raise NetworkError(operation, str(e)) from e

    def _bind_contract(self, contract_address: str) -> IContractReader:
        """Resolve stake contract handle at configured address."""
        try:
            contract = self.contract_binder.bind(contract_address)
        except StakeOpsException as e:
            self.reporter.error(f"Problem creating contract: {e}", context=CONTEXT)
            raise
        except Exception as e:
            self.reporter.error(f"Problem creating contract: {e}", context=CONTEXT)
            raise ContractResolutionError(contract_address, str(e)) from e

        # Reads and the deposit must target the same contract
        submit_address = self.contract_transactor.contract_address
        if str(submit_address).lower() != str(contract_address).lower():
            reason = f"transactor targets {submit_address}"
            self.reporter.error(f"Problem creating contract: {reason}", context=CONTEXT)
            raise ContractResolutionError(contract_address, reason)

        return contract
