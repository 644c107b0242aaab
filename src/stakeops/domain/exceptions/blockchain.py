"""
Blockchain-related exceptions.

Defines exceptions for ledger queries, contract resolution and
transaction submission.
"""

from stakeops.domain.exceptions.base import StakeOpsException


class NetworkError(StakeOpsException):
    """Raised when a ledger or contract RPC call fails."""

    def __init__(self, operation: str, reason: str):
        """
        Initialize network error.

        Args:
            operation: Failed query (e.g. "pending_nonce", "token_balance")
            reason: Underlying failure description
        """
        super().__init__(
            f"RPC call '{operation}' failed: {reason}",
            code="NETWORK_ERROR",
        )
        self.operation = operation
        self.reason = reason


class InsufficientFundsError(StakeOpsException):
    """Raised when native balance cannot cover the estimated fee."""

    def __init__(self, balance: int, cost: int):
        """
        Initialize insufficient funds error.

        Args:
            balance: Native balance of the signing account (wei)
            cost: Estimated transaction cost (wei)
        """
        super().__init__(
            f"Insufficient funds to send transaction: {balance} < {cost}",
            code="INSUFFICIENT_FUNDS",
        )
        self.balance = balance
        self.cost = cost


class ContractResolutionError(StakeOpsException):
    """Raised when the deployed contract handle cannot be constructed."""

    def __init__(self, contract_address: str, reason: str):
        """
        Initialize contract resolution error.

        Args:
            contract_address: Configured contract address
            reason: Why the handle could not be built
        """
        super().__init__(
            f"Could not resolve contract at {contract_address}: {reason}",
            code="CONTRACT_RESOLUTION_FAILED",
        )
        self.contract_address = contract_address
        self.reason = reason


class TransactionSubmissionError(StakeOpsException):
    """Raised when the deposit stake transaction is rejected."""

    def __init__(self, reason: str):
        super().__init__(
            f"Could not deposit stake: {reason}",
            code="TRANSACTION_SUBMISSION_FAILED",
        )
        self.reason = reason
