"""
Contract Transactor interface.

Submits signed state-changing calls to the stake contract.
"""

from abc import ABC, abstractmethod

from stakeops.domain.value_objects.submission_result import SubmissionResult
from stakeops.domain.value_objects.transaction_authorization import (
    TransactionAuthorization,
)


class IContractTransactor(ABC):
    """
    Abstract interface for stake contract write calls.

    Implementations sign with the authorization's signer and return as
    soon as the network accepted the transaction. Inclusion is not awaited.
    """

    @property
    @abstractmethod
    def contract_address(self) -> str:
        """Address of the stake contract this transactor submits to."""

    @abstractmethod
    async def deposit_stake(
        self,
        authorization: TransactionAuthorization,
    ) -> SubmissionResult:
        """
        Submit depositStake call.

        Args:
            authorization: Nonce, gas and signer for the transaction

        Returns:
            SubmissionResult with transaction hash

        Raises:
            TransactionSubmissionError: If the transaction is rejected
        """
