"""
Domain value objects.
"""

from stakeops.domain.value_objects.gas_estimate import GasEstimate
from stakeops.domain.value_objects.signing_account import SigningAccount
from stakeops.domain.value_objects.stake_policy import (
    AFFORDABILITY_GAS_LIMIT,
    MINIMUM_STAKE_BALANCE,
    SUBMISSION_GAS_LIMIT,
    StakePolicy,
)
from stakeops.domain.value_objects.submission_result import SubmissionResult
from stakeops.domain.value_objects.transaction_authorization import (
    TransactionAuthorization,
)

__all__ = [
    "AFFORDABILITY_GAS_LIMIT",
    "SUBMISSION_GAS_LIMIT",
    "MINIMUM_STAKE_BALANCE",
    "GasEstimate",
    "SigningAccount",
    "StakePolicy",
    "SubmissionResult",
    "TransactionAuthorization",
]
