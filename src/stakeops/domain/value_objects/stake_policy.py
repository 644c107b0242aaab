"""
StakePolicy value object - Gas and stake thresholds for deposits.

The affordability limit and the submission limit are separate policy
values: the pre-flight check uses the smaller estimate while the
transaction carries the larger limit. Neither is derived from the other.
"""

from dataclasses import dataclass

AFFORDABILITY_GAS_LIMIT = 700_000
SUBMISSION_GAS_LIMIT = 3_000_000
MINIMUM_STAKE_BALANCE = 1_000


@dataclass(frozen=True)
class StakePolicy:
    """
    Thresholds applied by the deposit stake operation.

    Attributes:
        affordability_gas_limit: Units used to estimate the fee (pre-flight)
        submission_gas_limit: Units attached to the submitted transaction
        minimum_stake_balance: Token base units required before depositing
    """

    affordability_gas_limit: int = AFFORDABILITY_GAS_LIMIT
    submission_gas_limit: int = SUBMISSION_GAS_LIMIT
    minimum_stake_balance: int = MINIMUM_STAKE_BALANCE

    def __post_init__(self):
        """Validate policy on creation."""
        if self.affordability_gas_limit <= 0:
            raise ValueError("Affordability gas limit must be positive")

        if self.submission_gas_limit <= 0:
            raise ValueError("Submission gas limit must be positive")

        if self.minimum_stake_balance < 0:
            raise ValueError("Minimum stake balance cannot be negative")
