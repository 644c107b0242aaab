"""Application use cases."""

from stakeops.application.use_cases.deposit_stake import (
    DepositResult,
    DepositStake,
    DepositStatus,
)

__all__ = [
    "DepositStake",
    "DepositResult",
    "DepositStatus",
]
