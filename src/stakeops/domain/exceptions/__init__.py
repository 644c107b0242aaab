"""
Domain exceptions package.
"""

# Base exceptions
from stakeops.domain.exceptions.base import StakeOpsException

# Blockchain exceptions
from stakeops.domain.exceptions.blockchain import (
    ContractResolutionError,
    InsufficientFundsError,
    NetworkError,
    TransactionSubmissionError,
)

# Key exceptions
from stakeops.domain.exceptions.key import KeyDerivationError

__all__ = [
    # Base
    "StakeOpsException",
    # Key
    "KeyDerivationError",
    # Blockchain
    "NetworkError",
    "InsufficientFundsError",
    "ContractResolutionError",
    "TransactionSubmissionError",
]
