"""
SubmissionResult value object - Transaction identifier of a sent call.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionResult:
    """Result returned by the transactor once the network accepted the call."""

    tx_hash: str

    def __post_init__(self):
        """Validate result on creation."""
        if not self.tx_hash:
            raise ValueError("Transaction hash cannot be empty")

    def __str__(self) -> str:
        return self.tx_hash
