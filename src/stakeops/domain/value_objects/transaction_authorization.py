"""
TransactionAuthorization value object - Signed write call parameters.
"""

from dataclasses import dataclass

from stakeops.domain.value_objects.signing_account import SigningAccount


@dataclass(frozen=True)
class TransactionAuthorization:
    """
    Parameters attached to the deposit stake transaction.

    Business rules:
    - Built once per invocation, never mutated
    - Nonce is the pending nonce fetched for the signer's address
    - Value is always zero (stake is moved by the contract, not sent)
    """

    signer: SigningAccount
    nonce: int
    gas_limit: int
    gas_price: int
    value: int = 0

    def __post_init__(self):
        """Validate authorization on creation."""
        if self.nonce < 0:
            raise ValueError(f"Nonce cannot be negative: {self.nonce}")

        if self.gas_limit <= 0:
            raise ValueError(f"Gas limit must be positive: {self.gas_limit}")

        if self.gas_price < 0:
            raise ValueError(f"Gas price cannot be negative: {self.gas_price}")

        if self.value != 0:
            raise ValueError("Deposit stake transactions carry no value")

    @property
    def sender(self) -> str:
        """Address of the signing account."""
        return self.signer.address

    def to_tx_params(self) -> dict:
        """Convert to web3 transaction parameters."""
        return {
            "from": self.signer.address,
            "nonce": self.nonce,
            "value": self.value,
            "gas": self.gas_limit,
            "gasPrice": self.gas_price,
        }
