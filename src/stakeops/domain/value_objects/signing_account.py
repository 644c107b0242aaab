"""
SigningAccount value object - Immutable account derived from a private key.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SigningAccount:
    """
    Value object representing an account able to sign transactions.

    Business rules:
    - Address is the EIP-55 checksum address derived from the key
    - Private key is raw 32-byte secp256k1 key material
    - Key material never appears in repr/str output
    - Never persisted; lives for one operation invocation
    """

    address: str
    private_key: bytes = field(repr=False)

    def __post_init__(self):
        """Validate account on creation."""
        if not self.address:
            raise ValueError("Account address cannot be empty")

        if len(self.private_key) != 32:
            raise ValueError(
                f"Invalid private key length: {len(self.private_key)}"
            )

    def truncated(self) -> str:
        """Return truncated address for display (e.g., '0x2c75...5c23')."""
        return f"{self.address[:6]}...{self.address[-4:]}"

    def __str__(self) -> str:
        """String representation returns the address only."""
        return self.address
