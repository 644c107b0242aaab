"""
Key Manager interface.
"""

from abc import ABC, abstractmethod

from stakeops.domain.value_objects.signing_account import SigningAccount


class IKeyManager(ABC):
    """Derives signing accounts from raw private-key material."""

    @abstractmethod
    def derive_account(self, private_key: str) -> SigningAccount:
        """
        Derive signing account from hex-encoded private key.

        Args:
            private_key: Hex private key (optional 0x prefix)

        Returns:
            SigningAccount with checksum address

        Raises:
            KeyDerivationError: If key material is invalid
        """
