"""
Ethereum key manager.

Derives secp256k1 signing accounts from hex-encoded private keys using
eth-keys (the key layer underneath eth-account).
"""

import binascii

from eth_keys import keys
from eth_keys.exceptions import ValidationError as KeyValidationError
from eth_utils import decode_hex

from stakeops.domain.exceptions.key import KeyDerivationError
from stakeops.domain.services.i_key_manager import IKeyManager
from stakeops.domain.value_objects.signing_account import SigningAccount


class EthKeyManager(IKeyManager):
    """
    Key manager for Ethereum-compatible ledgers.

    Accepts keys with or without 0x prefix. Error messages never echo
    the key material.
    """

    def derive_account(self, private_key: str) -> SigningAccount:
        """
        Derive signing account from hex-encoded private key.

        Args:
            private_key: Hex private key (optional 0x prefix)

        Returns:
            SigningAccount with EIP-55 checksum address

        Raises:
            KeyDerivationError: If key is not valid secp256k1 material
        """
        if not isinstance(private_key, str) or not private_key.strip():
            raise KeyDerivationError("private key is empty")

        try:
            key_bytes = decode_hex(private_key.strip())
        except (binascii.Error, ValueError):
            raise KeyDerivationError("private key is not valid hex") from None

        try:
            key = keys.PrivateKey(key_bytes)
        except (KeyValidationError, ValueError):
            raise KeyDerivationError(
                "private key is not a valid secp256k1 key"
            ) from None

        public_key = key.public_key
        if not isinstance(public_key, keys.PublicKey):
            raise KeyDerivationError("public key is not a secp256k1 public key")

        return SigningAccount(
            address=public_key.to_checksum_address(),
            private_key=key.to_bytes(),
        )
