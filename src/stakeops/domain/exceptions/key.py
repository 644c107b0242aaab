"""
Signing key exceptions.
"""

from stakeops.domain.exceptions.base import StakeOpsException


class KeyDerivationError(StakeOpsException):
    """
    Raised when a signing account cannot be derived from key material.

    Covers malformed private-key strings as well as a derived public key
    that is not a secp256k1 public key. The key itself is never part of
    the message.
    """

    def __init__(self, reason: str):
        super().__init__(
            f"Could not derive signing account: {reason}",
            code="KEY_DERIVATION_FAILED",
        )
        self.reason = reason
