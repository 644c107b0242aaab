"""
Unit tests for EthKeyManager.

Usage:
    pytest tests/unit/infrastructure/test_eth_key_manager.py
"""

from unittest.mock import MagicMock, patch

import pytest
from eth_keys import keys

from stakeops.domain.exceptions import KeyDerivationError
from stakeops.infrastructure.crypto.eth_key_manager import EthKeyManager

PRIVATE_KEY = "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
ADDRESS = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"


class TestEthKeyManager:
    """Unit tests for EthKeyManager."""

    def setup_method(self):
        self.key_manager = EthKeyManager()

    # ================================================================
    # Valid keys
    # ================================================================

    def test_derive_with_prefix(self):
        account = self.key_manager.derive_account("0x" + PRIVATE_KEY)

        assert account.address == ADDRESS
        assert account.private_key == bytes.fromhex(PRIVATE_KEY)

    def test_derive_without_prefix(self):
        """Test bare hex keys are accepted."""
        account = self.key_manager.derive_account(PRIVATE_KEY)

        assert account.address == ADDRESS

    def test_surrounding_whitespace_ignored(self):
        account = self.key_manager.derive_account(f"  {PRIVATE_KEY}\n")

        assert account.address == ADDRESS

    # ================================================================
    # Invalid keys
    # ================================================================

    @pytest.mark.parametrize(
        "bad_key",
        [
            "",
            "   ",
            "not-a-key",
            "0x1234",
            PRIVATE_KEY[:-2],
            PRIVATE_KEY + "00",
            "g" * 64,
        ],
    )
    def test_invalid_key_material(self, bad_key):
        with pytest.raises(KeyDerivationError):
            self.key_manager.derive_account(bad_key)

    def test_non_string_key(self):
        with pytest.raises(KeyDerivationError):
            self.key_manager.derive_account(None)

    def test_error_never_echoes_key(self):
        """Test key material does not leak into error messages."""
        bad_key = PRIVATE_KEY[:-2] + "zz"

        with pytest.raises(KeyDerivationError) as exc_info:
            self.key_manager.derive_account(bad_key)

        assert bad_key not in str(exc_info.value)
        assert exc_info.value.code == "KEY_DERIVATION_FAILED"

    def test_unexpected_public_key_type(self):
        """Test a key that yields a foreign public key type is refused."""
        derived = MagicMock()
        derived.public_key = object()

        with patch.object(keys, "PrivateKey", return_value=derived):
            with pytest.raises(KeyDerivationError) as exc_info:
                self.key_manager.derive_account(PRIVATE_KEY)

        assert "public key" in exc_info.value.message
