"""
Unit tests for domain exceptions.

Usage:
    pytest tests/unit/domain/test_exceptions.py
"""

import pytest

from stakeops.domain.exceptions import (
    ContractResolutionError,
    InsufficientFundsError,
    KeyDerivationError,
    NetworkError,
    StakeOpsException,
    TransactionSubmissionError,
)


@pytest.mark.parametrize(
    "error, code",
    [
        (KeyDerivationError("bad hex"), "KEY_DERIVATION_FAILED"),
        (NetworkError("gas_price", "timeout"), "NETWORK_ERROR"),
        (InsufficientFundsError(balance=1, cost=2), "INSUFFICIENT_FUNDS"),
        (ContractResolutionError("0x0", "bad"), "CONTRACT_RESOLUTION_FAILED"),
        (TransactionSubmissionError("rejected"), "TRANSACTION_SUBMISSION_FAILED"),
    ],
)
def test_error_codes(error, code):
    """Test every error is a StakeOpsException with a stable code."""
    assert isinstance(error, StakeOpsException)
    assert error.code == code
    assert error.message == str(error)


def test_base_exception_default_code():
    assert StakeOpsException("oops").code == "StakeOpsException"


def test_network_error_fields():
    error = NetworkError("pending_nonce", "connection refused")

    assert error.operation == "pending_nonce"
    assert error.reason == "connection refused"
    assert "pending_nonce" in str(error)


def test_insufficient_funds_message():
    error = InsufficientFundsError(balance=100, cost=700_000)

    assert str(error) == "Insufficient funds to send transaction: 100 < 700000"


def test_contract_resolution_fields():
    error = ContractResolutionError("0xdead", "not a valid contract address")

    assert error.contract_address == "0xdead"
    assert "0xdead" in str(error)
