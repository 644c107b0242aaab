"""
Domain services package.
"""

from stakeops.domain.services.i_contract_binder import IContractBinder
from stakeops.domain.services.i_contract_reader import IContractReader
from stakeops.domain.services.i_contract_transactor import (
    IContractTransactor,
)
from stakeops.domain.services.i_key_manager import IKeyManager
from stakeops.domain.services.i_ledger_client import ILedgerClient

__all__ = [
    "IKeyManager",
    "ILedgerClient",
    "IContractBinder",
    "IContractReader",
    "IContractTransactor",
]
