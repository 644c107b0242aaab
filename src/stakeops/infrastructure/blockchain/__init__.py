"""
Blockchain infrastructure.
"""

from stakeops.infrastructure.blockchain.stake_contract_abi import (
    STAKE_CONTRACT_ABI,
)
from stakeops.infrastructure.blockchain.web3_contract_client import (
    Web3ContractBinder,
    Web3ContractReader,
    Web3ContractTransactor,
    resolve_stake_contract,
)
from stakeops.infrastructure.blockchain.web3_factory import create_web3
from stakeops.infrastructure.blockchain.web3_ledger_client import (
    Web3LedgerClient,
)

__all__ = [
    "STAKE_CONTRACT_ABI",
    "Web3ContractBinder",
    "Web3ContractReader",
    "Web3ContractTransactor",
    "Web3LedgerClient",
    "create_web3",
    "resolve_stake_contract",
]
