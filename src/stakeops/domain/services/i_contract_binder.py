"""
Contract Binder interface.

Resolves a deployed contract handle from its configured address.
"""

from abc import ABC, abstractmethod

from stakeops.domain.services.i_contract_reader import IContractReader


class IContractBinder(ABC):
    """Abstract interface for binding to the deployed stake contract."""

    @abstractmethod
    def bind(self, contract_address: str) -> IContractReader:
        """
        Build a reader for the contract deployed at address.

        Args:
            contract_address: Configured contract address

        Returns:
            Contract reader bound to the address

        Raises:
            ContractResolutionError: If handle cannot be constructed
        """
