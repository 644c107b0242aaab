"""
Web3 stake contract adapters.

Binds the deployed stake contract, reads token balances and submits
signed depositStake transactions. Submission returns as soon as the node
accepted the raw transaction; inclusion is not awaited.
"""

from typing import Optional

from eth_account import Account
from eth_utils import (
    is_address,
    is_checksum_address,
    remove_0x_prefix,
    to_checksum_address,
)
from web3 import AsyncWeb3, Web3
from web3.contract import AsyncContract

from stakeops.domain.exceptions.blockchain import (
    ContractResolutionError,
    NetworkError,
    TransactionSubmissionError,
)
from stakeops.domain.services.i_contract_binder import IContractBinder
from stakeops.domain.services.i_contract_reader import IContractReader
from stakeops.domain.services.i_contract_transactor import (
    IContractTransactor,
)
from stakeops.domain.value_objects.submission_result import SubmissionResult
from stakeops.domain.value_objects.transaction_authorization import (
    TransactionAuthorization,
)
from stakeops.infrastructure.blockchain.stake_contract_abi import (
    STAKE_CONTRACT_ABI,
)


def resolve_stake_contract(w3: AsyncWeb3, contract_address: str) -> AsyncContract:
    """
    Build contract handle for the stake contract.

    Args:
        w3: AsyncWeb3 instance
        contract_address: Hex contract address (any case)

    Returns:
        AsyncContract bound to the checksum address

    Raises:
        ContractResolutionError: If address is malformed
    """
    if not isinstance(contract_address, str) or not is_address(contract_address):
        raise ContractResolutionError(
            str(contract_address), "not a valid contract address"
        )

    # Mixed case carries an EIP-55 checksum
    hex_body = remove_0x_prefix(contract_address)
    if hex_body != hex_body.lower() and hex_body != hex_body.upper():
        if not is_checksum_address(contract_address):
            raise ContractResolutionError(contract_address, "invalid checksum")

    try:
        return w3.eth.contract(
            address=to_checksum_address(contract_address),
            abi=STAKE_CONTRACT_ABI,
        )
    except Exception as e:
        raise ContractResolutionError(contract_address, str(e)) from e


class Web3ContractReader(IContractReader):
    """Read-only calls against a bound stake contract."""

    def __init__(self, contract: AsyncContract):
        self.contract = contract

    @property
    def address(self) -> str:
        """Checksum address of bound contract."""
        return self.contract.address

    async def balance_of(self, address: str) -> int:
        """Get token balance via balanceOf(address)."""
        try:
            return await self.contract.functions.balanceOf(address).call()
        except Exception as e:
            raise NetworkError("token_balance", str(e)) from e


class Web3ContractBinder(IContractBinder):
    """Creates Web3ContractReader handles for configured addresses."""

    def __init__(self, w3: AsyncWeb3):
        self.w3 = w3

    def bind(self, contract_address: str) -> IContractReader:
        """Resolve reader bound to contract address."""
        return Web3ContractReader(resolve_stake_contract(self.w3, contract_address))


class Web3ContractTransactor(IContractTransactor):
    """
    Submits signed depositStake transactions.

    Signing is local (eth-account); only the raw transaction is sent to
    the node.
    """

    def __init__(self, w3: AsyncWeb3, contract_address: str):
        """
        Initialize transactor.

        Args:
            w3: AsyncWeb3 instance
            contract_address: Stake contract address (resolved on first use)
        """
        self.w3 = w3
        self._contract_address = contract_address
        self._contract: Optional[AsyncContract] = None

    @property
    def contract_address(self) -> str:
        """Get configured stake contract address."""
        return self._contract_address

    @property
    def contract(self) -> AsyncContract:
        """
        Get bound stake contract.

        Raises:
            ContractResolutionError: If address is malformed
        """
        if self._contract is None:
            self._contract = resolve_stake_contract(self.w3, self._contract_address)
        return self._contract

    async def deposit_stake(
        self,
        authorization: TransactionAuthorization,
    ) -> SubmissionResult:
        """
        Build, sign and send depositStake().

        Nonce, value, gas limit and gas price are taken verbatim from the
        authorization.
        """
        contract = self.contract

        try:
            tx = await contract.functions.depositStake().build_transaction(
                authorization.to_tx_params()
            )
            signed = Account.sign_transaction(tx, authorization.signer.private_key)
            tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except Exception as e:
            raise TransactionSubmissionError(str(e)) from e

        return SubmissionResult(tx_hash=Web3.to_hex(tx_hash))
