"""
Stake contract ABI.

Only the entries used by the deposit operation: the ERC20-style token
balance read and the stake deposit write.
"""

STAKE_CONTRACT_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "_user", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": False,
        "inputs": [],
        "name": "depositStake",
        "outputs": [],
        "payable": False,
        "stateMutability": "nonpayable",
        "type": "function",
    },
]
