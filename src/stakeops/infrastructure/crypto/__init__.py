"""
Crypto infrastructure.
"""

from stakeops.infrastructure.crypto.eth_key_manager import EthKeyManager

__all__ = ["EthKeyManager"]
