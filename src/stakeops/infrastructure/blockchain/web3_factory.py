"""
AsyncWeb3 construction from node settings.
"""

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3


def create_web3(node_url: str, timeout: float = 15.0) -> AsyncWeb3:
    """
    Build AsyncWeb3 bound to an HTTP JSON-RPC node.

    Args:
        node_url: Node RPC endpoint URL
        timeout: Total request timeout in seconds

    Returns:
        AsyncWeb3 instance (session opened lazily by the provider)
    """
    provider = AsyncHTTPProvider(
        node_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)},
    )
    return AsyncWeb3(provider)
