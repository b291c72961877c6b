"""
Network selection.

Resolves a ``mainnet`` / ``testnet`` flag into an immutable ChainContext
that is passed explicitly to every chain call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import ConfigError

MAINNET = "mainnet"
TESTNET = "testnet"

MAINNET_RPC_URL = "https://bsc-dataseed1.binance.org:443"
MAINNET_CHAIN_ID = 56
MAINNET_EXPLORER = "https://bscscan.com"

TESTNET_RPC_URL = "https://data-seed-prebsc-1-s1.binance.org:8545"
TESTNET_CHAIN_ID = 97
TESTNET_EXPLORER = "https://testnet.bscscan.com"


@dataclass(frozen=True)
class ChainContext:
    network: str
    rpc_url: str
    chain_id: int
    explorer_url: str

    def tx_url(self, tx_hash: str) -> str:
        return f"{self.explorer_url}/tx/{tx_hash}"

    def address_url(self, address: str) -> str:
        return f"{self.explorer_url}/address/{address}"


_NETWORKS: dict[str, ChainContext] = {
    MAINNET: ChainContext(MAINNET, MAINNET_RPC_URL, MAINNET_CHAIN_ID, MAINNET_EXPLORER),
    TESTNET: ChainContext(TESTNET, TESTNET_RPC_URL, TESTNET_CHAIN_ID, TESTNET_EXPLORER),
}


def resolve_network(network_type: str, rpc_url: Optional[str] = None) -> ChainContext:
    """
    Resolve the chain context for a network type.

    Args:
        network_type: ``mainnet`` or ``testnet``
        rpc_url: Optional endpoint overriding the public default

    Returns:
        ChainContext for the network

    Raises:
        ConfigError: If the network type is unknown
    """
    try:
        ctx = _NETWORKS[network_type]
    except KeyError:
        raise ConfigError(
            f"unknown network type {network_type!r}, expect {MAINNET} or {TESTNET}"
        ) from None
    if rpc_url:
        ctx = ChainContext(ctx.network, rpc_url, ctx.chain_id, ctx.explorer_url)
    return ctx
