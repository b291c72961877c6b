"""
Chain interaction layer: network selection, JSON-RPC client, ABI
encoding, transaction building and contract bindings.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""

from .network import ChainContext, resolve_network

__all__ = ["ChainContext", "resolve_network"]
