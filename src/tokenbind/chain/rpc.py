"""
JSON-RPC client for BNB Smart Chain.

Lightweight alternative to web3.py: uses httpx for HTTP + eth-abi for encoding.
Supports read-only contract calls, balance queries, and transaction receipt polling.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from ..errors import ChainError
from .abi import decode_result, encode_call

DEFAULT_TIMEOUT = 30
RECEIPT_TIMEOUT = 120
RECEIPT_POLL_INTERVAL = 2.0


def _rpc_call(rpc_url: str, method: str, params: list) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        rpc_url: RPC endpoint URL
        method: RPC method name (e.g., "eth_call")
        params: RPC parameters

    Returns:
        Result field from the RPC response

    Raises:
        ChainError: If the transport fails or the node returns an error
    """
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }

    try:
        with httpx.Client(timeout=DEFAULT_TIMEOUT) as client:
            response = client.post(rpc_url, json=payload)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPError as exc:
        raise ChainError(f"RPC {method} failed: {exc}") from exc

    if "error" in data:
        raise ChainError(f"RPC error: {data['error']}")

    return data.get("result")


def read_contract(
    rpc_url: str,
    contract_address: str,
    function_name: str,
    args: Optional[list] = None,
    abi: Optional[list] = None,
) -> Any:
    """
    Read from a smart contract (eth_call).

    Args:
        rpc_url: RPC endpoint URL
        contract_address: 0x-prefixed contract address
        function_name: Function to call
        args: Function arguments (default: [])
        abi: Contract ABI

    Returns:
        Decoded return value(s), or None for empty return data
    """
    if abi is None:
        raise ValueError("abi must be provided")

    calldata = encode_call(abi, function_name, args or [])
    result = _rpc_call(
        rpc_url,
        "eth_call",
        [{"to": contract_address, "data": calldata}, "latest"],
    )

    if result is None or result == "0x":
        return None

    return decode_result(abi, function_name, result)


def get_balance(rpc_url: str, address: str) -> int:
    """Native balance of an address, in wei."""
    result = _rpc_call(rpc_url, "eth_getBalance", [address, "latest"])
    return int(result, 16)


def get_nonce(rpc_url: str, address: str) -> int:
    """Next nonce for an address, counting pending transactions."""
    result = _rpc_call(rpc_url, "eth_getTransactionCount", [address, "pending"])
    return int(result, 16)


def get_gas_price(rpc_url: str) -> int:
    result = _rpc_call(rpc_url, "eth_gasPrice", [])
    return int(result, 16)


def send_raw_transaction(rpc_url: str, raw_tx: str) -> str:
    """
    Send a signed raw transaction.

    Args:
        rpc_url: RPC endpoint URL
        raw_tx: 0x-prefixed hex encoded signed transaction

    Returns:
        Transaction hash (0x-prefixed hex)
    """
    return _rpc_call(rpc_url, "eth_sendRawTransaction", [raw_tx])


def get_receipt(rpc_url: str, tx_hash: str) -> Optional[dict]:
    return _rpc_call(rpc_url, "eth_getTransactionReceipt", [tx_hash])


def wait_for_receipt(
    rpc_url: str,
    tx_hash: str,
    timeout: float = RECEIPT_TIMEOUT,
    poll_interval: float = RECEIPT_POLL_INTERVAL,
) -> dict:
    """
    Wait for a transaction receipt.

    Args:
        rpc_url: RPC endpoint URL
        tx_hash: Transaction hash
        timeout: Maximum wait time in seconds
        poll_interval: Polling interval in seconds

    Returns:
        Transaction receipt dict

    Raises:
        ChainError: If the receipt is not found within timeout
    """
    deadline = time.monotonic() + timeout
    while True:
        receipt = get_receipt(rpc_url, tx_hash)
        if receipt is not None:
            return receipt
        if time.monotonic() >= deadline:
            break
        time.sleep(poll_interval)

    raise ChainError(f"Transaction {tx_hash} not confirmed within {timeout}s")


def receipt_status(receipt: dict) -> int:
    """Receipt status as an int: 1 for success, 0 for revert."""
    status = receipt.get("status", "0x0")
    if isinstance(status, int):
        return status
    return int(status, 16)
