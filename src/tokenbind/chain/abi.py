"""
Fixed ABIs for the three contracts the tool talks to, plus call
encoding / result decoding on top of eth-abi.
"""

from __future__ import annotations

from typing import Any

from eth_abi import decode, encode
from eth_hash.auto import keccak

TOKEN_MANAGER_ADDRESS = "0x0000000000000000000000000000000000001008"

BEP20_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "totalSupply",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "approve",
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "recipient", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
    },
]

OWNABLE_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "transferOwnership",
        "inputs": [{"name": "newOwner", "type": "address"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
]

TOKEN_MANAGER_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "approveBind",
        "inputs": [
            {"name": "contractAddr", "type": "address"},
            {"name": "bep2Symbol", "type": "string"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "payable",
    },
    {
        "type": "function",
        "name": "rejectBind",
        "inputs": [
            {"name": "contractAddr", "type": "address"},
            {"name": "bep2Symbol", "type": "string"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "payable",
    },
]


def find_function(abi: list[dict[str, Any]], function_name: str) -> dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def function_selector(abi: list[dict[str, Any]], function_name: str) -> bytes:
    """First 4 bytes of keccak256 over the canonical signature."""
    func = find_function(abi, function_name)
    input_types = [inp["type"] for inp in func.get("inputs", [])]
    sig = f"{function_name}({','.join(input_types)})"
    return keccak(sig.encode("utf-8"))[:4]


def encode_call(abi: list[dict[str, Any]], function_name: str, args: list) -> str:
    """ABI-encode a function call to 0x-prefixed hex calldata."""
    func = find_function(abi, function_name)
    input_types = [inp["type"] for inp in func.get("inputs", [])]
    if len(args) != len(input_types):
        raise ValueError(
            f"{function_name} expects {len(input_types)} arguments, got {len(args)}"
        )
    encoded_args = encode(input_types, args) if args else b""
    return "0x" + function_selector(abi, function_name).hex() + encoded_args.hex()


def decode_result(abi: list[dict[str, Any]], function_name: str, data: str) -> Any:
    """
    ABI-decode the return data of a call.

    Returns a single value for single-output functions, a tuple otherwise,
    and None for functions without outputs.
    """
    func = find_function(abi, function_name)
    output_types = [out["type"] for out in func.get("outputs", [])]
    if not output_types:
        return None

    raw = bytes.fromhex(data[2:] if data.startswith("0x") else data)
    decoded = decode(output_types, raw)
    if len(decoded) == 1:
        return decoded[0]
    return decoded
