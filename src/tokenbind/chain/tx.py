"""
Transaction builder - build, sign, and send BSC transactions.

Transactions are legacy (gasPrice) transactions; BSC does not price
EIP-1559 fees.  Signing is delegated to a Signer so the same path serves
the keystore account and the Ledger device.
"""

from __future__ import annotations

from typing import Any, Optional

from eth_utils import to_checksum_address

from ..keys.signer import Signer
from .abi import encode_call
from .network import ChainContext
from .rpc import (
    RECEIPT_TIMEOUT,
    get_gas_price,
    get_nonce,
    receipt_status,
    send_raw_transaction,
    wait_for_receipt,
)

DEFAULT_GAS_LIMIT = 500_000
DEPLOY_GAS_LIMIT = 4_700_000
TRANSFER_GAS_LIMIT = 21_000


def build_tx(
    ctx: ChainContext,
    signer: Signer,
    to: Optional[str],
    data: str = "0x",
    value: int = 0,
    gas_limit: int = DEFAULT_GAS_LIMIT,
    gas_price: Optional[int] = None,
) -> dict[str, Any]:
    """
    Build an unsigned legacy transaction.

    Args:
        ctx: Chain context
        signer: Sending identity (for nonce lookup)
        to: Recipient; None for contract creation
        data: 0x-prefixed calldata or init code
        value: Native value in wei
        gas_limit: Gas limit
        gas_price: Gas price in wei (default: eth_gasPrice)

    Returns:
        Unsigned transaction dict
    """
    tx: dict[str, Any] = {
        "data": data,
        "value": value,
        "nonce": get_nonce(ctx.rpc_url, signer.address),
        "gas": gas_limit,
        "gasPrice": gas_price if gas_price is not None else get_gas_price(ctx.rpc_url),
        "chainId": ctx.chain_id,
    }
    if to is not None:
        tx["to"] = to_checksum_address(to)
    return tx


def sign_and_send(
    ctx: ChainContext,
    signer: Signer,
    tx: dict[str, Any],
    wait: bool = False,
    timeout: float = RECEIPT_TIMEOUT,
) -> dict[str, Any]:
    """
    Sign a transaction and send it.

    Returns:
        Dict with tx_hash, plus receipt and status when wait is set
    """
    raw_tx = signer.sign_transaction(tx)
    tx_hash = send_raw_transaction(ctx.rpc_url, raw_tx)
    result: dict[str, Any] = {"tx_hash": tx_hash}

    if wait:
        receipt = wait_for_receipt(ctx.rpc_url, tx_hash, timeout=timeout)
        result["receipt"] = receipt
        result["status"] = receipt_status(receipt)

    return result


def send_contract_tx(
    ctx: ChainContext,
    signer: Signer,
    contract_address: str,
    function_name: str,
    args: list,
    abi: list,
    value: int = 0,
    gas_limit: int = DEFAULT_GAS_LIMIT,
    wait: bool = False,
) -> dict[str, Any]:
    """Build, sign, and send a contract call transaction."""
    tx = build_tx(
        ctx,
        signer,
        to=contract_address,
        data=encode_call(abi, function_name, args),
        value=value,
        gas_limit=gas_limit,
    )
    return sign_and_send(ctx, signer, tx, wait=wait)


def deploy_contract(
    ctx: ChainContext,
    signer: Signer,
    bytecode: bytes,
    gas_limit: int = DEPLOY_GAS_LIMIT,
) -> str:
    """
    Submit a contract-creation transaction carrying the init code.

    Returns:
        Transaction hash; the contract address is read from the receipt
    """
    if not bytecode:
        raise ValueError("empty contract bytecode")
    tx = build_tx(ctx, signer, to=None, data="0x" + bytecode.hex(), gas_limit=gas_limit)
    return sign_and_send(ctx, signer, tx)["tx_hash"]


def send_value(
    ctx: ChainContext,
    signer: Signer,
    to: str,
    value: int,
    gas_price: Optional[int] = None,
) -> str:
    """Send a plain native-currency transfer and return its hash."""
    tx = build_tx(
        ctx,
        signer,
        to=to,
        value=value,
        gas_limit=TRANSFER_GAS_LIMIT,
        gas_price=gas_price,
    )
    return sign_and_send(ctx, signer, tx)["tx_hash"]
