from __future__ import annotations

from ..chain.network import ChainContext
from ..chain.rpc import RECEIPT_TIMEOUT, receipt_status, wait_for_receipt
from ..errors import TransactionFailedError
from .. import console


def confirm(
    ctx: ChainContext,
    label: str,
    tx_hash: str,
    timeout: float = RECEIPT_TIMEOUT,
    require_success: bool = True,
) -> dict:
    """
    Print the explorer link for a submitted transaction and wait until mined.

    Raises:
        TransactionFailedError: If require_success is set and the
            transaction reverted
    """
    console.tx_link(ctx, f"{label} txHash", tx_hash)
    receipt = wait_for_receipt(ctx.rpc_url, tx_hash, timeout=timeout)
    if require_success and receipt_status(receipt) != 1:
        raise TransactionFailedError(f"{label} transaction failed: {tx_hash}", tx_hash=tx_hash)
    return receipt
