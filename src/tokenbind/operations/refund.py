from __future__ import annotations

from ..chain.network import ChainContext
from ..chain.rpc import RECEIPT_TIMEOUT, get_balance, get_gas_price
from ..chain.tx import TRANSFER_GAS_LIMIT, send_value
from ..errors import InsufficientFundsError
from ..keys.signer import Signer
from .. import console
from .receipts import confirm

WEI_PER_BNB = 10**18


def compute_refund(balance: int, gas_price: int, gas_limit: int = TRANSFER_GAS_LIMIT) -> int:
    """
    Spendable balance after reserving gas for the refund transfer itself.

    Raises:
        InsufficientFundsError: If nothing is left once gas is reserved
    """
    reserve = gas_price * gas_limit
    if balance <= reserve:
        raise InsufficientFundsError(
            f"balance {balance} wei does not cover the gas reserve of {reserve} wei"
        )
    return balance - reserve


def refund_rest_bnb(
    ctx: ChainContext,
    signer: Signer,
    refund_address: str,
    timeout: float = RECEIPT_TIMEOUT,
) -> str:
    """Send all remaining BNB, less the transfer's own gas, to refund_address."""
    balance = get_balance(ctx.rpc_url, signer.address)
    gas_price = get_gas_price(ctx.rpc_url)
    amount = compute_refund(balance, gas_price)

    console.step(
        f"Refund {amount / WEI_PER_BNB:.18f} BNB from {signer.address} to {refund_address}"
    )
    tx_hash = send_value(ctx, signer, refund_address, amount, gas_price=gas_price)
    confirm(ctx, "Refund", tx_hash, timeout=timeout)
    console.ruler()
    return tx_hash
