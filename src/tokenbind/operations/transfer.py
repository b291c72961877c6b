from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..chain.contracts import Bep20, Ownable
from ..chain.network import ChainContext
from ..chain.rpc import RECEIPT_TIMEOUT
from ..keys.signer import Signer
from .. import console
from .receipts import confirm


@dataclass(frozen=True)
class TransferResult:
    amount: int
    transfer_tx: Optional[str]
    ownership_tx: str


def transfer_token_and_ownership(
    ctx: ChainContext,
    signer: Signer,
    token_owner: str,
    contract_address: str,
    timeout: float = RECEIPT_TIMEOUT,
) -> TransferResult:
    """Move the signer's whole token balance and the contract ownership to token_owner."""
    token = Bep20(ctx, contract_address)
    console.info("Total Supply", token.total_supply())

    balance = token.balance_of(signer.address)
    transfer_tx = None
    if balance > 0:
        console.step(f"Transfer {balance} token to {token_owner}")
        transfer_tx = token.transfer(signer, token_owner, balance)
        confirm(ctx, "Transfer token", transfer_tx, timeout=timeout)
    else:
        console.warning(f"{signer.address} holds no tokens, skipping token transfer")

    console.step(f"Transfer ownership to {token_owner}")
    ownership_tx = Ownable(ctx, token.address).transfer_ownership(signer, token_owner)
    confirm(ctx, "Transfer ownership", ownership_tx, timeout=timeout)
    console.ruler()
    return TransferResult(amount=balance, transfer_tx=transfer_tx, ownership_tx=ownership_tx)
