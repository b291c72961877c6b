"""
Approve / bind - hand the token supply to TokenManager and bind the
BEP20 contract to its BEP2 symbol.

State machine:
    APPROVED -> BIND_SUBMITTED -> BIND_CONFIRMED   (proceed)
                               -> BIND_REJECTED    (rejectBind sent, stop)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..chain.abi import TOKEN_MANAGER_ADDRESS
from ..chain.contracts import DEFAULT_RELAY_FEE, Bep20, Ownable, TokenManager
from ..chain.network import ChainContext
from ..chain.rpc import RECEIPT_TIMEOUT, receipt_status
from ..config.models import BindConfig
from ..keys.signer import Signer
from .. import console
from .receipts import confirm


class BindState(enum.Enum):
    APPROVED = "approved"
    BIND_SUBMITTED = "bind-submitted"
    BIND_CONFIRMED = "bind-confirmed"
    BIND_REJECTED = "bind-rejected"


@dataclass
class BindOutcome:
    state: BindState
    approve_tx: str
    bind_tx: Optional[str] = None
    reject_tx: Optional[str] = None
    reject_status: Optional[int] = None
    ownership_tx: Optional[str] = None

    @property
    def bound(self) -> bool:
        return self.state is BindState.BIND_CONFIRMED


def approve_and_bind(
    ctx: ChainContext,
    signer: Signer,
    contract_address: str,
    bep2_symbol: str,
    amount: int,
    symbol: str = "",
    relay_fee: int = DEFAULT_RELAY_FEE,
    timeout: float = RECEIPT_TIMEOUT,
) -> BindOutcome:
    """
    Approve TokenManager for ``amount`` and submit approveBind.

    A failed approveBind is compensated with rejectBind; the outcome
    reports which branch was taken.
    """
    token = Bep20(ctx, contract_address)
    token_manager = TokenManager(ctx)

    console.step(
        f"Approve {amount}:{symbol or bep2_symbol} to TokenManager "
        f"{TOKEN_MANAGER_ADDRESS} from {signer.address}"
    )
    approve_tx = token.approve(signer, TOKEN_MANAGER_ADDRESS, amount)
    confirm(ctx, "Approve token to tokenManager", approve_tx, timeout=timeout)
    outcome = BindOutcome(state=BindState.APPROVED, approve_tx=approve_tx)

    console.step(f"ApproveBind {token.address} with {bep2_symbol}")
    outcome.bind_tx = token_manager.approve_bind(signer, token.address, bep2_symbol, relay_fee)
    outcome.state = BindState.BIND_SUBMITTED
    receipt = confirm(ctx, "ApproveBind", outcome.bind_tx, timeout=timeout, require_success=False)

    console.step("Track approveBind Tx status")
    if receipt_status(receipt) == 1:
        outcome.state = BindState.BIND_CONFIRMED
        console.success("Approve Bind Succeeded")
        return outcome

    console.failure("Approve Bind Failed")
    outcome.reject_tx = token_manager.reject_bind(signer, token.address, bep2_symbol, relay_fee)
    reject_receipt = confirm(
        ctx, "RejectBind", outcome.reject_tx, timeout=timeout, require_success=False
    )
    outcome.reject_status = receipt_status(reject_receipt)
    outcome.state = BindState.BIND_REJECTED
    console.step("Track rejectBind Tx status")
    console.info("reject bind tx receipt status", outcome.reject_status)
    console.ruler()
    return outcome


def approve_bind_and_transfer_ownership(
    ctx: ChainContext,
    signer: Signer,
    config: BindConfig,
    contract_address: str,
    relay_fee: int = DEFAULT_RELAY_FEE,
    timeout: float = RECEIPT_TIMEOUT,
) -> BindOutcome:
    token = Bep20(ctx, contract_address)
    total_supply = token.total_supply()
    console.info("Total Supply", total_supply)

    outcome = approve_and_bind(
        ctx,
        signer,
        token.address,
        config.bep2_symbol,
        total_supply,
        symbol=config.symbol,
        relay_fee=relay_fee,
        timeout=timeout,
    )
    if not outcome.bound:
        return outcome

    console.step(f"Transfer ownership of {token.address} to ledger account {config.ledger_account}")
    outcome.ownership_tx = Ownable(ctx, token.address).transfer_ownership(
        signer, config.ledger_account
    )
    confirm(ctx, "Transfer ownership", outcome.ownership_tx, timeout=timeout)
    console.ruler()
    return outcome
