from __future__ import annotations

from ..chain.contracts import DEFAULT_RELAY_FEE
from ..chain.network import ChainContext
from ..chain.rpc import RECEIPT_TIMEOUT
from ..config.models import BindConfig
from ..keys.ledger import LedgerSession
from .. import console
from .bind import BindOutcome, approve_and_bind


def approve_bind_from_ledger(
    ctx: ChainContext,
    session: LedgerSession,
    account_index: int,
    config: BindConfig,
    contract_address: str,
    peggy_amount: int,
    relay_fee: int = DEFAULT_RELAY_FEE,
    timeout: float = RECEIPT_TIMEOUT,
) -> BindOutcome:
    """
    Run the approve/bind step signed on the Ledger device.

    The caller-supplied peggy amount is approved instead of total supply,
    because the Ledger account may only hold part of it.
    """
    account = session.derive(account_index)
    console.address_link(ctx, f"Ledger account {account.index} ({account.path})", account.address)
    console.warning("Confirm each transaction on the device")
    return approve_and_bind(
        ctx,
        session.signer(account),
        contract_address,
        config.bep2_symbol,
        peggy_amount,
        symbol=config.symbol,
        relay_fee=relay_fee,
        timeout=timeout,
    )
