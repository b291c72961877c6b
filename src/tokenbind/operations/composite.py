"""
Deploy, hand over, refund - the one-shot path for a fresh token.

Steps run strictly in order and the first failure aborts the rest; the
chain keeps whatever was already applied.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..chain.network import ChainContext
from ..chain.rpc import RECEIPT_TIMEOUT
from ..config.models import BindConfig
from ..keys.signer import Signer
from .deploy import deploy_contract_from_temp_account
from .refund import refund_rest_bnb
from .transfer import TransferResult, transfer_token_and_ownership


@dataclass(frozen=True)
class DeployTransferRefundResult:
    contract_address: str
    transfer: TransferResult
    refund_tx: str


def deploy_transfer_refund(
    ctx: ChainContext,
    signer: Signer,
    config: BindConfig,
    timeout: float = RECEIPT_TIMEOUT,
) -> DeployTransferRefundResult:
    contract_address = deploy_contract_from_temp_account(
        ctx, signer, config.bytecode, timeout=timeout
    )
    transfer = transfer_token_and_ownership(
        ctx, signer, config.ledger_account, contract_address, timeout=timeout
    )
    refund_tx = refund_rest_bnb(ctx, signer, config.ledger_account, timeout=timeout)
    return DeployTransferRefundResult(
        contract_address=contract_address, transfer=transfer, refund_tx=refund_tx
    )
