from __future__ import annotations

from ..chain.network import ChainContext
from ..chain.rpc import RECEIPT_TIMEOUT
from ..chain.tx import deploy_contract
from ..errors import TransactionFailedError
from ..keys.signer import Signer
from .. import console
from .receipts import confirm


def deploy_contract_from_temp_account(
    ctx: ChainContext,
    signer: Signer,
    bytecode: bytes,
    timeout: float = RECEIPT_TIMEOUT,
) -> str:
    """Deploy the BEP20 contract and return its address."""
    console.step(f"Deploy BEP20 contract from account {signer.address}")
    tx_hash = deploy_contract(ctx, signer, bytecode)
    receipt = confirm(ctx, "Deploy BEP20 contract", tx_hash, timeout=timeout)

    contract_address = receipt.get("contractAddress")
    if not contract_address:
        raise TransactionFailedError(
            f"no contract address in deployment receipt: {tx_hash}", tx_hash=tx_hash
        )
    console.address_link(ctx, "The deployed BEP20 contract address is", contract_address)
    console.ruler()
    return contract_address
