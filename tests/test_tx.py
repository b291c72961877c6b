"""Tests for transaction building and sending."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from eth_account import Account
from eth_utils import to_checksum_address

from tokenbind.chain.network import ChainContext
from tokenbind.chain.tx import (
    DEPLOY_GAS_LIMIT,
    TRANSFER_GAS_LIMIT,
    build_tx,
    deploy_contract,
    send_contract_tx,
    send_value,
)
from tokenbind.chain.abi import BEP20_ABI
from tokenbind.keys.signer import KeystoreSigner

from conftest import FakeSigner, LEDGER_ADDRESS

GAS_PRICE = 5 * 10**9


@pytest.fixture()
def chain():
    with patch("tokenbind.chain.tx.get_nonce", return_value=7) as nonce, patch(
        "tokenbind.chain.tx.get_gas_price", return_value=GAS_PRICE
    ) as gas_price, patch(
        "tokenbind.chain.tx.send_raw_transaction", return_value="0xhash"
    ) as send_raw:
        yield {"nonce": nonce, "gas_price": gas_price, "send_raw": send_raw}


class TestBuildTx:
    def test_legacy_fields(self, ctx: ChainContext, signer: FakeSigner, chain) -> None:
        tx = build_tx(ctx, signer, to=LEDGER_ADDRESS.lower(), value=3)
        assert tx["to"] == to_checksum_address(LEDGER_ADDRESS)
        assert tx["nonce"] == 7
        assert tx["gasPrice"] == GAS_PRICE
        assert tx["chainId"] == 97
        assert tx["value"] == 3
        assert "maxFeePerGas" not in tx

    def test_explicit_gas_price_skips_lookup(
        self, ctx: ChainContext, signer: FakeSigner, chain
    ) -> None:
        tx = build_tx(ctx, signer, to=LEDGER_ADDRESS, gas_price=1)
        assert tx["gasPrice"] == 1
        chain["gas_price"].assert_not_called()


class TestSend:
    def test_deploy_has_no_recipient(self, ctx: ChainContext, signer: FakeSigner, chain) -> None:
        tx_hash = deploy_contract(ctx, signer, b"\x60\x80")
        assert tx_hash == "0xhash"
        tx = signer.signed[0]
        assert "to" not in tx
        assert tx["data"] == "0x6080"
        assert tx["gas"] == DEPLOY_GAS_LIMIT

    def test_deploy_rejects_empty_bytecode(self, ctx: ChainContext, signer: FakeSigner) -> None:
        with pytest.raises(ValueError):
            deploy_contract(ctx, signer, b"")

    def test_send_value(self, ctx: ChainContext, signer: FakeSigner, chain) -> None:
        send_value(ctx, signer, LEDGER_ADDRESS, 12345, gas_price=GAS_PRICE)
        tx = signer.signed[0]
        assert tx["value"] == 12345
        assert tx["gas"] == TRANSFER_GAS_LIMIT
        assert tx["to"] == to_checksum_address(LEDGER_ADDRESS)

    def test_contract_call_with_receipt(
        self, ctx: ChainContext, signer: FakeSigner, chain
    ) -> None:
        with patch(
            "tokenbind.chain.tx.wait_for_receipt", return_value={"status": "0x0"}
        ):
            result = send_contract_tx(
                ctx,
                signer,
                LEDGER_ADDRESS,
                "transfer",
                [LEDGER_ADDRESS, 1],
                abi=BEP20_ABI,
                wait=True,
            )
        assert result["tx_hash"] == "0xhash"
        assert result["status"] == 0
        assert signer.signed[0]["data"].startswith("0xa9059cbb")

    def test_real_signature_is_sent(self, ctx: ChainContext, chain) -> None:
        account = Account.create()
        send_value(ctx, KeystoreSigner(account), LEDGER_ADDRESS, 1)
        raw = chain["send_raw"].call_args.args[1]
        assert Account.recover_transaction(raw) == account.address
