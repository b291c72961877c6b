from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tokenbind.chain.network import ChainContext, resolve_network

LEDGER_ADDRESS = "0x4E656459ed25bF986Eea1196Bc1B00665401645d"
CONTRACT_ADDRESS = "0x1111111111111111111111111111111111111111"
TEMP_ADDRESS = "0x2222222222222222222222222222222222222222"

# Minimal init code: returns empty runtime code.
BYTECODE_HEX = "6080604052348015600f57600080fd5b50603f80601d6000396000f3fe"


class FakeSigner:
    """Records every transaction it is asked to sign."""

    def __init__(self, address: str = TEMP_ADDRESS) -> None:
        self._address = address
        self.signed: list[dict[str, Any]] = []

    @property
    def address(self) -> str:
        return self._address

    def sign_transaction(self, tx: dict[str, Any]) -> str:
        self.signed.append(tx)
        return "0x" + f"{len(self.signed):02x}" * 8


@pytest.fixture()
def ctx() -> ChainContext:
    return resolve_network("testnet", "http://127.0.0.1:8545")


@pytest.fixture()
def signer() -> FakeSigner:
    return FakeSigner()


@pytest.fixture()
def config_payload() -> dict[str, str]:
    return {
        "contract_data": BYTECODE_HEX,
        "symbol": "ABC",
        "bep2_symbol": "ABC-123",
        "ledger_account": LEDGER_ADDRESS,
    }


@pytest.fixture()
def config_file(tmp_path: Path, config_payload: dict[str, str]) -> Path:
    path = tmp_path / "bind.json"
    path.write_text(json.dumps(config_payload), encoding="utf-8")
    return path
