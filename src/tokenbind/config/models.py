from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import ConfigError
from ..utils import is_address
from .schemas import BIND_CONFIG_SCHEMA, SchemaRegistry, SchemaValidationError, load_json

EXAMPLE_ADDRESS = "0x4E656459ed25bF986Eea1196Bc1B00665401645d"
_LEDGER_ACCOUNT_MESSAGE = f"invalid ledger account, expect bsc address, like {EXAMPLE_ADDRESS}"

# Whole bytes of hex digits, nothing else. bytes.fromhex alone skips whitespace.
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def decode_bytecode(contract_data: str) -> bytes:
    """Decode hex contract bytecode, tolerating a 0x prefix."""
    data = contract_data[2:] if contract_data.startswith(("0x", "0X")) else contract_data
    if _HEX_RE.fullmatch(data) is None:
        raise ConfigError("invalid contract byte code: expect an even number of hex digits")
    return bytes.fromhex(data)


@dataclass(frozen=True)
class BindConfig:
    contract_data: str
    bep2_symbol: str
    ledger_account: str
    symbol: str = ""

    @classmethod
    def from_dict(cls, payload: Any, registry: SchemaRegistry | None = None) -> "BindConfig":
        registry = registry or SchemaRegistry.default()
        try:
            registry.validate_instance(payload, BIND_CONFIG_SCHEMA)
        except SchemaValidationError as exc:
            raise ConfigError(_describe(exc)) from exc

        if not is_address(payload["ledger_account"]):
            raise ConfigError(_LEDGER_ACCOUNT_MESSAGE)

        # Fails on odd length, whitespace or non-hex digits.
        decode_bytecode(payload["contract_data"])

        return cls(
            contract_data=payload["contract_data"],
            bep2_symbol=payload["bep2_symbol"],
            ledger_account=payload["ledger_account"],
            symbol=payload.get("symbol", ""),
        )

    @classmethod
    def from_path(cls, path: Path, registry: SchemaRegistry | None = None) -> "BindConfig":
        try:
            payload = load_json(path)
        except FileNotFoundError as exc:
            raise ConfigError(f"config file not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"config file is not valid JSON: {exc}") from exc
        return cls.from_dict(payload, registry=registry)

    @property
    def bytecode(self) -> bytes:
        return decode_bytecode(self.contract_data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "contract_data": self.contract_data,
            "symbol": self.symbol,
            "bep2_symbol": self.bep2_symbol,
            "ledger_account": self.ledger_account,
        }


def _describe(exc: SchemaValidationError) -> str:
    for error in exc.errors:
        if error.startswith("ledger_account"):
            return _LEDGER_ACCOUNT_MESSAGE
        if error.startswith("bep2_symbol") or "'bep2_symbol' is a required" in error:
            return "missing bep2 token symbol"
        if error.startswith("contract_data") or "'contract_data' is a required" in error:
            return "invalid contract byte code: missing contract_data"
    return str(exc)


__all__ = ["BindConfig", "decode_bytecode"]
