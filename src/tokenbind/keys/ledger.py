"""
Hardware wallet (Ledger) accounts.

Ledger accounts are the custodial destination for ownership and refunds,
and can sign the approve/bind step directly.  Device I/O goes through
ledgereth; the Ethereum app must be open on the device.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from eth_utils import to_checksum_address

from ..errors import LedgerError

# BIP-44 base path m/44'/60'/0'/0/0, the account component carries the index.
LEDGER_PATH_TEMPLATE = "44'/60'/{index}'/0/0"
DEFAULT_ACCOUNTS_SCRIPT = "ledger_accounts.sh"


def ledger_path(index: int) -> str:
    if index < 0:
        raise LedgerError(f"invalid ledger account index: {index}")
    return LEDGER_PATH_TEMPLATE.format(index=index)


@dataclass(frozen=True)
class LedgerAccount:
    index: int
    path: str
    address: str


class LedgerSession:
    """An open device session.  Use as a context manager."""

    def __init__(self, dongle: Any = None) -> None:
        self._dongle = dongle
        self._owns_dongle = dongle is None

    def __enter__(self) -> "LedgerSession":
        if self._dongle is None:
            from ledgereth.comms import init_dongle

            try:
                self._dongle = init_dongle()
            except Exception as exc:
                raise LedgerError(f"failed to open Ledger device: {exc}") from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._dongle is not None and self._owns_dongle:
            self._dongle.close()
            self._dongle = None

    @property
    def dongle(self) -> Any:
        if self._dongle is None:
            raise LedgerError("Ledger session is not open")
        return self._dongle

    def derive(self, index: int) -> LedgerAccount:
        from ledgereth.accounts import get_account_by_path

        path = ledger_path(index)
        try:
            account = get_account_by_path(path, dongle=self.dongle)
        except LedgerError:
            raise
        except Exception as exc:
            raise LedgerError(f"failed to derive account from ledger: {exc}") from exc
        return LedgerAccount(index=index, path=path, address=to_checksum_address(account.address))

    def derive_many(self, count: int) -> list[LedgerAccount]:
        """Derive accounts at indices 0..count-1."""
        return [self.derive(index) for index in range(count)]

    def signer(self, account: LedgerAccount) -> "LedgerSigner":
        return LedgerSigner(self, account)


class LedgerSigner:
    """Signs legacy transactions on the device at a fixed derivation path."""

    def __init__(self, session: LedgerSession, account: LedgerAccount) -> None:
        self._session = session
        self._account = account

    @property
    def address(self) -> str:
        return self._account.address

    def sign_transaction(self, tx: dict[str, Any]) -> str:
        from ledgereth.transactions import create_transaction

        try:
            signed = create_transaction(
                destination=tx["to"],
                amount=tx["value"],
                gas=tx["gas"],
                nonce=tx["nonce"],
                data=tx.get("data") or b"",
                gas_price=tx["gasPrice"],
                chain_id=tx["chainId"],
                sender_path=self._account.path,
                dongle=self._session.dongle,
            )
        except LedgerError:
            raise
        except Exception as exc:
            raise LedgerError(f"Ledger signing failed: {exc}") from exc

        raw = signed.raw_transaction()
        if isinstance(raw, (bytes, bytearray)):
            return "0x" + bytes(raw).hex()
        return raw if raw.startswith("0x") else "0x" + raw

    def __repr__(self) -> str:
        return f"LedgerSigner({self.address} @ {self._account.path})"


def write_accounts_script(
    accounts: list[LedgerAccount],
    output: Optional[Path] = None,
    variable: str = "ledger_accounts",
) -> Path:
    """Write a shell script exporting the derived addresses as an array."""
    output = output or Path(DEFAULT_ACCOUNTS_SCRIPT)
    quoted = " ".join(shlex.quote(a.address) for a in accounts)
    lines = [
        "#!/usr/bin/env bash",
        f"{variable}=({quoted})",
        f"export {variable}",
    ]
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return output
