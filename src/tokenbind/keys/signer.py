"""
Signing identities.

Transactions are built as plain dicts and handed to a Signer, which
returns the raw signed transaction ready for eth_sendRawTransaction.
"""

from __future__ import annotations

from typing import Any, Protocol

from eth_account.signers.local import LocalAccount


class Signer(Protocol):
    @property
    def address(self) -> str:
        ...

    def sign_transaction(self, tx: dict[str, Any]) -> str:
        ...


class KeystoreSigner:
    """Signs with an unlocked software-keystore account."""

    def __init__(self, account: LocalAccount) -> None:
        self._account = account

    @property
    def address(self) -> str:
        return self._account.address

    def sign_transaction(self, tx: dict[str, Any]) -> str:
        signed = self._account.sign_transaction(tx)
        return "0x" + bytes(signed.raw_transaction).hex()

    def __repr__(self) -> str:
        return f"KeystoreSigner({self.address})"
