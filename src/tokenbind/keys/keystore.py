"""
Temporary account provisioning.

The temporary account is a disposable geth-compatible (V3) keystore
entry used to deploy and bind.  The keystore directory holds zero or
one key file; anything more is a configuration error.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount

from ..errors import KeystoreError
from .signer import KeystoreSigner

DEFAULT_KEYSTORE_DIR = "bind_keystore"
DEFAULT_PASSWORD = "12345678"


@dataclass(frozen=True)
class TemporaryAccount:
    account: LocalAccount
    keyfile: Path
    created: bool

    @property
    def address(self) -> str:
        return self.account.address

    def signer(self) -> KeystoreSigner:
        return KeystoreSigner(self.account)


def keystore_files(keystore_dir: Path) -> list[Path]:
    """Key files in a keystore directory, ignoring dotfiles and sub-directories."""
    if not keystore_dir.is_dir():
        return []
    return sorted(
        p for p in keystore_dir.iterdir() if p.is_file() and not p.name.startswith(".")
    )


def _keyfile_name(address: str) -> str:
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S.%f000Z")
    return f"UTC--{ts}--{address.lower().removeprefix('0x')}"


def create_account(
    keystore_dir: Path,
    password: str,
    iterations: Optional[int] = None,
) -> TemporaryAccount:
    """
    Create a new account and write its encrypted key file.

    Args:
        keystore_dir: Directory to write the key file into (created if missing)
        password: Keystore encryption password
        iterations: scrypt work factor (default: eth-account's standard N)

    Returns:
        The new, unlocked TemporaryAccount
    """
    account = Account.create()
    keyfile_json = Account.encrypt(account.key, password, iterations=iterations)

    keystore_dir.mkdir(parents=True, exist_ok=True)
    keyfile = keystore_dir / _keyfile_name(account.address)
    keyfile.write_text(json.dumps(keyfile_json), encoding="utf-8")
    if os.name != "nt":
        keyfile.chmod(0o600)

    return TemporaryAccount(account=account, keyfile=keyfile, created=True)


def unlock_account(keyfile: Path, password: str) -> TemporaryAccount:
    try:
        keyfile_json = json.loads(keyfile.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise KeystoreError(f"cannot read key file {keyfile}: {exc}") from exc

    try:
        private_key = Account.decrypt(keyfile_json, password)
    except (ValueError, KeyError, TypeError) as exc:
        raise KeystoreError(f"cannot unlock key file {keyfile}: {exc}") from exc

    return TemporaryAccount(
        account=Account.from_key(private_key), keyfile=keyfile, created=False
    )


def get_or_create_temp_account(
    keystore_dir: Path,
    password: str = DEFAULT_PASSWORD,
    iterations: Optional[int] = None,
) -> TemporaryAccount:
    """
    Load the sole temporary account, creating it when the keystore is empty.

    Raises:
        KeystoreError: If the directory holds more than one key file, or
            the existing key cannot be unlocked
    """
    files = keystore_files(keystore_dir)
    if not files:
        try:
            return create_account(keystore_dir, password, iterations=iterations)
        except OSError as exc:
            raise KeystoreError(f"cannot create key file in {keystore_dir}: {exc}") from exc
    if len(files) == 1:
        return unlock_account(files[0], password)
    raise KeystoreError(
        f"expect only one or zero keystore file in {keystore_dir.resolve()}, found {len(files)}"
    )
