"""Tests for temporary account provisioning."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from eth_account import Account

from tokenbind.errors import KeystoreError
from tokenbind.keys.keystore import (
    create_account,
    get_or_create_temp_account,
    keystore_files,
)
from tokenbind.keys.signer import KeystoreSigner

# Low scrypt work factor keeps the tests fast.
N = 2**4
PASSWORD = "12345678"


class TestGetOrCreateTempAccount:
    def test_empty_directory_creates_one_account(self, tmp_path: Path) -> None:
        keystore = tmp_path / "bind_keystore"
        temp = get_or_create_temp_account(keystore, PASSWORD, iterations=N)

        assert temp.created
        files = keystore_files(keystore)
        assert files == [temp.keyfile]
        assert temp.keyfile.name.startswith("UTC--")
        assert temp.keyfile.name.endswith(temp.address.lower()[2:])

        # The file decrypts back to the same key
        keyfile_json = json.loads(temp.keyfile.read_text(encoding="utf-8"))
        assert Account.decrypt(keyfile_json, PASSWORD) == temp.account.key

    def test_single_file_is_loaded(self, tmp_path: Path) -> None:
        created = create_account(tmp_path, PASSWORD, iterations=N)
        loaded = get_or_create_temp_account(tmp_path, PASSWORD)

        assert not loaded.created
        assert loaded.address == created.address
        assert loaded.keyfile == created.keyfile
        assert len(keystore_files(tmp_path)) == 1

    def test_second_run_reuses_account(self, tmp_path: Path) -> None:
        first = get_or_create_temp_account(tmp_path, PASSWORD, iterations=N)
        second = get_or_create_temp_account(tmp_path, PASSWORD, iterations=N)
        assert second.address == first.address

    def test_two_files_is_fatal(self, tmp_path: Path) -> None:
        create_account(tmp_path, PASSWORD, iterations=N)
        create_account(tmp_path, PASSWORD, iterations=N)
        with pytest.raises(KeystoreError, match="expect only one or zero keystore file"):
            get_or_create_temp_account(tmp_path, PASSWORD, iterations=N)

    def test_wrong_password(self, tmp_path: Path) -> None:
        create_account(tmp_path, PASSWORD, iterations=N)
        with pytest.raises(KeystoreError, match="cannot unlock"):
            get_or_create_temp_account(tmp_path, "wrong-password")

    def test_corrupt_key_file(self, tmp_path: Path) -> None:
        (tmp_path / "UTC--broken").write_text("not json", encoding="utf-8")
        with pytest.raises(KeystoreError, match="cannot read"):
            get_or_create_temp_account(tmp_path, PASSWORD)

    def test_hidden_files_and_directories_ignored(self, tmp_path: Path) -> None:
        (tmp_path / ".DS_Store").write_text("", encoding="utf-8")
        (tmp_path / "backup").mkdir()
        temp = get_or_create_temp_account(tmp_path, PASSWORD, iterations=N)
        assert temp.created
        assert keystore_files(tmp_path) == [temp.keyfile]


class TestKeystoreSigner:
    def test_signature_recovers_to_account(self) -> None:
        account = Account.create()
        signer = KeystoreSigner(account)
        tx = {
            "to": "0x4E656459ed25bF986Eea1196Bc1B00665401645d",
            "value": 1,
            "nonce": 0,
            "gas": 21_000,
            "gasPrice": 10**9,
            "chainId": 97,
            "data": "0x",
        }
        raw = signer.sign_transaction(tx)
        assert raw.startswith("0x")
        assert Account.recover_transaction(raw) == account.address
