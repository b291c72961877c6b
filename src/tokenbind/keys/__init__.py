"""Signing identities: the temporary keystore account and Ledger accounts."""

from .keystore import TemporaryAccount, get_or_create_temp_account
from .ledger import LedgerAccount, LedgerSession, LedgerSigner, write_accounts_script
from .signer import KeystoreSigner, Signer

__all__ = [
    "KeystoreSigner",
    "LedgerAccount",
    "LedgerSession",
    "LedgerSigner",
    "Signer",
    "TemporaryAccount",
    "get_or_create_temp_account",
    "write_accounts_script",
]
