"""
Init Key - provision the temporary account and optionally list the
Ledger accounts it will hand over to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from ..chain.network import ChainContext
from ..keys.keystore import DEFAULT_PASSWORD, TemporaryAccount, get_or_create_temp_account
from ..keys.ledger import LedgerAccount, LedgerSession, write_accounts_script
from .. import console


@dataclass(frozen=True)
class InitKeyResult:
    temp_account: TemporaryAccount
    ledger_accounts: list[LedgerAccount] = field(default_factory=list)
    accounts_script: Optional[Path] = None


def provision_temp_account(
    ctx: ChainContext,
    keystore_dir: Path,
    password: str = DEFAULT_PASSWORD,
    iterations: Optional[int] = None,
) -> TemporaryAccount:
    temp = get_or_create_temp_account(keystore_dir, password, iterations=iterations)
    verb = "Create" if temp.created else "Load"
    console.address_link(ctx, f"{verb} temp account", temp.address)
    console.ruler()
    return temp


def init_key(
    ctx: ChainContext,
    keystore_dir: Path,
    password: str = DEFAULT_PASSWORD,
    ledger_count: int = 0,
    ledger_output: Optional[Path] = None,
    iterations: Optional[int] = None,
    session_factory: Callable[[], LedgerSession] = LedgerSession,
) -> InitKeyResult:
    temp = provision_temp_account(ctx, keystore_dir, password, iterations=iterations)
    if ledger_count <= 0:
        return InitKeyResult(temp_account=temp)

    with session_factory() as session:
        accounts = session.derive_many(ledger_count)

    for account in accounts:
        console.address_link(ctx, f"Ledger account {account.index} ({account.path})", account.address)
    script = write_accounts_script(accounts, ledger_output)
    console.info("Ledger accounts written to", script)
    console.ruler()
    return InitKeyResult(temp_account=temp, ledger_accounts=accounts, accounts_script=script)
