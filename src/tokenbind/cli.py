"""
token-bind-tool CLI

Binds a BEP2 token to a freshly deployed BEP20 contract on BNB Smart
Chain.  One operation per invocation, selected with --operation:

  initKey                                  - Create or load the temporary account
  deployContract                           - Deploy the BEP20 contract
  approveBindAndTransferOwnership          - Approve, bind, hand over ownership
  refundRestBNB                            - Return leftover BNB
  deploy_transferTokenAndOwnership_refund  - Deploy, hand over, refund
  approveBindFromLedger                    - Approve and bind from a Ledger account
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import click
from dotenv import load_dotenv

from . import __version__, console
from .chain.contracts import DEFAULT_RELAY_FEE
from .chain.network import MAINNET, TESTNET, ChainContext, resolve_network
from .chain.rpc import RECEIPT_TIMEOUT
from .config.models import BindConfig
from .errors import BindToolError, ConfigError
from .keys.keystore import DEFAULT_KEYSTORE_DIR, DEFAULT_PASSWORD, TemporaryAccount
from .keys.ledger import DEFAULT_ACCOUNTS_SCRIPT, LedgerSession
from .operations import (
    APPROVE_BIND,
    APPROVE_BIND_FROM_LEDGER,
    DEPLOY_CONTRACT,
    DEPLOY_TRANSFER_REFUND,
    INIT_KEY,
    OPERATIONS,
    REFUND_REST_BNB,
)
from .operations.bind import BindOutcome, approve_bind_and_transfer_ownership
from .operations.composite import deploy_transfer_refund
from .operations.deploy import deploy_contract_from_temp_account
from .operations.init_key import init_key, provision_temp_account
from .operations.ledger_bind import approve_bind_from_ledger
from .operations.refund import refund_rest_bnb
from .utils import parse_amount, require_address


@dataclass(frozen=True)
class RunOptions:
    ctx: ChainContext
    keystore_path: Path
    keystore_password: str
    config_path: Optional[Path]
    bep20_contract_addr: Optional[str]
    ledger_account: Optional[str]
    ledger_account_number: int
    ledger_account_index: int
    ledger_output: Path
    peggy_amount: Optional[str]
    relay_fee: int
    receipt_timeout: float

    def config(self) -> BindConfig:
        if self.config_path is None:
            raise ConfigError("--config-path is required for this operation")
        return BindConfig.from_path(self.config_path)

    def temp_account(self) -> TemporaryAccount:
        return provision_temp_account(self.ctx, self.keystore_path, self.keystore_password)


# ============ Banner ============


def _print_banner(ctx: ChainContext, operation: str) -> None:
    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("T O K E N - B I N D", fg="bright_white", bold=True)
        + click.style(f"  v{__version__}", dim=True)
    )
    click.echo(
        click.style("  network: ", dim=True)
        + f"{ctx.network} (chain id {ctx.chain_id})"
        + click.style("  operation: ", dim=True)
        + operation
    )
    click.echo()


# ============ Operation handlers ============


def _run_init_key(opts: RunOptions) -> None:
    init_key(
        opts.ctx,
        opts.keystore_path,
        opts.keystore_password,
        ledger_count=opts.ledger_account_number,
        ledger_output=opts.ledger_output,
    )


def _run_deploy_contract(opts: RunOptions) -> None:
    config = opts.config()
    temp = opts.temp_account()
    deploy_contract_from_temp_account(
        opts.ctx, temp.signer(), config.bytecode, timeout=opts.receipt_timeout
    )


def _run_approve_bind(opts: RunOptions) -> None:
    contract = require_address(opts.bep20_contract_addr, "bep20 contract address")
    config = opts.config()
    temp = opts.temp_account()
    outcome = approve_bind_and_transfer_ownership(
        opts.ctx,
        temp.signer(),
        config,
        contract,
        relay_fee=opts.relay_fee,
        timeout=opts.receipt_timeout,
    )
    _check_bound(outcome)


def _run_refund(opts: RunOptions) -> None:
    refund_address = require_address(opts.ledger_account, "refund address")
    temp = opts.temp_account()
    refund_rest_bnb(opts.ctx, temp.signer(), refund_address, timeout=opts.receipt_timeout)


def _run_deploy_transfer_refund(opts: RunOptions) -> None:
    config = opts.config()
    temp = opts.temp_account()
    deploy_transfer_refund(opts.ctx, temp.signer(), config, timeout=opts.receipt_timeout)


def _run_approve_bind_from_ledger(opts: RunOptions) -> None:
    peggy_amount = parse_amount(opts.peggy_amount, "peggy amount")
    contract = require_address(opts.bep20_contract_addr, "bep20 contract address")
    config = opts.config()
    with LedgerSession() as session:
        outcome = approve_bind_from_ledger(
            opts.ctx,
            session,
            opts.ledger_account_index,
            config,
            contract,
            peggy_amount,
            relay_fee=opts.relay_fee,
            timeout=opts.receipt_timeout,
        )
    _check_bound(outcome)


def _check_bound(outcome: BindOutcome) -> None:
    if not outcome.bound:
        raise BindToolError(
            f"approveBind failed, rejectBind submitted (receipt status {outcome.reject_status})"
        )


HANDLERS: dict[str, Callable[[RunOptions], None]] = {
    INIT_KEY: _run_init_key,
    DEPLOY_CONTRACT: _run_deploy_contract,
    APPROVE_BIND: _run_approve_bind,
    REFUND_REST_BNB: _run_refund,
    DEPLOY_TRANSFER_REFUND: _run_deploy_transfer_refund,
    APPROVE_BIND_FROM_LEDGER: _run_approve_bind_from_ledger,
}


# ============ Main command ============


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="token-bind-tool")
@click.option(
    "--network-type",
    type=click.Choice([MAINNET, TESTNET]),
    default=TESTNET,
    envvar="TOKEN_BIND_NETWORK",
    show_default=True,
    help="mainnet or testnet",
)
@click.option(
    "--operation",
    required=True,
    type=click.Choice(OPERATIONS),
    help="Operation to perform",
)
@click.option(
    "--keystore-path",
    default=DEFAULT_KEYSTORE_DIR,
    envvar="TOKEN_BIND_KEYSTORE",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Keystore directory for the temporary account",
)
@click.option(
    "--keystore-password",
    default=DEFAULT_PASSWORD,
    envvar="TOKEN_BIND_KEYSTORE_PASSWORD",
    help="Temporary account keystore password",
)
@click.option(
    "--config-path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Bind config file (JSON)",
)
@click.option("--bep20-contract-addr", default=None, help="BEP20 contract address")
@click.option("--ledger-account", default=None, help="Ledger account address (refund target)")
@click.option(
    "--ledger-account-number",
    default=0,
    type=click.IntRange(min=0),
    help="Number of Ledger accounts to derive on initKey",
)
@click.option(
    "--ledger-account-index",
    default=0,
    type=click.IntRange(min=0),
    help="Ledger account index used to sign approveBindFromLedger",
)
@click.option(
    "--ledger-output",
    default=DEFAULT_ACCOUNTS_SCRIPT,
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Shell script receiving the derived Ledger addresses",
)
@click.option("--peggy-amount", default=None, help="Token amount to approve from the Ledger account")
@click.option(
    "--relay-fee",
    default=DEFAULT_RELAY_FEE,
    type=click.IntRange(min=0),
    show_default=True,
    help="Relay fee in wei attached to approveBind / rejectBind",
)
@click.option(
    "--receipt-timeout",
    default=RECEIPT_TIMEOUT,
    type=click.FloatRange(min=0),
    show_default=True,
    help="Seconds to wait for each transaction receipt",
)
@click.option("--rpc-url", default=None, envvar="TOKEN_BIND_RPC_URL", help="Override the RPC endpoint")
def cli(
    network_type: str,
    operation: str,
    keystore_path: Path,
    keystore_password: str,
    config_path: Optional[Path],
    bep20_contract_addr: Optional[str],
    ledger_account: Optional[str],
    ledger_account_number: int,
    ledger_account_index: int,
    ledger_output: Path,
    peggy_amount: Optional[str],
    relay_fee: int,
    receipt_timeout: float,
    rpc_url: Optional[str],
) -> None:
    """Bind a BEP2 token to a BEP20 contract on BNB Smart Chain."""
    try:
        ctx = resolve_network(network_type, rpc_url)
        _print_banner(ctx, operation)
        opts = RunOptions(
            ctx=ctx,
            keystore_path=keystore_path,
            keystore_password=keystore_password,
            config_path=config_path,
            bep20_contract_addr=bep20_contract_addr,
            ledger_account=ledger_account,
            ledger_account_number=ledger_account_number,
            ledger_account_index=ledger_account_index,
            ledger_output=ledger_output,
            peggy_amount=peggy_amount,
            relay_fee=relay_fee,
            receipt_timeout=receipt_timeout,
        )
        HANDLERS[operation](opts)
    except BindToolError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    except (OSError, ValueError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


# ============ Entry Points ============


def main() -> None:
    """token-bind-tool entry point."""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
