"""Operator-facing output: status lines and block-explorer links."""

from __future__ import annotations

import click

from .chain.network import ChainContext

RULER = "-" * 96


def step(message: str) -> None:
    click.echo(click.style("  ◆ ", fg="cyan") + message)


def info(label: str, value: object) -> None:
    click.echo(click.style(f"  {label}: ", dim=True) + str(value))


def tx_link(ctx: ChainContext, label: str, tx_hash: str) -> None:
    click.echo(click.style(f"  {label}: ", dim=True) + ctx.tx_url(tx_hash))


def address_link(ctx: ChainContext, label: str, address: str) -> None:
    click.echo(
        click.style(f"  {label}: ", dim=True)
        + click.style(address, fg="bright_white")
        + click.style(f"  {ctx.address_url(address)}", dim=True)
    )


def success(message: str) -> None:
    click.secho(f"  {message}", fg="green")


def warning(message: str) -> None:
    click.secho(f"  {message}", fg="yellow")


def failure(message: str) -> None:
    click.secho(f"  {message}", fg="red")


def ruler() -> None:
    click.echo(click.style(RULER, dim=True))
