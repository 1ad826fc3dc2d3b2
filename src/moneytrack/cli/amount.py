#!/usr/bin/env python3
"""
Amount CLI - Currency Input Commands

Parse, validate and format amounts the way transaction forms do.
"""

import math

import click

from ..core.currency import (
    amount_validation_error,
    format_for_display,
    parse_amount,
    parse_amount_to_cents,
    sanitize_numeric_input,
)


@click.group()
def amount() -> None:
    """Amount parsing and formatting commands."""
    pass


@amount.command(context_settings={"ignore_unknown_options": True})
@click.argument("text")
@click.pass_context
def parse(ctx: click.Context, text: str) -> None:
    """
    Parse and validate an amount as a transaction form would.

    Exits with status 1 when the amount is invalid.

    Examples:
      moneytrack amount parse '$1,234.56'
      moneytrack amount parse '1.234.567,89'
      moneytrack amount parse -5
    """
    config = ctx.obj["config"]
    parsed = parse_amount(text)
    error = amount_validation_error(text)

    if not math.isfinite(parsed):
        click.echo("Parsed: (not a number)")
    else:
        click.echo(f"Parsed: {parsed}")
        click.echo(f"Display: {format_for_display(parsed, show_cents=config.display.show_cents)}")

    if error:
        raise click.ClickException(error)

    click.echo(f"Cents: {parse_amount_to_cents(text)}")
    click.echo("✅ Valid amount")


@amount.command(name="format", context_settings={"ignore_unknown_options": True})
@click.argument("value", type=float)
@click.option("--cents/--no-cents", default=None, help="Show cents (default: MONEYTRACK_SHOW_CENTS)")
@click.pass_context
def format_command(ctx: click.Context, value: float, cents: bool | None) -> None:
    """
    Format a number for display.

    Examples:
      moneytrack amount format 1234.5
      moneytrack amount format 1234.5 --no-cents
      moneytrack amount format -42.5
    """
    show_cents = ctx.obj["config"].display.show_cents if cents is None else cents
    click.echo(format_for_display(value, show_cents=show_cents))


@amount.command()
@click.argument("text")
def sanitize(text: str) -> None:
    """Strip characters a numeric keyboard field would not accept."""
    click.echo(sanitize_numeric_input(text))
