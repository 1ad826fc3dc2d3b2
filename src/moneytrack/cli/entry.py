#!/usr/bin/env python3
"""
Entry CLI - Transaction Prefill Command

Shows the form suggestion built from a voice or receipt parsing guess.
"""

import click

from ..categories.lexicon import LexiconError
from ..core.json_utils import format_json
from ..core.models import TransactionType
from ..entry.prefill import ParsedDetails, suggest_transaction


@click.command()
@click.option("--amount", default="", help="Amount text as returned by the parser")
@click.option("--merchant", default="", help="Merchant or payer name")
@click.option("--description", default="", help="Transaction description")
@click.option("--category", default="", help="Category name guessed by the parser")
@click.option("--transcript", default=None, help="Original transcript or receipt text")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["expense", "income"]),
    default="expense",
    help="Form being filled (default: expense)",
)
def prefill(
    amount: str,
    merchant: str,
    description: str,
    category: str,
    transcript: str | None,
    transaction_type: str,
) -> None:
    """
    Build a transaction form suggestion and print it as JSON.

    Examples:
      moneytrack prefill --amount 45.50 --merchant "Countdown Ponsonby"
      moneytrack prefill --type income --description "march salary" --amount "5.000,00"
    """
    details = ParsedDetails(amount=amount, merchant=merchant, description=description, category=category)

    try:
        suggestion = suggest_transaction(
            details,
            transaction_type=TransactionType(transaction_type),
            transcript=transcript,
        )
    except LexiconError as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_json(suggestion.to_dict()))
