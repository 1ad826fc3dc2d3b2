#!/usr/bin/env python3
"""
Categories CLI - Merchant Classification Commands

Suggest categories for free text and inspect the catalog and lexicon.
"""

from pathlib import Path

import click

from ..categories.catalog import CategoryCatalog
from ..categories.classifier import default_classifier
from ..categories.lexicon import LexiconError
from ..core.models import TransactionType
from ..entry.batch import DEFAULT_TEXT_COLUMNS, classify_frame, load_transactions_csv


def _load_classifier():
    try:
        return default_classifier()
    except LexiconError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("text")
@click.option("--explain", is_flag=True, help="Show the keyword that decided the category")
def classify(text: str, explain: bool) -> None:
    """
    Suggest a category id for a merchant name, transcript or receipt text.

    Examples:
      moneytrack classify "woolworths shopping"
      moneytrack classify "Pak n Save Albany" --explain
    """
    best = _load_classifier().match(text)

    if best is None:
        click.echo("No category match")
        return

    click.echo(best.category_id)
    if explain:
        category_type = CategoryCatalog.default().type_of(best.category_id)
        name = CategoryCatalog.default().name_for(best.category_id, category_type or TransactionType.EXPENSE)
        click.echo(f"Matched keyword: {best.keyword!r} ({name})")


@click.command()
@click.option(
    "--type",
    "category_type",
    type=click.Choice(["expense", "income"]),
    help="Only list one category set (default: both)",
)
def categories(category_type: str | None) -> None:
    """List the standard expense and income categories."""
    catalog = CategoryCatalog.default()
    types = [TransactionType(category_type)] if category_type else list(TransactionType)

    for current_type in types:
        click.echo(f"{current_type.value.title()} categories:")
        for category in catalog.categories(current_type):
            click.echo(f"  {category.icon or ' '} {category.id:<20} {category.name}")


@click.command()
@click.argument("category_id")
def keywords(category_id: str) -> None:
    """List the lexicon keywords for a category id."""
    found = _load_classifier().keywords_for_category(category_id)
    if not found:
        raise click.ClickException(f"No keywords for category: {category_id}")

    for keyword in found:
        click.echo(keyword)


@click.command(name="classify-csv")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--column",
    "columns",
    multiple=True,
    help=f"Text column to classify, in priority order (default: {', '.join(DEFAULT_TEXT_COLUMNS)})",
)
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the categorized CSV here")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def classify_csv(ctx: click.Context, path: Path, columns: tuple, output: Path | None, verbose: bool) -> None:
    """
    Add category suggestions to every row of a transactions CSV.

    Examples:
      moneytrack classify-csv transactions.csv
      moneytrack classify-csv export.csv --column payee --column memo --output categorized.csv
    """
    text_columns = columns or DEFAULT_TEXT_COLUMNS
    classifier = _load_classifier()

    try:
        df = load_transactions_csv(path)
    except Exception as e:
        raise click.ClickException(f"Cannot read {path}: {e}") from e

    missing = [column for column in text_columns if column not in df.columns]
    if len(missing) == len(text_columns):
        raise click.ClickException(f"None of the columns {', '.join(text_columns)} exist in {path}")

    if verbose or ctx.obj.get("verbose", False):
        click.echo(f"Input: {path}")
        click.echo(f"Columns: {', '.join(text_columns)}")
        if missing:
            click.echo(f"Skipping missing columns: {', '.join(missing)}")

    result = classify_frame(df, text_columns, classifier=classifier)
    matched = int(result["category_id"].notna().sum())

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        result.to_csv(output, index=False)
        click.echo(f"✅ Categorized {matched} of {len(result)} transactions")
        click.echo(f"   Saved to: {output}")
    else:
        click.echo(result.to_csv(index=False), nl=False)
