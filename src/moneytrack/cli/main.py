#!/usr/bin/env python3
"""
Main CLI Entry Point for Moneytrack

Provides a unified command-line interface for amount parsing and
merchant categorization.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Moneytrack - Personal Finance Entry Tools

    Parse loosely formatted amounts and suggest categories for merchant
    names, voice transcripts and receipt text.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["MONEYTRACK_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("moneytrack").setLevel(logging.DEBUG)

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Lexicon: {config.classifier.lexicon_path or 'bundled'}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from moneytrack import __author__, __version__

    click.echo(f"Moneytrack v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Lexicon Path: {config_obj.classifier.lexicon_path or 'bundled'}")
    click.echo(f"  Show Cents: {config_obj.display.show_cents}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import subcommands
from .amount import amount  # noqa: E402
from .categories import categories, classify, classify_csv, keywords  # noqa: E402
from .entry import prefill  # noqa: E402

main.add_command(amount)
main.add_command(classify)
main.add_command(categories)
main.add_command(keywords)
main.add_command(classify_csv)
main.add_command(prefill)


if __name__ == "__main__":
    main()
