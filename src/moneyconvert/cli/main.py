#!/usr/bin/env python3
"""
Main CLI Entry Point for moneyconvert

Provides the command-line interface for major/minor unit conversions.
"""

import logging
import os

import click

from ..core.config import get_config
from .convert import check, to_major, to_minor


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
    moneyconvert - Major/Minor Unit Money Conversion

    Converts amounts between major units (19.99) and minor units (1999).
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["MONEYCONVERT_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("moneyconvert").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from moneyconvert import __author__, __version__

    click.echo(f"moneyconvert v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Decimal Precision: {config_obj.decimal_precision}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


main.add_command(to_minor)
main.add_command(to_major)
main.add_command(check)


if __name__ == "__main__":
    main()
