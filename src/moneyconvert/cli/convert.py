#!/usr/bin/env python3
"""
Conversion CLI - Major/Minor Unit Commands

Values that start with "-" must follow "--" so they are not read as options:
  moneyconvert to-major -- -5
"""

import click

from ..core.converter import (
    MoneyConversionError,
    is_major_unit,
    is_positive_major_unit,
    major_to_minor,
    minor_to_major,
)


class ConversionFailed(click.ClickException):
    """Reports a conversion error on stderr and exits with status 2."""

    exit_code = 2


@click.command("to-minor")
@click.argument("value")
def to_minor(value: str) -> None:
    """
    Convert a major-unit amount to minor units.

    Examples:
      moneyconvert to-minor 19.99   # 1999
      moneyconvert to-minor 5       # 500
    """
    try:
        click.echo(major_to_minor(value))
    except MoneyConversionError as e:
        raise ConversionFailed(str(e)) from e


@click.command("to-major")
@click.argument("value")
def to_major(value: str) -> None:
    """
    Convert a minor-unit count to a two-decimal major-unit amount.

    Examples:
      moneyconvert to-major 1999    # 19.99
      moneyconvert to-major 7       # 0.07
    """
    try:
        click.echo(minor_to_major(value))
    except MoneyConversionError as e:
        raise ConversionFailed(str(e)) from e


@click.command()
@click.argument("value")
@click.option("--positive", is_flag=True, help="Also reject the zero forms 0, 0.0 and 0.00")
@click.pass_context
def check(ctx: click.Context, value: str, positive: bool) -> None:
    """Check whether VALUE is a valid major-unit amount (exit status 1 if not)."""
    valid = is_positive_major_unit(value) if positive else is_major_unit(value)
    click.echo("valid" if valid else "invalid")
    if not valid:
        ctx.exit(1)
