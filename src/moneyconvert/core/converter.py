#!/usr/bin/env python3
"""
Major/Minor Unit Money Conversion

Validation and conversion between major-unit amounts ("19.99" dollars/yuan) and
minor-unit integer counts (1999 cents/fen).

Currency Representations:
- Major units: ASCII digits with an optional "." and at most two fractional digits
- Minor units: ASCII digits only, no sign
- 100 minor units = 1 major unit

Key Principles:
- Never use floating-point arithmetic for the conversion itself
- Numeric input is validated through its str() form, so floats with
  representation error (0.1 + 0.2) are rejected rather than silently rounded
- Rounding is half-up
"""

import logging
import re
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    Overflow,
)
from typing import Union

from .config import decimal_precision_from_env

logger = logging.getLogger(__name__)

MajorValue = Union[str, int, float, Decimal, None]
MinorValue = Union[str, int, None]

MINOR_PER_MAJOR = 100

_MAJOR_PATTERN = re.compile(r"[0-9]+(\.[0-9]{0,2})?")
_MINOR_PATTERN = re.compile(r"[0-9]+")

# Literal forms only; "00" and "0.000" are not in this list.
_ZERO_LITERALS = ("0", "0.0", "0.00")

_TWO_PLACES = Decimal("0.01")
_WHOLE = Decimal("1")


class MoneyConversionError(ValueError):
    """Base class for major/minor unit conversion failures."""

    pass


class InvalidFormatError(MoneyConversionError):
    """Raised when input does not match the pattern for its conversion direction."""

    pass


class ConversionError(MoneyConversionError):
    """Raised when input passed validation but decimal arithmetic still failed."""

    pass


# Private context so callers' thread-local decimal settings never leak in.
_CONTEXT = Context(
    prec=decimal_precision_from_env(),
    rounding=ROUND_HALF_UP,
    traps=[Inexact, InvalidOperation, Overflow],
)


def _as_text(value: object) -> str:
    """Render input the way validation sees it: strings as-is, numbers via str()."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def is_major_unit(value: MajorValue) -> bool:
    """
    Check whether a value is a well-formed major-unit amount.

    Args:
        value: String like "12.34", or a number validated through its str() form

    Returns:
        True for "1", "1.", "1.2", "1.23"; False for None, blank strings, signs,
        exponents, grouping separators or more than two fractional digits

    Examples:
        is_major_unit("19.99") -> True
        is_major_unit("1.234") -> False
        is_major_unit(1.5) -> True
        is_major_unit(None) -> False
    """
    text = _as_text(value)
    if not text.strip():
        return False
    return _MAJOR_PATTERN.fullmatch(text) is not None


def is_minor_unit(value: MinorValue) -> bool:
    """Check whether str(value) is digits only: no sign, no decimal point."""
    return _MINOR_PATTERN.fullmatch(_as_text(value)) is not None


def is_positive_major_unit(value: MajorValue) -> bool:
    """
    Check whether a value is a well-formed major-unit amount other than zero.

    Only the literal forms "0", "0.0" and "0.00" count as zero here. Other
    spellings of zero such as "00" or "0." still return True.
    """
    return _as_text(value) not in _ZERO_LITERALS and is_major_unit(value)


def major_to_minor(value: MajorValue) -> int:
    """
    Convert a major-unit amount to an integer count of minor units.

    Args:
        value: Major-unit amount such as "19.99", "5" or 1.2

    Returns:
        Minor units, e.g. 1999 for "19.99"

    Raises:
        InvalidFormatError: If value is not a major-unit amount
        ConversionError: If the decimal arithmetic fails (precision overflow)

    Examples:
        major_to_minor("1") -> 100
        major_to_minor("1.2") -> 120
        major_to_minor("1.23") -> 123
    """
    if not is_major_unit(value):
        raise InvalidFormatError(f"Major to minor conversion: invalid amount format: {value!r}")

    text = _as_text(value)
    try:
        scaled = _CONTEXT.multiply(Decimal(text), MINOR_PER_MAJOR)
        minor = scaled.quantize(_WHOLE, rounding=ROUND_HALF_UP, context=_CONTEXT)
    except DecimalException as e:
        logger.error("Major to minor conversion failed for %r", text, exc_info=True)
        raise ConversionError(f"Major to minor conversion failed: {text!r}") from e

    logger.debug("Converted major %s to minor %s", text, minor)
    return int(minor)


def minor_to_major(value: MinorValue) -> str:
    """
    Convert a minor-unit count to a major-unit string with exactly two decimals.

    Args:
        value: Non-negative integer or digits-only string

    Returns:
        Fixed-point string such as "1.50"

    Raises:
        InvalidFormatError: If str(value) is not digits only (signs fail too)
        ConversionError: If the decimal arithmetic fails (precision overflow)

    Examples:
        minor_to_major(150) -> "1.50"
        minor_to_major("7") -> "0.07"
        minor_to_major(-5) -> InvalidFormatError
    """
    text = _as_text(value)
    if not is_minor_unit(text):
        raise InvalidFormatError(f"Minor to major conversion: invalid amount format: {value!r}")

    try:
        major = _CONTEXT.divide(Decimal(text), MINOR_PER_MAJOR)
        major = major.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP, context=_CONTEXT)
    except DecimalException as e:
        logger.error("Minor to major conversion failed for %r", text, exc_info=True)
        raise ConversionError(f"Minor to major conversion failed: {text!r}") from e

    result = f"{major:f}"
    logger.debug("Converted minor %s to major %s", text, result)
    return result
