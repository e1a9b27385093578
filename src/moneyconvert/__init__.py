"""
moneyconvert - Major/Minor Unit Money Conversion

Converts monetary amounts between major units ("19.99" dollars/yuan, at most
two fractional digits) and minor units (1999 cents/fen).

Example Usage:
    from moneyconvert import major_to_minor, minor_to_major

    major_to_minor("19.99")  # 1999
    minor_to_major(7)        # "0.07"
"""

__version__ = "0.1.0"
__author__ = "moneyconvert contributors"

from .core.converter import (
    ConversionError,
    InvalidFormatError,
    MoneyConversionError,
    is_major_unit,
    is_minor_unit,
    is_positive_major_unit,
    major_to_minor,
    minor_to_major,
)
from .core.money import Money

__all__ = [
    # Conversion functions
    "is_major_unit",
    "is_minor_unit",
    "is_positive_major_unit",
    "major_to_minor",
    "minor_to_major",

    # Errors
    "MoneyConversionError",
    "InvalidFormatError",
    "ConversionError",

    # Value type
    "Money",
]
