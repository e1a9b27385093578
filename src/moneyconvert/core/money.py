#!/usr/bin/env python3
"""
Money Primitive Type

Immutable money value wrapper that stores a non-negative count of minor units.
Parsing and formatting go through the converter so validation rules match.
"""

from dataclasses import dataclass

from .converter import (
    InvalidFormatError,
    MajorValue,
    MinorValue,
    is_minor_unit,
    major_to_minor,
    minor_to_major,
)


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable money value in minor units.

    Examples:
        >>> price = Money.from_major("19.99")
        >>> price.to_minor()
        1999
        >>> str(price + Money.from_minor(1))
        '20.00'
        >>> Money.from_minor("7").to_major()
        '0.07'
    """

    minor_units: int

    def __post_init__(self) -> None:
        if isinstance(self.minor_units, bool) or not isinstance(self.minor_units, int):
            raise TypeError(f"minor_units must be int, got {type(self.minor_units).__name__}")
        if self.minor_units < 0:
            raise ValueError(f"minor_units must be non-negative, got {self.minor_units}")

    @classmethod
    def from_major(cls, value: MajorValue) -> "Money":
        """
        Parse a major-unit amount like "12.34".

        Raises:
            InvalidFormatError: If value is not a major-unit amount
            ConversionError: If the decimal arithmetic fails
        """
        return cls(minor_units=major_to_minor(value))

    @classmethod
    def from_minor(cls, value: MinorValue) -> "Money":
        """Create Money from a digits-only string or non-negative int."""
        if not is_minor_unit(value):
            raise InvalidFormatError(f"Invalid minor unit amount: {value!r}")
        return cls(minor_units=int(str(value)))

    def to_minor(self) -> int:
        """Get value in minor units."""
        return self.minor_units

    def to_major(self) -> str:
        """Get value as a two-decimal major-unit string."""
        return minor_to_major(self.minor_units)

    def is_zero(self) -> bool:
        return self.minor_units == 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(minor_units=self.minor_units + other.minor_units)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects; the result may not go below zero."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(minor_units=self.minor_units - other.minor_units)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by a non-negative integer scalar."""
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return Money(minor_units=self.minor_units * scalar)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return self.to_major()

    def __repr__(self) -> str:
        return f"Money(minor_units={self.minor_units})"
