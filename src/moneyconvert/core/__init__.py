"""
Core Utilities Package

Major/minor unit money conversion and the pieces built around it.

This package provides:
- Validation and conversion between major-unit strings and minor-unit integers
- An immutable Money value type in minor units
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .converter import (
    ConversionError,
    InvalidFormatError,
    MoneyConversionError,
    is_major_unit,
    is_minor_unit,
    is_positive_major_unit,
    major_to_minor,
    minor_to_major,
)
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "ConversionError",
    "Environment",
    "InvalidFormatError",
    "Money",
    "MoneyConversionError",
    "get_config",
    "is_development",
    # Conversion
    "is_major_unit",
    "is_minor_unit",
    "is_positive_major_unit",
    "is_production",
    "is_test",
    "major_to_minor",
    "minor_to_major",
    "reload_config",
]
