#!/usr/bin/env python3
"""
Configuration Management for moneyconvert

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production) with logging
formats suited to each.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PRECISION = 28
MIN_DECIMAL_PRECISION = 4
MAX_DECIMAL_PRECISION = 999


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for moneyconvert.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Decimal context precision used by the converter
    decimal_precision: int = DEFAULT_DECIMAL_PRECISION

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("MONEYCONVERT_ENV", "development"))

        return cls(
            environment=env,
            decimal_precision=int(
                os.getenv("MONEYCONVERT_DECIMAL_PRECISION", str(DEFAULT_DECIMAL_PRECISION))
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not MIN_DECIMAL_PRECISION <= self.decimal_precision <= MAX_DECIMAL_PRECISION:
            errors.append(
                f"Decimal precision must be {MIN_DECIMAL_PRECISION}-{MAX_DECIMAL_PRECISION}, "
                f"got {self.decimal_precision}"
            )

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


def decimal_precision_from_env() -> int:
    """
    Read the decimal precision without building the full configuration.

    Falls back to the default when the variable is missing, not an integer or
    out of range, so importing the converter never fails.
    """
    raw = os.getenv("MONEYCONVERT_DECIMAL_PRECISION")
    if raw is None:
        return DEFAULT_DECIMAL_PRECISION

    try:
        precision = int(raw)
    except ValueError:
        precision = 0

    if not MIN_DECIMAL_PRECISION <= precision <= MAX_DECIMAL_PRECISION:
        logger.warning(
            "Ignoring invalid MONEYCONVERT_DECIMAL_PRECISION %r, using %d",
            raw,
            DEFAULT_DECIMAL_PRECISION,
        )
        return DEFAULT_DECIMAL_PRECISION
    return precision


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
