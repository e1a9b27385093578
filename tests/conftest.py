"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from typing import Any

import pytest

from moneyconvert.core import config as config_module


@pytest.fixture
def conversion_cases() -> list[dict[str, Any]]:
    """Major/minor pairs that convert exactly in both directions."""
    return [
        {'major': '0.00', 'minor': 0},
        {'major': '0.07', 'minor': 7},
        {'major': '1.00', 'minor': 100},
        {'major': '1.20', 'minor': 120},
        {'major': '1.23', 'minor': 123},
        {'major': '19.99', 'minor': 1999},
        {'major': '999.99', 'minor': 99999},
        {'major': '123456789.01', 'minor': 12345678901},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and drop any cached configuration."""
    monkeypatch.setenv('MONEYCONVERT_ENV', 'test')
    monkeypatch.delenv('MONEYCONVERT_DECIMAL_PRECISION', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    monkeypatch.delenv('DEBUG', raising=False)
    monkeypatch.setattr(config_module, '_config', None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for configuration and CLI"
    )
