#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import pytest
from click.testing import CliRunner

from moneyconvert.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        """Test moneyconvert --help shows all registered subcommands."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for command in ["to-minor", "to-major", "check", "version", "config"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        """Test version displays version and author."""
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "moneyconvert v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self):
        """Test config displays current configuration."""
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Decimal Precision: 28" in result.output

    def test_invalid_command_shows_error(self):
        """Test unknown subcommands fail with a usage error."""
        result = self.runner.invoke(main, ["does-not-exist"])

        assert result.exit_code != 0


@pytest.mark.integration
class TestConversionCommands:
    """Test the conversion subcommands."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_to_minor(self):
        result = self.runner.invoke(main, ["to-minor", "19.99"])

        assert result.exit_code == 0
        assert result.output.strip() == "1999"

    def test_to_major(self):
        result = self.runner.invoke(main, ["to-major", "7"])

        assert result.exit_code == 0
        assert result.output.strip() == "0.07"

    def test_to_minor_invalid_format_exits_2(self):
        """Test that conversion errors are reported with exit status 2."""
        result = self.runner.invoke(main, ["to-minor", "1.2.3"])

        assert result.exit_code == 2
        assert "invalid amount format" in result.output

    def test_to_major_negative_value(self):
        """Test that a negative count passed after -- is rejected."""
        result = self.runner.invoke(main, ["to-major", "--", "-5"])

        assert result.exit_code == 2
        assert "'-5'" in result.output

    def test_check_valid(self):
        result = self.runner.invoke(main, ["check", "1.23"])

        assert result.exit_code == 0
        assert result.output.strip() == "valid"

    def test_check_invalid(self):
        result = self.runner.invoke(main, ["check", "1.234"])

        assert result.exit_code == 1
        assert result.output.strip() == "invalid"

    def test_check_positive_rejects_zero_literals(self):
        """Test --positive against the literal zero forms."""
        for value in ["0", "0.0", "0.00"]:
            result = self.runner.invoke(main, ["check", "--positive", value])
            assert result.exit_code == 1, value

        result = self.runner.invoke(main, ["check", "--positive", "00"])
        assert result.exit_code == 0
