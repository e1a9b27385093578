"""
Command Line Interface Package

Thin command line wrapper around the conversion functions.

Command Structure:
- moneyconvert: Main entry point with utility commands (version, config)
- moneyconvert to-minor / to-major: One-shot conversions
- moneyconvert check: Format validation with an exit status
"""
