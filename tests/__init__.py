"""
Test Suite for moneyconvert

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI tests
"""
