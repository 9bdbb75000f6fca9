"""
Dice Roller Test Suite.

This package contains automated tests for:
- Dice sampling and selection modes
- Descriptive statistics (quartiles, mode, dispersion)
- Request validation
- Command line report

Run tests with: pytest
"""
