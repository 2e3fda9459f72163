"""
Test suite for hyper

Contains:
- tests/unit/      : Unit tests for individual modules
- tests/property/  : Property-based tests (hypothesis) for algebraic laws
"""
