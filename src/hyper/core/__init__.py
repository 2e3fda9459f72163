"""
Core domain models, algebraic structures, and law checks.

This module contains the foundational building blocks: the cardinal value
type and its adapters to generic semiring / total-order code.
"""
