"""
Domain models и value objects.

Содержит кардинальные числа: Finite, Aleph и их общий тип Cardinal.
"""

from hyper.core.domain.cardinal import (
    ONE,
    ZERO,
    Aleph,
    Cardinal,
    Finite,
    InvalidMagnitude,
    Ordering,
    aleph,
    finite,
)

__all__ = [
    # Types
    "Cardinal",
    "Finite",
    "Aleph",
    "Ordering",
    # Exceptions
    "InvalidMagnitude",
    # Constants
    "ZERO",
    "ONE",
    # Factories
    "finite",
    "aleph",
]
