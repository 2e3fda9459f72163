"""
hyper — cardinal arithmetic under the generalized continuum hypothesis.
"""

import logging

from hyper.core.config import LOGGER_NAME
from hyper.core.domain import (
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
from hyper.core.math import CARDINAL_ORDER, CARDINAL_SEMIRING

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Cardinal",
    "Finite",
    "Aleph",
    "Ordering",
    "InvalidMagnitude",
    "ZERO",
    "ONE",
    "finite",
    "aleph",
    "CARDINAL_SEMIRING",
    "CARDINAL_ORDER",
]
