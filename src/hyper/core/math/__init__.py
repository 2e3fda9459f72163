"""
Core math modules для hyper

Алгебраические структуры (semiring, total order) и проверка их законов.
"""

# Algebra
from hyper.core.math.algebra import (
    CARDINAL_ORDER,
    CARDINAL_SEMIRING,
    CardinalOrder,
    CardinalSemiring,
    Semiring,
    TotalOrder,
    power,
    product_of,
    sum_of,
)

# Laws
from hyper.core.math.laws import (
    LawViolation,
    check_order_laws,
    check_semiring_laws,
)

__all__ = [
    # Algebra — Protocols
    "Semiring",
    "TotalOrder",
    # Algebra — Instances
    "CardinalSemiring",
    "CardinalOrder",
    "CARDINAL_SEMIRING",
    "CARDINAL_ORDER",
    # Algebra — Functions
    "sum_of",
    "product_of",
    "power",
    # Laws
    "LawViolation",
    "check_semiring_laws",
    "check_order_laws",
]
