"""
Laws — Проверка алгебраических законов на конечной выборке

Перебирает все пары / тройки из выборки и собирает нарушения законов
semiring и total order. Пустой список означает, что на выборке
все законы выполняются.

Законы semiring:
- ассоциативность и коммутативность сложения и умножения
- нейтральность zero (сложение) и one (умножение)
- левая и правая дистрибутивность
- аннуляция: zero * a = a * zero = zero

Законы total order:
- рефлексивность, антисимметричность, транзитивность, тотальность
- согласованность min / max с compare
"""

import logging
from dataclasses import dataclass
from itertools import product
from typing import Any, List, Sequence, Tuple, TypeVar

from hyper.core.domain.cardinal import Ordering
from hyper.core.math.algebra import Semiring, TotalOrder

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class LawViolation:
    """Нарушение закона на конкретных операндах."""

    law: str
    operands: Tuple[Any, ...]


# =============================================================================
# SEMIRING
# =============================================================================


def check_semiring_laws(semiring: Semiring[T], samples: Sequence[T]) -> List[LawViolation]:
    """
    Проверка законов коммутативного semiring с единицей.

    Args:
        semiring: Проверяемый instance
        samples: Выборка значений (перебор O(n^3))

    Returns:
        Список нарушений (пустой, если законы выполняются)
    """
    add, mul = semiring.plus, semiring.times
    zero, one = semiring.zero, semiring.one
    violations: List[LawViolation] = []

    for a in samples:
        if add(a, zero) != a or add(zero, a) != a:
            violations.append(LawViolation("additive identity", (a,)))
        if mul(a, one) != a or mul(one, a) != a:
            violations.append(LawViolation("multiplicative identity", (a,)))
        if mul(a, zero) != zero or mul(zero, a) != zero:
            violations.append(LawViolation("annihilation", (a,)))

    for a, b in product(samples, repeat=2):
        if add(a, b) != add(b, a):
            violations.append(LawViolation("additive commutativity", (a, b)))
        if mul(a, b) != mul(b, a):
            violations.append(LawViolation("multiplicative commutativity", (a, b)))

    for a, b, c in product(samples, repeat=3):
        if add(add(a, b), c) != add(a, add(b, c)):
            violations.append(LawViolation("additive associativity", (a, b, c)))
        if mul(mul(a, b), c) != mul(a, mul(b, c)):
            violations.append(LawViolation("multiplicative associativity", (a, b, c)))
        if mul(a, add(b, c)) != add(mul(a, b), mul(a, c)):
            violations.append(LawViolation("left distributivity", (a, b, c)))
        if mul(add(a, b), c) != add(mul(a, c), mul(b, c)):
            violations.append(LawViolation("right distributivity", (a, b, c)))

    logger.debug(
        "Semiring law check: %d samples, %d violations", len(samples), len(violations)
    )
    return violations


# =============================================================================
# TOTAL ORDER
# =============================================================================


def check_order_laws(order: TotalOrder[T], samples: Sequence[T]) -> List[LawViolation]:
    """
    Проверка законов тотального порядка.

    Антисимметричность проверяется против структурного равенства (==):
    compare(a, b) == EQ тогда и только тогда, когда a == b.

    Args:
        order: Проверяемый instance
        samples: Выборка значений (перебор O(n^3))

    Returns:
        Список нарушений (пустой, если законы выполняются)
    """
    cmp = order.compare
    violations: List[LawViolation] = []

    for a in samples:
        if cmp(a, a) != Ordering.EQ:
            violations.append(LawViolation("reflexivity", (a,)))

    for a, b in product(samples, repeat=2):
        ab = cmp(a, b)
        if (ab == Ordering.EQ) != (a == b):
            violations.append(LawViolation("antisymmetry", (a, b)))
        if ab != -cmp(b, a):
            violations.append(LawViolation("totality", (a, b)))

        lo, hi = order.min(a, b), order.max(a, b)
        if lo not in (a, b) or cmp(lo, a) > 0 or cmp(lo, b) > 0:
            violations.append(LawViolation("min consistency", (a, b)))
        if hi not in (a, b) or cmp(hi, a) < 0 or cmp(hi, b) < 0:
            violations.append(LawViolation("max consistency", (a, b)))

    for a, b, c in product(samples, repeat=3):
        if cmp(a, b) <= 0 and cmp(b, c) <= 0 and cmp(a, c) > 0:
            violations.append(LawViolation("transitivity", (a, b, c)))

    logger.debug(
        "Order law check: %d samples, %d violations", len(samples), len(violations)
    )
    return violations
