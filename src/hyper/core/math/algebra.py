"""
Algebra — Алгебраические структуры для обобщённого кода

Тонкие адаптеры, позволяющие передавать кардиналы в код, написанный
против абстрактного semiring / total order:
- Semiring (rig): zero, one, plus, times. Без вычитания: кардиналы не кольцо
- TotalOrder: compare → Ordering

Собственной логики адаптеры не содержат: всё делегируется операторам Cardinal.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Protocol, TypeVar

from hyper.core.domain.cardinal import ONE, ZERO, Cardinal, Ordering

T = TypeVar("T")


# =============================================================================
# PROTOCOLS
# =============================================================================


class Semiring(Protocol[T]):
    """Коммутативный semiring с единицей (rig)."""

    @property
    def zero(self) -> T: ...

    @property
    def one(self) -> T: ...

    def plus(self, a: T, b: T) -> T: ...

    def times(self, a: T, b: T) -> T: ...


class TotalOrder(Protocol[T]):
    """Тотальный порядок с min / max."""

    def compare(self, a: T, b: T) -> Ordering: ...

    def min(self, a: T, b: T) -> T: ...

    def max(self, a: T, b: T) -> T: ...


# =============================================================================
# CARDINAL INSTANCES
# =============================================================================


@dataclass(frozen=True)
class CardinalSemiring:
    """Semiring[Cardinal]: zero=0, one=1, plus=+, times=*"""

    @property
    def zero(self) -> Cardinal:
        return ZERO

    @property
    def one(self) -> Cardinal:
        return ONE

    def plus(self, a: Cardinal, b: Cardinal) -> Cardinal:
        return a + b

    def times(self, a: Cardinal, b: Cardinal) -> Cardinal:
        return a * b


@dataclass(frozen=True)
class CardinalOrder:
    """TotalOrder[Cardinal] с производными операциями."""

    def compare(self, a: Cardinal, b: Cardinal) -> Ordering:
        return a.compare(b)

    def eqv(self, a: Cardinal, b: Cardinal) -> bool:
        return a.compare(b) == Ordering.EQ

    def lt(self, a: Cardinal, b: Cardinal) -> bool:
        return a < b

    def lteq(self, a: Cardinal, b: Cardinal) -> bool:
        return a <= b

    def gt(self, a: Cardinal, b: Cardinal) -> bool:
        return a > b

    def gteq(self, a: Cardinal, b: Cardinal) -> bool:
        return a >= b

    def min(self, a: Cardinal, b: Cardinal) -> Cardinal:
        return a.min(b)

    def max(self, a: Cardinal, b: Cardinal) -> Cardinal:
        return a.max(b)


CARDINAL_SEMIRING: CardinalSemiring = CardinalSemiring()
CARDINAL_ORDER: CardinalOrder = CardinalOrder()


# =============================================================================
# ОБОБЩЁННЫЕ ОПЕРАЦИИ
# =============================================================================


def sum_of(semiring: Semiring[T], values: Iterable[T]) -> T:
    """
    Сумма значений через semiring.plus.

    Returns:
        semiring.zero для пустого iterable
    """
    return reduce(semiring.plus, values, semiring.zero)


def product_of(semiring: Semiring[T], values: Iterable[T]) -> T:
    """
    Произведение значений через semiring.times.

    Returns:
        semiring.one для пустого iterable
    """
    return reduce(semiring.times, values, semiring.one)


def power(semiring: Semiring[T], x: T, k: int) -> T:
    """
    Натуральная степень x^k через повторное возведение в квадрат.

    Args:
        semiring: Semiring для умножения
        x: Основание
        k: Показатель (native int, k ≥ 0)

    Returns:
        x * x * ... * x (k раз); semiring.one при k == 0

    Raises:
        ValueError: Если k < 0

    Examples:
        >>> power(CARDINAL_SEMIRING, Finite(2), 10)
        Finite(n=1024)
    """
    if k < 0:
        raise ValueError(f"Exponent must be non-negative, got {k}")

    result = semiring.one
    base = x
    while k:
        if k & 1:
            result = semiring.times(result, base)
        k >>= 1
        if k:
            base = semiring.times(base, base)
    return result
