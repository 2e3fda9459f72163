"""
Cardinal — Кардинальные числа (конечные и алефы)

Кардинал описывает мощность множества, в том числе бесконечного:
- Finite(n): конечная мощность n ≥ 0
- Aleph(i): трансфинитная мощность ℵ_i, i ≥ 0

Реализация принимает не только аксиому выбора, но и обобщённую
континуум-гипотезу (GCH). Практическое следствие: 2^ℵ_k = ℵ_(k+1).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Магнитуда и ранг всегда неотрицательны (иначе InvalidMagnitude)
2. Значения immutable (frozen=True), сравнение структурное
3. Любой Aleph строго больше любого Finite
4. Арифметика тотальна: на валидных операндах исключений нет

https://en.wikipedia.org/wiki/Cardinal_number
"""

import logging
import operator
from enum import IntEnum
from typing import Any, Callable, Final, Tuple, TypeVar

from pydantic import BaseModel, Field

from hyper.core.config import ALEPH_SYMBOL

logger = logging.getLogger(__name__)

A = TypeVar("A")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidMagnitude(ValueError):
    """
    Отрицательная магнитуда (Finite) или отрицательный ранг (Aleph).

    Поднимается только при конструировании. Значение никогда не clamp-ится:
    решение об обработке принимает вызывающий код.
    """

    def __init__(self, kind: str, value: int):
        self.kind = kind
        self.value = value
        super().__init__(f"{kind} magnitude must be non-negative, got {value}")


def _require_non_negative(value: Any, kind: str) -> None:
    # Не-int значения отклоняет pydantic (strict=True)
    if isinstance(value, int) and value < 0:
        logger.debug("Rejected %s magnitude %d", kind, value)
        raise InvalidMagnitude(kind, value)


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(IntEnum):
    """Результат compare: LT < EQ < GT"""

    LT = -1
    EQ = 0
    GT = 1

    @classmethod
    def of(cls, lhs: Any, rhs: Any) -> "Ordering":
        """Сравнение двух значений с естественным порядком."""
        return cls((lhs > rhs) - (lhs < rhs))


# =============================================================================
# CARDINAL
# =============================================================================


class Cardinal(BaseModel):
    """
    Кардинальное число — закрытое объединение Finite | Aleph.

    Напрямую не создаётся: используйте Finite(n), Aleph(i) или
    фабрики finite() / aleph().

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.
    """

    model_config = {"frozen": True}

    def __init__(self, **data: Any) -> None:
        if type(self) is Cardinal:
            raise TypeError("Cardinal is abstract; use Finite or Aleph")
        super().__init__(**data)

    def fold(self, fin: Callable[[int], A], inf: Callable[[int], A]) -> A:
        """
        Диспетчеризация по варианту.

        Args:
            fin: Функция для магнитуды Finite
            inf: Функция для ранга Aleph

        Returns:
            fin(n) для Finite(n), inf(i) для Aleph(i)
        """
        raise NotImplementedError

    def _order_key(self) -> Tuple[int, int]:
        return self.fold(lambda n: (0, n), lambda i: (1, i))

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.fold(lambda n: n == 0, lambda _: False)

    def is_one(self) -> bool:
        return self.fold(lambda n: n == 1, lambda _: False)

    def is_finite(self) -> bool:
        return self.fold(lambda _: True, lambda _: False)

    def is_infinite(self) -> bool:
        return not self.is_finite()

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def compare(self, other: "Cardinal") -> Ordering:
        """
        Тотальный порядок на кардиналах.

        Finite vs Finite и Aleph vs Aleph сравниваются по магнитуде,
        любой Aleph больше любого Finite.
        """
        return Ordering.of(self._order_key(), other._order_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cardinal):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Cardinal):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Cardinal):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Cardinal):
            return NotImplemented
        return self.compare(other) >= 0

    def min(self, other: "Cardinal") -> "Cardinal":
        return self if self.compare(other) <= 0 else other

    def max(self, other: "Cardinal") -> "Cardinal":
        return other if self.compare(other) <= 0 else self

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Cardinal":
        """
        Сложение.

        Finite + Finite — точная сумма. Если хотя бы один операнд
        трансфинитный, результат — больший из операндов (поглощение).
        """
        if not isinstance(other, Cardinal):
            return NotImplemented
        if isinstance(self, Finite) and isinstance(other, Finite):
            return Finite(self.n + other.n)
        return self.max(other)

    def __mul__(self, other: object) -> "Cardinal":
        """
        Умножение.

        Ноль доминирует над бесконечностью: 0 * ℵ_i = 0. Иначе Finite * Finite —
        точное произведение, а с трансфинитным операндом — больший из операндов.
        """
        if not isinstance(other, Cardinal):
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return ZERO
        if isinstance(self, Finite) and isinstance(other, Finite):
            return Finite(self.n * other.n)
        return self.max(other)

    def __pow__(self, other: object, modulo: Any = None) -> "Cardinal":
        """
        Возведение в степень self ** other.

        Правила применяются строго по порядку (первое совпавшее побеждает):
            1. other == 0        → 1   (в том числе 0 ** 0 = 1)
            2. self == 0         → 0
            3. self == 1         → 1
            4. other == 1        → self
            5. Finite ** Finite  → точная степень
            6. Finite ** ℵ_i     → ℵ_(i+1)          (GCH)
            7. ℵ_i ** Finite     → ℵ_i
            8. ℵ_i ** ℵ_j        → ℵ_(max(i,j)+1)   (GCH)

        Examples:
            >>> Finite(2) ** Aleph(0)
            Aleph(i=1)
            >>> Aleph(3) ** Finite(5)
            Aleph(i=3)
        """
        if modulo is not None or not isinstance(other, Cardinal):
            return NotImplemented
        if other.is_zero():
            return ONE
        if self.is_zero():
            return ZERO
        if self.is_one():
            return ONE
        if other.is_one():
            return self

        if isinstance(self, Finite):
            if isinstance(other, Finite):
                return Finite(self.n**other.n)
            return Aleph(other.i + 1)

        if isinstance(other, Finite):
            return self
        return Aleph(max(self.i, other.i) + 1)


class Finite(Cardinal):
    """Конечный кардинал n ≥ 0"""

    n: int = Field(..., ge=0, strict=True, description="Конечная мощность")

    def __init__(self, n: int) -> None:
        _require_non_negative(n, "finite")
        super().__init__(n=n)

    def fold(self, fin: Callable[[int], A], inf: Callable[[int], A]) -> A:
        return fin(self.n)

    def __str__(self) -> str:
        return str(self.n)


class Aleph(Cardinal):
    """Трансфинитный кардинал ℵ_i, i ≥ 0"""

    i: int = Field(..., ge=0, strict=True, description="Ранг алефа")

    def __init__(self, i: int) -> None:
        _require_non_negative(i, "aleph")
        super().__init__(i=i)

    def fold(self, fin: Callable[[int], A], inf: Callable[[int], A]) -> A:
        return inf(self.i)

    def __str__(self) -> str:
        return f"{ALEPH_SYMBOL}{self.i}"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Аддитивная единица (нейтральный элемент сложения)
ZERO: Final[Cardinal] = Finite(0)

# Мультипликативная единица
ONE: Final[Cardinal] = Finite(1)


# =============================================================================
# ФАБРИКИ
# =============================================================================


def _as_magnitude(value: Any, kind: str) -> int:
    """
    Приведение integer-like значения к int.

    Принимает всё, что реализует __index__ (int, numpy integer scalars).
    bool не считается магнитудой.
    """
    if isinstance(value, bool):
        raise TypeError(f"{kind} magnitude must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{kind} magnitude must be an integer, got {type(value).__name__}"
        ) from None


def finite(n: Any) -> Cardinal:
    """
    Создание конечного кардинала.

    Args:
        n: Неотрицательное целое (int или integer-like)

    Returns:
        Finite(n)

    Raises:
        InvalidMagnitude: Если n < 0
        TypeError: Если n не целое
    """
    return Finite(_as_magnitude(n, "finite"))


def aleph(i: Any) -> Cardinal:
    """
    Создание трансфинитного кардинала ℵ_i.

    Args:
        i: Неотрицательный ранг (int или integer-like)

    Returns:
        Aleph(i)

    Raises:
        InvalidMagnitude: Если i < 0
        TypeError: Если i не целое
    """
    return Aleph(_as_magnitude(i, "aleph"))
