"""
Тесты для Algebra и Laws — semiring / total order instances

Проверяет:
1. CARDINAL_SEMIRING и CARDINAL_ORDER делегируют операторам Cardinal
2. sum_of / product_of / power
3. check_semiring_laws / check_order_laws на выборке кардиналов
4. Обнаружение нарушений на заведомо некорректных instances
"""

import logging
from dataclasses import dataclass

import pytest

from hyper.core.domain import ONE, ZERO, Aleph, Cardinal, Finite, Ordering
from hyper.core.math import (
    CARDINAL_ORDER,
    CARDINAL_SEMIRING,
    LawViolation,
    check_order_laws,
    check_semiring_laws,
    power,
    product_of,
    sum_of,
)


@pytest.fixture
def samples() -> list[Cardinal]:
    """Выборка с нулём, единицей, конечными и алефами"""
    return [
        ZERO,
        ONE,
        Finite(2),
        Finite(7),
        Finite(10**12),
        Aleph(0),
        Aleph(1),
        Aleph(5),
    ]


# =============================================================================
# ТЕСТЫ INSTANCES
# =============================================================================


class TestCardinalSemiring:
    """Тесты CARDINAL_SEMIRING"""

    def test_identities(self) -> None:
        """zero и one"""
        assert CARDINAL_SEMIRING.zero == ZERO
        assert CARDINAL_SEMIRING.one == ONE

    def test_plus_times_delegate(self) -> None:
        """plus / times совпадают с + / *"""
        assert CARDINAL_SEMIRING.plus(Finite(2), Finite(3)) == Finite(5)
        assert CARDINAL_SEMIRING.times(Finite(2), Finite(3)) == Finite(6)
        assert CARDINAL_SEMIRING.plus(Finite(2), Aleph(0)) == Aleph(0)
        assert CARDINAL_SEMIRING.times(ZERO, Aleph(0)) == ZERO


class TestCardinalOrder:
    """Тесты CARDINAL_ORDER"""

    def test_compare(self) -> None:
        """compare делегирует Cardinal.compare"""
        assert CARDINAL_ORDER.compare(Finite(1), Aleph(0)) is Ordering.LT
        assert CARDINAL_ORDER.compare(Aleph(0), Aleph(0)) is Ordering.EQ
        assert CARDINAL_ORDER.compare(Aleph(1), Finite(10)) is Ordering.GT

    def test_derived_relations(self) -> None:
        """eqv, lt, lteq, gt, gteq"""
        assert CARDINAL_ORDER.eqv(Finite(3), Finite(3))
        assert CARDINAL_ORDER.lt(Finite(3), Aleph(0))
        assert CARDINAL_ORDER.lteq(Aleph(0), Aleph(0))
        assert CARDINAL_ORDER.gt(Aleph(2), Aleph(1))
        assert CARDINAL_ORDER.gteq(Finite(0), ZERO)

    def test_min_max(self) -> None:
        """min / max"""
        assert CARDINAL_ORDER.min(Aleph(0), Finite(5)) == Finite(5)
        assert CARDINAL_ORDER.max(Aleph(0), Finite(5)) == Aleph(0)


# =============================================================================
# ТЕСТЫ ОБОБЩЁННЫХ ОПЕРАЦИЙ
# =============================================================================


class TestGenericOperations:
    """sum_of, product_of, power"""

    def test_sum_of(self) -> None:
        """Сумма конечных и с алефом"""
        assert sum_of(CARDINAL_SEMIRING, [Finite(1), Finite(2), Finite(3)]) == Finite(6)
        assert sum_of(CARDINAL_SEMIRING, [Finite(1), Aleph(2), Aleph(0)]) == Aleph(2)

    def test_sum_of_empty(self) -> None:
        """Пустая сумма → zero"""
        assert sum_of(CARDINAL_SEMIRING, []) == ZERO

    def test_product_of(self) -> None:
        """Произведение, ноль доминирует"""
        assert product_of(CARDINAL_SEMIRING, [Finite(2), Finite(3), Finite(4)]) == Finite(24)
        assert product_of(CARDINAL_SEMIRING, [Aleph(3), ZERO, Finite(4)]) == ZERO
        assert product_of(CARDINAL_SEMIRING, [Aleph(3), Finite(4)]) == Aleph(3)

    def test_product_of_empty(self) -> None:
        """Пустое произведение → one"""
        assert product_of(CARDINAL_SEMIRING, []) == ONE

    def test_power_finite(self) -> None:
        """power совпадает с целочисленной степенью"""
        assert power(CARDINAL_SEMIRING, Finite(2), 10) == Finite(1024)
        assert power(CARDINAL_SEMIRING, Finite(3), 7) == Finite(3**7)
        assert power(CARDINAL_SEMIRING, Finite(5), 1) == Finite(5)

    def test_power_zero_exponent(self) -> None:
        """x^0 = one для любого x"""
        assert power(CARDINAL_SEMIRING, ZERO, 0) == ONE
        assert power(CARDINAL_SEMIRING, Aleph(2), 0) == ONE

    def test_power_aleph(self) -> None:
        """ℵ_i^k = ℵ_i для k ≥ 1"""
        assert power(CARDINAL_SEMIRING, Aleph(2), 5) == Aleph(2)

    def test_power_matches_operator(self, samples: list[Cardinal]) -> None:
        """power(x, k) == x ** Finite(k) для небольших k"""
        for x in samples[:4] + samples[5:]:
            for k in range(6):
                assert power(CARDINAL_SEMIRING, x, k) == x ** Finite(k)

    def test_power_negative_exponent(self) -> None:
        """Отрицательный показатель → ValueError"""
        with pytest.raises(ValueError, match="non-negative"):
            power(CARDINAL_SEMIRING, Finite(2), -1)

    def test_power_works_for_int_semiring(self) -> None:
        """power не привязан к кардиналам"""
        assert power(_IntSemiring(), 3, 4) == 81


# =============================================================================
# ТЕСТЫ ЗАКОНОВ
# =============================================================================


@dataclass(frozen=True)
class _IntSemiring:
    """Корректный semiring на int"""

    zero: int = 0
    one: int = 1

    def plus(self, a: int, b: int) -> int:
        return a + b

    def times(self, a: int, b: int) -> int:
        return a * b


@dataclass(frozen=True)
class _SubtractionSemiring(_IntSemiring):
    """Некорректный: plus = вычитание"""

    def plus(self, a: int, b: int) -> int:
        return a - b


@dataclass(frozen=True)
class _ReversedMinOrder:
    """Некорректный порядок: min возвращает больший элемент"""

    def compare(self, a: int, b: int) -> Ordering:
        return Ordering.of(a, b)

    def min(self, a: int, b: int) -> int:
        return a if a >= b else b

    def max(self, a: int, b: int) -> int:
        return a if a >= b else b


class TestLaws:
    """check_semiring_laws / check_order_laws"""

    def test_cardinal_semiring_laws_hold(self, samples: list[Cardinal]) -> None:
        """Cardinal — коммутативный semiring с единицей"""
        assert check_semiring_laws(CARDINAL_SEMIRING, samples) == []

    def test_cardinal_order_laws_hold(self, samples: list[Cardinal]) -> None:
        """Cardinal — тотальный порядок"""
        assert check_order_laws(CARDINAL_ORDER, samples) == []

    def test_int_semiring_laws_hold(self) -> None:
        """Контрольный пример: int"""
        assert check_semiring_laws(_IntSemiring(), [0, 1, 2, 5]) == []

    def test_broken_semiring_detected(self) -> None:
        """Вычитание нарушает коммутативность и ассоциативность"""
        violations = check_semiring_laws(_SubtractionSemiring(), [0, 1, 2])
        laws = {v.law for v in violations}
        assert "additive commutativity" in laws
        assert "additive associativity" in laws
        assert "multiplicative identity" not in laws
        assert LawViolation("additive commutativity", (0, 1)) in violations

    def test_broken_order_detected(self) -> None:
        """Неверный min обнаруживается"""
        violations = check_order_laws(_ReversedMinOrder(), [1, 2])
        assert {v.law for v in violations} == {"min consistency"}

    def test_law_check_logged(
        self, samples: list[Cardinal], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Итог проверки пишется в debug-лог"""
        caplog.set_level(logging.DEBUG, logger="hyper")
        check_order_laws(CARDINAL_ORDER, samples)
        assert "Order law check: 8 samples, 0 violations" in caplog.text
