"""
Тесты для модуля Limbs

Проверяет:
1. combine/split и закон round-trip (включая MAX_LIMB)
2. Нормализацию массива limbs
3. Валидацию скалярных операндов
"""

import pytest

from src.core.math.errors import BigIntError, InvalidLimb
from src.core.math.limbs import (
    DOUBLE_LIMB_BITS,
    LIMB_BASE,
    LIMB_BITS,
    MAX_DOUBLE_LIMB,
    MAX_LIMB,
    combine,
    is_limb,
    is_zero_limbs,
    split,
    trim_limbs,
    validate_limb,
)

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestLimbConstants:
    """Тесты параметров limb"""

    def test_limb_width(self) -> None:
        """Limb 32-битный, double-limb ровно вдвое шире"""
        assert LIMB_BITS == 32
        assert DOUBLE_LIMB_BITS == 2 * LIMB_BITS

    def test_max_values(self) -> None:
        """MAX_LIMB и MAX_DOUBLE_LIMB согласованы с основанием"""
        assert LIMB_BASE == 2**32
        assert MAX_LIMB == 2**32 - 1
        assert MAX_DOUBLE_LIMB == 2**64 - 1


# =============================================================================
# ТЕСТЫ CARRY-PROPAGATION
# =============================================================================


class TestCombineSplit:
    """Тесты combine / split"""

    def test_combine_places_high_above_low(self) -> None:
        """combine(h, l) == h * 2**32 + l"""
        assert combine(1, 1) == 4294967297
        assert combine(0, 7) == 7
        assert combine(15, 237) == 64424509677

    def test_split_returns_carry_and_limb(self) -> None:
        """split разбивает double-limb на (high, low)"""
        assert split(4294967297) == (1, 1)
        assert split(7) == (0, 7)
        assert split(MAX_LIMB + 1) == (1, 0)

    def test_split_max_double_limb(self) -> None:
        """Максимальное double-width значение не теряет битов"""
        assert split(MAX_DOUBLE_LIMB) == (MAX_LIMB, MAX_LIMB)

    @pytest.mark.parametrize(
        ("high", "low"),
        [
            (0, 0),
            (0, MAX_LIMB),
            (MAX_LIMB, 0),
            (MAX_LIMB, MAX_LIMB),
            (1, 2),
            (0x80000000, 0x7FFFFFFF),
            (123456789, 987654321),
        ],
    )
    def test_round_trip(self, high: int, low: int) -> None:
        """split(combine(h, l)) == (h, l)"""
        assert split(combine(high, low)) == (high, low)

    def test_worst_case_product_fits_double_limb(self) -> None:
        """MAX_LIMB * MAX_LIMB + 2 * MAX_LIMB помещается в double-limb"""
        worst = MAX_LIMB * MAX_LIMB + MAX_LIMB + MAX_LIMB
        assert worst == MAX_DOUBLE_LIMB
        assert split(worst) == (MAX_LIMB, MAX_LIMB)


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestTrimLimbs:
    """Тесты trim_limbs"""

    def test_strips_most_significant_zeros(self) -> None:
        """Старшие нулевые limbs удаляются"""
        assert trim_limbs([5, 0, 0]) == [5]
        assert trim_limbs([0, 3, 0]) == [0, 3]

    def test_keeps_interior_zeros(self) -> None:
        """Нули внутри числа сохраняются"""
        assert trim_limbs([0, 0, 5]) == [0, 0, 5]

    def test_zero_becomes_single_limb(self) -> None:
        """Ноль нормализуется к [0]"""
        assert trim_limbs([0, 0, 0]) == [0]
        assert trim_limbs([0]) == [0]
        assert trim_limbs([]) == [0]

    def test_mutates_in_place(self) -> None:
        """Нормализация выполняется на месте"""
        limbs = [1, 0]
        result = trim_limbs(limbs)
        assert result is limbs
        assert limbs == [1]

    def test_is_zero_limbs(self) -> None:
        """Пустой массив и массив нулей равны нулю"""
        assert is_zero_limbs([])
        assert is_zero_limbs([0])
        assert is_zero_limbs([0, 0])
        assert not is_zero_limbs([0, 1])


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateLimb:
    """Тесты is_limb / validate_limb"""

    @pytest.mark.parametrize("value", [0, 1, 10, MAX_LIMB])
    def test_valid_limbs(self, value: int) -> None:
        """Значения в [0, MAX_LIMB] принимаются"""
        assert is_limb(value)
        assert validate_limb(value, "value") == value

    @pytest.mark.parametrize("value", [-1, MAX_LIMB + 1, 2**64, 1.0, "1", None, True])
    def test_invalid_limbs(self, value: object) -> None:
        """Значения вне диапазона и не-int отвергаются"""
        assert not is_limb(value)
        with pytest.raises(InvalidLimb, match="base must be an int"):
            validate_limb(value, "base")

    def test_invalid_limb_is_value_error(self) -> None:
        """InvalidLimb ловится как ValueError и как BigIntError"""
        with pytest.raises(ValueError):
            validate_limb(-1, "addend")
        with pytest.raises(BigIntError):
            validate_limb(-1, "addend")
