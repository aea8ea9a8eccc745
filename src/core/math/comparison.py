"""
Comparison — Сравнение BigInt с учётом знака и величины

Два уровня API:
- compare_legacy(a, b): четырёхзначный компаратор {-2, -1, 0, 1, 2}, где ±2
  сигнализирует о различии длины массивов limbs (различие по порядку величины)
- compare(a, b): основной трёхзначный компаратор, возвращает Ordering

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль равен нулю независимо от знака (0 == -0)
2. Для любой пары ровно одно из a < b, a == b, a > b
3. sign(compare_legacy(a, b)) == compare(a, b)
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Final

from src.core.math.limbs import is_zero_limbs

if TYPE_CHECKING:
    from src.core.math.bigint import BigInt

# Код различия по длине массива limbs (порядок величины)
MAGNITUDE_DIFFERS: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(IntEnum):
    """Результат трёхзначного сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# COMPARATORS
# =============================================================================


def _compare_magnitude_same_length(a_limbs: list[int], b_limbs: list[int]) -> int:
    # От старшего limb к младшему, первое расхождение решает
    for a_limb, b_limb in zip(reversed(a_limbs), reversed(b_limbs)):
        if a_limb != b_limb:
            return -1 if a_limb < b_limb else 1
    return 0


def compare_legacy(a: "BigInt", b: "BigInt") -> int:
    """
    Четырёхзначное сравнение двух BigInt.

    Алгоритм:
        - оба ноль → 0 (знак игнорируется)
        - ровно один ноль → знак ненулевого операнда решает (±1)
        - разные знаки → отрицательный меньше (±1)
        - одинаковый знак, разная длина limbs → ±2; для отрицательных
          более длинный массив означает меньшее значение
        - одинаковый знак и длина → старшие limbs решают (±1),
          результат инвертируется для отрицательных

    Args:
        a: Первый операнд
        b: Второй операнд

    Returns:
        -2 / -1 если a < b, 0 если a == b, 1 / 2 если a > b

    Examples:
        >>> compare_legacy(BigInt("5"), BigInt("4294967296"))
        -2
        >>> compare_legacy(BigInt("-5"), BigInt("3"))
        -1
    """
    a_zero = is_zero_limbs(a.limbs)
    b_zero = is_zero_limbs(b.limbs)

    if a_zero and b_zero:
        return 0
    if a_zero:
        return 1 if b.sign else -1
    if b_zero:
        return -1 if a.sign else 1

    if a.sign != b.sign:
        return -1 if a.sign else 1

    direction = -1 if a.sign else 1

    if len(a.limbs) != len(b.limbs):
        shorter = -MAGNITUDE_DIFFERS if len(a.limbs) < len(b.limbs) else MAGNITUDE_DIFFERS
        return shorter * direction

    return _compare_magnitude_same_length(a.limbs, b.limbs) * direction


def compare(a: "BigInt", b: "BigInt") -> Ordering:
    """
    Трёхзначное сравнение двух BigInt.

    Returns:
        Ordering.LESS, Ordering.EQUAL или Ordering.GREATER
    """
    result = compare_legacy(a, b)

    if result < 0:
        return Ordering.LESS
    elif result > 0:
        return Ordering.GREATER
    else:
        return Ordering.EQUAL
