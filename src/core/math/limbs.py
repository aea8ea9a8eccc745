"""
Limbs — Carry-Propagation Primitives

Модуль описывает хранение BigInt в виде массива limbs фиксированной ширины
и примитивы переноса между limb и double-limb представлением:
- combine(high, low): склейка двух limbs в double-width значение
- split(value): разбиение double-width значения на (carry, limb)
- нормализация массива limbs (удаление старших нулевых limbs)
- валидация скалярных операндов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. split(combine(h, l)) == (h, l) для любых limbs, включая MAX_LIMB
2. Любой результат, способный превысить LIMB_BITS, вычисляется в
   double-width домене и разбивается обратно через split
3. Нормализованный массив никогда не пуст: ноль хранится как [0]
"""

from typing import Final

from src.core.math.errors import InvalidLimb

# =============================================================================
# ПАРАМЕТРЫ LIMB
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32

# Ширина double-width значения (результат limb * limb + limb + limb)
DOUBLE_LIMB_BITS: Final[int] = 2 * LIMB_BITS

# Основание системы счисления limbs
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Максимальное значение limb, также маска младшей половины double-limb
MAX_LIMB: Final[int] = LIMB_BASE - 1

# Максимальное double-width значение
MAX_DOUBLE_LIMB: Final[int] = (1 << DOUBLE_LIMB_BITS) - 1


# =============================================================================
# CARRY-PROPAGATION
# =============================================================================


def combine(high: int, low: int) -> int:
    """
    Склейка двух limbs в одно double-width значение.

    Args:
        high: Старший limb
        low: Младший limb

    Returns:
        (high << LIMB_BITS) | low

    Examples:
        >>> combine(1, 1)
        4294967297
        >>> combine(0, 7)
        7
    """
    return ((high & MAX_LIMB) << LIMB_BITS) | (low & MAX_LIMB)


def split(value: int) -> tuple[int, int]:
    """
    Разбиение double-width значения на (high, low).

    high используется как carry для следующего, более старшего limb.

    Args:
        value: Double-width значение (0 <= value <= MAX_DOUBLE_LIMB)

    Returns:
        (high, low), оба усечены до LIMB_BITS

    Examples:
        >>> split(4294967297)
        (1, 1)
        >>> split(MAX_DOUBLE_LIMB) == (MAX_LIMB, MAX_LIMB)
        True
    """
    return ((value >> LIMB_BITS) & MAX_LIMB, value & MAX_LIMB)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim_limbs(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs на месте.

    Никогда не укорачивает массив ниже одного limb: нулевое значение
    (включая пустой массив) приводится к каноническому [0].

    Args:
        limbs: Массив limbs (младший первым), изменяется на месте

    Returns:
        Тот же список (для цепочек вызовов)
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero_limbs(limbs: list[int]) -> bool:
    """True если массив limbs представляет ноль ([] или только нули)."""
    return not any(limbs)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_limb(value: object) -> bool:
    """
    Проверка, помещается ли значение в один limb.

    bool отвергается, несмотря на то что является подклассом int.
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_LIMB
    )


def validate_limb(value: object, name: str) -> int:
    """
    Валидация скалярного операнда размером в один limb.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidLimb: Если value не int или вне [0, MAX_LIMB]
    """
    if not is_limb(value):
        raise InvalidLimb(f"{name} must be an int in [0, {MAX_LIMB}], got {value!r}")
    return value  # type: ignore[return-value]
