"""
BigInt Errors — таксономия ошибок арифметического движка

Все ошибки наследуют BigIntError и дополнительно встроенный тип Python,
которому они семантически соответствуют (ValueError / ZeroDivisionError),
поэтому вызывающий код может ловить их любым из двух способов.

Overflow отдельного типа не имеет: carry всегда помещается в новый limb,
массив limbs растёт.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntError(Exception):
    """Базовая ошибка арифметического движка BigInt."""

    pass


class InvalidFormat(BigIntError, ValueError):
    """
    Строка не образует валидное десятичное целое.

    Возникает при пустой строке, строке из одного знака или строке,
    первый символ которой (после знака) не является десятичной цифрой.
    """

    pass


class DivideByZero(BigIntError, ZeroDivisionError):
    """Скалярный делитель равен нулю."""

    pass


class InvalidLimb(BigIntError, ValueError):
    """
    Значение не помещается в один limb.

    Скалярные операнды и элементы массива limbs обязаны быть int
    в диапазоне [0, MAX_LIMB].
    """

    pass
