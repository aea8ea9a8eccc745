"""
Decimal Codec — десятичный разбор и сериализация BigInt

Разбор:
    value = 0
    для каждой цифры d слева направо: value.multiply_add(10, d)

Сериализация (на одноразовой копии):
    пока значение ненулевое: rem = copy.divmod_scalar(10), вывести '0' + rem
    цифры выводятся от младшей к старшей и затем разворачиваются

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Разбор потребляет максимальную серию цифр; хвост не проверяется
   (вызывающий код проверяет позицию остановки сам)
2. Сериализация не изменяет исходное значение
3. Буфер вывода либо создаётся на каждый вызов, либо принадлежит вызывающему
   коду; разделяемого scratch-буфера нет
"""

from typing import TYPE_CHECKING, Final

import structlog

from src.core.math.errors import InvalidFormat
from src.core.math.limbs import is_zero_limbs

if TYPE_CHECKING:
    from src.core.math.bigint import BigInt

log = structlog.get_logger()

# Основание десятичной системы
DECIMAL_BASE: Final[int] = 10

# Допустимые ведущие знаки
SIGN_NEGATIVE: Final[str] = "-"
SIGN_POSITIVE: Final[str] = "+"


# =============================================================================
# РАЗБОР
# =============================================================================


def _is_decimal_digit(char: str) -> bool:
    # str.isdigit() принимает и не-ASCII цифры, здесь нужны только '0'..'9'
    return "0" <= char <= "9"


def scan_sign(text: str) -> tuple[bool, int]:
    """
    Разбор необязательного ведущего знака.

    Args:
        text: Исходная строка

    Returns:
        (sign, index): sign=True для '-', index — позиция первого символа
        после знака
    """
    if text[:1] == SIGN_NEGATIVE:
        return (True, 1)
    if text[:1] == SIGN_POSITIVE:
        return (False, 1)
    return (False, 0)


def push_digits(target: "BigInt", text: str, start: int = 0, trace: bool = False) -> int:
    """
    Накопление десятичных цифр в target через multiply_add(10, d).

    Разбор останавливается на первом не-цифровом символе.

    Args:
        target: Аккумулятор (изменяется на месте)
        text: Исходная строка
        start: Позиция первой цифры
        trace: Логировать bigint.digit_pushed на каждую цифру

    Returns:
        Позиция остановки (индекс первого непотреблённого символа)

    Raises:
        InvalidFormat: Если в позиции start нет десятичной цифры
    """
    if start >= len(text) or not _is_decimal_digit(text[start]):
        raise InvalidFormat(f"String does not form a valid integer: {text!r}")

    index = start

    while index < len(text) and _is_decimal_digit(text[index]):
        digit = ord(text[index]) - ord("0")
        target.multiply_add(DECIMAL_BASE, digit)
        index += 1

        if trace:
            log.debug(
                "bigint.digit_pushed",
                digit=digit,
                value=format_decimal(target),
                limb_count=len(target.limbs),
                limbs=list(target.limbs),
            )

    return index


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def write_decimal(value: "BigInt", buffer: list[str]) -> list[str]:
    """
    Запись десятичного представления value в конец буфера вызывающего кода.

    Отрицательное ненулевое значение получает ведущий '-'. Ноль
    записывается как "0" независимо от знака.

    Args:
        value: Сериализуемое значение (не изменяется)
        buffer: Буфер символов, принадлежащий вызывающему коду

    Returns:
        Тот же буфер (для цепочек вызовов)
    """
    if is_zero_limbs(value.limbs):
        buffer.append("0")
        return buffer

    if value.sign:
        buffer.append(SIGN_NEGATIVE)

    start = len(buffer)
    # Деление разрушительно, работаем на копии
    work = value.copy()

    while work:
        remainder = work.divmod_scalar(DECIMAL_BASE)
        buffer.append(chr(ord("0") + remainder))

    # Цифры записаны от младшей к старшей
    buffer[start:] = buffer[start:][::-1]
    return buffer


def format_decimal(value: "BigInt") -> str:
    """
    Десятичная строка для value (буфер создаётся на каждый вызов).

    Examples:
        >>> format_decimal(BigInt("-000123"))
        '-123'
    """
    return "".join(write_decimal(value, []))
