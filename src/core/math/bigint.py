"""
BigInt — Знаковое целое произвольной точности на массиве limbs

Хранение:
- limbs: массив 32-битных limbs, младший limb первым
- sign: True для отрицательного значения

Операции:
- Скалярные мутаторы (на месте): multiply_add, add_scalar, mul_scalar,
  divmod_scalar, mul_signed, div_signed, операторы +=, *=, //=
- BigInt × BigInt умножение (школьный алгоритм), новый результат
- Сравнение (==, <, <=, >, >=) через compare
- Десятичный разбор и сериализация (decimal_codec)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. limbs никогда не пуст; старших нулевых limbs нет; ноль хранится как [0]
2. Скалярные операции работают над модулем значения, знак не меняется
3. Знак произведения BigInt × BigInt = sign_a XOR sign_b
4. Копии глубокие: массив limbs никогда не разделяется между экземплярами
"""

from collections.abc import Iterable

import structlog
from pydantic import ValidationError

from src.core.math import decimal_codec
from src.core.math.comparison import Ordering, compare
from src.core.math.errors import DivideByZero, InvalidLimb
from src.core.math.limbs import (
    LIMB_BITS,
    combine,
    is_zero_limbs,
    split,
    trim_limbs,
    validate_limb,
)
from src.core.math.snapshot import BigIntSnapshot
from src.core.settings import get_settings

log = structlog.get_logger()


def _is_negative_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value < 0


class BigInt:
    """
    Знаковое целое произвольной точности.

    Изменяемый объект: скалярные операции меняют значение на месте,
    поэтому BigInt не хешируется.

    Examples:
        >>> x = BigInt("4294967297")
        >>> x.limbs
        [1, 1]
        >>> x *= 10
        >>> str(x)
        '42949672970'
    """

    __slots__ = ("limbs", "sign")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str = "0") -> None:
        """
        Построение из десятичной строки.

        Разбор нестрогий: хвост после максимальной серии цифр игнорируется.
        Для строгой проверки используйте BigInt.parse_prefix.

        Raises:
            InvalidFormat: Если строка не начинается с [+-]?[0-9]
        """
        value, _ = BigInt.parse_prefix(text)
        self.limbs: list[int] = value.limbs
        self.sign: bool = value.sign

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _raw(cls, limbs: list[int], sign: bool = False) -> "BigInt":
        # Без валидации: вызывающий код гарантирует корректность limbs
        instance = cls.__new__(cls)
        instance.limbs = trim_limbs(limbs)
        instance.sign = sign
        return instance

    @classmethod
    def zero(cls) -> "BigInt":
        """Новый ноль ([0], sign=False)."""
        return cls._raw([0])

    @classmethod
    def parse_prefix(cls, text: str, *, trace: bool = False) -> tuple["BigInt", int]:
        """
        Разбор максимального десятичного префикса строки.

        Значение строится на отдельном аккумуляторе и возвращается только
        при успехе, частично построенный BigInt не наблюдаем.

        Args:
            text: Строка вида [+-]?[0-9]+ с произвольным хвостом
            trace: Логировать каждую цифру (событие bigint.digit_pushed)

        Returns:
            (value, stop): stop — индекс первого непотреблённого символа;
            stop == len(text) означает, что строка потреблена полностью

        Raises:
            InvalidFormat: Если после необязательного знака нет цифры
        """
        sign, start = decimal_codec.scan_sign(text)
        accumulator = cls._raw([])
        stop = decimal_codec.push_digits(accumulator, text, start, trace=trace)
        accumulator.sign = sign
        return accumulator, stop

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], sign: bool = False) -> "BigInt":
        """
        Построение из массива limbs (младший первым).

        Пустой массив и массив из нулей дают канонический ноль [0].

        Raises:
            InvalidLimb: Если какой-либо limb вне [0, MAX_LIMB] или не int
            TypeError: Если sign не bool
        """
        if not isinstance(sign, bool):
            raise TypeError(f"sign must be a bool, got {sign!r}")

        try:
            snapshot = BigIntSnapshot(limbs=tuple(limbs), sign=sign)
        except ValidationError as e:
            raise InvalidLimb(f"Invalid limb array: {e}") from e
        return cls.from_snapshot(snapshot)

    @classmethod
    def from_snapshot(cls, snapshot: BigIntSnapshot) -> "BigInt":
        """Построение из валидированного снимка."""
        return cls._raw(list(snapshot.limbs), snapshot.sign)

    def snapshot(self) -> BigIntSnapshot:
        """Immutable снимок текущего значения."""
        return BigIntSnapshot(limbs=tuple(self.limbs), sign=self.sign)

    def copy(self) -> "BigInt":
        """Глубокая копия (массив limbs дублируется)."""
        return BigInt._raw(list(self.limbs), self.sign)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()

    # -------------------------------------------------------------------------
    # Скалярные операции
    # -------------------------------------------------------------------------

    def multiply_add(self, base: int, addend: int) -> "BigInt":
        """
        self = self * base + addend (на месте).

        carry инициализируется addend, затем для каждого limb от младшего:
            product = limb * base + carry
            (carry, limb) = split(product)
        Остаток carry добавляется новым старшим limb.

        Args:
            base: Скалярный множитель (один limb)
            addend: Скалярное слагаемое (один limb)

        Returns:
            self

        Raises:
            InvalidLimb: Если base или addend не помещаются в limb
        """
        validate_limb(base, "base")
        carry = validate_limb(addend, "addend")

        limbs = self.limbs
        for i in range(len(limbs)):
            carry, limbs[i] = split(limbs[i] * base + carry)

        if carry or not limbs:
            limbs.append(carry)

        # base == 0 обнуляет все limbs
        trim_limbs(limbs)
        return self

    def add_scalar(self, value: int) -> "BigInt":
        """Прибавление скаляра к модулю: multiply_add(1, value)."""
        return self.multiply_add(1, value)

    def mul_scalar(self, value: int) -> "BigInt":
        """Умножение модуля на скаляр: multiply_add(value, 0)."""
        return self.multiply_add(value, 0)

    def divmod_scalar(self, divisor: int) -> int:
        """
        Деление модуля на скаляр с остатком (частное на месте).

        Limbs обрабатываются от старшего к младшему:
            n = combine(rem, limb)
            limb = n // divisor
            rem = n % divisor

        Args:
            divisor: Скалярный делитель (один limb, ненулевой)

        Returns:
            Остаток (0 <= rem < divisor)

        Raises:
            DivideByZero: Если divisor == 0
            InvalidLimb: Если divisor не помещается в limb
        """
        validate_limb(divisor, "divisor")
        if divisor == 0:
            raise DivideByZero("Scalar division by zero")

        limbs = self.limbs
        remainder = 0
        for i in reversed(range(len(limbs))):
            n = combine(remainder, limbs[i])
            limbs[i] = n // divisor
            remainder = n % divisor

        trim_limbs(limbs)
        return remainder

    def mul_signed(self, value: int) -> "BigInt":
        """
        Умножение на знаковый скаляр (|value| <= MAX_LIMB).

        Отрицательный value инвертирует знак, модуль умножается на |value|.
        """
        negative = _is_negative_int(value)
        self.mul_scalar(-value if negative else value)
        if negative:
            self.sign = not self.sign
        return self

    def div_signed(self, value: int) -> int:
        """
        Деление на знаковый скаляр (|value| <= MAX_LIMB), частное на месте.

        Отрицательный value инвертирует знак. Деление усекающее по модулю.

        Returns:
            Остаток от деления модуля (неотрицательный)
        """
        negative = _is_negative_int(value)
        remainder = self.divmod_scalar(-value if negative else value)
        if negative:
            self.sign = not self.sign
        return remainder

    def __iadd__(self, value: int) -> "BigInt":
        if not isinstance(value, int):
            return NotImplemented
        return self.add_scalar(value)

    def __imul__(self, other: "int | BigInt") -> "BigInt":
        if isinstance(other, BigInt):
            product = self * other
            self.limbs = product.limbs
            self.sign = product.sign
            return self
        if not isinstance(other, int):
            return NotImplemented
        return self.mul_scalar(other)

    def __ifloordiv__(self, value: int) -> "BigInt":
        if not isinstance(value, int):
            return NotImplemented
        self.divmod_scalar(value)
        return self

    # -------------------------------------------------------------------------
    # BigInt × BigInt
    # -------------------------------------------------------------------------

    def __mul__(self, other: "BigInt") -> "BigInt":
        """
        Школьное умножение O(m·n), новый результат.

        Каждое частичное произведение накапливается прямо в общий буфер:
            product = a[i] * b[j] + result[i+j]
            (carry, result[i+j]) = split(product)
        carry распространяется в result[i+j+1], result[i+j+2], ...
        """
        if not isinstance(other, BigInt):
            return NotImplemented

        if not self or not other:
            return BigInt.zero()

        a_limbs = self.limbs
        b_limbs = other.limbs
        result = [0] * (len(a_limbs) + len(b_limbs))

        for i, a_limb in enumerate(a_limbs):
            if a_limb == 0:
                continue
            for j, b_limb in enumerate(b_limbs):
                k = i + j
                carry, result[k] = split(a_limb * b_limb + result[k])

                # Ripple-carry в старшие limbs
                while carry:
                    k += 1
                    if k == len(result):
                        result.append(0)
                    carry, result[k] = split(result[k] + carry)

        return BigInt._raw(result, self.sign != other.sign)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInt") -> Ordering:
        """Трёхзначное сравнение с other."""
        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) == Ordering.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) != Ordering.EQUAL

    def __lt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) == Ordering.LESS

    def __le__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) != Ordering.GREATER

    def __gt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) == Ordering.GREATER

    def __ge__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return compare(self, other) != Ordering.LESS

    def __bool__(self) -> bool:
        return not is_zero_limbs(self.limbs)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_decimal(self) -> str:
        """Десятичная строка с необязательным ведущим '-'."""
        return decimal_codec.format_decimal(self)

    def write_decimal(self, buffer: list[str]) -> list[str]:
        """Запись десятичного представления в буфер вызывающего кода."""
        return decimal_codec.write_decimal(self, buffer)

    def __str__(self) -> str:
        return self.to_decimal()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_decimal()}')"


# =============================================================================
# UTILITIES
# =============================================================================


def pow2(exponent: int) -> BigInt:
    """
    2 ** exponent, построенное напрямую в limbs.

    Args:
        exponent: Неотрицательная степень

    Raises:
        ValueError: Если exponent отрицательный

    Examples:
        >>> str(pow2(128))
        '340282366920938463463374607431768211456'
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    whole, bit = divmod(exponent, LIMB_BITS)
    limbs = [0] * whole + [1 << bit]
    return BigInt._raw(limbs)


def parse(text: str) -> BigInt:
    """
    Разбор десятичной строки с логированием результата.

    Нестрогий, как BigInt(text). Трассировка цифр включается настройкой
    BIGINT_TRACE_DIGITS.
    """
    value, _ = BigInt.parse_prefix(text, trace=get_settings().trace_digits)
    log.debug("bigint.parsed", text=text, limb_count=len(value.limbs), sign=value.sign)
    return value
