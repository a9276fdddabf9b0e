"""
BigNum — знаковое большое число поверх magnitude buffer

Тонкий фасад над беззнаковыми движками core.math: хранит ровно один
приватный magnitude buffer и один флаг знака.

ЗНАКОВОЕ ПРАВИЛО (для всех арифметических операций):
1. Комбинировать знаки операндов
2. Делегировать операцию над magnitudes беззнаковому движку
3. Применить знак результата
4. Нормализовать: ноль всегда положительный, magnitude обрезается до
   канонической формы

ВЛАДЕНИЕ:
- Конструкторы всегда копируют входной буфер
- Изменяют экземпляр только iadd / isub / imul и сеттер negative
- Все остальные операции возвращают новый независимый экземпляр

Деление — с округлением к нулю: знак частного = XOR знаков, знак остатка =
знак делимого.
"""

from enum import Enum

from bufnum.core.math.additive import add, sub
from bufnum.core.math.bit_utils import bit_length, trim
from bufnum.core.math.comparator import compare
from bufnum.core.math.division import div_mod
from bufnum.core.math.encodings import (
    from_number,
    from_utf,
    parse_hex,
    to_hex,
    to_number,
    to_utf,
)
from bufnum.core.math.errors import FormatError
from bufnum.core.math.magnitude import BytesLike, Endianness, as_magnitude, is_zero
from bufnum.core.math.multiplicative import mul


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак значения"""

    POSITIVE = "pos"
    NEGATIVE = "neg"


# =============================================================================
# SIGNED MAGNITUDE HELPERS
# =============================================================================


def _signed_add(
    a: BytesLike, a_negative: bool, b: BytesLike, b_negative: bool
) -> tuple[bytearray, bool]:
    """Сложение знаковых magnitudes: (magnitude, negative)."""
    if a_negative == b_negative:
        return add(a, b), a_negative

    # Разные знаки: из большей magnitude вычитается меньшая
    if compare(a, b) >= 0:
        return sub(a, b), a_negative
    return sub(b, a), b_negative


# =============================================================================
# VALUE TYPE
# =============================================================================


class BigNum:
    """
    Знаковое целое произвольной точности.

    Конструктор выбирает путь по типу value:
    - bytes / bytearray / memoryview → сырой буфер (копия; LITTLE разворачивается)
    - int → safe integer через hex-путь
    - str → hex-строка (поддерживается только base=16)

    Examples:
        >>> BigNum("0x123ff8").hex
        '123ff8'
        >>> (BigNum(5) - BigNum(7)).signed_hex
        '-02'
    """

    __slots__ = ("_magnitude", "_negative")

    # Изменяемый тип: не хэшируется
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: BytesLike | int | str,
        base: int = 16,
        endian: Endianness = Endianness.BIG,
    ):
        if isinstance(value, (bytes, bytearray, memoryview)):
            magnitude, negative = as_magnitude(value, endian), False
        elif isinstance(value, int):
            magnitude, negative = from_number(value)
        elif isinstance(value, str):
            if base != 16:
                raise FormatError(f"Only base 16 strings supported, got base {base}")
            magnitude, negative = parse_hex(value)
        else:
            raise TypeError(f"invalid constructor argument: {value!r}")

        self._magnitude = magnitude
        self._negative = negative and not is_zero(magnitude)

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_buffer(cls, buffer: BytesLike, endian: Endianness = Endianness.BIG) -> "BigNum":
        """Копия сырого буфера как положительное значение."""
        return cls(as_magnitude(buffer, endian))

    @classmethod
    def from_hex(cls, text: str) -> "BigNum":
        """
        Разбор hex-строки; "-" задаёт отрицательный знак.

        Raises:
            FormatError: Если строка невалидна
        """
        return cls(text, 16)

    @classmethod
    def from_number(cls, value: int) -> "BigNum":
        """
        Нативное целое в safe integer range.

        Raises:
            FormatError: Если value вне safe integer range
        """
        magnitude, negative = from_number(value)
        return cls._from_parts(magnitude, negative)

    @classmethod
    def from_utf(cls, text: str) -> "BigNum":
        """UTF-8 байты текста как magnitude."""
        return cls(from_utf(text))

    @classmethod
    def _from_parts(cls, magnitude: BytesLike, negative: bool) -> "BigNum":
        """Результат арифметики: каноническая magnitude, ноль положителен."""
        instance = cls.__new__(cls)
        instance._magnitude = trim(magnitude)
        instance._negative = negative and bit_length(instance._magnitude) > 0
        return instance

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def buffer(self) -> bytes:
        """Неизменяемая копия magnitude (big-endian)."""
        return bytes(self._magnitude)

    @property
    def hex(self) -> str:
        """Hex magnitude без знака; "0" для пустой magnitude."""
        return to_hex(self._magnitude)

    @property
    def signed_hex(self) -> str:
        """Hex со знаком "-" для отрицательных; разбирается обратно from_hex."""
        return f"-{self.hex}" if self._negative else self.hex

    @property
    def utf(self) -> str:
        """
        Magnitude как UTF-8 текст.

        Raises:
            FormatError: Если значение отрицательное или байты не UTF-8
        """
        if self._negative:
            raise FormatError("Negative values have no UTF-8 representation")
        return to_utf(self._magnitude)

    @property
    def sign(self) -> Sign:
        return Sign.NEGATIVE if self._negative else Sign.POSITIVE

    @property
    def negative(self) -> bool:
        return self._negative

    @negative.setter
    def negative(self, value: bool) -> None:
        # Ноль остаётся положительным
        self._negative = bool(value) and not is_zero(self._magnitude)

    def bit_length(self) -> int:
        return bit_length(self._magnitude)

    def byte_length(self) -> int:
        return len(self._magnitude)

    def zero_bits(self) -> int:
        """Число ведущих нулевых бит хранимого буфера."""
        return self.byte_length() * 8 - self.bit_length()

    def is_neg(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return is_zero(self._magnitude)

    def is_even(self) -> bool:
        return len(self._magnitude) == 0 or self._magnitude[-1] & 1 == 0

    def is_odd(self) -> bool:
        return not self.is_even()

    def to_number(self) -> int:
        """
        Знаковое нативное целое.

        Raises:
            ArithmeticOverflowError: Если magnitude вне safe integer range
        """
        value = to_number(self._magnitude)
        return -value if self._negative else value

    # -------------------------------------------------------------------------
    # Арифметика (новый экземпляр)
    # -------------------------------------------------------------------------

    def add(self, other: "BigNum") -> "BigNum":
        other = _coerce(other)
        return BigNum._from_parts(
            *_signed_add(self._magnitude, self._negative, other._magnitude, other._negative)
        )

    def sub(self, other: "BigNum") -> "BigNum":
        other = _coerce(other)
        return BigNum._from_parts(
            *_signed_add(self._magnitude, self._negative, other._magnitude, not other._negative)
        )

    def mul(self, other: "BigNum") -> "BigNum":
        other = _coerce(other)
        return BigNum._from_parts(
            mul(self._magnitude, other._magnitude), self._negative != other._negative
        )

    def divmod(self, other: "BigNum") -> tuple["BigNum", "BigNum"]:
        """
        Деление с остатком, округление частного к нулю.

        Returns:
            (частное, остаток), где частное * other + остаток == self

        Raises:
            DivisionByZeroError: Если other равен нулю
        """
        other = _coerce(other)
        result = div_mod(self._magnitude, other._magnitude)
        return (
            BigNum._from_parts(result.div, self._negative != other._negative),
            BigNum._from_parts(result.mod, self._negative),
        )

    def div(self, other: "BigNum") -> "BigNum":
        return self.divmod(other)[0]

    def mod(self, other: "BigNum") -> "BigNum":
        return self.divmod(other)[1]

    def neg(self) -> "BigNum":
        return BigNum._from_parts(self._magnitude, not self._negative)

    def abs(self) -> "BigNum":
        return BigNum._from_parts(self._magnitude, False)

    # -------------------------------------------------------------------------
    # Арифметика на месте
    # -------------------------------------------------------------------------

    def iadd(self, other: "BigNum") -> "BigNum":
        return self._assign(self.add(other))

    def isub(self, other: "BigNum") -> "BigNum":
        return self._assign(self.sub(other))

    def imul(self, other: "BigNum") -> "BigNum":
        return self._assign(self.mul(other))

    def _assign(self, result: "BigNum") -> "BigNum":
        # Результат полностью вычислен до записи: при ошибке self не меняется
        self._magnitude = result._magnitude
        self._negative = result._negative
        return self

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def cmp(self, other: "BigNum") -> int:
        """
        Знаковое трёхстороннее сравнение.

        Returns:
            -1, 0 или 1; ведущие нули и знак нуля не влияют на результат
        """
        other = _coerce(other)
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = compare(self._magnitude, other._magnitude)
        return -order if self._negative else order

    def eq(self, other: "BigNum") -> bool:
        return self.cmp(other) == 0

    def lt(self, other: "BigNum") -> bool:
        return self.cmp(other) < 0

    def lte(self, other: "BigNum") -> bool:
        return self.cmp(other) <= 0

    def gt(self, other: "BigNum") -> bool:
        return self.cmp(other) > 0

    def gte(self, other: "BigNum") -> bool:
        return self.cmp(other) >= 0

    # -------------------------------------------------------------------------
    # Операторы Python
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.mul(other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return _coerce(other).add(self)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return _coerce(other).sub(self)

    def __rmul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return _coerce(other).mul(self)

    def __neg__(self) -> "BigNum":
        return self.neg()

    def __abs__(self) -> "BigNum":
        return self.abs()

    def __eq__(self, other) -> bool:
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, (BigNum, int)):
            return NotImplemented
        return self.gte(other)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"BigNum('{self.signed_hex}')"

    def __str__(self) -> str:
        return self.signed_hex


def _coerce(value: BigNum | int) -> BigNum:
    """BigNum как есть; int любой величины оборачивается через hex-путь."""
    if isinstance(value, BigNum):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        sign = "-" if value < 0 else ""
        magnitude, negative = parse_hex(f"{sign}{abs(value):x}")
        return BigNum._from_parts(magnitude, negative)
    raise TypeError(f"unsupported operand type: {type(value).__name__}")
