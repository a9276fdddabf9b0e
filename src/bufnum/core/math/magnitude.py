"""
Magnitude Buffer Model — каноническое представление беззнакового целого

Magnitude buffer — последовательность байтов, старший байт первым
(big-endian), представляющая неотрицательное целое.

КАНОНИЧЕСКАЯ ФОРМА:
- Нет ведущих нулевых байтов
- Ноль представлен пустым буфером (b"\\x00" декодируется в то же значение)
- Длина не является частью идентичности значения

ВЛАДЕНИЕ:
Все функции модуля возвращают новый bytearray, эксклюзивный для вызывающего.
Входные буферы никогда не изменяются.
"""

from enum import Enum
from typing import Final

from bufnum.core.math.errors import ArithmeticOverflowError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Маска младших 8 бит
BYTE_MASK: Final[int] = 0xFF

# Маска 16-битной lane (единица работы умножения)
LANE_MASK: Final[int] = 0xFFFF

# Ширина lane в байтах
LANE_BYTES: Final[int] = 2

# Safe integer range: границы, в которых magnitude без потерь конвертируется
# в нативное целое и обратно (2**53 - 1)
MAX_SAFE_INTEGER: Final[int] = 9007199254740991
MIN_SAFE_INTEGER: Final[int] = -9007199254740991

BytesLike = bytes | bytearray | memoryview


# =============================================================================
# ТИПЫ
# =============================================================================


class Endianness(str, Enum):
    """Порядок байтов сырого буфера"""

    BIG = "be"
    LITTLE = "le"


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def as_magnitude(buffer: BytesLike, endian: Endianness = Endianness.BIG) -> bytearray:
    """
    Приватная копия сырого буфера в виде magnitude.

    Args:
        buffer: Байты вызывающего (bytes, bytearray или memoryview)
        endian: Порядок байтов входа; LITTLE разворачивается в big-endian

    Returns:
        Новый bytearray (big-endian)

    Raises:
        TypeError: Если buffer не bytes-like
    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise TypeError(f"magnitude must be bytes-like, got {type(buffer).__name__}")

    result = bytearray(buffer)
    if Endianness(endian) is Endianness.LITTLE:
        result.reverse()
    return result


def clone(buffer: BytesLike) -> bytearray:
    """Независимая копия буфера."""
    return bytearray(buffer)


def zeros(length: int) -> bytearray:
    """Буфер из length нулевых байтов."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return bytearray(length)


def slice_buffer(buffer: BytesLike, start: int, stop: int | None = None) -> bytearray:
    """
    Копия среза буфера.

    Используется для разрезания секретов фиксированной длины (например,
    64-байтного MAC digest на ключ и chain code).
    """
    return bytearray(buffer[start:stop])


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================


def pad_to_multiple(buffer: BytesLike, n: int) -> bytearray:
    """
    Дополнение буфера нулями слева до длины, кратной n байтам.

    Args:
        buffer: Исходный буфер
        n: Кратность (например, LANE_BYTES для 16-битных lanes)

    Returns:
        Новый буфер длиной ceil(len / n) * n с тем же значением

    Examples:
        >>> pad_to_multiple(b"\\x01\\x02\\x03", 2)
        bytearray(b'\\x00\\x01\\x02\\x03')
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")

    under_length = (n - len(buffer) % n) % n
    return bytearray(under_length) + bytearray(buffer)


def pad_to_length(buffer: BytesLike, length: int) -> bytearray:
    """
    Дополнение буфера нулями слева ровно до length байтов.

    Ведущие нули входа отбрасываются перед выравниванием, поэтому
    b"\\x00\\x00\\x01" помещается в length=1.

    Args:
        buffer: Исходный буфер
        length: Целевая длина

    Returns:
        Новый буфер длиной ровно length

    Raises:
        ArithmeticOverflowError: Если значение не помещается в length байтов
    """
    start = leading_zero_bytes(buffer)
    significant = len(buffer) - start
    if significant > length:
        raise ArithmeticOverflowError(
            f"value needs {significant} bytes, does not fit in {length}"
        )
    return bytearray(length - significant) + bytearray(buffer[start:])


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def leading_zero_bytes(buffer: BytesLike) -> int:
    """Количество ведущих нулевых байтов."""
    count = 0
    for byte in buffer:
        if byte != 0:
            break
        count += 1
    return count


def is_zero(buffer: BytesLike) -> bool:
    """True для пустого буфера и буфера из одних нулей."""
    return leading_zero_bytes(buffer) == len(buffer)
