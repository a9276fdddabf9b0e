"""
Encodings — текстовые и числовые представления magnitude buffers

Форматы:
- Hex: необязательный "-", необязательный префикс "0x"/"0X", цифры
  [0-9a-fA-F]; нечётная длина дополняется "0" слева; один байт на пару цифр
- UTF-8: байты буфера — стандартная UTF-8 кодировка текста
- Binary: восемь двоичных цифр на байт
- Safe integer: нативное целое в [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER]

Любой невалидный вход → FormatError.
"""

import logging
import re
from typing import Final, NamedTuple

from bufnum.core.math.bit_utils import bit_length
from bufnum.core.math.errors import ArithmeticOverflowError, FormatError
from bufnum.core.math.magnitude import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    BytesLike,
)

logger = logging.getLogger(__name__)

# Знак, префикс, цифры
HEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"(-)?(?:0[xX])?([0-9a-fA-F]*)")


class HexLiteral(NamedTuple):
    """Разобранная hex-строка: magnitude и флаг знака."""

    magnitude: bytearray
    negative: bool


# =============================================================================
# HEX
# =============================================================================


def parse_hex(text: str) -> HexLiteral:
    """
    Разбор hex-строки со знаком.

    Args:
        text: Hex-строка, например "-0x1ff" или "00ab"

    Returns:
        HexLiteral(magnitude, negative); ведущие нули сохраняются

    Raises:
        FormatError: Если строка не соответствует формату

    Examples:
        >>> parse_hex("0x123ff8")
        HexLiteral(magnitude=bytearray(b'\\x12?\\xf8'), negative=False)
        >>> parse_hex("-abc").negative
        True
    """
    if not isinstance(text, str):
        raise FormatError(f"hex input must be str, got {type(text).__name__}")

    match = HEX_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("rejected hex literal %r", text)
        raise FormatError(f"{text} is not a valid number string")

    sign, digits = match.groups()
    if len(digits) & 1:
        digits = "0" + digits

    return HexLiteral(magnitude=bytearray.fromhex(digits), negative=sign is not None)


def from_hex(text: str) -> bytearray:
    """
    Разбор беззнаковой hex-строки в magnitude.

    Raises:
        FormatError: Если строка невалидна или содержит знак "-"
    """
    literal = parse_hex(text)
    if literal.negative:
        raise FormatError(f"{text} is negative, a magnitude cannot carry a sign")
    return literal.magnitude


def to_hex(buffer: BytesLike) -> str:
    """
    Hex-представление буфера: нижний регистр, две цифры на байт.

    Пустой буфер отображается как "0". Ведущие нулевые байты сохраняются.
    """
    return bytes(buffer).hex() or "0"


def to_binary(buffer: BytesLike) -> str:
    """Двоичное представление: восемь цифр на байт, "00000000" для пустого."""
    return "".join(f"{byte:08b}" for byte in buffer) or "00000000"


# =============================================================================
# UTF-8
# =============================================================================


def from_utf(text: str) -> bytearray:
    """
    UTF-8 байты текста как magnitude (не числовой разбор текста).

    Examples:
        >>> from_utf("한글").hex()
        'ed959ceab880'
    """
    return bytearray(text.encode("utf-8"))


def to_utf(buffer: BytesLike) -> str:
    """
    Декодирование буфера как UTF-8 текста.

    Raises:
        FormatError: Если буфер не является валидной UTF-8 кодировкой
    """
    try:
        return bytes(buffer).decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"{to_hex(buffer)} is not a valid UTF-8 encoding") from e


# =============================================================================
# SAFE INTEGER
# =============================================================================


def from_number(value: int) -> HexLiteral:
    """
    Нативное целое → HexLiteral через hex-представление.

    Args:
        value: Целое в [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER]

    Raises:
        FormatError: Если value не int или вне safe integer range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"expected an integer, got {type(value).__name__}")

    if value < MIN_SAFE_INTEGER or value > MAX_SAFE_INTEGER:
        logger.debug("number %d outside safe integer bounds", value)
        raise FormatError(f"Number {value} outside safe integer bounds")

    sign = "-" if value < 0 else ""
    return parse_hex(f"{sign}{abs(value):x}")


def to_number(buffer: BytesLike) -> int:
    """
    Magnitude → нативное целое.

    Raises:
        ArithmeticOverflowError: Если значение больше MAX_SAFE_INTEGER
    """
    if bit_length(buffer) > MAX_SAFE_INTEGER.bit_length():
        raise ArithmeticOverflowError(
            f"{to_hex(buffer)} exceeds the safe integer range"
        )

    result = 0
    for byte in buffer:
        result = (result << 8) | byte
    return result
