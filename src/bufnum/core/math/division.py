"""
Division Engine — двоичное деление столбиком и модульные примитивы

Алгоритм div_mod(numerator, denominator):
    for index in bit_length(numerator) - 1 .. 0:
        remainder <<= 1
        remainder |= bit(numerator, index)
        if remainder >= denominator:
            remainder -= denominator
            quotient |= 1 << index

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bit_length(denominator) == 0 → DivisionByZeroError
2. numerator < denominator → div = пустой буфер, mod = копия numerator
3. quotient и remainder выделяются заранее (len(numerator) и
   len(denominator) + 1 байт) и не перевыделяются по ходу алгоритма
4. div * denominator + mod == numerator, 0 <= mod < denominator

Стоимость: O(bit_length(numerator)) сравнений и вычитаний.
"""

import logging
from typing import NamedTuple

from bufnum.core.math.additive import add, sub_in_place
from bufnum.core.math.bit_utils import (
    bit_length,
    get_bit,
    left_shift_in_place,
    set_bit_in_place,
    trim,
)
from bufnum.core.math.comparator import gte, lt
from bufnum.core.math.errors import DivisionByZeroError
from bufnum.core.math.magnitude import BytesLike

logger = logging.getLogger(__name__)


class DivModResult(NamedTuple):
    """Частное и остаток целочисленного деления."""

    div: bytearray  # Частное
    mod: bytearray  # Остаток


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def div_mod(numerator: BytesLike, denominator: BytesLike) -> DivModResult:
    """
    Деление с остатком.

    Args:
        numerator: Делимое
        denominator: Делитель

    Returns:
        DivModResult(div, mod); буферы не обрезаны до канонической формы

    Raises:
        DivisionByZeroError: Если denominator равен нулю

    Examples:
        >>> result = div_mod(b"\\x00\\x00\\x01\\x01\\xff\\xff", b"\\xff\\x0f\\xff")
        >>> int(result.div.hex(), 16), int(result.mod.hex(), 16)
        (1, 192512)
    """
    if bit_length(denominator) == 0:
        logger.debug("division by zero: numerator=%s", bytes(numerator).hex())
        raise DivisionByZeroError("Division by zero")

    if lt(numerator, denominator):
        return DivModResult(div=bytearray(), mod=bytearray(numerator))

    quotient = bytearray(len(numerator))
    remainder = bytearray(len(denominator) + 1)

    for index in range(bit_length(numerator) - 1, -1, -1):
        left_shift_in_place(remainder, 1)
        if get_bit(numerator, index):
            remainder[-1] |= 1
        if gte(remainder, denominator):
            sub_in_place(remainder, denominator)
            set_bit_in_place(quotient, index)

    return DivModResult(div=quotient, mod=remainder)


def div(numerator: BytesLike, denominator: BytesLike) -> bytearray:
    """Частное numerator / denominator (округление к нулю)."""
    return div_mod(numerator, denominator).div


def mod(value: BytesLike, modulus: BytesLike) -> bytearray:
    """
    Приведение по модулю.

    Returns:
        Остаток в канонической форме

    Raises:
        DivisionByZeroError: Если modulus равен нулю
    """
    return trim(div_mod(value, modulus).mod)


# =============================================================================
# МОДУЛЬНАЯ АРИФМЕТИКА
# =============================================================================


def add_mod(a: BytesLike, b: BytesLike, modulus: BytesLike) -> bytearray:
    """
    Сложение по модулю: (a + b) mod modulus.

    Используется при выводе дочерних ключей: (tweak + parent_key) mod n.

    Returns:
        Результат в канонической форме

    Raises:
        DivisionByZeroError: Если modulus равен нулю
    """
    return mod(add(a, b), modulus)


def mul_mod(a: BytesLike, b: BytesLike, modulus: BytesLike) -> bytearray:
    """
    Умножение по модулю.

    Точка расширения: операция объявлена, но не реализована.

    Raises:
        NotImplementedError: Всегда
    """
    raise NotImplementedError("Modular multiplication is not implemented")
