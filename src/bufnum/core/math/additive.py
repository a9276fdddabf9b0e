"""
Additive Engine — сложение и вычитание magnitude buffers

Обе операции идут от младшего байта к старшему с переносом (carry) или
заёмом (borrow) в соседний разряд.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add никогда не переполняется: длина max(len a, len b), плюс ровно один
   ведущий байт, если остался финальный перенос
2. sub никогда не даёт отрицательную magnitude: a < b → ArithmeticOverflowError
3. a == b → sub возвращает нулевой буфер длиной len(a) (не укорачивается)
4. *_in_place проверяют предусловия ДО изменения буфера

Знак операндов движок не рассматривает; знаковая логика — на уровне BigNum.
"""

import logging

from bufnum.core.math.comparator import compare
from bufnum.core.math.errors import ArithmeticOverflowError
from bufnum.core.math.magnitude import BYTE_MASK, BytesLike

logger = logging.getLogger(__name__)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(a: BytesLike, b: BytesLike) -> bytearray:
    """
    Беззнаковое сложение.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Новый буфер длиной max(len a, len b) или на один байт длиннее
        при финальном переносе

    Examples:
        >>> add(b"\\xff", b"\\x01").hex()
        '0100'
    """
    length = max(len(a), len(b))
    result = bytearray(length)
    offset_a = length - len(a)
    offset_b = length - len(b)

    carry = 0
    for index in range(length - 1, -1, -1):
        total = carry
        if index >= offset_a:
            total += a[index - offset_a]
        if index >= offset_b:
            total += b[index - offset_b]
        result[index] = total & BYTE_MASK
        carry = 1 if total > BYTE_MASK else 0

    if carry:
        result.insert(0, carry)

    return result


def add_in_place(a: bytearray, b: BytesLike) -> bytearray:
    """
    Сложение с записью результата в буфер вызывающего.

    Вызывающий передаёт эксклюзивное владение a на время вызова.
    Буфер может вырасти на один ведущий байт.

    Returns:
        Тот же объект a
    """
    a[:] = add(a, b)
    return a


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub(a: BytesLike, b: BytesLike) -> bytearray:
    """
    Беззнаковое вычитание b из a.

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        Новый буфер длиной len(a)

    Raises:
        ArithmeticOverflowError: Если a < b (результат был бы отрицательным)

    Examples:
        >>> sub(b"\\x01\\x00", b"\\x01").hex()
        '00ff'
    """
    result = bytearray(a)
    sub_in_place(result, b)
    return result


def sub_in_place(a: bytearray, b: BytesLike) -> bytearray:
    """
    Вычитание b из a на месте.

    Вызывающий передаёт эксклюзивное владение a на время вызова.
    Длина a не меняется. При ошибке a остаётся нетронутым.

    Args:
        a: Уменьшаемое (изменяется)
        b: Вычитаемое; может быть длиннее a, если лишние старшие байты нулевые

    Returns:
        Тот же объект a

    Raises:
        ArithmeticOverflowError: Если a < b
    """
    order = compare(a, b)
    if order < 0:
        logger.debug("subtraction underflow: %s - %s", bytes(a).hex(), bytes(b).hex())
        raise ArithmeticOverflowError("Result is smaller than 0")

    if order == 0:
        a[:] = bytearray(len(a))
        return a

    offset_b = len(a) - len(b)
    borrow = 0
    for index in range(len(a) - 1, -1, -1):
        value = a[index] - borrow
        b_index = index - offset_b
        if 0 <= b_index < len(b):
            value -= b[b_index]
        a[index] = value & BYTE_MASK
        borrow = 1 if value < 0 else 0

    return a
