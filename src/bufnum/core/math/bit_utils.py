"""
Bit Utilities — длина в битах, сдвиги и приведение к канонической форме

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bit_length пустого буфера и буфера из нулей равен 0
2. left_shift_in_place сдвигает не более чем на MAX_SHIFT_PER_CALL бит
   (перенос из одного байта помещается в 32 бита)
3. left_shift растит буфер на минимальное число ведущих байтов
4. trim возвращает каноническую форму (ноль → пустой буфер)
"""

from typing import Final

from bufnum.core.math.magnitude import BYTE_MASK, BytesLike, leading_zero_bytes

# Максимальный сдвиг за один вызов; большие сдвиги составляются из повторов
MAX_SHIFT_PER_CALL: Final[int] = 24


# =============================================================================
# ДЛИНА
# =============================================================================


def bit_length(buffer: BytesLike) -> int:
    """
    Позиция (с 1) старшего установленного бита во всём буфере.

    Args:
        buffer: Magnitude buffer

    Returns:
        0 для пустого или нулевого буфера

    Examples:
        >>> bit_length(b"\\x00\\x00\\x01\\x01\\xff\\xff")
        25
        >>> bit_length(b"")
        0
    """
    start = leading_zero_bytes(buffer)
    if start == len(buffer):
        return 0
    return 8 * (len(buffer) - start - 1) + buffer[start].bit_length()


def trim(buffer: BytesLike) -> bytearray:
    """
    Отбрасывание ведущих нулевых байтов до канонической формы.

    Returns:
        Новый буфер длиной ceil(bit_length / 8)
    """
    zero_bytes = len(buffer) - (bit_length(buffer) + 7) // 8
    return bytearray(buffer[zero_bytes:])


# =============================================================================
# ДОСТУП К БИТАМ
# =============================================================================


def get_bit(buffer: BytesLike, index: int) -> bool:
    """
    Значение бита с номером index (0 — младший бит последнего байта).

    Биты за пределами буфера считаются нулевыми.
    """
    byte_index = len(buffer) - 1 - index // 8
    if index < 0 or byte_index < 0:
        return False
    return bool(buffer[byte_index] & (1 << (index % 8)))


def set_bit_in_place(buffer: bytearray, index: int) -> None:
    """
    Установка бита с номером index в буфере вызывающего.

    Raises:
        IndexError: Если бит за пределами буфера (буфер не растёт)
    """
    byte_index = len(buffer) - 1 - index // 8
    if index < 0 or byte_index < 0:
        raise IndexError(f"bit {index} is outside a {len(buffer)}-byte buffer")
    buffer[byte_index] |= 1 << (index % 8)


# =============================================================================
# СДВИГИ
# =============================================================================


def left_shift_in_place(buffer: bytearray, n: int = 1) -> int:
    """
    Сдвиг буфера влево на n бит на месте.

    Вызывающий передаёт эксклюзивное владение buffer на время вызова.
    Длина буфера не меняется; вытесненные старшие биты возвращаются.

    Args:
        buffer: Изменяемый буфер вызывающего
        n: Число бит, 0 <= n <= MAX_SHIFT_PER_CALL

    Returns:
        Overflow: биты, вытесненные из старшего байта

    Raises:
        ValueError: Если n вне [0, MAX_SHIFT_PER_CALL] (буфер не изменён)
    """
    if n < 0 or n > MAX_SHIFT_PER_CALL:
        raise ValueError(
            f"Cannot left-shift by {n} places, allowed range is 0..{MAX_SHIFT_PER_CALL}"
        )

    carry = 0
    for i in range(len(buffer) - 1, -1, -1):
        carry += buffer[i] << n
        buffer[i] = carry & BYTE_MASK
        carry >>= 8

    return carry


def left_shift(buffer: BytesLike, n: int = 1) -> bytearray:
    """
    Сдвиг влево на n бит с ростом буфера.

    Overflow из старшего байта записывается в минимальное число
    дополнительных ведущих байтов.

    Args:
        buffer: Исходный буфер (не изменяется)
        n: Число бит, 0 <= n <= MAX_SHIFT_PER_CALL

    Returns:
        Новый буфер

    Examples:
        >>> left_shift(b"\\xff\\x0f\\xff").hex()
        '01fe1ffe'
    """
    result = bytearray(buffer)
    carry = left_shift_in_place(result, n)

    if carry:
        overflow_bytes = (carry.bit_length() + 7) // 8
        prefix = bytearray(overflow_bytes)
        for i in range(overflow_bytes - 1, -1, -1):
            prefix[i] = carry & BYTE_MASK
            carry >>= 8
        result[0:0] = prefix

    return result


def shift_left(buffer: BytesLike, n: int) -> bytearray:
    """
    Сдвиг влево на произвольное n >= 0 бит.

    Составляется из повторных left_shift не более чем на MAX_SHIFT_PER_CALL.
    """
    if n < 0:
        raise ValueError(f"shift must be non-negative, got {n}")

    result = bytearray(buffer)
    while n > 0:
        step = min(n, MAX_SHIFT_PER_CALL)
        result = left_shift(result, step)
        n -= step
    return result
