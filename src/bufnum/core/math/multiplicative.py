"""
Multiplicative Engine — школьное умножение по 16-битным lanes

Операнды и результат разбиваются на 16-битные big-endian lanes (операнды
дополняются нулём слева до чётной длины). Lane результата k собирается из
всех пар (i, j), i + j == k, плюс перенос предыдущей lane.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточное значение пары не превышает 32 бит:
       0xFFFF * 0xFFFF + 0xFFFF = 0xFFFF0000
2. Младшие 16 бит накопленной суммы — lane результата, старшие уходят в carry
3. carry >= MAX_SAFE_INTEGER → ArithmeticOverflowError (никогда не усекается
   молча; на реальных размерах входа не срабатывает)
4. Длина результата: len(a) + len(b), дополненная до чётной; обрезку до
   канонической формы выполняет вызывающий
"""

import logging

from bufnum.core.math.errors import ArithmeticOverflowError
from bufnum.core.math.magnitude import (
    LANE_BYTES,
    LANE_MASK,
    MAX_SAFE_INTEGER,
    BytesLike,
    pad_to_multiple,
)

logger = logging.getLogger(__name__)


def _lanes(buffer: BytesLike) -> list[int]:
    """16-битные lanes буфера, от младшей к старшей."""
    padded = pad_to_multiple(buffer, LANE_BYTES)
    return [
        (padded[offset] << 8) | padded[offset + 1]
        for offset in range(len(padded) - LANE_BYTES, -1, -LANE_BYTES)
    ]


def mul(a: BytesLike, b: BytesLike) -> bytearray:
    """
    Беззнаковое умножение (schoolbook).

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Новый буфер длиной len(a) + len(b), дополненной до чётной

    Raises:
        ArithmeticOverflowError: Если carry достиг MAX_SAFE_INTEGER

    Examples:
        >>> mul(b"\\xff\\xff", b"\\xff\\xff").hex()
        'fffe0001'
    """
    result = pad_to_multiple(bytearray(len(a) + len(b)), LANE_BYTES)
    a_lanes = _lanes(a)
    b_lanes = _lanes(b)
    result_lanes = len(result) // LANE_BYTES

    carry = 0
    for k in range(result_lanes):
        if carry >= MAX_SAFE_INTEGER:
            logger.debug(
                "multiplication carry overflow at lane %d: %d-byte x %d-byte operands",
                k,
                len(a),
                len(b),
            )
            raise ArithmeticOverflowError("carry >= MAX_SAFE_INTEGER")

        # Младшие 16 бит переноса начинают сумму lane; sum <= 0xFFFF всегда
        lane_sum = carry & LANE_MASK
        carry >>= 16

        for i in range(max(0, k - len(b_lanes) + 1), min(k + 1, len(a_lanes))):
            # Инвариант: tmp <= 0xFFFF0000
            tmp = a_lanes[i] * b_lanes[k - i] + lane_sum
            lane_sum = tmp & LANE_MASK
            carry += tmp >> 16

        offset = len(result) - LANE_BYTES * (k + 1)
        result[offset] = lane_sum >> 8
        result[offset + 1] = lane_sum & 0xFF

    return result


def mul_in_place(a: bytearray, b: BytesLike) -> bytearray:
    """
    Умножение с записью результата в буфер вызывающего.

    Вызывающий передаёт эксклюзивное владение a на время вызова.
    Произведение вычисляется целиком до записи: при ошибке a не меняется.

    Returns:
        Тот же объект a
    """
    product = mul(a, b)
    a[:] = product
    return a
