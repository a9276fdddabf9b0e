"""
bufnum — arbitrary-precision integer arithmetic over big-endian byte buffers.
"""

from bufnum.core.domain.bignum import BigNum, Sign
from bufnum.core.math.errors import (
    ArithmeticOverflowError,
    BufnumError,
    DivisionByZeroError,
    FormatError,
)
from bufnum.core.math.magnitude import Endianness

__all__ = [
    "BigNum",
    "Sign",
    "Endianness",
    "BufnumError",
    "FormatError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
]
