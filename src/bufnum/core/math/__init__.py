"""
Core math modules для bufnum

Беззнаковые арифметические движки над big-endian magnitude buffers.
"""

# Errors
from bufnum.core.math.errors import (
    ArithmeticOverflowError,
    BufnumError,
    DivisionByZeroError,
    FormatError,
)

# Magnitude Buffer Model
from bufnum.core.math.magnitude import (
    BYTE_MASK,
    LANE_BYTES,
    LANE_MASK,
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    BytesLike,
    Endianness,
    as_magnitude,
    clone,
    is_zero,
    leading_zero_bytes,
    pad_to_length,
    pad_to_multiple,
    slice_buffer,
    zeros,
)

# Bit Utilities
from bufnum.core.math.bit_utils import (
    MAX_SHIFT_PER_CALL,
    bit_length,
    get_bit,
    left_shift,
    left_shift_in_place,
    set_bit_in_place,
    shift_left,
    trim,
)

# Comparator
from bufnum.core.math.comparator import compare, eq, gt, gte, lt, lte

# Additive Engine
from bufnum.core.math.additive import add, add_in_place, sub, sub_in_place

# Multiplicative Engine
from bufnum.core.math.multiplicative import mul, mul_in_place

# Division Engine
from bufnum.core.math.division import (
    DivModResult,
    add_mod,
    div,
    div_mod,
    mod,
    mul_mod,
)

# Encodings
from bufnum.core.math.encodings import (
    HexLiteral,
    from_hex,
    from_number,
    from_utf,
    parse_hex,
    to_binary,
    to_hex,
    to_number,
    to_utf,
)

__all__ = [
    # Errors
    "ArithmeticOverflowError",
    "BufnumError",
    "DivisionByZeroError",
    "FormatError",
    # Magnitude — Constants
    "BYTE_MASK",
    "LANE_BYTES",
    "LANE_MASK",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Magnitude — Types
    "BytesLike",
    "Endianness",
    # Magnitude — Functions
    "as_magnitude",
    "clone",
    "is_zero",
    "leading_zero_bytes",
    "pad_to_length",
    "pad_to_multiple",
    "slice_buffer",
    "zeros",
    # Bit Utilities
    "MAX_SHIFT_PER_CALL",
    "bit_length",
    "get_bit",
    "left_shift",
    "left_shift_in_place",
    "set_bit_in_place",
    "shift_left",
    "trim",
    # Comparator
    "compare",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    # Additive Engine
    "add",
    "add_in_place",
    "sub",
    "sub_in_place",
    # Multiplicative Engine
    "mul",
    "mul_in_place",
    # Division Engine
    "DivModResult",
    "add_mod",
    "div",
    "div_mod",
    "mod",
    "mul_mod",
    # Encodings
    "HexLiteral",
    "from_hex",
    "from_number",
    "from_utf",
    "parse_hex",
    "to_binary",
    "to_hex",
    "to_number",
    "to_utf",
]
