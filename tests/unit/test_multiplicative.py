"""
Тесты для Multiplicative Engine

Проверяемые инварианты:
1. Произведение совпадает с точным значением
2. Длина результата: len(a) + len(b), дополненная до чётной
3. Перенос >= MAX_SAFE_INTEGER → ArithmeticOverflowError
4. mul_in_place не меняет буфер при ошибке
"""

import pytest

from bufnum.core.math import multiplicative
from bufnum.core.math.encodings import to_number
from bufnum.core.math.errors import ArithmeticOverflowError
from bufnum.core.math.multiplicative import mul, mul_in_place

A = bytes.fromhex("00000101ffff")
B = bytes.fromhex("ff0fff")
E = bytes([0xFF] * 14)


class TestMul:
    """Тесты mul"""

    def test_reference_product(self) -> None:
        assert to_number(mul(A, B)) == 282635121127425

    def test_result_length_even_padded(self) -> None:
        """6 + 3 = 9 байтов → 10"""
        assert len(mul(A, B)) == 10
        assert len(mul(b"\x01\x02", b"\x03\x04")) == 4

    def test_max_lanes(self) -> None:
        """0xFFFF * 0xFFFF = 0xFFFE0001"""
        assert mul(b"\xff\xff", b"\xff\xff").hex() == "fffe0001"

    def test_large_all_ones(self) -> None:
        """Проверка накопления переносов на 14-байтных операндах"""
        value = int.from_bytes(E, "big")
        result = mul(E, E)
        assert int.from_bytes(result, "big") == value * value
        assert len(result) == 28

    def test_zero_operand(self) -> None:
        assert int.from_bytes(mul(A, b""), "big") == 0
        assert int.from_bytes(mul(b"\x00", B), "big") == 0

    def test_odd_lengths(self) -> None:
        assert int.from_bytes(mul(b"\xff", b"\xff"), "big") == 255 * 255

    @pytest.mark.parametrize(
        "x, y",
        [(1, 1), (255, 257), (65535, 65537), (123456789, 54321), (2**26 - 1, 2**26 + 1)],
    )
    def test_matches_int_product(self, x: int, y: int) -> None:
        """to_number(mul(a, b)) == to_number(a) * to_number(b)"""
        a = x.to_bytes(5, "big")
        b = y.to_bytes(4, "big")
        assert to_number(mul(a, b)) == x * y

    def test_wide_operands_match_int(self) -> None:
        x = int("1234567890abcdef" * 5, 16)
        y = int("fedcba0987654321" * 3, 16)
        a = x.to_bytes(40, "big")
        b = y.to_bytes(24, "big")
        assert int.from_bytes(mul(a, b), "big") == x * y

    def test_inputs_not_mutated(self) -> None:
        a = bytearray(b"\x01")
        mul(a, B)
        assert a == bytearray(b"\x01")

    def test_carry_guard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Перенос, достигший границы, вызывает ошибку, а не усечение"""
        monkeypatch.setattr(multiplicative, "MAX_SAFE_INTEGER", 1)
        with pytest.raises(ArithmeticOverflowError, match="carry"):
            mul(b"\xff\xff", b"\xff\xff")


class TestMulInPlace:
    """Тесты mul_in_place"""

    def test_writes_product(self) -> None:
        target = bytearray(A)
        result = mul_in_place(target, B)
        assert result is target
        assert to_number(target) == 282635121127425

    def test_untouched_on_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(multiplicative, "MAX_SAFE_INTEGER", 1)
        target = bytearray(b"\xff\xff")
        with pytest.raises(ArithmeticOverflowError):
            mul_in_place(target, b"\xff\xff")
        assert target == bytearray(b"\xff\xff")
