"""
Тесты для Additive Engine

Проверяемые инварианты:
1. add растит буфер ровно на один байт при финальном переносе
2. sub при a < b → ArithmeticOverflowError, результат не возвращается
3. sub при a == b → нулевой буфер длиной len(a)
4. *_in_place не изменяют буфер при ошибке
"""

import logging

import pytest

from bufnum.core.math.additive import add, add_in_place, sub, sub_in_place
from bufnum.core.math.comparator import compare
from bufnum.core.math.encodings import to_number
from bufnum.core.math.errors import ArithmeticOverflowError

A = bytes.fromhex("00000101ffff")  # 16908287
B = bytes.fromhex("ff0fff")  # 16715775
E = bytes([0xFF] * 14)


# =============================================================================
# ТЕСТЫ: Сложение
# =============================================================================


class TestAdd:
    """Тесты add / add_in_place"""

    def test_reference_sum(self) -> None:
        result = add(A, B)
        assert to_number(result) == 33624062
        assert len(result) == len(A)

    def test_commutative(self) -> None:
        assert add(A, B) == add(B, A)

    def test_final_carry_adds_one_byte(self) -> None:
        """Финальный перенос добавляет ровно один ведущий байт"""
        assert add(b"\xff", b"\x01").hex() == "0100"
        assert add(b"\xff\xff", b"\xff\xff").hex() == "01fffe"

    def test_carry_through_longer_operand(self) -> None:
        assert add(b"\x00\xff\xff", b"\x01").hex() == "010000"

    def test_empty_operands(self) -> None:
        assert add(b"", b"") == bytearray()
        assert add(b"", b"\x05") == bytearray(b"\x05")

    def test_large_operands(self) -> None:
        result = add(E, E)
        assert int.from_bytes(result, "big") == 2 * int.from_bytes(E, "big")
        assert len(result) == len(E) + 1

    @pytest.mark.parametrize(
        "x, y",
        [(0, 0), (1, 255), (255, 1), (65535, 1), (2**40 + 7, 2**45 - 1), (2**52, 2**52 - 1)],
    )
    def test_matches_int_sum(self, x: int, y: int) -> None:
        """to_number(add(a, b)) == to_number(a) + to_number(b)"""
        a = x.to_bytes(7, "big")
        b = y.to_bytes(3 if y < 2**24 else 7, "big")
        assert to_number(add(a, b)) == x + y

    def test_add_in_place(self) -> None:
        target = bytearray(b"\xff")
        result = add_in_place(target, b"\x01")
        assert result is target
        assert target == bytearray(b"\x01\x00")

    def test_inputs_not_mutated(self) -> None:
        a = bytearray(A)
        b = bytearray(B)
        add(a, b)
        assert a == bytearray(A)
        assert b == bytearray(B)


# =============================================================================
# ТЕСТЫ: Вычитание
# =============================================================================


class TestSub:
    """Тесты sub / sub_in_place"""

    def test_reference_difference(self) -> None:
        result = sub(A, B)
        assert to_number(result) == 192512
        assert len(result) == len(A)

    def test_underflow_raises(self) -> None:
        """sub(b, a) при b < a → ArithmeticOverflowError"""
        with pytest.raises(ArithmeticOverflowError, match="smaller than 0"):
            sub(B, A)

    def test_underflow_is_overflow_error(self) -> None:
        """Ошибка ловится и как встроенный OverflowError"""
        with pytest.raises(OverflowError):
            sub(b"\x01", b"\x02")

    def test_equal_operands_zero_filled(self) -> None:
        """a == b → нули длиной len(a)"""
        result = sub(E, E)
        assert result == bytearray(len(E))
        assert to_number(sub(A, bytes.fromhex("0101ffff"))) == 0
        assert len(sub(A, bytes.fromhex("0101ffff"))) == len(A)

    def test_borrow_chain(self) -> None:
        assert sub(b"\x01\x00\x00", b"\x01").hex() == "00ffff"

    def test_longer_subtrahend_with_zero_prefix(self) -> None:
        """Вычитаемое длиннее уменьшаемого, если лишние байты нулевые"""
        assert sub(b"\x05", b"\x00\x00\x03").hex() == "02"

    @pytest.mark.parametrize(
        "x, y",
        [(1, 0), (256, 1), (65536, 65535), (2**52, 3), (2**53 - 1, 2**40)],
    )
    def test_matches_int_difference(self, x: int, y: int) -> None:
        a = x.to_bytes(7, "big")
        b = y.to_bytes(7, "big")
        assert to_number(sub(a, b)) == x - y

    def test_raises_whenever_compare_negative(self) -> None:
        for x, y in [(0, 1), (254, 255), (2**30, 2**31)]:
            a = x.to_bytes(4, "big")
            b = y.to_bytes(5, "big")
            assert compare(a, b) < 0
            with pytest.raises(ArithmeticOverflowError):
                sub(a, b)

    def test_sub_in_place(self) -> None:
        target = bytearray(b"\x01\x00")
        result = sub_in_place(target, b"\x01")
        assert result is target
        assert target == bytearray(b"\x00\xff")

    def test_sub_in_place_untouched_on_underflow(self) -> None:
        """Неудачный вызов не меняет буфер"""
        target = bytearray(B)
        with pytest.raises(ArithmeticOverflowError):
            sub_in_place(target, A)
        assert target == bytearray(B)

    def test_underflow_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="bufnum.core.math.additive"):
            with pytest.raises(ArithmeticOverflowError):
                sub(b"\x01", b"\x02")
        assert "subtraction underflow" in caplog.text
