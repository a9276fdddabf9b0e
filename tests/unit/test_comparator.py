"""
Тесты для Comparator

Проверяемые инварианты:
1. compare возвращает -1 / 0 / 1
2. Результат не зависит от ведущих нулевых байтов
3. eq/lt/lte/gt/gte согласованы с compare
"""

import pytest

from bufnum.core.math.comparator import compare, eq, gt, gte, lt, lte
from bufnum.core.math.encodings import from_hex

A = bytes.fromhex("00000101ffff")
B = bytes.fromhex("ff0fff")


class TestCompare:
    """Тесты compare"""

    def test_reference_operands(self) -> None:
        assert compare(A, B) == 1
        assert compare(B, A) == -1
        assert compare(A, A) == 0

    def test_leading_zero_padding_ignored(self) -> None:
        """00ab == ab"""
        assert compare(from_hex("00ab"), from_hex("ab")) == 0
        assert compare(from_hex("ab"), from_hex("0000ab")) == 0

    def test_empty_equals_zero(self) -> None:
        assert compare(b"\x00\x00", b"") == 0
        assert compare(b"", b"") == 0

    def test_longer_buffer_with_nonzero_prefix_wins(self) -> None:
        assert compare(b"\x01\x00", b"\xff") == 1
        assert compare(b"\xff", b"\x01\x00") == -1

    def test_first_mismatch_decides(self) -> None:
        assert compare(b"\x01\x02\x03", b"\x01\x03\x00") == -1
        assert compare(b"\x00\x01\x03\x00", b"\x01\x02\x03") == 1

    @pytest.mark.parametrize(
        "x, y",
        [(0, 0), (0, 1), (255, 256), (65535, 65534), (10**12, 10**12 + 1)],
    )
    def test_matches_int_order(self, x: int, y: int) -> None:
        """Порядок совпадает с порядком целых при любой длине буферов"""
        a = x.to_bytes(8, "big")
        b = y.to_bytes(6, "big")
        expected = (x > y) - (x < y)
        assert compare(a, b) == expected
        assert compare(b, a) == -expected


class TestRelations:
    """Тесты производных отношений"""

    def test_gt(self) -> None:
        assert gt(A, B)
        assert not gt(B, A)

    def test_lte(self) -> None:
        assert lte(B, B)
        assert lte(B, A)

    def test_eq(self) -> None:
        assert eq(from_hex("00ab"), from_hex("ab"))
        assert eq(b"\x00\x00", b"")

    def test_lt(self) -> None:
        assert lt(from_hex("ab"), from_hex("ac"))
        assert not lt(from_hex("ac"), from_hex("ab"))

    def test_gte(self) -> None:
        assert gte(A, A)
        assert gte(A, B)
        assert not gte(B, A)
