"""
Key Material Contracts — граница с коллаборатором вывода ключей

Иерархический вывод ключей (seed → master → child) и растяжение пароля
находятся вне bufnum: они сами вызывают HMAC/PBKDF2 платформы. Движок
поставляет им только:
- разрезание 64-байтного MAC digest на ключ и chain code
- сложение по модулю порядка кривой для дочернего приватного ключа
- выравнивание результата до фиксированной длины секрета

Все константы коллаборатора передаются явными параметрами со значениями по
умолчанию, а не глобальным изменяемым состоянием.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from bufnum.core.math.comparator import gte
from bufnum.core.math.division import add_mod
from bufnum.core.math.errors import FormatError
from bufnum.core.math.magnitude import BytesLike, is_zero, pad_to_length, slice_buffer

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Длина приватного ключа и chain code (байты)
SECRET_LENGTH: Final[int] = 32

# Длина HMAC-SHA512 digest (байты)
DIGEST_LENGTH: Final[int] = 64

# Порядок группы secp256k1 (n)
SECP256K1_ORDER: Final[bytes] = bytes.fromhex(
    "fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141"
)


# =============================================================================
# MODELS
# =============================================================================


class ExtendedKey(BaseModel):
    """
    Расширенный ключ: приватный ключ и chain code.

    Immutable модель (frozen=True). Приватный ключ должен лежать в
    [1, SECP256K1_ORDER - 1].
    """

    private_key: bytes = Field(
        ..., min_length=SECRET_LENGTH, max_length=SECRET_LENGTH, description="Приватный ключ"
    )
    chain_code: bytes = Field(
        ..., min_length=SECRET_LENGTH, max_length=SECRET_LENGTH, description="Chain code"
    )

    model_config = {"frozen": True}

    @field_validator("private_key")
    @classmethod
    def validate_private_key_range(cls, v: bytes) -> bytes:
        """Проверка, что ключ не ноль и меньше порядка кривой"""
        if is_zero(v):
            raise ValueError("private_key must not be zero")
        if gte(v, SECP256K1_ORDER):
            raise ValueError("private_key must be below the secp256k1 order")
        return v


# =============================================================================
# ПРИМИТИВЫ ГРАНИЦЫ
# =============================================================================


def split_digest(digest: BytesLike) -> ExtendedKey:
    """
    Разрезание MAC digest на приватный ключ (левая половина) и chain code.

    Args:
        digest: Ровно DIGEST_LENGTH байтов

    Returns:
        ExtendedKey

    Raises:
        FormatError: Если длина digest не DIGEST_LENGTH
        pydantic.ValidationError: Если левая половина — невалидный ключ
    """
    if len(digest) != DIGEST_LENGTH:
        raise FormatError(f"digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")

    return ExtendedKey(
        private_key=bytes(slice_buffer(digest, 0, SECRET_LENGTH)),
        chain_code=bytes(slice_buffer(digest, SECRET_LENGTH, DIGEST_LENGTH)),
    )


def tweak_private_key(
    private_key: BytesLike,
    tweak: BytesLike,
    order: BytesLike = SECP256K1_ORDER,
    length: int = SECRET_LENGTH,
) -> bytes:
    """
    Дочерний приватный ключ: (tweak + private_key) mod order.

    Args:
        private_key: Родительский ключ
        tweak: Левая половина MAC digest дочернего индекса
        order: Порядок группы (default: SECP256K1_ORDER)
        length: Длина результата (default: SECRET_LENGTH)

    Returns:
        Ключ ровно length байтов

    Raises:
        ValueError: Если tweak >= order или результат равен нулю (ключ
            невалиден, вызывающий переходит к следующему индексу)
        DivisionByZeroError: Если order равен нулю
    """
    if gte(tweak, order):
        raise ValueError("tweak is not below the group order, use the next index")

    child = add_mod(tweak, private_key, order)
    if is_zero(child):
        raise ValueError("derived key is zero, use the next index")

    return bytes(pad_to_length(child, length))
