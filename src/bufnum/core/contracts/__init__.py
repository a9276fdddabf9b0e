"""
Contracts Module

Граница между движком bufnum и внешним коллаборатором вывода ключей.
"""

from .key_material import (
    DIGEST_LENGTH,
    SECP256K1_ORDER,
    SECRET_LENGTH,
    ExtendedKey,
    split_digest,
    tweak_private_key,
)

__all__ = [
    # Constants
    "DIGEST_LENGTH",
    "SECP256K1_ORDER",
    "SECRET_LENGTH",
    # Models
    "ExtendedKey",
    # Functions
    "split_digest",
    "tweak_private_key",
]
