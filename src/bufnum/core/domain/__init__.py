"""
Domain models and value objects.

Contains the signed BigNum value type built on the unsigned engines.
"""

from bufnum.core.domain.bignum import BigNum, Sign

__all__ = [
    "BigNum",
    "Sign",
]
