"""
BN254 prime fields using galois library.

This module provides the field capability the permutation and the byte codec
are written against: galois prime field classes for the BN254 scalar field
(FR, used by the circom parameter catalog) and base field (FQ), plus the
modulus helpers shared by every field.

Any `galois.GF(p)` class works as a field here; nothing below is specific to
BN254 except the two constructed classes.
"""

from enum import Enum
from typing import Type, Union

import galois

# BN254 scalar field: r = 0x30644e72...f0000001
BN254_FR_MODULUS = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001

# BN254 base field: q = 0x30644e72...d87cfd47
BN254_FQ_MODULUS = 0x30644E72E131A029B85045B68181585D97816A916871CA8D3C208C16D87CFD47

# Multiplicative generators are passed explicitly so galois does not factor
# p - 1 when the class is built.
FR = galois.GF(BN254_FR_MODULUS, primitive_element=5, verify=False)
"""BN254 scalar field GF(r)."""

FQ = galois.GF(BN254_FQ_MODULUS, primitive_element=3, verify=False)
"""BN254 base field GF(q)."""

FieldType = Type[galois.FieldArray]


class Endianness(str, Enum):
    """Byte order of a field element encoding."""

    BIG = "big"
    LITTLE = "little"


EndiannessLike = Union[Endianness, str]


def modulus(field: FieldType = FR) -> int:
    """Return the prime modulus of a prime field class."""
    return field.characteristic


def modulus_bits(field: FieldType = FR) -> int:
    """Return the number of bits in the field modulus."""
    return field.characteristic.bit_length()


def modulus_byte_len(field: FieldType = FR) -> int:
    """
    Return the canonical byte length of a field element encoding.

    This is ceil(bits(p) / 8): 32 for both BN254 fields.
    """
    return (modulus_bits(field) + 7) // 8
