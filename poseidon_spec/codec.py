"""
Strict conversion between byte strings and field elements.

Generic "bytes to field element mod p" conversions silently truncate or wrap
over-long input, which lets two distinct byte strings map to the same
element. The functions here refuse instead:

* `validate_bytes_length` rejects empty input and input longer than the
  modulus byte length, before any reduction happens.
* `bytes_to_field_element` rejects integers >= the modulus rather than
  reducing them.

Big-endian and little-endian paths share one implementation parameterized by
`Endianness`.
"""

from typing import Sequence, Union

import galois

from .errors import ArrayConversion, EmptyInput, InputLargerThanModulus, InvalidInputLength
from .field import FR, Endianness, EndiannessLike, FieldType, modulus, modulus_byte_len

BytesLike = Union[bytes, bytearray, memoryview, Sequence[int]]


def validate_bytes_length(data: BytesLike, field: FieldType = FR) -> BytesLike:
    """
    Check that `data` is non-empty and no longer than the modulus byte length.

    Returns:
        `data` unchanged

    Raises:
        EmptyInput: If `data` is empty
        InvalidInputLength: If len(data) > modulus_byte_len(field)
    """
    modulus_bytes_len = modulus_byte_len(field)
    if len(data) == 0:
        raise EmptyInput()
    if len(data) > modulus_bytes_len:
        raise InvalidInputLength(length=len(data), modulus_bytes_len=modulus_bytes_len)
    return data


def bytes_to_field_element(data: BytesLike, endianness: EndiannessLike,
                           field: FieldType = FR) -> galois.FieldArray:
    """
    Interpret `data` as an unsigned integer and return it as a field element.

    Args:
        data: Byte string
        endianness: Byte order of `data`
        field: Target galois field class

    Raises:
        InputLargerThanModulus: If the integer is >= the field modulus
    """
    endianness = Endianness(endianness)
    value = int.from_bytes(bytes(data), endianness.value)

    # value == modulus is rejected too
    if value >= modulus(field):
        raise InputLargerThanModulus()
    return field(value)


def field_element_to_bytes(element: Union[galois.FieldArray, int], endianness: EndiannessLike,
                           field: FieldType = FR) -> bytes:
    """
    Encode a field element as exactly modulus_byte_len(field) bytes.

    Raises:
        ArrayConversion: If the value does not fit the fixed length
    """
    endianness = Endianness(endianness)
    try:
        return int(element).to_bytes(modulus_byte_len(field), endianness.value)
    except OverflowError as e:
        raise ArrayConversion() from e


def hash_bytes(hasher, inputs: Sequence[BytesLike], endianness: EndiannessLike) -> bytes:
    """
    Hash byte-string inputs with `hasher` and return the encoded digest.

    All inputs are length-checked first, then converted, then hashed; the
    first error raised is propagated and no digest is produced.

    Args:
        hasher: A Poseidon hasher
        inputs: One byte string per input, each in `endianness` order
        endianness: Byte order of the inputs and of the returned digest

    Returns:
        Digest of modulus_byte_len bytes
    """
    endianness = Endianness(endianness)
    field = hasher.field

    inputs = [validate_bytes_length(data, field) for data in inputs]
    elements = [bytes_to_field_element(data, endianness, field) for data in inputs]
    digest = hasher.hash(elements)
    return field_element_to_bytes(digest, endianness, field)
