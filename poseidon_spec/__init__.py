"""
Poseidon hash in Python

A Python implementation of the Poseidon hash over prime fields, compatible
with circomlib's BN254 instantiation.

This package provides:
- BN254 field arithmetic (via galois)
- Poseidon permutation and sponge hasher
- Strict byte <-> field element codec
- circom BN254 x^5 parameter catalog for 1 to 12 inputs

Usage:
    from poseidon_spec import Poseidon, FR

    hasher = Poseidon.new_circom(2)
    digest = hasher.hash([FR(1), FR(2)])
    digest_bytes = hasher.hash_bytes_be([b"\\x01", b"\\x02"])
"""

# Field arithmetic (via galois)
from .field import (
    FR,
    FQ,
    BN254_FR_MODULUS,
    BN254_FQ_MODULUS,
    Endianness,
    modulus,
    modulus_byte_len,
)

# Errors
from .errors import (
    PoseidonError,
    InvalidNumberOfInputs,
    InvalidWidthCircom,
    EmptyInput,
    InvalidInputLength,
    InputLargerThanModulus,
    ArrayConversion,
)

# Parameters
from .parameters import PoseidonParameters, load_parameters
from .catalog import (
    parameters_for_arity,
    bn254_x5_parameters,
    FULL_ROUNDS,
    PARTIAL_ROUNDS,
    MAX_X5_LEN,
)

# Permutation and sponge
from .permutation import permute
from .sponge import Poseidon, ArityPolicy

# Byte codec
from .codec import (
    validate_bytes_length,
    bytes_to_field_element,
    field_element_to_bytes,
    hash_bytes,
)

HASH_LEN = modulus_byte_len(FR)

__version__ = "0.1.0"
__all__ = [
    # Field
    "FR",
    "FQ",
    "BN254_FR_MODULUS",
    "BN254_FQ_MODULUS",
    "Endianness",
    "modulus",
    "modulus_byte_len",
    "HASH_LEN",
    # Errors
    "PoseidonError",
    "InvalidNumberOfInputs",
    "InvalidWidthCircom",
    "EmptyInput",
    "InvalidInputLength",
    "InputLargerThanModulus",
    "ArrayConversion",
    # Parameters
    "PoseidonParameters",
    "load_parameters",
    "parameters_for_arity",
    "bn254_x5_parameters",
    "FULL_ROUNDS",
    "PARTIAL_ROUNDS",
    "MAX_X5_LEN",
    # Hashing
    "permute",
    "Poseidon",
    "ArityPolicy",
    # Codec
    "validate_bytes_length",
    "bytes_to_field_element",
    "field_element_to_bytes",
    "hash_bytes",
]
