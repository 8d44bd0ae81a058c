"""
Poseidon golden test vectors.

Expected digests over the BN254 scalar field with the circom parameters.
The CIRCOM_* values were produced with circomlibjs `poseidon(...)`.
DO NOT MODIFY - these values must match circomlib exactly.
"""

from typing import List

# ============================================================================
# Two inputs (width 3)
# ============================================================================

# [0x01] * 32 and [0x02] * 32, hashed big-endian
ONES_TWOS_INPUTS = [bytes([1] * 32), bytes([2] * 32)]

ONES_TWOS_DIGEST_BE = bytes([
    13, 84, 225, 147, 143, 138, 140, 28, 125, 235, 94, 3, 85, 242, 99, 25,
    32, 123, 132, 254, 156, 162, 206, 27, 38, 231, 53, 200, 41, 130, 25, 144,
])

# Same inputs, hashed little-endian
ONES_TWOS_DIGEST_LE = bytes([
    144, 25, 130, 41, 200, 53, 231, 38, 27, 206, 162, 156, 254, 132, 123, 32,
    25, 99, 242, 85, 3, 94, 235, 125, 28, 140, 138, 143, 147, 225, 84, 13,
])

# poseidon([1, 1]), big-endian
ONE_ONE_DIGEST_BE = bytes([
    0, 122, 243, 70, 226, 211, 4, 39, 158, 121, 224, 169, 243, 2, 63, 119,
    18, 148, 167, 138, 203, 112, 231, 63, 144, 175, 226, 124, 173, 64, 30, 129,
])

# poseidon([1, 2]), little-endian
ONE_TWO_DIGEST_LE = bytes([
    154, 24, 23, 68, 122, 96, 25, 158, 81, 69, 50, 116, 242, 23, 54, 42,
    207, 233, 98, 150, 107, 76, 246, 61, 65, 144, 214, 231, 245, 192, 92, 17,
])

# Random big-endian inputs; the second is above the modulus and is reduced
# mod r before hashing
RANDOM_INPUT_1_BE = bytes([
    0x06, 0x9C, 0x63, 0x81, 0xAC, 0x0B, 0x96, 0x8E, 0x88, 0x1C, 0x91, 0x3C, 0x17, 0xD8, 0x36, 0x06,
    0x7F, 0xD1, 0x5F, 0x2C, 0xC7, 0x9F, 0x90, 0x2C, 0x80, 0x70, 0xB3, 0x6D, 0x28, 0x66, 0x17, 0xDD,
])
RANDOM_INPUT_2_BE = bytes([
    0xC3, 0x3B, 0x60, 0x04, 0x2F, 0x76, 0xC7, 0xFB, 0xD0, 0x5D, 0xB7, 0x76, 0x23, 0xCB, 0x17, 0xB8,
    0x1D, 0x49, 0x41, 0x4B, 0x82, 0xE5, 0x6A, 0x2E, 0xC0, 0x18, 0xF7, 0xA5, 0x5C, 0x3F, 0x30, 0x0B,
])

# poseidon([RANDOM_INPUT_1 mod r, RANDOM_INPUT_2 mod r]), little-endian
RANDOM_DIGEST_LE = bytes([
    75, 85, 249, 42, 66, 238, 230, 151, 158, 90, 250, 51, 131, 212, 131, 18,
    151, 235, 96, 103, 135, 243, 186, 61, 173, 135, 52, 77, 132, 173, 19, 10,
])

# ============================================================================
# Two inputs (width 3), circom constants over the BN254 base field
# ============================================================================

# ONES_TWOS_INPUTS hashed big-endian over FQ
FQ_ONES_TWOS_DIGEST_BE = bytes([
    40, 7, 251, 60, 51, 30, 115, 141, 251, 200, 13, 46, 134, 91, 113, 170,
    131, 90, 53, 175, 9, 61, 242, 164, 127, 33, 249, 65, 253, 131, 35, 116,
])

# poseidon([1, 2]) over FQ, big-endian
FQ_ONE_TWO_DIGEST_BE = bytes([
    25, 11, 182, 121, 54, 48, 205, 9, 39, 164, 111, 44, 108, 203, 20, 95,
    112, 101, 97, 130, 151, 54, 169, 215, 37, 104, 12, 83, 176, 236, 253, 54,
])

# poseidon([RANDOM_INPUT_1 mod q, RANDOM_INPUT_2 mod q]) over FQ, big-endian
FQ_RANDOM_DIGEST_BE = bytes([
    43, 94, 133, 6, 86, 161, 42, 237, 224, 252, 105, 131, 134, 176, 141, 84,
    159, 162, 172, 12, 155, 131, 123, 94, 218, 217, 178, 239, 100, 87, 4, 238,
])

# ============================================================================
# 1 to 12 inputs: poseidon([1] * n), big-endian
# ============================================================================

CIRCOM_ONES_DIGESTS_BE: List[bytes] = [
    bytes([41, 23, 97, 0, 234, 169, 98, 189, 193, 254, 108, 101, 77, 106, 60, 19,
           14, 150, 164, 209, 22, 139, 51, 132, 139, 137, 125, 197, 2, 130, 1, 51]),
    bytes([0, 122, 243, 70, 226, 211, 4, 39, 158, 121, 224, 169, 243, 2, 63, 119,
           18, 148, 167, 138, 203, 112, 231, 63, 144, 175, 226, 124, 173, 64, 30, 129]),
    bytes([2, 192, 6, 110, 16, 167, 42, 189, 43, 51, 195, 178, 20, 203, 62, 129,
           188, 177, 182, 227, 9, 97, 205, 35, 194, 2, 177, 134, 115, 191, 37, 67]),
    bytes([8, 44, 156, 55, 10, 13, 36, 244, 65, 111, 188, 65, 74, 55, 104, 31,
           120, 68, 45, 39, 216, 99, 133, 153, 28, 23, 214, 252, 12, 75, 125, 113]),
    bytes([16, 56, 150, 5, 174, 104, 141, 79, 20, 219, 133, 49, 34, 196, 125, 102,
           168, 3, 199, 43, 65, 88, 156, 177, 191, 134, 135, 65, 178, 6, 185, 187]),
    bytes([42, 115, 246, 121, 50, 140, 62, 171, 114, 74, 163, 229, 189, 191, 80, 179,
           144, 53, 215, 114, 159, 19, 91, 151, 9, 137, 15, 133, 197, 220, 94, 118]),
    bytes([34, 118, 49, 10, 167, 243, 52, 58, 40, 66, 20, 19, 157, 157, 169, 89,
           190, 42, 49, 178, 199, 8, 165, 248, 25, 84, 178, 101, 229, 58, 48, 184]),
    bytes([23, 126, 20, 83, 196, 70, 225, 176, 125, 43, 66, 51, 66, 81, 71, 9,
           92, 79, 202, 187, 35, 61, 35, 11, 109, 70, 162, 20, 217, 91, 40, 132]),
    bytes([14, 143, 238, 47, 228, 157, 163, 15, 222, 235, 72, 196, 46, 187, 68, 204,
           110, 231, 5, 95, 97, 251, 202, 94, 49, 59, 138, 95, 202, 131, 76, 71]),
    bytes([46, 196, 198, 94, 99, 120, 171, 140, 115, 48, 133, 79, 74, 112, 119, 193,
           255, 146, 96, 228, 72, 133, 196, 184, 29, 209, 49, 173, 58, 134, 205, 150]),
    bytes([0, 113, 61, 65, 236, 166, 53, 241, 23, 212, 236, 188, 235, 95, 58, 102,
           220, 65, 66, 235, 112, 181, 103, 101, 188, 53, 143, 27, 236, 64, 187, 155]),
    bytes([20, 57, 11, 224, 186, 239, 36, 155, 212, 124, 101, 221, 172, 101, 194, 229,
           46, 133, 19, 192, 129, 193, 205, 114, 201, 128, 6, 9, 142, 154, 143, 190]),
]

# ============================================================================
# Catalog constants
# ============================================================================

# First round constant of the width-3 table
WIDTH_3_FIRST_ARK = 0x0EE9A592BA9A9518D05986D656F40C2114C4993C11BB29938D21D47304CD8E6E


def get_circom_ones_digest(nr_inputs: int) -> bytes:
    """Get the expected big-endian digest of poseidon([1] * nr_inputs)."""
    if not 1 <= nr_inputs <= len(CIRCOM_ONES_DIGESTS_BE):
        raise ValueError(f"No vector for {nr_inputs} inputs")
    return CIRCOM_ONES_DIGESTS_BE[nr_inputs - 1]
