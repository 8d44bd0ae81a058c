"""
Circom-compatible Poseidon parameters for BN254.

Parameters provided by the catalog:

* x^5 S-boxes
* width 2 <= t <= 13, i.e. 1 <= n <= 12 inputs
* 8 full rounds and partial rounds depending on t:
  [56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65]

The constants are the ones circomlib ships. Each width's table is derived
from the Grain stream (see grain.py) the first time it is requested and
cached for the life of the process. The table can be loaded over any galois
field whose modulus exceeds the constants, e.g. FQ for the base field; the
same PoseidonParameters object is returned for every later request with the
same width and field.
"""

import logging
import time
from functools import lru_cache
from typing import List

from .errors import InvalidWidthCircom
from .field import FR, BN254_FR_MODULUS, FieldType, modulus_bits
from .grain import generate_constants
from .parameters import PoseidonParameters

logger = logging.getLogger(__name__)

FULL_ROUNDS = 8
ALPHA = 5

# Partial rounds indexed by width - 2
PARTIAL_ROUNDS: List[int] = [56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65]

MIN_WIDTH = 2
MAX_X5_LEN = MIN_WIDTH + len(PARTIAL_ROUNDS) - 1  # 13


def partial_rounds_for_width(width: int) -> int:
    """Return the number of partial rounds used at `width`."""
    if not MIN_WIDTH <= width <= MAX_X5_LEN:
        raise InvalidWidthCircom(width=width, max_limit=MAX_X5_LEN)
    return PARTIAL_ROUNDS[width - MIN_WIDTH]


@lru_cache(maxsize=None)
def _bn254_x5_constants(width: int):
    partial_rounds = partial_rounds_for_width(width)

    start = time.perf_counter()
    ark, mds = generate_constants(
        prime=BN254_FR_MODULUS,
        field_size=modulus_bits(FR),
        width=width,
        full_rounds=FULL_ROUNDS,
        partial_rounds=partial_rounds,
    )
    logger.debug(
        "Derived BN254 x5 constants for width %d (%d constants) in %.2fs",
        width, len(ark), time.perf_counter() - start,
    )
    return ark, mds


def bn254_x5_parameters(width: int, field: FieldType = FR) -> PoseidonParameters:
    """
    Return the BN254 x^5 parameter set for state width `width` over `field`.

    The constants are always the scalar-field table; `field` only selects the
    galois class they are loaded into, so FQ gives circomlib's constants over
    the base field. Every constant must be below the modulus of `field`.

    Raises:
        InvalidWidthCircom: If `width` is outside [2, 13]
    """
    return _bn254_x5_parameters(width, field)


@lru_cache(maxsize=None)
def _bn254_x5_parameters(width: int, field: FieldType) -> PoseidonParameters:
    ark, mds = _bn254_x5_constants(width)
    return PoseidonParameters(
        ark=field(ark),
        mds=field(mds),
        full_rounds=FULL_ROUNDS,
        partial_rounds=partial_rounds_for_width(width),
        width=width,
        alpha=ALPHA,
    )


def parameters_for_arity(nr_inputs: int, field: FieldType = FR) -> PoseidonParameters:
    """
    Return the parameter set for hashing `nr_inputs` elements of `field`.

    The state width is nr_inputs + 1: one slot for the domain tag and one per
    input.

    Raises:
        InvalidWidthCircom: If nr_inputs is 0 or greater than 12
    """
    return bn254_x5_parameters(nr_inputs + 1, field)
