"""
Grain LFSR constant stream for Poseidon parameters.

The circom-compatible BN254 parameter table is the output of the reference
`generate_parameters_grain.sage` script invoked as

    sage generate_parameters_grain.sage 1 0 254 <t> 8 <R_P> <p>

The script draws every round constant and the MDS matrix from one
self-shrinking Grain LFSR whose 80-bit seed encodes those arguments. This
module reproduces that stream, so a parameter set is a pure function of the
published generation arguments. The security checks the script runs on the
MDS matrix are not part of this module.

Seed layout (80 bits, most significant first within each field):

    field type (2) | S-box type (4) | field size n (12) | width t (12)
    | full rounds (10) | partial rounds (10) | 1 * 30
"""

from typing import List

# Field type: 0 = GF(2^n), 1 = GF(p)
FIELD_PRIME = 1

# S-box type: 0 = x^alpha, 1 = x^(-1)
SBOX_POWER = 0

STATE_BITS = 80
WARMUP_CLOCKS = 160


def _to_bits(value: int, n_bits: int) -> List[int]:
    """Return `value` as `n_bits` bits, most significant first."""
    return [(value >> (n_bits - 1 - i)) & 1 for i in range(n_bits)]


def seed_bits(field_size: int, width: int, full_rounds: int, partial_rounds: int,
              field_type: int = FIELD_PRIME, sbox: int = SBOX_POWER) -> List[int]:
    """
    Build the 80-bit initial LFSR sequence for the given arguments.

    Raises:
        ValueError: If an argument does not fit its bit field
    """
    fields = (
        ("field_type", field_type, 2),
        ("sbox", sbox, 4),
        ("field_size", field_size, 12),
        ("width", width, 12),
        ("full_rounds", full_rounds, 10),
        ("partial_rounds", partial_rounds, 10),
    )
    bits: List[int] = []
    for name, value, n_bits in fields:
        if not 0 <= value < (1 << n_bits):
            raise ValueError(f"{name} must fit in {n_bits} bits, got {value}")
        bits += _to_bits(value, n_bits)
    return bits + [1] * (STATE_BITS - len(bits))


class GrainLFSR:
    """
    Self-shrinking Grain LFSR.

    The register is kept as an int whose bit i is sequence position i, so
    position 0 is the oldest bit. Clocking computes
    b[62] ^ b[51] ^ b[38] ^ b[23] ^ b[13] ^ b[0], drops position 0 and
    appends the new bit at position 79.

    Output bits are produced in pairs: when the first bit of a pair is 1 the
    second is emitted, otherwise the pair is discarded.
    """

    def __init__(self, field_size: int, width: int, full_rounds: int, partial_rounds: int,
                 field_type: int = FIELD_PRIME, sbox: int = SBOX_POWER):
        bits = seed_bits(field_size, width, full_rounds, partial_rounds, field_type, sbox)
        self.state = sum(bit << i for i, bit in enumerate(bits))
        for _ in range(WARMUP_CLOCKS):
            self._clock()

    def _clock(self) -> int:
        s = self.state
        new_bit = ((s >> 62) ^ (s >> 51) ^ (s >> 38) ^ (s >> 23) ^ (s >> 13) ^ s) & 1
        self.state = (s >> 1) | (new_bit << (STATE_BITS - 1))
        return new_bit

    def next_bit(self) -> int:
        while True:
            first = self._clock()
            second = self._clock()
            if first:
                return second

    def random_bits(self, n_bits: int) -> int:
        """Read `n_bits` output bits as an unsigned integer, first bit most significant."""
        s = self.state
        top = STATE_BITS - 1
        value = 0
        produced = 0
        # Inlined pair clocking; this loop dominates parameter derivation time.
        while produced < n_bits:
            first = ((s >> 62) ^ (s >> 51) ^ (s >> 38) ^ (s >> 23) ^ (s >> 13) ^ s) & 1
            s = (s >> 1) | (first << top)
            second = ((s >> 62) ^ (s >> 51) ^ (s >> 38) ^ (s >> 23) ^ (s >> 13) ^ s) & 1
            s = (s >> 1) | (second << top)
            if first:
                value = (value << 1) | second
                produced += 1
        self.state = s
        return value

    def field_element(self, n_bits: int, prime: int) -> int:
        """Sample an element of GF(prime) by rejection of values >= prime."""
        value = self.random_bits(n_bits)
        while value >= prime:
            value = self.random_bits(n_bits)
        return value


def generate_round_constants(lfsr: GrainLFSR, prime: int, field_size: int, count: int) -> List[int]:
    """Draw `count` round constants from the stream."""
    return [lfsr.field_element(field_size, prime) for _ in range(count)]


def generate_cauchy_mds(lfsr: GrainLFSR, prime: int, field_size: int, width: int) -> List[List[int]]:
    """
    Draw a width x width Cauchy matrix M[i][j] = 1 / (x_i + y_j).

    The 2 * width samples are reduced mod `prime` (not rejected) and redrawn
    until they are pairwise distinct and every x_i + y_j is non-zero.
    """
    while True:
        samples = [lfsr.random_bits(field_size) % prime for _ in range(2 * width)]
        while len(set(samples)) != 2 * width:
            samples = [lfsr.random_bits(field_size) % prime for _ in range(2 * width)]

        xs = samples[:width]
        ys = samples[width:]
        if any((x + y) % prime == 0 for x in xs for y in ys):
            continue

        return [[pow(x + y, -1, prime) for y in ys] for x in xs]


def generate_constants(prime: int, field_size: int, width: int, full_rounds: int,
                       partial_rounds: int):
    """
    Derive (ark, mds) for one parameter set, in the order the reference
    script draws them: all round constants first, then the MDS matrix.

    Returns:
        Tuple of (round constants as a flat list of ints, MDS rows as lists of ints)
    """
    lfsr = GrainLFSR(field_size, width, full_rounds, partial_rounds)
    ark = generate_round_constants(lfsr, prime, field_size, (full_rounds + partial_rounds) * width)
    mds = generate_cauchy_mds(lfsr, prime, field_size, width)
    return ark, mds
