"""
Poseidon sponge hasher.

The hasher absorbs up to width - 1 field elements in one call: the state is
[domain_tag, input_0, ..., input_{k-1}] (zero-padded to the width under the
padded policy), the permutation runs once, and state[0] is the digest.

Example:
    from poseidon_spec import Poseidon

    hasher = Poseidon.new_circom(2)
    digest = hasher.hash_bytes_be([bytes([1] * 32), bytes([2] * 32)])
"""

from enum import Enum
from typing import Iterable, Optional, Sequence, Union

import galois

from .catalog import parameters_for_arity
from .codec import BytesLike, hash_bytes
from .errors import InputLargerThanModulus, InvalidNumberOfInputs
from .field import Endianness, EndiannessLike, FieldType, modulus
from .parameters import PoseidonParameters
from .permutation import permute

FieldElementLike = Union[galois.FieldArray, int]


class ArityPolicy(Enum):
    """
    How many inputs a hasher accepts.

    EXACT: exactly width - 1 inputs. Matches circomlib.
    PADDED: 0 to width - 1 inputs; missing slots are filled with zeros.

    Digests agree only when width - 1 inputs are given, so one deployment
    must not mix the two.
    """

    EXACT = "exact"
    PADDED = "padded"


class Poseidon:
    """
    Stateful Poseidon sponge over one parameter set.

    Not re-entrant: `state` holds the sponge state during a call. Use one
    instance per thread; the PoseidonParameters can be shared.

    Attributes:
        params: Permutation parameters
        domain_tag: Element placed in state[0] before the inputs
        policy: Input count policy
        state: Sponge state, empty between calls
    """

    def __init__(
        self,
        params: PoseidonParameters,
        domain_tag: Optional[FieldElementLike] = None,
        policy: Union[ArityPolicy, str] = ArityPolicy.EXACT,
    ):
        self.params = params
        self.domain_tag = self.field(0 if domain_tag is None else self._to_int(domain_tag))
        self.policy = ArityPolicy(policy)
        self.state = self.field.Zeros(0)

    @classmethod
    def new_circom(cls, nr_inputs: int) -> "Poseidon":
        """Hasher for `nr_inputs` inputs with the circom BN254 parameters."""
        return cls.with_domain_tag_circom(nr_inputs, None)

    @classmethod
    def with_domain_tag_circom(
        cls,
        nr_inputs: int,
        domain_tag: Optional[FieldElementLike],
        policy: Union[ArityPolicy, str] = ArityPolicy.EXACT,
    ) -> "Poseidon":
        """
        Hasher for `nr_inputs` inputs with the circom BN254 parameters and a
        custom domain tag.

        Raises:
            InvalidWidthCircom: If nr_inputs is outside [1, 12]
        """
        return cls(parameters_for_arity(nr_inputs), domain_tag, policy)

    @property
    def field(self) -> FieldType:
        return self.params.field

    @property
    def width(self) -> int:
        return self.params.width

    def _to_int(self, element: FieldElementLike) -> int:
        if isinstance(element, galois.FieldArray) and type(element) is not self.field:
            raise ValueError(
                f"input is over {type(element).name}, expected {self.field.name}"
            )
        value = int(element)
        if value < 0:
            raise ValueError(f"input must be non-negative, got {value}")
        if value >= modulus(self.field):
            raise InputLargerThanModulus()
        return value

    def _check_number_of_inputs(self, n_inputs: int) -> None:
        max_limit = self.width - 1
        if self.policy is ArityPolicy.EXACT:
            valid = n_inputs == max_limit
        else:
            valid = n_inputs <= max_limit
        if not valid:
            raise InvalidNumberOfInputs(inputs=n_inputs, max_limit=max_limit, width=self.width)

    def hash(self, inputs: Iterable[FieldElementLike]) -> galois.FieldArray:
        """
        Hash field elements.

        Args:
            inputs: Field elements of `self.field` (scalars or a 1-D FieldArray),
                or ints already below the modulus

        Returns:
            The digest as a scalar FieldArray

        Raises:
            InvalidNumberOfInputs: If the input count violates the policy
            InputLargerThanModulus: If an int input is >= the field modulus
            ValueError: If an input is a FieldArray over another field
        """
        values = [self._to_int(x) for x in inputs]
        self._check_number_of_inputs(len(values))

        values = [int(self.domain_tag)] + values
        values += [0] * (self.width - len(values))
        self.state = self.field(values)

        try:
            permute(self.state, self.params)
            return self.field(int(self.state[0]))
        finally:
            self.state = self.field.Zeros(0)

    def hash_bytes(self, inputs: Sequence[BytesLike], endianness: EndiannessLike) -> bytes:
        """Hash byte-string inputs in the given byte order; see codec.hash_bytes."""
        return hash_bytes(self, inputs, endianness)

    def hash_bytes_be(self, inputs: Sequence[BytesLike]) -> bytes:
        """
        Hash big-endian byte-string inputs and return a big-endian digest.

        Each input must be 1 to 32 bytes and encode an integer below the
        modulus; shorter inputs behave as if left-padded with zeros.
        """
        return hash_bytes(self, inputs, Endianness.BIG)

    def hash_bytes_le(self, inputs: Sequence[BytesLike]) -> bytes:
        """
        Hash little-endian byte-string inputs and return a little-endian digest.

        Shorter inputs behave as if right-padded with zeros.
        """
        return hash_bytes(self, inputs, Endianness.LITTLE)
