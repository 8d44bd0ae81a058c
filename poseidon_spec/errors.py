"""
Errors raised by the Poseidon hasher, the byte codec and the parameter catalog.

Every error is a caller-input problem. They all derive from ValueError so
that callers treating bad arguments generically keep working, and they
compare equal when their type and fields match.
"""


class PoseidonError(ValueError):
    """Base class for all Poseidon errors."""

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = ValueError.__hash__


class InvalidNumberOfInputs(PoseidonError):
    """Input count does not match the width of the hasher."""

    def __init__(self, inputs: int, max_limit: int, width: int):
        self.inputs = inputs
        self.max_limit = max_limit
        self.width = width
        super().__init__(
            f"Invalid number of inputs: {inputs}. "
            f"The limit is {max_limit} ({width} - 1)."
        )


class InvalidWidthCircom(PoseidonError):
    """Requested width is outside the range covered by the parameter catalog."""

    def __init__(self, width: int, max_limit: int):
        self.width = width
        self.max_limit = max_limit
        super().__init__(
            f"Invalid width: {width}. Choose a width between 2 and {max_limit} "
            f"for 1 to {max_limit - 1} inputs."
        )


class EmptyInput(PoseidonError):
    """A byte input has zero length."""

    def __init__(self):
        super().__init__("Input is an empty slice.")


class InvalidInputLength(PoseidonError):
    """A byte input is longer than the modulus byte length."""

    def __init__(self, length: int, modulus_bytes_len: int):
        self.length = length
        self.modulus_bytes_len = modulus_bytes_len
        super().__init__(
            f"Invalid length of the input: {length}. The length matching the "
            f"modulus of the prime field is: {modulus_bytes_len}."
        )


class InputLargerThanModulus(PoseidonError):
    """A byte input decodes to an integer >= the field modulus."""

    def __init__(self):
        super().__init__("Input is larger than the modulus of the prime field.")


class ArrayConversion(PoseidonError):
    """A digest did not fit the fixed-length output array."""

    def __init__(self):
        super().__init__("Failed to convert the digest into a fixed-length byte array.")
