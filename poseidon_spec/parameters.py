"""
Poseidon parameter sets.

A parameter set bundles everything that describes one permutation instance:
round constants (ARK), the MDS matrix, the round counts, the state width and
the S-box exponent. Parameter sets are immutable once built; the constant
arrays are copied and marked read-only so one set can back any number of
hashers.

The same data can be stored as JSON:

    {
        "width": 3,
        "full_rounds": 8,
        "partial_rounds": 57,
        "alpha": 5,
        "ark": ["0x0ee9...", ...],
        "mds": [["0x109b...", ...], ...]
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import galois

from .field import FR, FieldType


@dataclass(frozen=True, eq=False)
class PoseidonParameters:
    """
    Parameters for the Poseidon permutation.

    Attributes:
        ark: Round constants, (full_rounds + partial_rounds) * width elements
        mds: width x width MDS matrix
        full_rounds: Rounds applying the S-box to every state element
        partial_rounds: Rounds applying the S-box to the first element only
        width: Number of field elements in the state
        alpha: S-box exponent
    """
    ark: galois.FieldArray
    mds: galois.FieldArray
    full_rounds: int
    partial_rounds: int
    width: int
    alpha: int

    def __post_init__(self):
        if not isinstance(self.ark, galois.FieldArray):
            raise ValueError(f"ark must be a galois FieldArray, got {type(self.ark).__name__}")
        if type(self.mds) is not type(self.ark):
            raise ValueError("ark and mds must be arrays over the same field")
        if self.width < 2:
            raise ValueError(f"width must be >= 2, got {self.width}")
        if self.full_rounds < 0 or self.partial_rounds < 0:
            raise ValueError(
                f"round counts must be non-negative, got "
                f"full_rounds={self.full_rounds}, partial_rounds={self.partial_rounds}"
            )
        if self.alpha < 3 or self.alpha % 2 == 0:
            raise ValueError(f"alpha must be an odd integer >= 3, got {self.alpha}")

        expected = self.n_rounds * self.width
        if self.ark.ndim != 1 or self.ark.size != expected:
            raise ValueError(
                f"ark must hold (full_rounds + partial_rounds) * width = {expected} "
                f"elements, got shape {self.ark.shape}"
            )
        if self.mds.shape != (self.width, self.width):
            raise ValueError(
                f"mds must be {self.width}x{self.width}, got shape {self.mds.shape}"
            )

        ark = self.ark.copy()
        mds = self.mds.copy()
        ark.setflags(write=False)
        mds.setflags(write=False)
        object.__setattr__(self, "ark", ark)
        object.__setattr__(self, "mds", mds)

    @property
    def field(self) -> FieldType:
        """The galois field class the constants live in."""
        return type(self.ark)

    @property
    def n_rounds(self) -> int:
        return self.full_rounds + self.partial_rounds

    def round_constants(self, round_idx: int) -> galois.FieldArray:
        """Return the `width` constants added in round `round_idx`."""
        start = round_idx * self.width
        return self.ark[start:start + self.width]

    # --- JSON serialization ---

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "full_rounds": self.full_rounds,
            "partial_rounds": self.partial_rounds,
            "alpha": self.alpha,
            "ark": [hex(int(c)) for c in self.ark],
            "mds": [[hex(int(c)) for c in row] for row in self.mds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], field: FieldType = FR) -> "PoseidonParameters":
        """
        Build parameters from their JSON representation.

        Constants are hex strings (or ints) that must already be reduced
        below the field modulus.

        Raises:
            ValueError: Missing keys, malformed constants or inconsistent shapes
        """
        missing = [k for k in ("width", "full_rounds", "partial_rounds", "alpha", "ark", "mds")
                   if k not in data]
        if missing:
            raise ValueError(f"Parameter data is missing keys: {', '.join(missing)}")

        ark = field([_parse_constant(c) for c in data["ark"]])
        mds = field([[_parse_constant(c) for c in row] for row in data["mds"]])
        return cls(
            ark=ark,
            mds=mds,
            full_rounds=int(data["full_rounds"]),
            partial_rounds=int(data["partial_rounds"]),
            width=int(data["width"]),
            alpha=int(data["alpha"]),
        )

    def save(self, path: Union[str, Path]) -> None:
        """Write the parameter set to `path` as JSON."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
            f.write("\n")


def _parse_constant(value: Union[str, int]) -> int:
    if isinstance(value, str):
        return int(value, 16) if value.lower().startswith("0x") else int(value)
    return int(value)


def load_parameters(path: Union[str, Path], field: FieldType = FR) -> PoseidonParameters:
    """Load a parameter set written by `PoseidonParameters.save`."""
    with open(path) as f:
        data = json.load(f)
    return PoseidonParameters.from_dict(data, field)
