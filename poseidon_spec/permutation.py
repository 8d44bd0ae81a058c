"""
Poseidon permutation.

This module implements the Hades round schedule over a galois FieldArray
state: full rounds, then partial rounds, then full rounds again. Every round
runs the same three steps in the same order:

1. ARK: add the round constants
2. S-box: x -> x^alpha on every element (full) or on element 0 (partial)
3. MDS: state <- mds @ state

The state is updated in place.
"""

import galois

from .parameters import PoseidonParameters


def apply_ark(state: galois.FieldArray, params: PoseidonParameters, round_idx: int) -> None:
    """Add the round constants of `round_idx` to every state element."""
    state[:] = state + params.round_constants(round_idx)


def apply_sbox_full(state: galois.FieldArray, alpha: int) -> None:
    """Raise every state element to `alpha`."""
    state[:] = state ** alpha


def apply_sbox_partial(state: galois.FieldArray, alpha: int) -> None:
    """Raise only the first state element to `alpha`."""
    state[0] = state[0] ** alpha


def apply_mds(state: galois.FieldArray, mds: galois.FieldArray) -> None:
    """Replace the state with mds @ state, i.e. new[i] = sum_j mds[i][j] * state[j]."""
    state[:] = mds @ state


def permute(state: galois.FieldArray, params: PoseidonParameters) -> galois.FieldArray:
    """
    Apply the full Poseidon permutation to `state`.

    Args:
        state: FieldArray of `params.width` elements over `params.field`,
            modified in place
        params: Permutation parameters

    Returns:
        The same `state` array, permuted
    """
    if state.shape != (params.width,):
        raise ValueError(f"state must have {params.width} elements, got shape {state.shape}")
    if type(state) is not params.field:
        raise ValueError("state and parameters must be over the same field")

    half_full_rounds = params.full_rounds // 2
    partial_end = half_full_rounds + params.partial_rounds

    # First half of full rounds
    for r in range(half_full_rounds):
        apply_ark(state, params, r)
        apply_sbox_full(state, params.alpha)
        apply_mds(state, params.mds)

    # Partial rounds
    for r in range(half_full_rounds, partial_end):
        apply_ark(state, params, r)
        apply_sbox_partial(state, params.alpha)
        apply_mds(state, params.mds)

    # Second half of full rounds
    for r in range(partial_end, params.n_rounds):
        apply_ark(state, params, r)
        apply_sbox_full(state, params.alpha)
        apply_mds(state, params.mds)

    return state
