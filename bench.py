#!/usr/bin/env python3
"""Benchmark Poseidon hashing over the BN254 circom parameters.

Hashes random 32-byte big-endian inputs for each supported number of inputs
and reports the mean time per hash.

Run with: uv run python bench.py --max-inputs 12 --iterations 50
"""

import argparse
import time
from typing import Dict, List

from poseidon_spec import FR, MAX_X5_LEN, Poseidon, field_element_to_bytes


def bench_arity(nr_inputs: int, iterations: int, seed: int) -> List[float]:
    """Time `iterations` hashes of `nr_inputs` random inputs."""
    hasher = Poseidon.new_circom(nr_inputs)
    elements = FR.Random((iterations, nr_inputs), seed=seed)
    inputs = [
        [field_element_to_bytes(e, "big") for e in row]
        for row in elements
    ]

    timings = []
    for row in inputs:
        start = time.perf_counter()
        hasher.hash_bytes_be(row)
        timings.append(time.perf_counter() - start)
    return timings


def main():
    parser = argparse.ArgumentParser(
        description='Benchmark Poseidon BN254 x5 hashing for 1..N inputs'
    )
    parser.add_argument(
        '--max-inputs',
        type=int,
        default=MAX_X5_LEN - 1,
        help=f'Largest number of inputs to benchmark (1 to {MAX_X5_LEN - 1})'
    )
    parser.add_argument(
        '--iterations',
        type=int,
        default=20,
        help='Hashes per number of inputs'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=0,
        help='Seed for the random inputs'
    )
    args = parser.parse_args()

    if not 1 <= args.max_inputs <= MAX_X5_LEN - 1:
        parser.error(f"--max-inputs must be between 1 and {MAX_X5_LEN - 1}")

    results: Dict[str, List[float]] = {}
    for nr_inputs in range(1, args.max_inputs + 1):
        # Parameter derivation is cached; keep it out of the measured loop.
        Poseidon.new_circom(nr_inputs)
        results[f"poseidon_bn254_x5_{nr_inputs}"] = bench_arity(nr_inputs, args.iterations, args.seed)

    print(f"{'benchmark':<24} {'mean':>12} {'min':>12} {'max':>12}")
    print("-" * 63)
    for name, timings in results.items():
        mean = sum(timings) / len(timings)
        print(f"{name:<24} {mean * 1e3:>10.3f}ms {min(timings) * 1e3:>10.3f}ms "
              f"{max(timings) * 1e3:>10.3f}ms")


if __name__ == "__main__":
    main()
