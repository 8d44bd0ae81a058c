#!/usr/bin/env python3
"""
Export the circom BN254 x5 parameter sets as JSON.

Writes one file per width, poseidon_params_bn254_x5_<t>.json, in the format
read by `poseidon_spec.load_parameters`. The files can be diffed against
circomlib's constants or shipped to other implementations.

Usage:
    python export-parameters.py --output-dir params/
    python export-parameters.py --output-dir params/ --width 3
"""

import argparse
import sys
from pathlib import Path

from poseidon_spec import MAX_X5_LEN, bn254_x5_parameters


def main():
    parser = argparse.ArgumentParser(
        description='Export circom BN254 x5 Poseidon parameters as JSON'
    )
    parser.add_argument(
        '--output-dir',
        type=Path,
        required=True,
        help='Directory for the JSON parameter files'
    )
    parser.add_argument(
        '--width',
        type=int,
        action='append',
        help=f'Width to export (2 to {MAX_X5_LEN}); repeatable, defaults to all'
    )
    args = parser.parse_args()

    widths = args.width or list(range(2, MAX_X5_LEN + 1))
    for width in widths:
        if not 2 <= width <= MAX_X5_LEN:
            print(f"Error: width must be between 2 and {MAX_X5_LEN}, got {width}", file=sys.stderr)
            sys.exit(1)

    args.output_dir.mkdir(parents=True, exist_ok=True)

    for width in widths:
        print(f"Generating parameters t = {width}...")
        params = bn254_x5_parameters(width)
        path = args.output_dir / f"poseidon_params_bn254_x5_{width}.json"
        params.save(path)
        print(f"  {params.n_rounds} rounds, {params.ark.size} constants -> {path}")


if __name__ == "__main__":
    main()
