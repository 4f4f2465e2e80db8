# Copyright (c) 2026 Signer — MIT License

"""Command-line Saph hashing.

    python -m saph [-m MEMORY] [-i ITERATIONS] [--hex-parts]
                   [--prompt LABEL ...] PART ...

Prints the hash as lowercase hex. ``--prompt`` reads an extra part from
the terminal without echo, after the positional parts.
"""

import argparse
import getpass
import sys

from .errors import SaphError
from .hasher import DEFAULT_ITERATIONS, DEFAULT_MEMORY_SIZE, Saph


def build_parser():
    parser = argparse.ArgumentParser(
        prog="saph",
        description="Compute a Saph memory-hard hash over ordered parts.",
    )
    parser.add_argument("parts", nargs="*", metavar="PART",
                        help="part to add, in order")
    parser.add_argument("-m", "--memory", type=int, default=DEFAULT_MEMORY_SIZE,
                        help=f"memory size in 64-byte blocks (default {DEFAULT_MEMORY_SIZE})")
    parser.add_argument("-i", "--iterations", type=int, default=DEFAULT_ITERATIONS,
                        help=f"number of iterations (default {DEFAULT_ITERATIONS})")
    parser.add_argument("--hex-parts", action="store_true",
                        help="decode each positional PART from hex")
    parser.add_argument("--prompt", action="append", default=[], metavar="LABEL",
                        help="read one more part from the terminal (repeatable)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    parts = args.parts
    if args.hex_parts:
        try:
            parts = [bytes.fromhex(p) for p in parts]
        except ValueError as exc:
            parser.error(f"invalid hex part: {exc}")

    try:
        saph = Saph(args.memory, args.iterations)
    except SaphError as exc:
        parser.error(str(exc))

    saph.add_all(parts)
    for label in args.prompt:
        saph.add(getpass.getpass(f"{label}: "))

    print(saph.hexdigest())
    return 0


if __name__ == "__main__":
    sys.exit(main())
