"""Command-line entry point: print the instructions that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.operations import Machine
from pushswap.parser import ParseError, parse_args
from pushswap.sorting import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers in ``argv`` and write one instruction per line to stdout."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    machine = Machine(values, emit=lambda name: sys.stdout.write(name + "\n"))
    push_swap(machine)
    return 0


if __name__ == "__main__":
    sys.exit(main())