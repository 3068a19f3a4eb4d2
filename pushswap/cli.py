"""Command-line entry point: print push_swap instructions for the numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .quick import sort_large
from .small import sort_small
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given as arguments, printing each operation."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(numbers, verbose=False)
    if len(stacks.stack("a")) <= 3:
        sort_small(stacks)
    else:
        sort_large(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())