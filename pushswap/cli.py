"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments, split_words
from pushswap.sorting import sort_stacks
from pushswap.stack import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the given numbers and print each operation; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    tokens = split_words(args[0], " ") if len(args) == 1 else args
    try:
        values = parse_arguments(tokens)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sort_stacks(Stacks(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())