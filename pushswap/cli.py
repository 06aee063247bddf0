"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import ParseError, check_duplicates, make_stack, validate_arguments
from pushswap.sorting import sort_it
from pushswap.stacks import Stacks, is_sorted


def run(args: Sequence[str]) -> list[str]:
    """Return the moves that sort the numbers in ``args``.

    Raises ParseError when the arguments are not distinct integers.
    """
    if not args:
        return []
    validate_arguments(args)
    stack = make_stack(args)
    check_duplicates(item.number for item in stack)
    if is_sorted(stack):
        return []
    stacks = Stacks(a=stack)
    sort_it(stacks)
    return stacks.moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; on bad input print ``Error`` and return 1."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        moves = run(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())