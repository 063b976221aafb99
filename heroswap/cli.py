"""Command-line entry point that prints the operations sorting its numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, check_duplicates, parse_arguments, rank
from .printf import printf
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one stack operation per line; return the process exit status.

    With no arguments nothing is printed and the status is 1. Invalid input
    writes ``Error`` and a reason to standard error and gives status 1.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        check_duplicates(values)
    except InputError as error:
        if error.report:
            sys.stderr.write(f"Error\n{error.message}\n")
        return 1
    for operation in solve(rank(values)):
        printf("%s\n", operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())