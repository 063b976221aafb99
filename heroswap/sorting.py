"""Choosing and running the sequence of stack operations that sorts ranks."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import islice

from .stacks import Stacks

_Op = Callable[[Stacks], None]
_Case = tuple[tuple[int, int, int], tuple[_Op, ...]]

_LOW_CASES: tuple[_Case, ...] = (
    ((1, 3, 2), (Stacks.rra, Stacks.sa)),
    ((2, 1, 3), (Stacks.sa,)),
    ((3, 1, 2), (Stacks.ra,)),
    ((3, 2, 1), (Stacks.sa, Stacks.rra)),
    ((2, 3, 1), (Stacks.rra,)),
)

_HIGH_CASES: tuple[_Case, ...] = tuple(
    (tuple(value + 2 for value in pattern), ops) for pattern, ops in _LOW_CASES
)


def _apply_cases(stacks: Stacks, cases: tuple[_Case, ...]) -> None:
    # Each pattern is tested against the state left by the previous ones.
    for pattern, ops in cases:
        if tuple(islice(stacks.a, 3)) == pattern:
            for op in ops:
                op(stacks)


def is_sorted(ranks: Iterable[int]) -> bool:
    """Tell whether the ranks read 1, 2, 3, ... from the top."""
    ranks = list(ranks)
    return ranks == list(range(1, len(ranks) + 1))


def sort_three(stacks: Stacks) -> None:
    """Sort ranks 1 to 3 on top of ``a``."""
    _apply_cases(stacks, _LOW_CASES)


def sort_three_high(stacks: Stacks) -> None:
    """Sort ranks 3 to 5 on top of ``a``."""
    _apply_cases(stacks, _HIGH_CASES)


def sort_four_or_five(stacks: Stacks) -> None:
    """Sort four or five ranks by parking 1 and 2 on ``b``."""
    if not {1, 2}.issubset(stacks.a):
        raise ValueError("stack a must hold ranks 1 and 2")
    total = len(stacks.a) + len(stacks.b)
    for _ in range(2):
        while stacks.a[0] not in (1, 2):
            stacks.ra()
        stacks.pb()
    if stacks.b[0] != 2:
        stacks.rb()
    if total == 5:
        sort_three_high(stacks)
    elif total == 4 and stacks.a[0] > stacks.a[1]:
        stacks.ra()
    stacks.pa()
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort ranks 1..n bit by bit, splitting them between the two stacks."""
    max_bits = len(stacks.a).bit_length()
    for bit in range(max_bits):
        for _ in range(len(stacks.a)):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        for _ in range(len(stacks.b)):
            if (stacks.b[0] >> bit) & 1:
                stacks.pa()
            else:
                stacks.rb()
    while stacks.b:
        stacks.pa()


def solve(ranks: Iterable[int]) -> list[str]:
    """Return the operations that sort the ranks; empty if already sorted."""
    ranks = list(ranks)
    if is_sorted(ranks):
        return []
    stacks = Stacks(ranks)
    count = len(ranks)
    if count == 2:
        stacks.sa()
    elif count == 3:
        sort_three(stacks)
    elif count in (4, 5):
        sort_four_or_five(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations