"""Checking and converting the command-line numbers to sort."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from itertools import zip_longest

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")
_ALLOWED = _DIGITS | {" ", "+", "-"}
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")

_LONE_SIGN = "un + ou un - se balade seul"
_BAD_CHARACTER = "des cara non autorise sont present."
_BLANK_ARGUMENT = "il y a un argument vide"
_OUT_OF_RANGE = "> Int-max ou < int-min DETECTE"
_DUPLICATE = "I never allow you to put double in my list"
_SINGLE_NUMBER = "a single number needs no sorting"


class InputError(ValueError):
    """Invalid input; ``report`` is False when no message should be shown."""

    def __init__(self, message: str, *, report: bool = True) -> None:
        super().__init__(message)
        self.message = message
        self.report = report


def _tokens(arg: str) -> list[str]:
    return [token for token in arg.split(" ") if token]


def validate_characters(args: Iterable[str]) -> None:
    """Reject signs not followed by a digit and characters other than digits, signs and spaces."""
    for arg in args:
        for current, following in zip_longest(arg, arg[1:], fillvalue=""):
            if current in ("+", "-") and following not in _DIGITS:
                raise InputError(_LONE_SIGN)
            if current not in _ALLOWED:
                raise InputError(_BAD_CHARACTER)


def has_blank_argument(args: Iterable[str]) -> bool:
    """Tell whether some argument is empty or holds only spaces."""
    return any(not arg.strip(" ") for arg in args)


def count_numbers(args: Iterable[str]) -> int:
    """Count the space-separated numbers over all arguments."""
    return sum(len(_tokens(arg)) for arg in args)


def parse_int(text: str) -> int:
    """Read a leading signed decimal integer that must fit in 32 bits.

    Leading whitespace is skipped and reading stops at the first non-digit;
    text without digits reads as 0.
    """
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(_OUT_OF_RANGE)
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate the arguments and return the numbers they hold, in order."""
    args = list(args)
    validate_characters(args)
    if has_blank_argument(args):
        raise InputError(_BLANK_ARGUMENT)
    tokens = [token for arg in args for token in _tokens(arg)]
    if len(tokens) == 1:
        raise InputError(_SINGLE_NUMBER, report=False)
    return [parse_int(token) for token in tokens]


def check_duplicates(values: Iterable[int]) -> None:
    """Raise InputError if a value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(_DUPLICATE)
        seen.add(value)


def rank(values: Sequence[int]) -> list[int]:
    """Replace each value by its 1-based position in sorted order."""
    ordered = sorted(values)
    positions = {value: index for index, value in enumerate(ordered, 1)}
    return [positions[value] for value in values]