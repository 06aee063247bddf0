"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from pushswap.stacks import Item

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1

_SPACES = "\t\n\v\f\r "
_LEADING_DIGITS = re.compile(r"[0-9]*")
_NUMBER_WORD = re.compile(r"[-+]?[0-9]*")
_ANY_DIGIT = re.compile(r"[0-9]")


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def parse_int(text: str) -> int:
    """Read an integer the way ``atoi`` does, failing on ``long`` overflow.

    Leading white space and one sign are accepted; reading stops at the
    first non-digit, and no digits at all read as zero.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _LEADING_DIGITS.match(rest).group()
    value = int(digits) if digits else 0
    if value > LONG_MAX:
        raise ParseError(f"number too large: {text!r}")
    return sign * value


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def validate_arguments(args: Iterable[str]) -> list[str]:
    """Check every argument and return the words found in them.

    Each argument must be non-empty and hold at least one digit; each
    space-separated word must be an optional sign followed by digits and
    fit in a 32-bit signed integer.
    """
    words: list[str] = []
    for arg in args:
        if not arg:
            raise ParseError("empty argument")
        for word in split_words(arg, " "):
            value = parse_int(word)
            if not INT_MIN <= value <= INT_MAX:
                raise ParseError(f"number out of range: {word!r}")
            if not _NUMBER_WORD.fullmatch(word):
                raise ParseError(f"not a number: {word!r}")
            words.append(word)
        if not _ANY_DIGIT.search(arg):
            raise ParseError(f"no digits in argument: {arg!r}")
    return words


def make_stack(args: Sequence[str]) -> list[Item]:
    """Build stack ``a`` from the arguments, first number on top."""
    joined = " ".join(args)
    return [Item(parse_int(word)) for word in split_words(joined, " ")]


def check_duplicates(numbers: Iterable[int]) -> None:
    """Raise ParseError if there are no numbers or any number repeats."""
    seen: set[int] = set()
    for number in numbers:
        if number in seen:
            raise ParseError(f"duplicate number: {number}")
        seen.add(number)
    if not seen:
        raise ParseError("no numbers given")