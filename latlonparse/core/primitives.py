"""
Lexical building blocks: integers, decimals, signs and unit marks.

Each rule here is deterministic (at most one candidate) except where an
optional part makes two readings possible; in that case the longer reading
is produced first.
"""

from typing import Sequence

from latlonparse.core.cursor import Cursor
from latlonparse.core.rules import Candidates, Rule, rule
from latlonparse.utils.constants import (
    DECIMAL_MAX_INTEGER_DIGITS,
    DECIMAL_POINT,
    DEGREE_SIGN,
    DIGITS,
    MINUTE_TICKS,
    PLUS_MINUS,
    SECOND_TICKS,
)


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return char in DIGITS


def digit_run(cursor: Cursor):
    """Consume the longest non-empty run of ASCII digits, or return None."""
    digits, rest = cursor.take_while(_is_digit)
    if not digits:
        return None
    return digits, rest


@rule
def natural(cursor: Cursor) -> Candidates:
    """One or more digits read as a non-negative integer. No upper bound."""
    run = digit_run(cursor)
    if run is None:
        return
    digits, rest = run
    try:
        value = int(digits)
    except ValueError:
        # Longer than the interpreter's int conversion limit
        return
    yield value, rest


@rule
def decimal(cursor: Cursor) -> Candidates:
    """
    Unsigned decimal with optional fraction and no exponent.

    The integer part is limited to four digits. Longer runs are left to
    :func:`~latlonparse.core.angles.dms7`, which would otherwise compete
    with this rule on inputs such as ``"0000512"``.
    """
    run = digit_run(cursor)
    if run is None:
        return
    integer_part, rest = run
    if len(integer_part) > DECIMAL_MAX_INTEGER_DIGITS:
        return
    point = rest.expect(DECIMAL_POINT)
    if point is not None:
        fraction = digit_run(point[1])
        if fraction is not None:
            fraction_part, after = fraction
            yield float(f"{integer_part}.{fraction_part}"), after
    yield float(integer_part), rest


def sign_char(positive: str, negative: str) -> Rule:
    """
    Build a rule reading exactly one of two sign characters.

    Parameters
    ----------
    positive : str
        Character yielding +1.
    negative : str
        Character yielding -1.
    """

    def run(cursor: Cursor) -> Candidates:
        matched = cursor.expect((positive, negative))
        if matched is not None:
            char, rest = matched
            yield (1 if char == positive else -1), rest

    return Rule(run, name=f"sign_char({positive!r}, {negative!r})")


plus_minus = sign_char(*PLUS_MINUS)


@rule
def signed_decimal(cursor: Cursor) -> Candidates:
    """A :func:`decimal` with an optional leading ``+`` or ``-``."""
    starts = list(plus_minus.run(cursor)) or [(1, cursor)]
    for sign, rest in starts:
        for value, after in decimal.run(rest):
            yield sign * value, after


def _tick(chars: Sequence[str], name: str) -> Rule:
    def run(cursor: Cursor) -> Candidates:
        matched = cursor.expect(chars)
        if matched is not None:
            yield None, matched[1]

    return Rule(run, name=name)


minute_tick = _tick(MINUTE_TICKS, "minute_tick")
second_tick = _tick(SECOND_TICKS, "second_tick")
degree_sign = _tick((DEGREE_SIGN,), "degree_sign")
