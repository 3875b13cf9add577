"""
Grammars for unsigned angles.

All rules return degrees as float. Components may be separated by any
amount of whitespace. Each rule checks its own component ranges; a reading
that breaks a bound is dropped so that the next alternative can try the
same input.

The alternatives overlap on purpose (``"452312"`` is not a valid decimal
here but is a valid compact DMS), and :data:`angle` resolves the overlap by
declaration order alone.
"""

from latlonparse.core.cursor import Cursor
from latlonparse.core.primitives import (
    decimal,
    degree_sign,
    digit_run,
    minute_tick,
    natural,
    second_tick,
)
from latlonparse.core.rules import Candidates, choice, optional_char, rule
from latlonparse.utils.constants import (
    DECIMAL_POINT,
    DEGREE_SIGN,
    DMS7_MAX_DIGITS,
    DMS7_MIN_DIGITS,
    MAX_ANGLE_DEG,
    SEXAGESIMAL_LIMIT,
)


def _degrees(cursor: Cursor, marked: bool) -> Candidates:
    """Integer degrees no larger than 360, followed by ``°`` when ``marked``."""
    for degrees, rest in natural.run(cursor):
        if degrees > MAX_ANGLE_DEG:
            continue
        if not marked:
            yield degrees, rest.skip_spaces()
            continue
        for _, after in degree_sign.run(rest):
            yield degrees, after.skip_spaces()


def _minutes(cursor: Cursor) -> Candidates:
    for minutes, rest in natural.run(cursor):
        if minutes < SEXAGESIMAL_LIMIT:
            yield minutes, rest


def _fractional(cursor: Cursor) -> Candidates:
    """A decimal value below 60, used for decimal seconds and decimal minutes."""
    for value, rest in decimal.run(cursor):
        if value < SEXAGESIMAL_LIMIT:
            yield value, rest


@rule
def degrees_minutes_seconds(cursor: Cursor) -> Candidates:
    """
    Degrees, minutes and seconds separated by spaces, e.g. ``"40 30 15.5"``.

    Degrees and minutes are integers; seconds may carry a fraction.
    """
    for degrees, rest in _degrees(cursor, marked=False):
        for minutes, rest2 in _minutes(rest):
            for seconds, rest3 in _fractional(rest2.skip_spaces()):
                yield degrees + minutes / 60 + seconds / 3600, rest3


@rule
def degrees_minutes_seconds_units(cursor: Cursor) -> Candidates:
    """Degrees, minutes and seconds with unit marks, e.g. ``"40° 30' 15.5\""``."""
    for degrees, rest in _degrees(cursor, marked=True):
        for minutes, rest2 in _minutes(rest):
            for _, rest3 in minute_tick.run(rest2):
                for seconds, rest4 in _fractional(rest3.skip_spaces()):
                    for _, rest5 in second_tick.run(rest4):
                        yield degrees + minutes / 60 + seconds / 3600, rest5


@rule
def degrees_decimal_minutes(cursor: Cursor) -> Candidates:
    """Integer degrees and decimal minutes separated by spaces, e.g. ``"40 30.25"``."""
    for degrees, rest in _degrees(cursor, marked=False):
        for minutes, rest2 in _fractional(rest):
            yield degrees + minutes / 60, rest2


@rule
def degrees_decimal_minutes_units(cursor: Cursor) -> Candidates:
    """Integer degrees and decimal minutes with unit marks, e.g. ``"40° 30.25'"``."""
    for degrees, rest in _degrees(cursor, marked=True):
        for minutes, rest2 in _fractional(rest):
            for _, rest3 in minute_tick.run(rest2):
                yield degrees + minutes / 60, rest3


@rule
def dms7(cursor: Cursor) -> Candidates:
    """
    Compact ``DDDMMSS.ss`` angle.

    The integer digits are sliced from the right: the last two are seconds,
    the two before are minutes and the remaining one to three are degrees.
    Leading zeros on the degrees and the fraction on the seconds are
    optional.

    Examples
    --------
    >>> round(dms7("0452312").value, 6)
    45.386667
    """
    run = digit_run(cursor)
    if run is None:
        return
    digits, rest = run
    count = len(digits)
    if count < DMS7_MIN_DIGITS or count > DMS7_MAX_DIGITS:
        return

    degrees = int(digits[: count - 4])
    minutes = int(digits[count - 4 : count - 2])
    if minutes >= SEXAGESIMAL_LIMIT:
        return

    endings = []
    point = rest.expect(DECIMAL_POINT)
    if point is not None:
        fraction_run = digit_run(point[1])
        if fraction_run is not None:
            endings.append(fraction_run)
    endings.append(("0", rest))

    for fraction, after in endings:
        seconds = float(f"{digits[count - 2 :]}.{fraction}")
        if seconds < SEXAGESIMAL_LIMIT:
            yield degrees + minutes / 60 + seconds / 3600, after


@rule
def decimal_degrees(cursor: Cursor) -> Candidates:
    """Plain decimal degrees with an optional trailing ``°``."""
    for value, rest in decimal.run(cursor):
        for after in optional_char(rest, DEGREE_SIGN):
            yield value, after


angle = choice(
    "angle",
    decimal_degrees,
    degrees_minutes_seconds,
    degrees_minutes_seconds_units,
    degrees_decimal_minutes,
    degrees_decimal_minutes_units,
    dms7,
)
angle.__doc__ = """
Unsigned angle in any supported notation.

Alternatives are tried in this order: plain decimal (optional ``°``),
space-separated DMS, DMS with units, space-separated decimal minutes,
decimal minutes with units, compact DDDMMSS.
"""
