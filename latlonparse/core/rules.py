"""
Ordered-choice parsing rules.

A rule is a generator function taking a :class:`Cursor` and yielding
``(value, cursor)`` candidates. Candidates are produced depth-first in the
order the alternatives are declared, so the first candidate is the reading
an ordered-choice parser would pick, while later candidates let an
enclosing rule backtrack when its own continuation fails.

Rules never raise for bad input: producing no candidates is the only
failure signal. :meth:`Rule.parse` converts that into a
:class:`~latlonparse.validation.exceptions.CoordinateParseError` for
callers working with whole strings.
"""

import functools
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from latlonparse.core.cursor import Cursor, ParseResult
from latlonparse.validation.exceptions import CoordinateParseError

T = TypeVar("T")

Candidates = Iterator[Tuple[Any, Cursor]]


class Rule(Generic[T]):
    """
    A named grammar rule.

    Parameters
    ----------
    func : callable
        Generator function ``Cursor -> Iterator[(value, Cursor)]``.
    name : str, optional
        Name used in error messages. Defaults to the function name.
    """

    def __init__(
        self, func: Callable[[Cursor], Candidates], name: Optional[str] = None
    ):
        self._func = func
        self.name = name or func.__name__
        functools.update_wrapper(self, func)
        self.__name__ = self.name

    def __repr__(self) -> str:
        return f"<Rule {self.name}>"

    def run(self, cursor: Cursor) -> Candidates:
        """Yield every candidate reading at ``cursor`` in declared order."""
        return self._func(cursor)

    def __call__(self, text: str) -> Optional[ParseResult]:
        """
        Return the first candidate reading of a prefix of ``text``.

        Parameters
        ----------
        text : str
            Input to read from its first character.

        Returns
        -------
        ParseResult or None
            The value and the unconsumed remainder, or None when the rule
            does not match.

        Examples
        --------
        >>> angle("40 30 15")
        ParseResult(value=40.0, remaining=' 30 15')
        """
        for value, rest in self.run(Cursor(text)):
            return ParseResult(value, rest.remaining)
        return None

    def match_all(self, text: str) -> List[ParseResult]:
        """Return every candidate reading of a prefix of ``text``, in declared order."""
        return [
            ParseResult(value, rest.remaining)
            for value, rest in self.run(Cursor(text))
        ]

    def complete_readings(self, text: str) -> List[T]:
        """Return the values of every candidate that consumes all of ``text``."""
        return [value for value, rest in self.run(Cursor(text)) if rest.at_end]

    def parse(self, text: str) -> T:
        """
        Read the whole of ``text``.

        Returns
        -------
        value
            The first candidate, in declared order, that leaves no input.

        Raises
        ------
        CoordinateParseError
            If no candidate consumes the entire input.
        """
        for value, rest in self.run(Cursor(text)):
            if rest.at_end:
                return value
        raise CoordinateParseError(text, self.name)


def rule(func: Callable[[Cursor], Candidates]) -> Rule:
    """Decorator turning a candidate generator into a :class:`Rule`."""
    return Rule(func)


def choice(name: str, *alternatives: Rule) -> Rule:
    """
    Ordered choice: all candidates of the first alternative, then the second, ...

    Every alternative starts from the same cursor.
    """

    def run(cursor: Cursor) -> Candidates:
        for alternative in alternatives:
            yield from alternative.run(cursor)

    return Rule(run, name=name)


def optional_char(cursor: Cursor, chars: Sequence[str]) -> Iterator[Cursor]:
    """Yield the cursor after one of ``chars`` (if present), then ``cursor`` itself."""
    matched = cursor.expect(chars)
    if matched is not None:
        yield matched[1]
    yield cursor
