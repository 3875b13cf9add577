"""
Immutable input cursor used by the grammar rules.

A rule never modifies the cursor it receives. Consuming input produces a
new cursor, so backtracking to a sibling alternative only needs the
original cursor object.
"""

from dataclasses import dataclass
from typing import Any, Callable, NamedTuple, Optional, Sequence, Tuple


class ParseResult(NamedTuple):
    """A parsed value together with the input left unconsumed."""

    value: Any
    remaining: str


@dataclass(frozen=True)
class Cursor:
    """
    Position within an input string.

    Attributes
    ----------
    text : str
        The complete input.
    pos : int
        Index of the next unconsumed character.
    """

    text: str
    pos: int = 0

    @property
    def remaining(self) -> str:
        """Unconsumed input."""
        return self.text[self.pos :]

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the next character, or an empty string at end of input."""
        return self.text[self.pos] if not self.at_end else ""

    def advance(self, count: int = 1) -> "Cursor":
        return Cursor(self.text, min(self.pos + count, len(self.text)))

    def take_while(self, predicate: Callable[[str], bool]) -> Tuple[str, "Cursor"]:
        """
        Consume the longest run of characters satisfying ``predicate``.

        Returns
        -------
        tuple
            The consumed run (possibly empty) and the cursor after it.
        """
        end = self.pos
        while end < len(self.text) and predicate(self.text[end]):
            end += 1
        return self.text[self.pos : end], Cursor(self.text, end)

    def skip_spaces(self) -> "Cursor":
        return self.take_while(str.isspace)[1]

    def expect(self, chars: Sequence[str]) -> Optional[Tuple[str, "Cursor"]]:
        """
        Consume one character if it is one of ``chars``.

        Returns
        -------
        tuple or None
            The matched character and the advanced cursor, or None when the
            next character is not acceptable.
        """
        char = self.peek()
        if char and char in chars:
            return char, self.advance()
        return None
