"""
  Character cursor for the fused reader/evaluator.

- Holds the source text and a position that only ever moves forward
- Look-ahead (peek, startswith, identifier_end) never moves the position
- Only the space character counts as whitespace; tabs and newlines do not
"""

from __future__ import annotations

import string

from sigma.errors import SigmaSyntaxError

DIGITS = frozenset(string.digits)
ALPHA = frozenset(string.ascii_letters)
ALPHANUMERIC = ALPHA | DIGITS


def is_num(c: str) -> bool:
    return c in DIGITS


def is_alpha(c: str) -> bool:
    return c in ALPHA


def is_alphanumeric(c: str) -> bool:
    return c in ALPHANUMERIC


class Cursor:
    __slots__ = ("source", "pos")

    def __init__(self, source: str, pos: int = 0):
        self.source = source
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """Character at pos + offset, or "" past the end of the source."""
        i = self.pos + offset
        return self.source[i] if i < len(self.source) else ""

    def rest(self) -> str:
        return self.source[self.pos:]

    def advance(self, n: int = 1) -> None:
        self.pos = min(self.pos + n, len(self.source))

    def skip_spaces(self) -> None:
        while self.peek() == " ":
            self.pos += 1

    def startswith(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.pos)

    def expect(self, char: str) -> None:
        """Consume `char` or raise a syntax error showing the unread text."""
        if self.peek() != char:
            raise SigmaSyntaxError(f"expected {char!r}: {self.rest()}")
        self.pos += 1

    def identifier_end(self) -> int:
        """Index just past the identifier starting at pos (pos itself if there is none)."""
        if not is_alpha(self.peek()):
            return self.pos
        end = self.pos + 1
        while end < len(self.source) and is_alphanumeric(self.source[end]):
            end += 1
        return end

    def read_identifier(self) -> str:
        end = self.identifier_end()
        if end == self.pos:
            raise SigmaSyntaxError(f"expected an identifier: {self.rest()}")
        name = self.source[self.pos:end]
        self.pos = end
        return name

    def read_number(self) -> float:
        """Read `-?digit+` as an integer and return it as a float."""
        start = self.pos
        digits_start = start + 1 if self.peek() == "-" else start
        end = digits_start
        while end < len(self.source) and is_num(self.source[end]):
            end += 1
        if end == digits_start:
            raise SigmaSyntaxError(f"expected digits: {self.rest()}")
        literal = self.source[start:end]
        try:
            value = float(int(literal))
        except (OverflowError, ValueError):
            raise SigmaSyntaxError(f"numeric literal out of range: {literal}") from None
        self.pos = end
        return value

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, rest={self.rest()!r})"
