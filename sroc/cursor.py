"""Read-only position tracking over an input buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .classifier import CharClass, classify
from .errors import EndOfInput

END = ""


@dataclass(slots=True, frozen=True)
class Position:
    line: int
    column: int
    offset: int


class Cursor:
    """Walks ``text`` one character at a time, strictly left to right.

    Lines and columns are 1-based; ``offset`` is an index into ``text``.
    """

    def __init__(self, text: str):
        self.text = text
        self._offset = 0
        self._line = 1
        self._column = 1

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self.text)

    def peek(self) -> str:
        return END if self.at_end else self.text[self._offset]

    def peek_class(self) -> CharClass:
        return classify(self.peek())

    def position(self) -> Position:
        return Position(self._line, self._column, self._offset)

    def advance(self) -> str:
        if self.at_end:
            raise EndOfInput(self._line, self._column)
        char = self.text[self._offset]
        self._offset += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def seek_to(self, offset: int) -> None:
        if offset < self._offset:
            raise ValueError(f"Cannot seek backwards from offset {self._offset} to {offset}")
        if offset > len(self.text):
            raise EndOfInput(self._line, self._column)
        while self._offset < offset:
            self.advance()

    def consume_while(self, condition: Callable[[str], bool]) -> str:
        start = self._offset
        while not self.at_end and condition(self.peek()):
            self.advance()
        return self.text[start : self._offset]

    def skip_whitespace(self) -> None:
        self.consume_while(lambda c: classify(c) is CharClass.WHITESPACE)

    def skip_blank(self) -> None:
        self.consume_while(lambda c: classify(c) in (CharClass.WHITESPACE, CharClass.NEWLINE))

    def consume_line(self) -> str:
        """Consume through the next newline (or to the end) and return the text before it."""
        line = self.consume_while(lambda c: c != "\n")
        if not self.at_end:
            self.advance()
        return line


__all__ = ["END", "Position", "Cursor"]
