"""Maps single characters to the lexical classes the scanner dispatches on."""

from __future__ import annotations

from enum import Enum, auto


class CharClass(Enum):
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    COMMA = auto()
    EQUAL = auto()
    ESCAPE = auto()
    MINUS = auto()
    PERIOD = auto()
    QUOTE = auto()
    COMMENT_START = auto()
    ALPHA_CHAR = auto()
    NUMERIC_CHAR = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    UNKNOWN = auto()


PUNCTUATION: dict[str, CharClass] = {
    "[": CharClass.OPEN_BRACKET,
    "]": CharClass.CLOSE_BRACKET,
    ",": CharClass.COMMA,
    "=": CharClass.EQUAL,
    "\\": CharClass.ESCAPE,
    "-": CharClass.MINUS,
    ".": CharClass.PERIOD,
    '"': CharClass.QUOTE,
    ";": CharClass.COMMENT_START,
    "#": CharClass.COMMENT_START,
    "\n": CharClass.NEWLINE,
}

WHITESPACE = {" ", "\t", "\r", "\v", "\f"}


def classify(char: str) -> CharClass:
    if char in PUNCTUATION:
        return PUNCTUATION[char]
    if char in WHITESPACE:
        return CharClass.WHITESPACE
    if char.isascii() and char.isalpha():
        return CharClass.ALPHA_CHAR
    if char.isascii() and char.isdigit():
        return CharClass.NUMERIC_CHAR
    return CharClass.UNKNOWN


def describe(char: str) -> str:
    if char == "":
        return "end of input"
    if char == "\n":
        return "newline"
    return f"'{char}'"


__all__ = ["CharClass", "classify", "describe"]
