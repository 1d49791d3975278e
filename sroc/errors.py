"""Exceptions raised while parsing and querying sroc documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import ValueType


class SrocError(Exception):
    pass


class ParseError(SrocError):
    """Base for every failure that aborts a parse; always carries a location."""

    kind = "parse"

    def __init__(self, detail: str, line: int, column: int):
        super().__init__(f"{detail} at line {line}, column {column}")
        self.detail = detail
        self.line = line
        self.column = column


class SrocSyntaxError(ParseError):
    kind = "syntax"


class EndOfInput(ParseError):
    kind = "end_of_input"

    def __init__(self, line: int, column: int):
        super().__init__("Attempt to advance beyond end of input", line, column)


class DuplicateSection(ParseError):
    kind = "duplicate_section"

    def __init__(self, name: str, line: int, column: int):
        super().__init__(f"Duplicate section '{name}'", line, column)
        self.name = name


class DuplicateKey(ParseError):
    kind = "duplicate_key"

    def __init__(self, key: str, line: int, column: int):
        super().__init__(f"Duplicate key '{key}'", line, column)
        self.key = key


class AccessError(SrocError):
    pass


class SectionNotFound(AccessError):
    def __init__(self, name: str):
        super().__init__(f"Section '{name}' not found")
        self.name = name


class KeyNotFound(AccessError):
    def __init__(self, key: str, section: str | None = None):
        where = f"section '{section}'" if section is not None else "root"
        super().__init__(f"Key '{key}' not found in {where}")
        self.key = key
        self.section = section


class TypeMismatch(AccessError):
    def __init__(self, expected: ValueType, actual: ValueType, key: str | None = None):
        message = f"Expected {expected.value}, got {actual.value}"
        if key is not None:
            message = f"{message} for key '{key}'"
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.key = key


class SrocIOError(SrocError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "SrocError",
    "ParseError",
    "SrocSyntaxError",
    "EndOfInput",
    "DuplicateSection",
    "DuplicateKey",
    "AccessError",
    "SectionNotFound",
    "KeyNotFound",
    "TypeMismatch",
    "SrocIOError",
]
