"""Recursive parser for the right-hand side of a declaration."""

from __future__ import annotations

import logging

from .classifier import CharClass, classify, describe
from .cursor import Cursor, Position
from .errors import SrocSyntaxError
from .nodes import INT64_MAX, INT64_MIN, ArrayValue, BooleanValue, IntegerValue, TextValue, Value, ValueType

BOOLEAN_LITERALS = {"true": True, "false": False}
ESCAPABLE = {'"', "\\"}
MAX_ARRAY_DEPTH = 64


class ValueParser:
    """Consumes exactly one value starting at the cursor.

    The cursor must sit on the first character of the value and is left just
    past its last character. Strings and arrays may run across physical lines.
    """

    def __init__(self, cursor: Cursor, logger: logging.Logger | None = None, max_depth: int = MAX_ARRAY_DEPTH):
        self.cursor = cursor
        self.logger = logger or logging.getLogger("sroc.parser")
        self.max_depth = max_depth
        self._depth = 0

    def parse_value(self) -> Value:
        char_class = self.cursor.peek_class()
        if char_class is CharClass.QUOTE:
            return self._parse_text()
        if char_class is CharClass.OPEN_BRACKET:
            return self._parse_array()
        if char_class in (CharClass.MINUS, CharClass.NUMERIC_CHAR):
            return self._parse_integer()
        if char_class is CharClass.ALPHA_CHAR:
            return self._parse_boolean()
        raise self._error(f"Unrecognized value start {describe(self.cursor.peek())}")

    def _error(self, detail: str, position: Position | None = None) -> SrocSyntaxError:
        position = position or self.cursor.position()
        return SrocSyntaxError(detail, position.line, position.column)

    def _parse_boolean(self) -> BooleanValue:
        start = self.cursor.position()
        word = self.cursor.consume_while(lambda c: classify(c) is CharClass.ALPHA_CHAR)
        if word not in BOOLEAN_LITERALS:
            raise self._error(f"Unrecognized literal '{word}'", start)
        return BooleanValue(value=BOOLEAN_LITERALS[word])

    def _parse_integer(self) -> IntegerValue:
        start = self.cursor.position()
        sign = ""
        if self.cursor.peek_class() is CharClass.MINUS:
            sign = self.cursor.advance()
        digits = self.cursor.consume_while(lambda c: classify(c) is CharClass.NUMERIC_CHAR)
        if not digits:
            raise self._error(f"Expected digit after '-', got {describe(self.cursor.peek())}")
        number = int(sign + digits)
        if not INT64_MIN <= number <= INT64_MAX:
            raise self._error(f"Integer out of range: {sign}{digits}", start)
        return IntegerValue(value=number)

    def _parse_text(self) -> TextValue:
        start = self.cursor.position()
        self.cursor.advance()
        buffer: list[str] = []
        while not self.cursor.at_end:
            char = self.cursor.advance()
            if char == '"':
                if self.cursor.position().line != start.line:
                    self.logger.debug(f"String starting at line {start.line} continued to line {self.cursor.position().line}")
                return TextValue(value="".join(buffer))
            if char == "\\" and self.cursor.peek() in ESCAPABLE:
                buffer.append(self.cursor.advance())
            else:
                buffer.append(char)
        raise self._error("Unterminated string", start)

    def _parse_array(self) -> ArrayValue:
        if self._depth >= self.max_depth:
            raise self._error(f"Array nesting too deep (limit {self.max_depth})")
        self._depth += 1
        try:
            return self._parse_array_elements()
        finally:
            self._depth -= 1

    def _parse_array_elements(self) -> ArrayValue:
        start = self.cursor.position()
        self.cursor.advance()
        values: list[Value] = []
        element_type: ValueType | None = None
        while True:
            self.cursor.skip_blank()
            if self.cursor.at_end:
                raise self._error("Unterminated array", start)
            if self.cursor.peek_class() is CharClass.CLOSE_BRACKET:
                break
            element_start = self.cursor.position()
            value = self.parse_value()
            if element_type is None:
                element_type = value.value_type
            elif value.value_type is not element_type:
                raise self._error(
                    f"Inhomogeneous array: expected {element_type.value} element, got {value.value_type.value}",
                    element_start,
                )
            values.append(value)
            self.cursor.skip_blank()
            if self.cursor.at_end:
                raise self._error("Unterminated array", start)
            char_class = self.cursor.peek_class()
            if char_class is CharClass.COMMA:
                self.cursor.advance()
            elif char_class is not CharClass.CLOSE_BRACKET:
                raise self._error(f"Expected ',' or ']' in array, got {describe(self.cursor.peek())}")
        self.cursor.advance()
        if self.cursor.position().line != start.line:
            self.logger.debug(f"Array starting at line {start.line} continued to line {self.cursor.position().line}")
        return ArrayValue(values=tuple(values))


__all__ = ["ValueParser", "BOOLEAN_LITERALS", "MAX_ARRAY_DEPTH"]
