from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal, NotRequired, Optional, TypedDict

from sroc.builder import DocumentBuilder
from sroc.classifier import CharClass, describe
from sroc.cursor import Cursor, Position
from sroc.document import Document
from sroc.errors import SrocIOError, SrocSyntaxError
from sroc.logger import Logger
from sroc.utils import is_single_word, resolve_config
from sroc.value_parser import ValueParser

LineKind = Literal["blank", "comment", "section", "item"]


@dataclass(slots=True, frozen=True)
class TraceEvent:
    kind: LineKind
    detail: str
    position: Position


TraceHook = Callable[[TraceEvent], None]


class ParserConfig(TypedDict):
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]
    trace: NotRequired[Optional[TraceHook]]


class ParserConfigRequired(TypedDict):
    enable_logger: bool
    log_level: int
    trace: Optional[TraceHook]


DEFAULT_CONFIG: ParserConfigRequired = {"enable_logger": False, "log_level": logging.DEBUG, "trace": None}


class Parser:
    """Line parser: classifies each logical line and feeds the builder.

    The builder's active section is the only state carried from one line to the
    next. The first error aborts the whole parse.
    """

    def __init__(self, text: str, config: Optional[ParserConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={"name": "sroc.parser", "is_enabled": self.config["enable_logger"], "level": self.config["log_level"]}
        ).logger
        self.cursor = Cursor(text)
        self.values = ValueParser(self.cursor, self.logger)
        self.builder = DocumentBuilder()

    def parse_document(self) -> Document:
        self.logger.info("Starting parse")
        while not self.cursor.at_end:
            self.parse_line()
        document = self.builder.build()
        self.logger.info(f"Parse complete: {len(document.items)} root item(s), {len(document.sections)} section(s)")
        return document

    def parse_line(self) -> None:
        self.cursor.skip_whitespace()
        start = self.cursor.position()
        char_class = self.cursor.peek_class()
        if self.cursor.at_end or char_class is CharClass.NEWLINE:
            self.cursor.consume_line()
            self._trace("blank", "", start)
        elif char_class is CharClass.COMMENT_START:
            comment = self.cursor.consume_line()
            self._trace("comment", comment, start)
        elif char_class is CharClass.OPEN_BRACKET:
            self._parse_section_header(start)
        elif char_class is CharClass.ALPHA_CHAR:
            self._parse_declaration(start)
        else:
            raise self._error(f"Unexpected token {describe(self.cursor.peek())}", start)

    def _error(self, detail: str, position: Optional[Position] = None) -> SrocSyntaxError:
        position = position or self.cursor.position()
        return SrocSyntaxError(detail, position.line, position.column)

    def _trace(self, kind: LineKind, detail: str, position: Position) -> None:
        hook = self.config["trace"]
        if hook is not None:
            hook(TraceEvent(kind, detail, position))

    def _parse_section_header(self, start: Position) -> None:
        self.cursor.advance()
        raw_name = self.cursor.consume_while(lambda c: c not in "]\n")
        if self.cursor.peek_class() is not CharClass.CLOSE_BRACKET:
            raise self._error("Unterminated section header", start)
        self.cursor.advance()
        name = raw_name.strip()
        if not name:
            raise self._error("Empty section name", start)
        if not is_single_word(name):
            raise self._error(f"Invalid section name '{name}'", start)
        self.builder.open_section(name, start)
        self._finish_line()
        self.logger.debug(f"Opened section '{name}' at line {start.line}")
        self._trace("section", name, start)

    def _parse_declaration(self, start: Position) -> None:
        raw_key = self.cursor.consume_while(lambda c: c not in "=\n")
        if self.cursor.peek_class() is not CharClass.EQUAL:
            raise self._error(f"Expected '=' after key, got {describe(self.cursor.peek())}")
        key = raw_key.strip()
        if not is_single_word(key):
            raise self._error(f"Invalid key '{key}'", start)
        self.cursor.advance()
        self.cursor.skip_whitespace()
        if self.cursor.at_end or self.cursor.peek_class() is CharClass.NEWLINE:
            raise self._error(f"Missing value for key '{key}'")
        value = self.values.parse_value()
        self.builder.add_item(key, value, start)
        self._finish_line()
        where = self.builder.active_section or "root"
        self.logger.debug(f"Added {value.value_type.value} item '{key}' to {where} at line {start.line}")
        self._trace("item", key, start)

    def _finish_line(self) -> None:
        self.cursor.skip_whitespace()
        if self.cursor.at_end:
            return
        if self.cursor.peek_class() is not CharClass.NEWLINE:
            raise self._error(f"Unexpected trailing characters starting with {describe(self.cursor.peek())}")
        self.cursor.advance()


def parse(text: str, config: Optional[ParserConfig] = None) -> Document:
    return Parser(text, config=config).parse_document()


def load(path: str | os.PathLike[str], encoding: str = "utf-8", config: Optional[ParserConfig] = None) -> Document:
    """Read ``path`` into memory and parse it; I/O and decoding failures raise SrocIOError."""
    try:
        text = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise SrocIOError(str(path), getattr(exc, "strerror", None) or str(exc)) from exc
    return parse(text, config=config)


__all__ = [
    "TraceEvent",
    "TraceHook",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "Parser",
    "parse",
    "load",
]
