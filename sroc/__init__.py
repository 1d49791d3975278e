"""Parser and typed accessors for the sroc configuration format."""

from .classifier import CharClass, classify
from .cursor import Cursor, Position
from .errors import (
    AccessError,
    DuplicateKey,
    DuplicateSection,
    EndOfInput,
    KeyNotFound,
    ParseError,
    SectionNotFound,
    SrocError,
    SrocIOError,
    SrocSyntaxError,
    TypeMismatch,
)
from .nodes import (
    ArrayValue,
    BooleanValue,
    IntegerValue,
    Item,
    Section,
    TextValue,
    Value,
    ValueType,
)
from .document import Document, read_array, read_bool, read_number, read_string
from .builder import DocumentBuilder
from .value_parser import ValueParser
from .parser import Parser, ParserConfig, TraceEvent, load, parse
from .formatter import SrocFormatter, dumps

__all__ = [
    "CharClass",
    "classify",
    "Cursor",
    "Position",
    "AccessError",
    "DuplicateKey",
    "DuplicateSection",
    "EndOfInput",
    "KeyNotFound",
    "ParseError",
    "SectionNotFound",
    "SrocError",
    "SrocIOError",
    "SrocSyntaxError",
    "TypeMismatch",
    "ArrayValue",
    "BooleanValue",
    "IntegerValue",
    "Item",
    "Section",
    "TextValue",
    "Value",
    "ValueType",
    "Document",
    "read_array",
    "read_bool",
    "read_number",
    "read_string",
    "DocumentBuilder",
    "ValueParser",
    "Parser",
    "ParserConfig",
    "TraceEvent",
    "load",
    "parse",
    "SrocFormatter",
    "dumps",
]
