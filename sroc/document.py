"""Parsed sroc document and its typed accessors."""

from __future__ import annotations

from typing import Any

from pydantic import model_validator

from .errors import KeyNotFound, SectionNotFound, TypeMismatch
from .nodes import ArrayValue, ItemContainer, Section, Value, ValueType


class Document(ItemContainer):
    """Top-level items declared before any header, followed by the sections in file order.

    Documents are frozen once built, so any number of readers may query one
    concurrently.
    """

    sections: tuple[Section, ...] = ()

    @model_validator(mode="after")
    def check_unique_sections(self) -> Document:
        seen: set[str] = set()
        for section in self.sections:
            if section.name in seen:
                raise ValueError(f"Duplicate section {section.name!r}")
            seen.add(section.name)
        return self

    def get_section(self, name: str) -> Section:
        for section in self.sections:
            if section.name == name:
                return section
        raise SectionNotFound(name)

    def section_names(self) -> list[str]:
        return [section.name for section in self.sections]

    def has_section(self, name: str) -> bool:
        return any(section.name == name for section in self.sections)

    def _lookup(self, section: str | None, key: str, expected: ValueType) -> Value:
        container: ItemContainer = self if section is None else self.get_section(section)
        value = container.get(key)
        if value is None:
            raise KeyNotFound(key, section)
        if value.value_type is not expected:
            raise TypeMismatch(expected, value.value_type, key)
        return value

    def read_bool(self, section: str | None, key: str) -> bool:
        return self._lookup(section, key, ValueType.BOOLEAN).value  # type: ignore[union-attr]

    def read_number(self, section: str | None, key: str) -> int:
        return self._lookup(section, key, ValueType.INTEGER).value  # type: ignore[union-attr]

    def read_string(self, section: str | None, key: str) -> str:
        return self._lookup(section, key, ValueType.TEXT).value  # type: ignore[union-attr]

    def read_array(self, section: str | None, key: str, element_type: ValueType) -> tuple[Value, ...]:
        value = self._lookup(section, key, ValueType.ARRAY)
        if not isinstance(value, ArrayValue):
            raise TypeMismatch(ValueType.ARRAY, value.value_type, key)
        # an empty array satisfies every element type
        if value.element_type is not None and value.element_type is not element_type:
            raise TypeMismatch(element_type, value.element_type, key)
        return value.values

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.items_dict(),
            "sections": {section.name: section.items_dict() for section in self.sections},
        }


def read_bool(document: Document, section: str | None, key: str) -> bool:
    return document.read_bool(section, key)


def read_number(document: Document, section: str | None, key: str) -> int:
    return document.read_number(section, key)


def read_string(document: Document, section: str | None, key: str) -> str:
    return document.read_string(section, key)


def read_array(document: Document, section: str | None, key: str, element_type: ValueType) -> tuple[Value, ...]:
    return document.read_array(section, key, element_type)


__all__ = ["Document", "read_bool", "read_number", "read_string", "read_array"]
