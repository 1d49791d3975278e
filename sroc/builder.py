"""Accumulates parsed items and sections, then freezes them into a Document."""

from __future__ import annotations

from .cursor import Position
from .document import Document
from .errors import DuplicateKey, DuplicateSection
from .nodes import Item, Section, Value


class DocumentBuilder:
    def __init__(self):
        self._root_items: list[Item] = []
        self._sections: dict[str, list[Item]] = {}
        self._keys: dict[str | None, set[str]] = {None: set()}
        self._active: str | None = None

    @property
    def active_section(self) -> str | None:
        """Name of the section new items go to, or None while still at the root."""
        return self._active

    def open_section(self, name: str, position: Position) -> None:
        if name in self._sections:
            raise DuplicateSection(name, position.line, position.column)
        self._sections[name] = []
        self._keys[name] = set()
        self._active = name

    def add_item(self, key: str, value: Value, position: Position) -> Item:
        keys = self._keys[self._active]
        if key in keys:
            raise DuplicateKey(key, position.line, position.column)
        item = Item(key=key, value=value)
        keys.add(key)
        items = self._root_items if self._active is None else self._sections[self._active]
        items.append(item)
        return item

    def build(self) -> Document:
        sections = tuple(Section(name=name, items=tuple(items)) for name, items in self._sections.items())
        return Document(items=tuple(self._root_items), sections=sections)


__all__ = ["DocumentBuilder"]
