"""Writes documents back out in the canonical sroc layout."""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document
from .nodes import ArrayValue, BooleanValue, IntegerValue, TextValue, Value


@dataclass
class SrocFormatter:
    indent: str = "    "
    inline_arrays: bool = True
    max_inline_items: int = 8

    def format_document(self, document: Document) -> str:
        lines: list[str] = []
        for item in document.items:
            lines.extend(self.format_item(item.key, item.value))
        for section in document.sections:
            if lines:
                lines.append("")
            lines.append(f"[{section.name}]")
            for item in section.items:
                lines.extend(self.format_item(item.key, item.value))
        return "\n".join(lines) + "\n" if lines else ""

    def format_item(self, key: str, value: Value) -> list[str]:
        lines = self._format_value(value, level=0)
        lines[0] = f"{key} = {lines[0]}"
        return lines

    def _format_value(self, value: Value, level: int) -> list[str]:
        if isinstance(value, ArrayValue):
            return self._format_array(value, level)
        return [self._format_scalar(value)]

    def _format_array(self, value: ArrayValue, level: int) -> list[str]:
        if not value.values:
            return ["[]"]
        if self.inline_arrays and self._can_inline_array(value):
            return ["[" + ", ".join(self._format_scalar(item) for item in value.values) + "]"]

        lines = ["["]
        for item in value.values:
            rendered = self._format_value(item, level + 1)
            rendered[0] = f"{self._indent(level + 1)}{rendered[0]}"
            rendered[-1] = f"{rendered[-1]},"
            lines.extend(rendered)
        lines.append(f"{self._indent(level)}]")
        return lines

    def _format_scalar(self, value: Value) -> str:
        if isinstance(value, BooleanValue):
            return "true" if value.value else "false"
        if isinstance(value, IntegerValue):
            return str(value.value)
        if isinstance(value, TextValue):
            escaped = value.value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        raise ValueError(f"Cannot format {value.kind} as a scalar")

    def _can_inline_array(self, value: ArrayValue) -> bool:
        if len(value.values) > self.max_inline_items:
            return False
        return all(isinstance(item, (BooleanValue, IntegerValue, TextValue)) for item in value.values)

    def _indent(self, level: int) -> str:
        return "" if level <= 0 else self.indent * level


def dumps(document: Document, **options) -> str:
    return SrocFormatter(**options).format_document(document)


__all__ = ["SrocFormatter", "dumps"]
