"""Node definitions for the sroc document tree."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .utils import is_single_word

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueType(str, Enum):
    BOOLEAN = "boolean"
    INTEGER = "integer"
    TEXT = "text"
    ARRAY = "array"


class SrocNode(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)


class BooleanValue(SrocNode):
    kind: Literal["boolean"] = "boolean"
    value: bool

    @property
    def value_type(self) -> ValueType:
        return ValueType.BOOLEAN

    def to_python(self) -> bool:
        return self.value


class IntegerValue(SrocNode):
    kind: Literal["integer"] = "integer"
    value: int = Field(ge=INT64_MIN, le=INT64_MAX)

    @property
    def value_type(self) -> ValueType:
        return ValueType.INTEGER

    def to_python(self) -> int:
        return self.value


class TextValue(SrocNode):
    kind: Literal["text"] = "text"
    value: str

    @property
    def value_type(self) -> ValueType:
        return ValueType.TEXT

    def to_python(self) -> str:
        return self.value


class ArrayValue(SrocNode):
    """An ordered run of values that all share one type.

    An empty array has no element type until a reader asks for one.
    """

    kind: Literal["array"] = "array"
    values: tuple[Value, ...] = ()

    @model_validator(mode="after")
    def check_homogeneous(self) -> ArrayValue:
        kinds = {value.kind for value in self.values}
        if len(kinds) > 1:
            raise ValueError(f"Array elements must share one type, got {sorted(kinds)}")
        return self

    @property
    def value_type(self) -> ValueType:
        return ValueType.ARRAY

    @property
    def element_type(self) -> ValueType | None:
        return self.values[0].value_type if self.values else None

    def to_python(self) -> list[Any]:
        return [value.to_python() for value in self.values]


Value = BooleanValue | IntegerValue | TextValue | ArrayValue
ArrayValue.model_rebuild()


class Item(SrocNode):
    key: str
    value: Value

    @field_validator("key")
    @classmethod
    def check_key(cls, key: str) -> str:
        if not is_single_word(key):
            raise ValueError(f"Key must be a single word, got {key!r}")
        return key


class ItemContainer(SrocNode):
    items: tuple[Item, ...] = ()

    @model_validator(mode="after")
    def check_unique_keys(self) -> ItemContainer:
        seen: set[str] = set()
        for item in self.items:
            if item.key in seen:
                raise ValueError(f"Duplicate key {item.key!r}")
            seen.add(item.key)
        return self

    def find_item(self, key: str) -> Item | None:
        return next((item for item in self.items if item.key == key), None)

    def get(self, key: str) -> Value | None:
        item = self.find_item(key)
        return item.value if item else None

    def keys(self) -> list[str]:
        return [item.key for item in self.items]

    def items_dict(self) -> dict[str, Any]:
        return {item.key: item.value.to_python() for item in self.items}


class Section(ItemContainer):
    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, name: str) -> str:
        if not is_single_word(name):
            raise ValueError(f"Section name must be a single word, got {name!r}")
        return name


__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "ValueType",
    "SrocNode",
    "BooleanValue",
    "IntegerValue",
    "TextValue",
    "ArrayValue",
    "Value",
    "Item",
    "ItemContainer",
    "Section",
]
