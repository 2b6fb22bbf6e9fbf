"""Definitions of models, their fields and field types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TypeKind(IntEnum):
    """The kinds of type a field may have."""

    ARRAY = 0
    BOOL = 1
    BYTES = 2
    FLOAT = 3
    INT = 4
    MAP = 5
    MODEL = 6
    REF = 7
    STRING = 8
    TIME = 9


_SIMPLE_NAMES = {
    TypeKind.BOOL: "bool",
    TypeKind.BYTES: "bytes",
    TypeKind.FLOAT: "float",
    TypeKind.INT: "int",
    TypeKind.STRING: "string",
    TypeKind.TIME: "time",
}


@dataclass
class Type:
    """A field type; arrays and maps carry element (and key) types."""

    kind: TypeKind
    name: str = ""
    key: Type | None = None
    sub: Type | None = None

    def __str__(self) -> str:
        if self.kind == TypeKind.ARRAY:
            return f"[]{self.sub}"
        if self.kind == TypeKind.MAP:
            return f"[{self.key}]{self.sub}"
        if self.kind == TypeKind.MODEL:
            return f"model {self.name}"
        simple = _SIMPLE_NAMES.get(self.kind)
        if simple is not None:
            return simple
        return f"Unknown ({int(self.kind)})"


@dataclass
class Field:
    """A named, typed field of a model."""

    name: str
    type: Type

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass
class Model:
    """A model definition: a numeric id, a name and its fields."""

    id: int
    name: str
    fields: list[Field] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"Model {self.name} (id {self.id})"]
        lines.extend(f"  {f}" for f in self.fields)
        return "\n".join(lines)