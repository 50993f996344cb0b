# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type system representations for the type-checked IDL model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveType(Enum):
    """Primitive (base) types of the IDL type system."""

    VOID = "void"
    STRING = "string"
    BOOL = "bool"
    BYTE = "byte"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    DOUBLE = "double"


class PrimitiveTypeRef(BaseModel):
    """Reference to a primitive type.

    A ``STRING`` primitive carrying ``string_enum_values`` is a string
    enumeration: only the listed literals are permitted.
    """

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType
    string_enum_values: list[str] | None = None

    @property
    def is_void(self) -> bool:
        return self.primitive is PrimitiveType.VOID

    @property
    def is_string_enum(self) -> bool:
        return self.primitive is PrimitiveType.STRING and self.string_enum_values is not None


class TypedefTypeRef(BaseModel):
    """A named alias for another type."""

    kind: Literal["typedef"] = "typedef"
    name: str
    aliased_type: TypeRef


class EnumConstant(BaseModel):
    """One symbolic constant of an enum together with its integer value."""

    name: str
    value: int


class EnumTypeRef(BaseModel):
    """An integer enumeration with ordered constants."""

    kind: Literal["enum"] = "enum"
    name: str
    constants: list[EnumConstant] = _Field(default_factory=list)


class StructTypeRef(BaseModel):
    """A struct (or exception) with ordered member fields.

    ``xsd_all`` selects the unordered "all" layout; otherwise the members
    are rendered as a strict sequence.
    """

    kind: Literal["struct"] = "struct"
    name: str
    fields: list[Field] = _Field(default_factory=list)
    xsd_all: bool = False
    is_exception: bool = False


class ListTypeRef(BaseModel):
    """Reference to a parameterized list<T> type."""

    kind: Literal["list"] = "list"
    element_type: TypeRef


class SetTypeRef(BaseModel):
    """Reference to a parameterized set<T> type."""

    kind: Literal["set"] = "set"
    element_type: TypeRef


class MapTypeRef(BaseModel):
    """Reference to a parameterized map<K, V> type."""

    kind: Literal["map"] = "map"
    key_type: TypeRef
    value_type: TypeRef


# A type reference: a primitive, a named definition, or a container.
# The `kind` discriminator keeps the union closed and unambiguous.
TypeRef = Annotated[
    PrimitiveTypeRef | TypedefTypeRef | EnumTypeRef | StructTypeRef | ListTypeRef | SetTypeRef | MapTypeRef,
    _Field(discriminator="kind"),
]


class Field(BaseModel):
    """A named, typed member of a struct, exception list, or attribute struct.

    Attributes:
        name: Member name, used as the element name.
        type: The member's type.
        xsd_attrs: Optional struct whose members are rendered as XML
            attributes of the element instead of child elements.
        xsd_optional: Render the element with ``minOccurs="0"``.
        xsd_nillable: Render the element with ``nillable="true"``.
    """

    name: str
    type: TypeRef
    xsd_attrs: StructTypeRef | None = None
    xsd_optional: bool = False
    xsd_nillable: bool = False


def primitive(kind: PrimitiveType) -> PrimitiveTypeRef:
    """Return a plain reference to the primitive *kind*."""
    return PrimitiveTypeRef(primitive=kind)


VOID = primitive(PrimitiveType.VOID)


# Resolve forward references for models that use TypeRef.
TypedefTypeRef.model_rebuild()
StructTypeRef.model_rebuild()
ListTypeRef.model_rebuild()
SetTypeRef.model_rebuild()
MapTypeRef.model_rebuild()
Field.model_rebuild()
