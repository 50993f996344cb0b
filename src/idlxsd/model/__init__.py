# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only IDL type model consumed by the schema generator."""

from idlxsd.model.entities import Function, Program, Service
from idlxsd.model.types import (
    VOID,
    EnumConstant,
    EnumTypeRef,
    Field,
    ListTypeRef,
    MapTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    SetTypeRef,
    StructTypeRef,
    TypedefTypeRef,
    TypeRef,
    primitive,
)

__all__ = [
    # Type system
    "PrimitiveType",
    "PrimitiveTypeRef",
    "TypedefTypeRef",
    "EnumConstant",
    "EnumTypeRef",
    "StructTypeRef",
    "ListTypeRef",
    "SetTypeRef",
    "MapTypeRef",
    "TypeRef",
    "Field",
    "VOID",
    "primitive",
    # Entities
    "Function",
    "Service",
    "Program",
]
