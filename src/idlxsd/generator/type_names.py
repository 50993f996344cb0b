# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of IDL type references to the names used in schema markup."""

from __future__ import annotations

from idlxsd.model.types import (
    EnumTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    StructTypeRef,
    TypedefTypeRef,
    TypeRef,
)

# ###############
# Public Interface
# ###############

XSD_PREFIX = "xsd"

# Placeholder for types that must be expanded structurally.
CONTAINER_TYPE_NAME = "container"

XSD_BASE_TYPE_NAMES: dict[PrimitiveType, str] = {
    PrimitiveType.VOID: "void",
    PrimitiveType.STRING: "string",
    PrimitiveType.BOOL: "boolean",
    PrimitiveType.BYTE: "byte",
    PrimitiveType.I16: "short",
    PrimitiveType.I32: "int",
    PrimitiveType.I64: "long",
    PrimitiveType.DOUBLE: "decimal",
}


class UnmappablePrimitiveTypeError(Exception):
    """Raised when a primitive kind has no XSD built-in counterpart.

    The type checker never produces such a type, so this signals an internal
    compiler error and aborts generation of the current program.
    """

    def __init__(self, kind: object) -> None:
        self.kind = kind
        label = kind.value if isinstance(kind, PrimitiveType) else kind
        super().__init__(f"compiler error: no XSD base type name for base type {label!r}")


def xsd(name: str) -> str:
    """Qualify *name* with the XML Schema namespace prefix."""
    return f"{XSD_PREFIX}:{name}"


def base_type_name(kind: PrimitiveType) -> str:
    """Return the unqualified XSD built-in name for a primitive kind.

    Raises:
        UnmappablePrimitiveTypeError: If *kind* is not in the fixed table.
    """
    try:
        return XSD_BASE_TYPE_NAMES[kind]
    except (KeyError, TypeError):
        raise UnmappablePrimitiveTypeError(kind) from None


def type_name(type_ref: TypeRef) -> str:
    """Return the name used to reference *type_ref* in schema markup.

    Typedefs, structs and exceptions are referenced by their declared name,
    primitives by their qualified XSD built-in, enums as ``xsd:int``.  Any
    container yields the ``"container"`` placeholder.
    """
    if isinstance(type_ref, TypedefTypeRef):
        return type_ref.name
    if isinstance(type_ref, PrimitiveTypeRef):
        return xsd(base_type_name(type_ref.primitive))
    if isinstance(type_ref, EnumTypeRef):
        return xsd("int")
    if isinstance(type_ref, StructTypeRef):
        return type_ref.name
    return CONTAINER_TYPE_NAME
