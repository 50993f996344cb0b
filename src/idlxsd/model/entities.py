# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Program-level entities: functions, services and the program itself."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from idlxsd.model.types import VOID, EnumTypeRef, Field, StructTypeRef, TypedefTypeRef, TypeRef

# ###############
# Public Interface
# ###############


class Function(BaseModel):
    """A service operation with its return type and declared exceptions."""

    name: str
    return_type: TypeRef = VOID
    exceptions: list[Field] = _Field(default_factory=list)


class Service(BaseModel):
    """A named, ordered collection of functions."""

    name: str
    functions: list[Function] = _Field(default_factory=list)


class Program(BaseModel):
    """Top-level model of one type-checked IDL program.

    Definitions are kept in declaration order; the generator relies on it.
    """

    name: str = ""
    namespaces: dict[str, str] = _Field(default_factory=dict)
    typedefs: list[TypedefTypeRef] = _Field(default_factory=list)
    enums: list[EnumTypeRef] = _Field(default_factory=list)
    structs: list[StructTypeRef] = _Field(default_factory=list)
    services: list[Service] = _Field(default_factory=list)

    def get_namespace(self, key: str) -> str:
        """Return the namespace declared for *key*, or ``""`` if there is none."""
        return self.namespaces.get(key, "")
