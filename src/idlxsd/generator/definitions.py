# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emission of named schema types for typedefs, enums and structs.

Each ``generate_*`` call renders one type definition, writes it as a
standalone schema document and appends it to the context's accumulation
buffer for inclusion in the service documents.
"""

from __future__ import annotations

from pathlib import Path

from idlxsd.generator.context import GenerationContext
from idlxsd.generator.elements import element_lines
from idlxsd.generator.framing import indent_lines, quote, render_document
from idlxsd.generator.type_names import type_name, xsd
from idlxsd.model.types import EnumTypeRef, PrimitiveTypeRef, StructTypeRef, TypedefTypeRef

# ###############
# Public Interface
# ###############


def render_typedef(typedef: TypedefTypeRef) -> str:
    """Render a typedef as a named ``xsd:simpleType`` restriction.

    A string enumeration lists its permitted literals as enumeration facets;
    any other aliased type becomes a plain restriction of its base.
    """
    aliased = typedef.aliased_type
    base = quote(type_name(aliased))
    lines: list[tuple[int, str]] = [(0, f'<xsd:simpleType name="{quote(typedef.name)}">')]
    if isinstance(aliased, PrimitiveTypeRef) and aliased.is_string_enum:
        lines.append((1, f'<xsd:restriction base="{base}">'))
        lines.extend(_enumeration_facets(aliased.string_enum_values or [], level=2))
        lines.append((1, "</xsd:restriction>"))
    else:
        lines.append((1, f'<xsd:restriction base="{base}" />'))
    lines.append((0, "</xsd:simpleType>"))
    return _fragment(lines)


def render_enum(enum: EnumTypeRef) -> str:
    """Render an enum as an ``xsd:string`` restriction.

    Each facet value is ``"<value>,<name>"`` so both the numeric and the
    symbolic form of a constant survive in the schema.
    """
    values = [f"{constant.value},{constant.name}" for constant in enum.constants]
    lines: list[tuple[int, str]] = [
        (0, f'<xsd:simpleType name="{quote(enum.name)}">'),
        (1, f'<xsd:restriction base="{xsd("string")}">'),
    ]
    lines.extend(_enumeration_facets(values, level=2))
    lines.extend([(1, "</xsd:restriction>"), (0, "</xsd:simpleType>")])
    return _fragment(lines)


def render_struct(struct: StructTypeRef) -> str:
    """Render a struct as a named ``xsd:complexType``.

    Members are wrapped in ``xsd:all`` for all-mode structs and in
    ``xsd:sequence`` otherwise.  All-mode members are always optional.
    """
    group = "xsd:all" if struct.xsd_all else "xsd:sequence"
    lines: list[tuple[int, str]] = [
        (0, f'<xsd:complexType name="{quote(struct.name)}">'),
        (1, f"<{group}>"),
    ]
    for member in struct.fields:
        member_lines = element_lines(
            member.name,
            member.type,
            member.xsd_attrs,
            optional=member.xsd_optional or struct.xsd_all,
            nillable=member.xsd_nillable,
        )
        lines.extend((2 + level, text) for level, text in member_lines)
    lines.extend([(1, f"</{group}>"), (0, "</xsd:complexType>")])
    return _fragment(lines)


def generate_typedef(ctx: GenerationContext, typedef: TypedefTypeRef) -> Path:
    """Emit *typedef* to its own artifact and the accumulation buffer."""
    return _emit(ctx, typedef.name, render_typedef(typedef))


def generate_enum(ctx: GenerationContext, enum: EnumTypeRef) -> Path:
    """Emit *enum* to its own artifact and the accumulation buffer."""
    return _emit(ctx, enum.name, render_enum(enum))


def generate_struct(ctx: GenerationContext, struct: StructTypeRef) -> Path:
    """Emit *struct* (or exception) to its own artifact and the accumulation buffer."""
    return _emit(ctx, struct.name, render_struct(struct))


# ################
# Implementation
# ################


def _enumeration_facets(values: list[str], level: int) -> list[tuple[int, str]]:
    return [(level, f'<xsd:enumeration value="{quote(value)}" />') for value in values]


def _fragment(lines: list[tuple[int, str]]) -> str:
    """Indent a definition one level below the schema root and add a separating blank line."""
    return indent_lines(lines, depth=1) + "\n"


def _emit(ctx: GenerationContext, name: str, fragment: str) -> Path:
    ctx.append_definition(fragment)
    path = ctx.artifact_path(name)
    path.write_text(render_document(fragment, ctx.namespace), encoding="utf-8")
    return path
