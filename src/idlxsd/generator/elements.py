# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive rendering of schema element declarations.

One occurrence of a value (a struct member, a function response, an
exception, or the synthetic member of a list) becomes exactly one
``xsd:element``.  Four shapes are possible:

1. **void, no attributes**: an element with an empty complex type.
2. **void with attributes, or a list**: an element with an explicit complex
   type body.  Lists get an unbounded inner sequence holding one repeated
   member element plus a boolean ``list`` marker attribute.
3. **scalar, no attributes**: a single element referencing the type name.
4. **scalar with attributes**: an element whose complex type extends the
   named type and adds the attribute struct's members as attributes.
"""

from __future__ import annotations

from idlxsd.generator.framing import indent_lines, quote
from idlxsd.generator.type_names import type_name, xsd
from idlxsd.model.types import (
    EnumTypeRef,
    ListTypeRef,
    PrimitiveTypeRef,
    StructTypeRef,
    TypedefTypeRef,
    TypeRef,
)

# ###############
# Public Interface
# ###############

LIST_ELEMENT_SUFFIX = "_elt"

LIST_MARKER_ATTRIBUTE = "list"


def render_element(
    name: str,
    type_ref: TypeRef,
    attrs: StructTypeRef | None = None,
    *,
    optional: bool = False,
    nillable: bool = False,
    list_element: bool = False,
    depth: int = 0,
) -> str:
    """Render one ``xsd:element`` declaration.

    Args:
        name: The element name.
        type_ref: Type of the occurrence.
        attrs: Optional attribute struct; its members become XML attributes.
        optional: Emit ``minOccurs="0"``.
        nillable: Emit ``nillable="true"``.
        list_element: True only for the synthetic member of an expanded list;
            implies ``minOccurs="0"`` and ``maxOccurs="unbounded"``.
        depth: Indentation level of the opening tag.

    Returns:
        Newline-terminated markup.

    Raises:
        UnmappablePrimitiveTypeError: If a referenced primitive has no XSD name.
    """
    return indent_lines(
        element_lines(name, type_ref, attrs, optional=optional, nillable=nillable, list_element=list_element),
        depth,
    )


def element_lines(
    name: str,
    type_ref: TypeRef,
    attrs: StructTypeRef | None = None,
    *,
    optional: bool = False,
    nillable: bool = False,
    list_element: bool = False,
) -> list[tuple[int, str]]:
    """Return the element markup as ``(level, text)`` pairs relative to level 0."""
    occurs = _occurs(optional, list_element)
    if nillable:
        occurs += ' nillable="true"'
    open_tag = f'<xsd:element name="{quote(name)}"{occurs}'

    is_void = isinstance(type_ref, PrimitiveTypeRef) and type_ref.is_void
    is_list = isinstance(type_ref, ListTypeRef)

    if is_void and attrs is None:
        return [
            (0, open_tag + ">"),
            (1, "<xsd:complexType />"),
            (0, "</xsd:element>"),
        ]

    if is_void or is_list:
        lines = [(0, open_tag + ">"), (1, "<xsd:complexType>")]
        if isinstance(type_ref, ListTypeRef):
            lines.extend(_list_body_lines(name, type_ref, level=2))
        if attrs is not None:
            lines.extend(_attribute_lines(attrs, level=2))
        lines.append((1, "</xsd:complexType>"))
        lines.append((0, "</xsd:element>"))
        return lines

    if attrs is None:
        return [(0, f'<xsd:element name="{quote(name)}" type="{quote(type_name(type_ref))}"{occurs} />')]

    # A simple type plus attributes needs a full complex type extension.
    lines = [
        (0, open_tag + ">"),
        (1, "<xsd:complexType>"),
        (2, "<xsd:complexContent>"),
        (3, f'<xsd:extension base="{quote(type_name(type_ref))}">'),
    ]
    lines.extend(_attribute_lines(attrs, level=4))
    lines.extend(
        [
            (3, "</xsd:extension>"),
            (2, "</xsd:complexContent>"),
            (1, "</xsd:complexType>"),
            (0, "</xsd:element>"),
        ]
    )
    return lines


def list_member_name(name: str, element_type: TypeRef) -> str:
    """Return the name of the repeated member element of list *name*.

    Named structs, enums and typedefs keep their declared name; primitives
    and nested containers get the synthetic ``<name>_elt``.
    """
    if isinstance(element_type, (StructTypeRef, EnumTypeRef, TypedefTypeRef)):
        return element_type.name
    return name + LIST_ELEMENT_SUFFIX


# ################
# Implementation
# ################


def _occurs(optional: bool, list_element: bool) -> str:
    occurs = ""
    if optional or list_element:
        occurs += ' minOccurs="0"'
    if list_element:
        occurs += ' maxOccurs="unbounded"'
    return occurs


def _list_body_lines(name: str, list_type: ListTypeRef, level: int) -> list[tuple[int, str]]:
    element_type = list_type.element_type
    member = element_lines(list_member_name(name, element_type), element_type, list_element=True)
    lines = [(level, '<xsd:sequence minOccurs="0" maxOccurs="unbounded">')]
    lines.extend((level + 1 + sub_level, text) for sub_level, text in member)
    lines.append((level, "</xsd:sequence>"))
    lines.append((level, f'<xsd:attribute name="{LIST_MARKER_ATTRIBUTE}" type="{xsd("boolean")}" />'))
    return lines


def _attribute_lines(attrs: StructTypeRef, level: int) -> list[tuple[int, str]]:
    return [
        (level, f'<xsd:attribute name="{quote(f.name)}" type="{quote(type_name(f.type))}" />')
        for f in attrs.fields
    ]
