# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Literal document framing shared by every generated schema file."""

from __future__ import annotations

from xml.sax import saxutils

# ###############
# Public Interface
# ###############

XSD_NAMESPACE_URI = "http://www.w3.org/2001/XMLSchema"

INDENT = "  "

GENERATED_BY = "This XSD was generated by idl-xsd."


def render_header(namespace: str = "") -> str:
    """Return the XML declaration, the opening schema tag and the banner comment.

    A non-empty *namespace* becomes the target namespace, the default
    namespace and switches element forms to qualified.
    """
    ns = ""
    if namespace:
        quoted = quote(namespace)
        ns = f' targetNamespace="{quoted}" xmlns="{quoted}" elementFormDefault="qualified"'
    return (
        '<?xml version="1.0" encoding="UTF-8" ?>\n'
        f'<xsd:schema xmlns:xsd="{XSD_NAMESPACE_URI}"{ns}>\n'
        "\n"
        f"{INDENT}<!-- {GENERATED_BY} -->\n"
        "\n"
    )


def render_footer() -> str:
    """Return the closing schema tag."""
    return "</xsd:schema>\n"


def render_document(body: str, namespace: str = "") -> str:
    """Wrap *body* into a complete schema document."""
    return render_header(namespace) + body + render_footer()


def quote(value: str) -> str:
    """Escape *value* for use inside a double-quoted XML attribute."""
    return saxutils.escape(value, {'"': "&quot;"})


def indent_lines(lines: list[tuple[int, str]], depth: int = 0) -> str:
    """Join ``(level, text)`` pairs into newline-terminated, indented markup."""
    return "".join(f"{INDENT * (depth + level)}{text}\n" for level, text in lines)
