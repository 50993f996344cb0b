# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""XML Schema emission for the IDL type model."""

from idlxsd.generator.context import GenerationContext
from idlxsd.generator.definitions import (
    generate_enum,
    generate_struct,
    generate_typedef,
    render_enum,
    render_struct,
    render_typedef,
)
from idlxsd.generator.driver import generate_program
from idlxsd.generator.elements import render_element
from idlxsd.generator.framing import render_footer, render_header
from idlxsd.generator.service import collect_exceptions, generate_service, render_service
from idlxsd.generator.type_names import UnmappablePrimitiveTypeError, type_name

__all__ = [
    "GenerationContext",
    "UnmappablePrimitiveTypeError",
    "collect_exceptions",
    "generate_enum",
    "generate_program",
    "generate_service",
    "generate_struct",
    "generate_typedef",
    "render_element",
    "render_enum",
    "render_footer",
    "render_header",
    "render_service",
    "render_struct",
    "render_typedef",
    "type_name",
]
