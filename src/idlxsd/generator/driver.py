# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Whole-program generation: definitions first, then service documents."""

from __future__ import annotations

from pathlib import Path

from idlxsd.generator.context import GenerationContext
from idlxsd.generator.definitions import generate_enum, generate_struct, generate_typedef
from idlxsd.generator.service import generate_service
from idlxsd.model.entities import Program

# ###############
# Public Interface
# ###############


def generate_program(program: Program, out_dir: Path) -> list[Path]:
    """Generate every schema artifact of *program* into *out_dir*.

    The output directory is created if needed.  Typedefs, enums and structs
    are emitted in declaration order before any service, so that each
    service document sees the complete accumulation buffer.

    Returns:
        Paths of the written artifacts, in emission order.

    Raises:
        UnmappablePrimitiveTypeError: If the model contains a primitive kind
            without an XSD counterpart.  Generation stops immediately.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    ctx = GenerationContext.for_program(program, out_dir)

    written: list[Path] = []
    for typedef in program.typedefs:
        written.append(generate_typedef(ctx, typedef))
    for enum in program.enums:
        written.append(generate_enum(ctx, enum))
    for struct in program.structs:
        written.append(generate_struct(ctx, struct))
    for service in program.services:
        written.append(generate_service(ctx, service))
    return written
