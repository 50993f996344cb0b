# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Front end: loading of type-checked program descriptions."""

from idlxsd.compiler.loader import ProgramLoadError, load_program, parse_program, parse_type_expression

__all__ = [
    "ProgramLoadError",
    "load_program",
    "parse_program",
    "parse_type_expression",
]
