# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-program generation state shared by the definition and service emitters."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from idlxsd.model.entities import Program

# ###############
# Public Interface
# ###############

SCHEMA_NAMESPACE_KEY = "xsd"

SCHEMA_SUFFIX = ".xsd"


@dataclass
class GenerationContext:
    """State of one program's generation pass.

    Every emitted type definition is appended to the accumulation buffer;
    each service document later inlines the whole buffer.  All definitions of
    a program must therefore be generated before any of its services.

    Attributes:
        out_dir: Directory receiving the ``.xsd`` artifacts.  Must exist.
        namespace: Target namespace URI, or ``""`` for none.
    """

    out_dir: Path
    namespace: str = ""
    _fragments: list[str] = field(default_factory=list, repr=False)

    @classmethod
    def for_program(cls, program: Program, out_dir: Path) -> GenerationContext:
        """Create a fresh context using the program's ``xsd`` namespace."""
        return cls(out_dir=out_dir, namespace=program.get_namespace(SCHEMA_NAMESPACE_KEY))

    def append_definition(self, fragment: str) -> None:
        """Append one rendered type definition to the accumulation buffer."""
        self._fragments.append(fragment)

    @property
    def fragments(self) -> tuple[str, ...]:
        """The accumulated type definitions, in emission order."""
        return tuple(self._fragments)

    @property
    def types(self) -> str:
        """The accumulation buffer as one block of markup."""
        return "".join(self._fragments)

    def artifact_path(self, name: str) -> Path:
        """Return the output path of the artifact for definition *name*."""
        return self.out_dir / (name + SCHEMA_SUFFIX)
