# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of the per-service schema document."""

from __future__ import annotations

from pathlib import Path

from idlxsd.generator.context import GenerationContext
from idlxsd.generator.elements import render_element
from idlxsd.generator.framing import render_footer, render_header
from idlxsd.model.entities import Service
from idlxsd.model.types import TypeRef

# ###############
# Public Interface
# ###############

RESPONSE_SUFFIX = "_response"


def collect_exceptions(service: Service) -> dict[str, TypeRef]:
    """Map every exception field name thrown by *service* to its type.

    Functions are scanned in declaration order.  A later exception with the
    same name replaces an earlier one, whatever its type.
    """
    registry: dict[str, TypeRef] = {}
    for function in service.functions:
        for xception in function.exceptions:
            registry[xception.name] = xception.type
    return registry


def render_service(ctx: GenerationContext, service: Service) -> str:
    """Return the complete schema document for *service*.

    The document inlines every type definition accumulated in *ctx* so far,
    then one ``<function>_response`` element per function and one element
    per distinct exception name, sorted by name.
    """
    parts = [render_header(ctx.namespace), ctx.types]
    for function in service.functions:
        parts.append(render_element(function.name + RESPONSE_SUFFIX, function.return_type, depth=1))
        parts.append("\n")
    registry = collect_exceptions(service)
    for name in sorted(registry):
        parts.append(render_element(name, registry[name], depth=1))
    parts.append(render_footer())
    return "".join(parts)


def generate_service(ctx: GenerationContext, service: Service) -> Path:
    """Write the schema document of *service* and return its path."""
    path = ctx.artifact_path(service.name)
    path.write_text(render_service(ctx, service), encoding="utf-8")
    return path

