# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of serialized, type-checked programs into the IDL type model.

The input is a YAML (or JSON) document describing the definitions of one
program.  Type expressions are primitive names (``i32``, ``string``, ...),
container expressions (``list<T>``, ``set<T>``, ``map<K,V>``), or the name
of a typedef, enum or struct declared anywhere in the same document.

The loader only resolves names into the in-memory type graph.  It does not
re-check the IDL for well-formedness beyond what resolution requires.
"""

from __future__ import annotations

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from idlxsd.model.entities import Function, Program, Service
from idlxsd.model.types import (
    EnumConstant,
    EnumTypeRef,
    ListTypeRef,
    MapTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    SetTypeRef,
    StructTypeRef,
    TypedefTypeRef,
    TypeRef,
)
from idlxsd.model.types import Field as FieldDef

# ###############
# Public Interface
# ###############


class ProgramLoadError(Exception):
    """Raised when a program description cannot be read or resolved."""


def load_program(path: Path) -> Program:
    """Load a program description from a YAML or JSON file.

    Args:
        path: Path to the program description.

    Returns:
        The resolved :class:`~idlxsd.model.entities.Program`.

    Raises:
        ProgramLoadError: If the file cannot be read, is not valid YAML, does
            not match the document schema, or references unknown types.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProgramLoadError(f"Program file not found: {path}") from None
    except OSError as exc:
        raise ProgramLoadError(f"Cannot read program file: {exc}") from exc

    return parse_program(text, source_label=str(path), default_name=path.stem)


def parse_program(text: str, source_label: str = "<string>", default_name: str = "") -> Program:
    """Parse program description text into a resolved Program.

    Args:
        text: Raw YAML or JSON content.
        source_label: Human-readable label used in error messages.
        default_name: Program name used when the document declares none.

    Raises:
        ProgramLoadError: On invalid YAML, schema violations or unresolved names.
    """
    try:
        data = yaml.load(text, Loader=_ProgramLoader)
    except yaml.YAMLError as exc:
        raise ProgramLoadError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ProgramLoadError(f"{source_label}: program description must be a YAML mapping")

    try:
        raw = _RawProgram.model_validate(data)
    except ValidationError as exc:
        raise ProgramLoadError(f"Invalid program description {source_label}: {exc}") from exc

    return _Resolver(raw, source_label).resolve(default_name)


def parse_type_expression(expr: str) -> tuple[str, list[str]]:
    """Split a type expression into its head and top-level type arguments.

    ``"map<string, list<i32>>"`` yields ``("map", ["string", "list<i32>"])``;
    a plain name yields the name and an empty list.

    Raises:
        ValueError: If the angle brackets are unbalanced or an argument is empty.
    """
    expr = expr.strip()
    if "<" not in expr:
        if ">" in expr or "," in expr or not expr:
            raise ValueError(f"malformed type expression {expr!r}")
        return expr, []
    if not expr.endswith(">"):
        raise ValueError(f"malformed type expression {expr!r}")

    head, inner = expr[: expr.index("<")].strip(), expr[expr.index("<") + 1 : -1]
    args: list[str] = []
    depth = 0
    start = 0
    for pos, char in enumerate(inner):
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth < 0:
                raise ValueError(f"malformed type expression {expr!r}")
        elif char == "," and depth == 0:
            args.append(inner[start:pos].strip())
            start = pos + 1
    if depth != 0:
        raise ValueError(f"malformed type expression {expr!r}")
    args.append(inner[start:].strip())
    if not head or any(not arg for arg in args):
        raise ValueError(f"malformed type expression {expr!r}")
    return head, args


# ################
# Implementation
# ################

_BOOL_TAG = "tag:yaml.org,2002:bool"


class _ProgramLoader(yaml.SafeLoader):
    """SafeLoader that only reads ``true`` and ``false`` as booleans.

    Plain scalars such as ``ON``, ``OFF``, ``yes`` or ``n`` stay strings, so
    they can be used as enum constant, field and value names unquoted.
    """


_ProgramLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_ProgramLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)

_PRIMITIVES: dict[str, PrimitiveType] = {p.value: p for p in PrimitiveType}

_CONTAINER_ARITY: dict[str, int] = {"list": 1, "set": 1, "map": 2}


class _RawField(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    optional: bool = False
    nillable: bool = False
    attrs: str | None = None


class _RawTypedef(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    values: list[str] | None = None


class _RawEnum(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    constants: list[EnumConstant] = Field(default_factory=list)


class _RawStruct(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    fields: list[_RawField] = Field(default_factory=list)
    xsd_all: bool = Field(alias="all", default=False)
    is_exception: bool = Field(alias="exception", default=False)


class _RawFunction(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    returns: str = "void"
    throws: list[_RawField] = Field(default_factory=list)


class _RawService(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    functions: list[_RawFunction] = Field(default_factory=list)


class _RawProgram(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    namespaces: dict[str, str] = Field(default_factory=dict)
    typedefs: list[_RawTypedef] = Field(default_factory=list)
    enums: list[_RawEnum] = Field(default_factory=list)
    structs: list[_RawStruct] = Field(default_factory=list)
    services: list[_RawService] = Field(default_factory=list)


class _Resolver:
    """Resolves the named type references of one raw program document.

    Named definitions are built on first use, so a definition may refer to
    one declared later in the document.  Reference cycles are rejected.
    """

    def __init__(self, raw: _RawProgram, source_label: str) -> None:
        self._raw = raw
        self._label = source_label
        self._declared: dict[str, _RawTypedef | _RawEnum | _RawStruct] = {}
        self._built: dict[str, TypedefTypeRef | EnumTypeRef | StructTypeRef] = {}
        self._in_progress: set[str] = set()

        for definition in [*raw.typedefs, *raw.enums, *raw.structs]:
            if definition.name in self._declared:
                raise self._error(f"duplicate definition '{definition.name}'")
            if definition.name in _PRIMITIVES or definition.name in _CONTAINER_ARITY:
                raise self._error(f"definition name '{definition.name}' shadows a built-in type")
            self._declared[definition.name] = definition

    def resolve(self, default_name: str) -> Program:
        raw = self._raw
        return Program(
            name=raw.name if raw.name is not None else default_name,
            namespaces=dict(raw.namespaces),
            typedefs=[self._named(t.name) for t in raw.typedefs],
            enums=[self._named(e.name) for e in raw.enums],
            structs=[self._named(s.name) for s in raw.structs],
            services=[self._service(s) for s in raw.services],
        )

    def _error(self, message: str) -> ProgramLoadError:
        return ProgramLoadError(f"{self._label}: {message}")

    def _type(self, expr: str, context: str) -> TypeRef:
        try:
            head, args = parse_type_expression(expr)
        except ValueError as exc:
            raise self._error(f"{context}: {exc}") from None

        if head in _CONTAINER_ARITY:
            if len(args) != _CONTAINER_ARITY[head]:
                raise self._error(f"{context}: '{head}' expects {_CONTAINER_ARITY[head]} type argument(s) in {expr!r}")
            resolved = [self._type(arg, context) for arg in args]
            if head == "list":
                return ListTypeRef(element_type=resolved[0])
            if head == "set":
                return SetTypeRef(element_type=resolved[0])
            return MapTypeRef(key_type=resolved[0], value_type=resolved[1])

        if args:
            raise self._error(f"{context}: type '{head}' does not take type arguments")
        if head in _PRIMITIVES:
            return PrimitiveTypeRef(primitive=_PRIMITIVES[head])
        if head in self._declared:
            return self._named(head)
        raise self._error(f"{context}: unknown type '{head}'")

    def _named(self, name: str) -> TypedefTypeRef | EnumTypeRef | StructTypeRef:
        if name in self._built:
            return self._built[name]
        if name in self._in_progress:
            raise self._error(f"circular type reference involving '{name}'")

        definition = self._declared[name]
        self._in_progress.add(name)
        try:
            if isinstance(definition, _RawTypedef):
                built: TypedefTypeRef | EnumTypeRef | StructTypeRef = self._typedef(definition)
            elif isinstance(definition, _RawEnum):
                built = EnumTypeRef(name=definition.name, constants=list(definition.constants))
            else:
                built = self._struct(definition)
        finally:
            self._in_progress.discard(name)

        self._built[name] = built
        return built

    def _typedef(self, raw: _RawTypedef) -> TypedefTypeRef:
        context = f"typedef '{raw.name}'"
        aliased = self._type(raw.type, context)
        if raw.values is not None:
            if not (isinstance(aliased, PrimitiveTypeRef) and aliased.primitive is PrimitiveType.STRING):
                raise self._error(f"{context}: permitted values require the 'string' type")
            aliased = PrimitiveTypeRef(primitive=PrimitiveType.STRING, string_enum_values=list(raw.values))
        return TypedefTypeRef(name=raw.name, aliased_type=aliased)

    def _struct(self, raw: _RawStruct) -> StructTypeRef:
        context = f"struct '{raw.name}'"
        return StructTypeRef(
            name=raw.name,
            fields=[self._field(f, context) for f in raw.fields],
            xsd_all=raw.xsd_all,
            is_exception=raw.is_exception,
        )

    def _field(self, raw: _RawField, owner: str) -> FieldDef:
        context = f"{owner}, field '{raw.name}'"
        attrs = None
        if raw.attrs is not None:
            attrs = self._type(raw.attrs, context)
            if not isinstance(attrs, StructTypeRef):
                raise self._error(f"{context}: attribute type '{raw.attrs}' is not a struct")
        return FieldDef(
            name=raw.name,
            type=self._type(raw.type, context),
            xsd_attrs=attrs,
            xsd_optional=raw.optional,
            xsd_nillable=raw.nillable,
        )

    def _service(self, raw: _RawService) -> Service:
        functions = []
        for fn in raw.functions:
            context = f"service '{raw.name}', function '{fn.name}'"
            exceptions = [self._field(x, context) for x in fn.throws]
            for xception in exceptions:
                if not isinstance(xception.type, StructTypeRef):
                    raise self._error(f"{context}: thrown type of '{xception.name}' is not a struct")
            functions.append(
                Function(name=fn.name, return_type=self._type(fn.returns, context), exceptions=exceptions)
            )
        return Service(name=raw.name, functions=functions)
