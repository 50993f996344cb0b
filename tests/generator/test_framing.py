# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schema document header and footer."""

from pathlib import Path

from idlxsd.generator.context import GenerationContext
from idlxsd.generator.framing import quote, render_document, render_footer, render_header
from idlxsd.model.entities import Program


def test_header_without_namespace() -> None:
    assert render_header() == (
        '<?xml version="1.0" encoding="UTF-8" ?>\n'
        '<xsd:schema xmlns:xsd="http://www.w3.org/2001/XMLSchema">\n'
        "\n"
        "  <!-- This XSD was generated by idl-xsd. -->\n"
        "\n"
    )


def test_header_with_namespace() -> None:
    header = render_header("http://example.com/store")
    assert header.splitlines()[1] == (
        '<xsd:schema xmlns:xsd="http://www.w3.org/2001/XMLSchema"'
        ' targetNamespace="http://example.com/store"'
        ' xmlns="http://example.com/store"'
        ' elementFormDefault="qualified">'
    )


def test_empty_namespace_declares_nothing() -> None:
    header = render_header("")
    assert "targetNamespace" not in header
    assert "elementFormDefault" not in header


def test_footer() -> None:
    assert render_footer() == "</xsd:schema>\n"


def test_document_wraps_body() -> None:
    assert render_document("BODY", "urn:x") == render_header("urn:x") + "BODY" + render_footer()


def test_quote_escapes_markup() -> None:
    assert quote('a<b & "c"') == "a&lt;b &amp; &quot;c&quot;"


# ###############
# Generation context
# ###############


def test_context_reads_xsd_namespace(tmp_path: Path) -> None:
    program = Program(namespaces={"xsd": "urn:store", "java": "com.example"})
    ctx = GenerationContext.for_program(program, tmp_path)
    assert ctx.namespace == "urn:store"


def test_context_without_xsd_namespace(tmp_path: Path) -> None:
    ctx = GenerationContext.for_program(Program(namespaces={"java": "com.example"}), tmp_path)
    assert ctx.namespace == ""


def test_context_artifact_path(tmp_path: Path) -> None:
    assert GenerationContext(out_dir=tmp_path).artifact_path("Item") == tmp_path / "Item.xsd"


def test_context_starts_empty(tmp_path: Path) -> None:
    ctx = GenerationContext(out_dir=tmp_path)
    assert ctx.types == ""
    assert ctx.fragments == ()
