# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the idl-xsd CLI entry point."""

import sys
from pathlib import Path

import pytest

from idlxsd.cli.main import main

# ###############
# Helpers
# ###############

PROGRAM = """\
name: tutorial
namespaces:
  xsd: http://example.com/tutorial
typedefs:
  - {name: UserId, type: i64}
structs:
  - name: User
    fields:
      - {name: id, type: UserId}
services:
  - name: Users
    functions:
      - {name: get, returns: User}
"""


def _write_program(tmp_path: Path, content: str = PROGRAM) -> Path:
    path = tmp_path / "tutorial.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["idlxsd", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code  # type: ignore[return-value]


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- generate tests --------


def test_generate_writes_artifacts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """generate writes one .xsd per definition and service into --out."""
    out_dir = tmp_path / "out"
    assert _run(monkeypatch, "generate", str(_write_program(tmp_path)), "--out", str(out_dir)) == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["User.xsd", "UserId.xsd", "Users.xsd"]
    assert 'targetNamespace="http://example.com/tutorial"' in (out_dir / "Users.xsd").read_text(encoding="utf-8")


def test_generate_reports_written_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    out_dir = tmp_path / "out"
    _run(monkeypatch, "generate", str(_write_program(tmp_path)), "-o", str(out_dir))
    captured = capsys.readouterr()
    assert "Users.xsd" in captured.out
    assert "Generated 3 schema file(s)" in captured.out


def test_generate_default_output_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without --out or config, artifacts land in ./gen-xsd."""
    program = _write_program(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "generate", str(program)) == 0
    assert (tmp_path / "gen-xsd" / "Users.xsd").exists()


def test_generate_uses_config_in_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    program = _write_program(tmp_path)
    (tmp_path / ".idlxsd.yaml").write_text("output-directory: schemas\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "generate", str(program)) == 0
    assert (tmp_path / "schemas" / "User.xsd").exists()


def test_generate_config_paths_relative_to_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    program = _write_program(tmp_path)
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    config = config_dir / "gen.yaml"
    config.write_text("output-directory: xsd\n", encoding="utf-8")
    assert _run(monkeypatch, "generate", str(program), "--config", str(config)) == 0
    assert (config_dir / "xsd" / "User.xsd").exists()


def test_generate_out_overrides_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    program = _write_program(tmp_path)
    config = tmp_path / "gen.yaml"
    config.write_text("output-directory: from-config\n", encoding="utf-8")
    out_dir = tmp_path / "from-flag"
    assert _run(monkeypatch, "generate", str(program), "--config", str(config), "--out", str(out_dir)) == 0
    assert (out_dir / "User.xsd").exists()
    assert not (tmp_path / "from-config").exists()


def test_generate_invalid_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    program = _write_program(tmp_path)
    config = tmp_path / "gen.yaml"
    config.write_text("output-directory: 7\n", encoding="utf-8")
    assert _run(monkeypatch, "generate", str(program), "--config", str(config)) == 1
    assert "output-directory" in capsys.readouterr().err


def test_generate_missing_program(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    code = _run(monkeypatch, "generate", str(tmp_path / "missing.yaml"), "--out", str(tmp_path / "out"))
    assert code == 1
    assert "not found" in capsys.readouterr().err


def test_generate_unresolved_type(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    program = _write_program(tmp_path, "typedefs:\n  - {name: T, type: Unknown}\n")
    out_dir = tmp_path / "out"
    assert _run(monkeypatch, "generate", str(program), "--out", str(out_dir)) == 1
    assert "unknown type 'Unknown'" in capsys.readouterr().err
    assert not out_dir.exists()


# -------- check tests --------


def test_check_reports_summary(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, "check", str(_write_program(tmp_path))) == 0
    out = capsys.readouterr().out
    assert "Program 'tutorial': 1 typedef(s), 0 enum(s), 1 struct(s), 1 service(s)." in out
    assert "Target namespace: http://example.com/tutorial" in out


def test_check_writes_nothing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    program = _write_program(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "check", str(program)) == 0
    assert not (tmp_path / "gen-xsd").exists()


def test_check_invalid_program(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    program = _write_program(tmp_path, "- not\n- a mapping\n")
    assert _run(monkeypatch, "check", str(program)) == 1
    assert "must be a YAML mapping" in capsys.readouterr().err


def test_unknown_subcommand_is_rejected(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, "publish", "tutorial.yaml") == 2
    assert "invalid choice" in capsys.readouterr().err
