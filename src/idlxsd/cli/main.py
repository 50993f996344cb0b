# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the idl-xsd command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from idlxsd.compiler.loader import ProgramLoadError, load_program
from idlxsd.generator.context import SCHEMA_NAMESPACE_KEY
from idlxsd.generator.driver import generate_program
from idlxsd.generator.type_names import UnmappablePrimitiveTypeError
from idlxsd.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the idl-xsd CLI."""
    parser = argparse.ArgumentParser(
        prog="idlxsd",
        description="idl-xsd: XML Schema generator for type-checked IDL programs",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate XSD files for a program",
        description="Write one .xsd file per typedef, enum, struct and service of a program.",
    )
    generate_parser.add_argument("program", help="Program description file (YAML or JSON)")
    generate_parser.add_argument(
        "--out",
        "-o",
        default=None,
        help="Output directory (default: from the config file, else 'gen-xsd')",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help=f"Generator config file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Load a program and report its definitions",
        description="Resolve all type references of a program without writing any files.",
    )
    check_parser.add_argument("program", help="Program description file (YAML or JSON)")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    return _cmd_check(args)


def _error(message: str) -> None:
    print(f"{chalk.red('Error:')} {message}", file=sys.stderr)


def _resolve_output_directory(args: argparse.Namespace) -> Path | None:
    """Return the output directory, or None after reporting a config error."""
    if args.out is not None:
        return Path(args.out).resolve()

    if args.config is not None:
        config_path = Path(args.config)
    else:
        config_path = Path.cwd() / CONFIG_FILE_NAME
        if not config_path.exists():
            return (Path.cwd() / GeneratorConfig().output_directory).resolve()

    try:
        config = load_generator_config(config_path)
    except GeneratorConfigError as exc:
        _error(str(exc))
        return None
    return (config_path.parent / config.output_directory).resolve()


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    out_dir = _resolve_output_directory(args)
    if out_dir is None:
        return 1

    try:
        program = load_program(Path(args.program))
    except ProgramLoadError as exc:
        _error(str(exc))
        return 1

    try:
        written = generate_program(program, out_dir)
    except (UnmappablePrimitiveTypeError, OSError) as exc:
        _error(str(exc))
        return 1

    for path in written:
        print(f"  wrote {path}")
    print(chalk.green(f"Generated {len(written)} schema file(s) in '{out_dir}'."))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        program = load_program(Path(args.program))
    except ProgramLoadError as exc:
        _error(str(exc))
        return 1

    print(
        f"Program '{program.name}': "
        f"{len(program.typedefs)} typedef(s), {len(program.enums)} enum(s), "
        f"{len(program.structs)} struct(s), {len(program.services)} service(s)."
    )
    namespace = program.get_namespace(SCHEMA_NAMESPACE_KEY)
    if namespace:
        print(f"Target namespace: {namespace}")
    print(chalk.green("No issues found."))
    return 0
