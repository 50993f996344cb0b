# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration for idl-xsd."""

from idlxsd.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT_DIRECTORY,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_OUTPUT_DIRECTORY",
    "GeneratorConfig",
    "GeneratorConfigError",
    "load_generator_config",
]
