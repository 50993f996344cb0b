# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""idl-xsd: XML Schema generation for type-checked IDL programs."""

__version__ = "0.1.0"
