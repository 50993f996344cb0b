# Copyright 2026 idl-xsd Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for idl-xsd."""
