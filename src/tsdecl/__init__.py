# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeScript declarations from C# models, enums, and service contracts."""

__version__ = "0.1.0"
