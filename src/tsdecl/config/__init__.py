# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Converter options."""

from tsdecl.config.options import (
    CamelCaseOptions,
    ConverterOptions,
    OptionsError,
    load_options,
    parse_options,
)

__all__ = [
    "CamelCaseOptions",
    "ConverterOptions",
    "OptionsError",
    "load_options",
    "parse_options",
]
