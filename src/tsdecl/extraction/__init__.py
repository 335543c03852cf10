# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction of IR declarations from syntax trees and interchange documents."""

from tsdecl.extraction.artifact import ArtifactError, deserialize, read_units, serialize
from tsdecl.extraction.documentation import extract_extra_info
from tsdecl.extraction.extractor import (
    extract_contracts,
    extract_enums,
    extract_models,
    extract_unit,
    is_exported_member,
    split_base_types,
)

__all__ = [
    "extract_unit",
    "extract_models",
    "extract_enums",
    "extract_contracts",
    "extract_extra_info",
    "is_exported_member",
    "split_base_types",
    "ArtifactError",
    "serialize",
    "deserialize",
    "read_units",
]
