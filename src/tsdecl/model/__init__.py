# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Intermediate representation of exported models, enums, and contracts."""

from tsdecl.model.entities import (
    ContractDef,
    EnumDef,
    EnumValue,
    ExtraInfo,
    Member,
    ModelDef,
    Operation,
    Parameter,
    SourceUnit,
)

__all__ = [
    "ExtraInfo",
    "Member",
    "ModelDef",
    "EnumValue",
    "EnumDef",
    "Parameter",
    "Operation",
    "ContractDef",
    "SourceUnit",
]
