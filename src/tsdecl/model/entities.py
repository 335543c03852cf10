# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Intermediate representation of exported declarations.

Entities are produced once by extraction and only read afterwards, so every
model is frozen and ordered sequences are stored as tuples.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ExtraInfo(BaseModel):
    """Documentation and serialization facts attached to a declaration."""

    model_config = ConfigDict(frozen=True)

    obsolete: bool = False
    obsolete_message: str | None = None
    summary: str | None = None
    remarks: str | None = None
    emit_default_value: bool = True


class Member(BaseModel):
    """An exported field or property of a model."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    type: str
    extra_info: ExtraInfo = _Field(default_factory=ExtraInfo)


class ModelDef(BaseModel):
    """A class or interface exported as a TypeScript interface.

    Attributes:
        base_types: Ordinary base types, in declaration order.
        index_signature: The dictionary-shaped base type, if any. It never
            appears in ``base_types``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    base_types: tuple[str, ...] = ()
    index_signature: str | None = None
    members: tuple[Member, ...] = ()
    extra_info: ExtraInfo = _Field(default_factory=ExtraInfo)


class EnumValue(BaseModel):
    """A single enum member. ``value`` is the explicit initializer text, if any."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    value: str | None = None
    extra_info: ExtraInfo = _Field(default_factory=ExtraInfo)


class EnumDef(BaseModel):
    """An enumeration with its values in declaration order."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    values: tuple[EnumValue, ...] = ()
    extra_info: ExtraInfo = _Field(default_factory=ExtraInfo)


class Parameter(BaseModel):
    """A service operation parameter."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    type: str


class Operation(BaseModel):
    """A service operation (a method marked as part of a contract)."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    return_type: str
    parameters: tuple[Parameter, ...] = ()
    extra_info: ExtraInfo = _Field(default_factory=ExtraInfo)


class ContractDef(BaseModel):
    """A service contract exported as a TypeScript interface of method signatures."""

    model_config = ConfigDict(frozen=True)

    name: str
    operations: tuple[Operation, ...] = ()
    extra_info: ExtraInfo = _Field(default_factory=ExtraInfo)


class SourceUnit(BaseModel):
    """All declarations extracted from one source file."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    models: tuple[ModelDef, ...] = ()
    enums: tuple[EnumDef, ...] = ()
    contracts: tuple[ContractDef, ...] = ()
