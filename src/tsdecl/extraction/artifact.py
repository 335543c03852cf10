# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing the JSON interchange document of extracted declarations.

The document is a list of files as produced by the upstream
``csharp-models-to-json`` extractor::

    [{"FileName": "...", "Models": [...], "Enums": [...], "Contracts": [...]}]

Models list ``Fields`` and ``Properties`` separately; both become members,
fields first. Documents without an ``IndexSignature`` get one derived from
``BaseClasses`` with the same rule extraction applies.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from tsdecl.extraction.extractor import split_base_types
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
from tsdecl.translation.type_parser import is_dictionary_type

# ###############
# Public Interface
# ###############


class ArtifactError(Exception):
    """Raised when an interchange document cannot be read or is malformed."""


def serialize(units: list[SourceUnit]) -> str:
    """Serialize source units to a compact JSON document."""
    return json.dumps([_unit_to_dict(unit) for unit in units], separators=(",", ":"))


def deserialize(data: str, base_dir: Path | None = None) -> list[SourceUnit]:
    """Deserialize source units from a JSON document.

    Args:
        data: The JSON text.
        base_dir: Directory absolute ``FileName`` entries are made relative
            to. Defaults to the current working directory.

    Returns:
        One SourceUnit per file, in document order.

    Raises:
        ArtifactError: If the text is not JSON or does not have the expected shape.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ArtifactError(f"Invalid JSON: {exc}") from exc

    if not isinstance(obj, list):
        raise ArtifactError("Expected a list of files at the top level")

    base = base_dir if base_dir is not None else Path.cwd()
    units: list[SourceUnit] = []
    for index, entry in enumerate(obj):
        try:
            units.append(_unit_from_dict(entry, base))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ArtifactError(f"Malformed file entry at index {index}: {exc!r}") from exc
    return units


def read_units(path: Path, base_dir: Path | None = None) -> list[SourceUnit]:
    """Read and deserialize source units from *path*."""
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ArtifactError(f"Declaration file not found: {path}") from None
    except OSError as exc:
        raise ArtifactError(f"Cannot read declaration file '{path}': {exc}") from exc
    try:
        return deserialize(data, base_dir)
    except ArtifactError as exc:
        raise ArtifactError(f"{path}: {exc}") from exc


# ################
# Implementation
# ################


def _relative_path(file_name: str, base: Path) -> str:
    if os.path.isabs(file_name):
        return os.path.relpath(file_name, base)
    return file_name


def _unit_to_dict(unit: SourceUnit) -> dict[str, Any]:
    return {
        "FileName": unit.relative_path,
        "Models": [_model_to_dict(m) for m in unit.models],
        "Enums": [_enum_to_dict(e) for e in unit.enums],
        "Contracts": [_contract_to_dict(c) for c in unit.contracts],
    }


def _unit_from_dict(obj: dict[str, Any], base: Path) -> SourceUnit:
    return SourceUnit(
        relative_path=_relative_path(obj["FileName"], base),
        models=tuple(_model_from_dict(m) for m in obj.get("Models") or []),
        enums=tuple(_enum_from_dict(e) for e in obj.get("Enums") or []),
        contracts=tuple(_contract_from_dict(c) for c in obj.get("Contracts") or []),
    )


def _extra_info_to_dict(info: ExtraInfo) -> dict[str, Any]:
    d: dict[str, Any] = {"Obsolete": info.obsolete, "EmitDefaultValue": info.emit_default_value}
    if info.obsolete_message is not None:
        d["ObsoleteMessage"] = info.obsolete_message
    if info.summary is not None:
        d["Summary"] = info.summary
    if info.remarks is not None:
        d["Remarks"] = info.remarks
    return d


def _extra_info_from_dict(obj: dict[str, Any] | None) -> ExtraInfo:
    if not obj:
        return ExtraInfo()
    return ExtraInfo(
        obsolete=bool(obj.get("Obsolete", False)),
        obsolete_message=obj.get("ObsoleteMessage"),
        summary=obj.get("Summary"),
        remarks=obj.get("Remarks"),
        emit_default_value=bool(obj.get("EmitDefaultValue", True)),
    )


def _member_to_dict(member: Member) -> dict[str, Any]:
    return {
        "Identifier": member.identifier,
        "Type": member.type,
        "ExtraInfo": _extra_info_to_dict(member.extra_info),
    }


def _member_from_dict(obj: dict[str, Any]) -> Member:
    return Member(
        identifier=obj["Identifier"],
        type=obj["Type"],
        extra_info=_extra_info_from_dict(obj.get("ExtraInfo")),
    )


def _model_to_dict(model: ModelDef) -> dict[str, Any]:
    d: dict[str, Any] = {
        "ModelName": model.name,
        "BaseClasses": list(model.base_types),
        "Properties": [_member_to_dict(m) for m in model.members],
        "ExtraInfo": _extra_info_to_dict(model.extra_info),
    }
    if model.index_signature is not None:
        d["IndexSignature"] = model.index_signature
    return d


def _model_from_dict(obj: dict[str, Any]) -> ModelDef:
    # The upstream extractor lists a dictionary base both in BaseClasses and as IndexSignature.
    base_types, index_signature = split_base_types(obj.get("BaseClasses") or [])
    explicit_signature = obj.get("IndexSignature")
    if explicit_signature is not None:
        if not is_dictionary_type(explicit_signature):
            raise ValueError(f"IndexSignature {explicit_signature!r} of {obj['ModelName']!r} is not a dictionary type")
        index_signature = explicit_signature
    members = [*(obj.get("Fields") or []), *(obj.get("Properties") or [])]
    return ModelDef(
        name=obj["ModelName"],
        base_types=base_types,
        index_signature=index_signature,
        members=tuple(_member_from_dict(m) for m in members),
        extra_info=_extra_info_from_dict(obj.get("ExtraInfo")),
    )


def _enum_to_dict(enum: EnumDef) -> dict[str, Any]:
    values: list[dict[str, Any]] = []
    for value in enum.values:
        entry: dict[str, Any] = {"Identifier": value.identifier, "ExtraInfo": _extra_info_to_dict(value.extra_info)}
        if value.value is not None:
            entry["Value"] = value.value
        values.append(entry)
    return {"Identifier": enum.identifier, "Values": values, "ExtraInfo": _extra_info_to_dict(enum.extra_info)}


def _enum_from_dict(obj: dict[str, Any]) -> EnumDef:
    raw_values = obj.get("Values") or []
    if isinstance(raw_values, dict):
        # Older extractors emit {"Identifier": value-or-null} in declaration order.
        values = [
            EnumValue(identifier=name, value=None if value is None else str(value))
            for name, value in raw_values.items()
        ]
    else:
        values = [
            EnumValue(
                identifier=v["Identifier"],
                value=None if v.get("Value") is None else str(v["Value"]),
                extra_info=_extra_info_from_dict(v.get("ExtraInfo")),
            )
            for v in raw_values
        ]
    return EnumDef(
        identifier=obj["Identifier"],
        values=tuple(values),
        extra_info=_extra_info_from_dict(obj.get("ExtraInfo")),
    )


def _operation_to_dict(operation: Operation) -> dict[str, Any]:
    return {
        "Identifier": operation.identifier,
        "ReturnType": operation.return_type,
        "Parameters": [{"Identifier": p.identifier, "Type": p.type} for p in operation.parameters],
        "ExtraInfo": _extra_info_to_dict(operation.extra_info),
    }


def _operation_from_dict(obj: dict[str, Any]) -> Operation:
    return Operation(
        identifier=obj["Identifier"],
        return_type=obj["ReturnType"],
        parameters=tuple(Parameter(identifier=p["Identifier"], type=p["Type"]) for p in obj.get("Parameters") or []),
        extra_info=_extra_info_from_dict(obj.get("ExtraInfo")),
    )


def _contract_to_dict(contract: ContractDef) -> dict[str, Any]:
    return {
        "ContractName": contract.name,
        "Operations": [_operation_to_dict(o) for o in contract.operations],
        "ExtraInfo": _extra_info_to_dict(contract.extra_info),
    }


def _contract_from_dict(obj: dict[str, Any]) -> ContractDef:
    return ContractDef(
        name=obj["ContractName"],
        operations=tuple(_operation_from_dict(o) for o in obj.get("Operations") or []),
        extra_info=_extra_info_from_dict(obj.get("ExtraInfo")),
    )
