# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration extraction: from a syntax tree to IR entities.

Decides which declarations and members are exported:

- Models come from top-level classes, interfaces, structs, and records.
  Nested type declarations are not exported as models.
- Enums come from every enum declaration, including nested ones.
- Model members are public, non-static, non-const fields and properties
  that are not marked to be skipped during serialization. Interface
  members without an access modifier are public.
- Contract operations are methods carrying ``[OperationContract]``.
- A dictionary-shaped base type becomes the model's index signature.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from tsdecl.extraction.documentation import attribute_name, extract_extra_info, find_attribute
from tsdecl.model.entities import (
    ContractDef,
    EnumDef,
    EnumValue,
    Member,
    ModelDef,
    Operation,
    Parameter,
    SourceUnit,
)
from tsdecl.syntax.nodes import (
    AttributeNode,
    CompilationUnitNode,
    DeclarationKind,
    EnumDeclarationNode,
    MemberKind,
    MemberNode,
    TypeDeclarationNode,
)
from tsdecl.translation.type_parser import is_dictionary_type

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

OPERATION_ATTRIBUTE = "OperationContract"
SKIP_SERIALIZATION_ATTRIBUTES: frozenset[str] = frozenset({"JsonIgnore", "IgnoreDataMember", "NonSerialized"})

MODEL_KINDS: frozenset[DeclarationKind] = frozenset(
    {DeclarationKind.CLASS, DeclarationKind.INTERFACE, DeclarationKind.STRUCT, DeclarationKind.RECORD}
)
CONTRACT_KINDS: frozenset[DeclarationKind] = frozenset({DeclarationKind.CLASS, DeclarationKind.INTERFACE})


def extract_unit(relative_path: str, root: CompilationUnitNode, *, contracts: bool = False) -> SourceUnit:
    """Extract one source unit from a parsed file.

    Args:
        relative_path: Path of the file as it should appear in output comments.
        root: The parsed compilation unit.
        contracts: Treat the file as a service contract file. Only contracts
            are extracted from contract files; models and enums otherwise.

    Returns:
        The SourceUnit for the file.
    """
    if contracts:
        unit = SourceUnit(relative_path=relative_path, contracts=tuple(extract_contracts(root)))
        logger.debug("%s: extracted %d contract(s)", relative_path, len(unit.contracts))
        return unit
    unit = SourceUnit(
        relative_path=relative_path,
        models=tuple(extract_models(root)),
        enums=tuple(extract_enums(root)),
    )
    logger.debug("%s: extracted %d model(s), %d enum(s)", relative_path, len(unit.models), len(unit.enums))
    return unit


def extract_models(root: CompilationUnitNode) -> list[ModelDef]:
    """Extract a model from every top-level class, interface, struct, or record."""
    return [extract_model(decl) for decl in root.declarations if decl.kind in MODEL_KINDS]


def extract_enums(root: CompilationUnitNode) -> list[EnumDef]:
    """Extract every enum in document order, including enums nested in types."""
    return [extract_enum(decl) for decl in _walk_enums(root.declarations)]


def extract_contracts(root: CompilationUnitNode) -> list[ContractDef]:
    """Extract a contract from every top-level class or interface."""
    return [extract_contract(decl) for decl in root.declarations if decl.kind in CONTRACT_KINDS]


def extract_model(node: TypeDeclarationNode) -> ModelDef:
    base_types, index_signature = split_base_types(node.base_types)
    members = [
        Member(identifier=member.identifier, type=member.type, extra_info=extract_extra_info(member))
        for member in node.members
        if is_exported_member(member, node.kind)
    ]
    return ModelDef(
        name=f"{node.identifier}{node.type_parameters}",
        base_types=base_types,
        index_signature=index_signature,
        members=tuple(members),
        extra_info=extract_extra_info(node),
    )


def extract_enum(node: EnumDeclarationNode) -> EnumDef:
    values = [
        EnumValue(identifier=member.identifier, value=member.value, extra_info=extract_extra_info(member))
        for member in node.members
    ]
    return EnumDef(identifier=node.identifier, values=tuple(values), extra_info=extract_extra_info(node))


def extract_contract(node: TypeDeclarationNode) -> ContractDef:
    operations = [
        _operation(member)
        for member in node.members
        if member.kind == MemberKind.METHOD and find_attribute(member.attributes, OPERATION_ATTRIBUTE) is not None
    ]
    return ContractDef(
        name=f"{node.identifier}{node.type_parameters}",
        operations=tuple(operations),
        extra_info=extract_extra_info(node),
    )


def is_exported_member(member: MemberNode, declaration_kind: DeclarationKind) -> bool:
    """Apply the member inclusion policy of a model."""
    if member.kind not in (MemberKind.FIELD, MemberKind.PROPERTY):
        return False
    modifiers = {modifier.strip() for modifier in member.modifiers}
    if modifiers & {"const", "static"}:
        return False
    access = modifiers & _ACCESS_MODIFIERS
    if access:
        if access != {"public"}:
            return False
    elif declaration_kind != DeclarationKind.INTERFACE:
        return False
    return not any(_skips_serialization(attribute) for attribute in member.attributes)


def split_base_types(base_types: Sequence[str]) -> tuple[tuple[str, ...], str | None]:
    """Separate dictionary-shaped base types from ordinary ones.

    Returns:
        The ordinary base types in declaration order, and the index
        signature type. When several base types are dictionaries the last
        one wins and all of them are removed from the base types.
    """
    ordinary: list[str] = []
    index_signature: str | None = None
    for base_type in base_types:
        if is_dictionary_type(base_type):
            if index_signature is not None:
                logger.debug("Index signature %r replaced by %r", index_signature, base_type)
            index_signature = base_type
        else:
            ordinary.append(base_type)
    return tuple(ordinary), index_signature


# ################
# Implementation
# ################

_ACCESS_MODIFIERS: frozenset[str] = frozenset({"public", "private", "protected", "internal"})


def _walk_enums(
    declarations: Sequence[TypeDeclarationNode | EnumDeclarationNode],
) -> Iterator[EnumDeclarationNode]:
    for decl in declarations:
        if decl.kind == DeclarationKind.ENUM:
            yield decl  # type: ignore[misc]
        else:
            yield from _walk_enums(decl.nested)  # type: ignore[union-attr]


def _skips_serialization(attribute: AttributeNode) -> bool:
    name = attribute_name(attribute)
    if name not in SKIP_SERIALIZATION_ATTRIBUTES:
        return False
    if name != "JsonIgnore":
        return True
    # [JsonIgnore(Condition = JsonIgnoreCondition.WhenWritingNull)] keeps the member.
    for argument in attribute.arguments:
        if argument.name is not None and argument.name.strip() == "Condition":
            return argument.value.strip().endswith("Always")
    return True


def _operation(method: MemberNode) -> Operation:
    return Operation(
        identifier=method.identifier,
        return_type=method.type,
        parameters=tuple(Parameter(identifier=p.identifier, type=p.type) for p in method.parameters),
        extra_info=extract_extra_info(method),
    )
