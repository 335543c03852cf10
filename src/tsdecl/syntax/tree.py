# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Immutable syntax tree satisfying the protocols of :mod:`tsdecl.syntax.nodes`.

Parser adapters build these nodes from whatever tree their parser produces.
"""

from __future__ import annotations

from dataclasses import dataclass

from tsdecl.syntax.nodes import DeclarationKind, MemberKind

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class AttributeArgument:
    """An attribute argument; ``value`` is the argument expression as written."""

    value: str
    name: str | None = None


@dataclass(frozen=True)
class Attribute:
    name: str
    arguments: tuple[AttributeArgument, ...] = ()


@dataclass(frozen=True)
class ParameterDeclaration:
    identifier: str
    type: str


@dataclass(frozen=True)
class MemberDeclaration:
    """A field, property, or method declaration.

    Attributes:
        kind: What sort of member this is.
        identifier: The member name.
        type: The declared type, or the return type for methods.
        modifiers: Modifier keywords in source order (``public``, ``static``, ...).
        attributes: Attributes applied to the member.
        documentation: Raw XML doc comment text, with or without ``///`` markers.
        parameters: Method parameters; empty for fields and properties.
    """

    kind: MemberKind
    identifier: str
    type: str
    modifiers: tuple[str, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    documentation: str | None = None
    parameters: tuple[ParameterDeclaration, ...] = ()


@dataclass(frozen=True)
class EnumMember:
    identifier: str
    value: str | None = None
    attributes: tuple[Attribute, ...] = ()
    documentation: str | None = None


@dataclass(frozen=True)
class EnumDeclaration:
    identifier: str
    members: tuple[EnumMember, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    documentation: str | None = None
    kind: DeclarationKind = DeclarationKind.ENUM


@dataclass(frozen=True)
class TypeDeclaration:
    """A class, interface, struct, or record declaration."""

    kind: DeclarationKind
    identifier: str
    type_parameters: str = ""
    base_types: tuple[str, ...] = ()
    modifiers: tuple[str, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    documentation: str | None = None
    members: tuple[MemberDeclaration, ...] = ()
    nested: tuple[TypeDeclaration | EnumDeclaration, ...] = ()


@dataclass(frozen=True)
class CompilationUnit:
    declarations: tuple[TypeDeclaration | EnumDeclaration, ...] = ()
