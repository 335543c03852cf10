# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree interface consumed by declaration extraction."""

from tsdecl.syntax.nodes import (
    AttributeArgumentNode,
    AttributeNode,
    CompilationUnitNode,
    DeclarationKind,
    DocumentedNode,
    EnumDeclarationNode,
    EnumMemberNode,
    MemberKind,
    MemberNode,
    ParameterNode,
    TypeDeclarationNode,
)
from tsdecl.syntax.tree import (
    Attribute,
    AttributeArgument,
    CompilationUnit,
    EnumDeclaration,
    EnumMember,
    MemberDeclaration,
    ParameterDeclaration,
    TypeDeclaration,
)

__all__ = [
    # Protocols
    "DeclarationKind",
    "MemberKind",
    "AttributeArgumentNode",
    "AttributeNode",
    "ParameterNode",
    "MemberNode",
    "EnumMemberNode",
    "EnumDeclarationNode",
    "TypeDeclarationNode",
    "CompilationUnitNode",
    "DocumentedNode",
    # Concrete tree
    "AttributeArgument",
    "Attribute",
    "ParameterDeclaration",
    "MemberDeclaration",
    "EnumMember",
    "EnumDeclaration",
    "TypeDeclaration",
    "CompilationUnit",
]
