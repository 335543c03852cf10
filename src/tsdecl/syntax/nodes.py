# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural interface of the syntax tree consumed by declaration extraction.

Extraction never depends on a concrete parser. Any tree whose nodes expose
the read-only attributes below can be fed to it; :mod:`tsdecl.syntax.tree`
provides a ready-made implementation.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Protocol

# ###############
# Public Interface
# ###############


class DeclarationKind(enum.Enum):
    """Kinds of type-level declarations found in a compilation unit."""

    CLASS = "class"
    INTERFACE = "interface"
    STRUCT = "struct"
    RECORD = "record"
    ENUM = "enum"


class MemberKind(enum.Enum):
    """Kinds of members declared inside a type."""

    FIELD = "field"
    PROPERTY = "property"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    EVENT = "event"


class AttributeArgumentNode(Protocol):
    """One argument of an attribute. ``name`` is set for named arguments only."""

    @property
    def name(self) -> str | None: ...

    @property
    def value(self) -> str: ...


class AttributeNode(Protocol):
    """An attribute as written in source, e.g. ``[DataMember(EmitDefaultValue = false)]``."""

    @property
    def name(self) -> str: ...

    @property
    def arguments(self) -> Sequence[AttributeArgumentNode]: ...


class ParameterNode(Protocol):
    @property
    def identifier(self) -> str: ...

    @property
    def type(self) -> str: ...


class MemberNode(Protocol):
    """A field, property, or method. For methods ``type`` is the return type."""

    @property
    def kind(self) -> MemberKind: ...

    @property
    def identifier(self) -> str: ...

    @property
    def type(self) -> str: ...

    @property
    def modifiers(self) -> Sequence[str]: ...

    @property
    def attributes(self) -> Sequence[AttributeNode]: ...

    @property
    def documentation(self) -> str | None: ...

    @property
    def parameters(self) -> Sequence[ParameterNode]: ...


class EnumMemberNode(Protocol):
    """An enum member. ``value`` is the initializer source text, if any."""

    @property
    def identifier(self) -> str: ...

    @property
    def value(self) -> str | None: ...

    @property
    def attributes(self) -> Sequence[AttributeNode]: ...

    @property
    def documentation(self) -> str | None: ...


class EnumDeclarationNode(Protocol):
    @property
    def kind(self) -> DeclarationKind: ...

    @property
    def identifier(self) -> str: ...

    @property
    def members(self) -> Sequence[EnumMemberNode]: ...

    @property
    def attributes(self) -> Sequence[AttributeNode]: ...

    @property
    def documentation(self) -> str | None: ...


class TypeDeclarationNode(Protocol):
    """A class, interface, struct, or record declaration.

    ``type_parameters`` is the source text of the type parameter list
    (``"<T>"``) or an empty string. ``nested`` holds type and enum
    declarations declared inside this one.
    """

    @property
    def kind(self) -> DeclarationKind: ...

    @property
    def identifier(self) -> str: ...

    @property
    def type_parameters(self) -> str: ...

    @property
    def base_types(self) -> Sequence[str]: ...

    @property
    def modifiers(self) -> Sequence[str]: ...

    @property
    def attributes(self) -> Sequence[AttributeNode]: ...

    @property
    def documentation(self) -> str | None: ...

    @property
    def members(self) -> Sequence[MemberNode]: ...

    @property
    def nested(self) -> Sequence[TypeDeclarationNode | EnumDeclarationNode]: ...


class CompilationUnitNode(Protocol):
    """The root of a parsed file: top-level declarations with namespaces flattened."""

    @property
    def declarations(self) -> Sequence[TypeDeclarationNode | EnumDeclarationNode]: ...


# Anything that carries attributes and a doc comment.
class DocumentedNode(Protocol):
    @property
    def attributes(self) -> Sequence[AttributeNode]: ...

    @property
    def documentation(self) -> str | None: ...
