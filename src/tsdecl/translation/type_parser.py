# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for source-language type names.

Grammar (whitespace is insignificant)::

    type    := primary suffix*
    suffix  := "?" | "[" "]"
    primary := NAME ( "<" type ( "," type )* ">" )?

``NAME`` is an identifier, optionally dotted (``System.Int32``). Suffixes
bind left to right, so ``int?[]`` is an array of nullable ints and
``List<int>[]?`` is a nullable array of lists.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

# Generic names with one type argument that translate to arrays.
COLLECTION_TYPES: frozenset[str] = frozenset(
    {
        "List",
        "IList",
        "IReadOnlyList",
        "IEnumerable",
        "ICollection",
        "IReadOnlyCollection",
        "HashSet",
        "ISet",
    }
)

# Generic names with a key and a value type argument that translate to mappings.
DICTIONARY_TYPES: frozenset[str] = frozenset(
    {
        "Dictionary",
        "IDictionary",
        "SortedDictionary",
        "IReadOnlyDictionary",
    }
)


class TypeGrammarError(Exception):
    """Raised when a type name does not match the type grammar.

    Attributes:
        column: 1-based column where the problem was detected.
    """

    def __init__(self, message: str, column: int) -> None:
        super().__init__(f"Column {column}: {message}")
        self.column = column


@dataclass(frozen=True)
class NamedType:
    """A plain or generic type name, e.g. ``Foo`` or ``Dictionary<string, Foo>``."""

    name: str
    arguments: tuple[TypeExpr, ...] = ()

    @property
    def is_simple(self) -> bool:
        """True for a bare identifier without type arguments."""
        return not self.arguments

    @property
    def base_name(self) -> str:
        """The name without its namespace qualifier."""
        return self.name.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class ArrayType:
    element: TypeExpr


@dataclass(frozen=True)
class NullableType:
    inner: TypeExpr


TypeExpr = NamedType | ArrayType | NullableType


def parse_type(text: str) -> TypeExpr:
    """Parse a type name into a type expression tree.

    Raises:
        TypeGrammarError: If the text is not a well-formed type name.
    """
    return _Parser(_tokenize(text)).parse()


def format_type(expr: TypeExpr) -> str:
    """Render a type expression back to normalized source text."""
    if isinstance(expr, ArrayType):
        return f"{format_type(expr.element)}[]"
    if isinstance(expr, NullableType):
        return f"{format_type(expr.inner)}?"
    if expr.arguments:
        return f"{expr.name}<{', '.join(format_type(arg) for arg in expr.arguments)}>"
    return expr.name


def collection_element(expr: TypeExpr) -> TypeExpr | None:
    """Return the element type if *expr* is a known single-argument collection."""
    if isinstance(expr, NamedType) and expr.base_name in COLLECTION_TYPES and len(expr.arguments) == 1:
        return expr.arguments[0]
    return None


def dictionary_arguments(expr: TypeExpr) -> tuple[TypeExpr, TypeExpr] | None:
    """Return ``(key, value)`` if *expr* is a known dictionary type, ignoring a trailing ``?``.

    The key must be a plain identifier; ``Dictionary<List<int>, Foo>`` is not
    a dictionary type and translates like any other generic.
    """
    if isinstance(expr, NullableType):
        expr = expr.inner
    if isinstance(expr, NamedType) and expr.base_name in DICTIONARY_TYPES and len(expr.arguments) == 2:
        key, value = expr.arguments
        if isinstance(key, NamedType) and key.is_simple:
            return key, value
    return None


def is_dictionary_type(text: str) -> bool:
    """True if *text* parses as a dictionary type (optionally nullable, never an array)."""
    try:
        expr = parse_type(text)
    except TypeGrammarError:
        return False
    return dictionary_arguments(expr) is not None


# ################
# Implementation
# ################


class _TokenType(enum.Enum):
    NAME = "NAME"
    LANGLE = "<"
    RANGLE = ">"
    COMMA = ","
    LBRACKET = "["
    RBRACKET = "]"
    QUESTION = "?"
    EOF = "EOF"


@dataclass(frozen=True)
class _Token:
    type: _TokenType
    value: str
    column: int


_SINGLE_CHAR_TOKENS: dict[str, _TokenType] = {
    "<": _TokenType.LANGLE,
    ">": _TokenType.RANGLE,
    ",": _TokenType.COMMA,
    "[": _TokenType.LBRACKET,
    "]": _TokenType.RBRACKET,
    "?": _TokenType.QUESTION,
}


def _tokenize(text: str) -> list[_Token]:
    """Split a type name into tokens, ending with a single EOF token."""
    tokens: list[_Token] = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch.isspace():
            pos += 1
        elif ch in _SINGLE_CHAR_TOKENS:
            tokens.append(_Token(_SINGLE_CHAR_TOKENS[ch], ch, pos + 1))
            pos += 1
        elif ch.isalpha() or ch == "_":
            start = pos
            pos = _scan_name(text, pos)
            tokens.append(_Token(_TokenType.NAME, text[start:pos], start + 1))
        else:
            raise TypeGrammarError(f"Unexpected character: {ch!r}", pos + 1)
    tokens.append(_Token(_TokenType.EOF, "", len(text) + 1))
    return tokens


def _scan_name(text: str, pos: int) -> int:
    """Return the end position of the dotted identifier starting at *pos*."""
    while pos < len(text):
        ch = text[pos]
        if ch.isalnum() or ch == "_":
            pos += 1
        elif ch == "." and pos + 1 < len(text) and (text[pos + 1].isalpha() or text[pos + 1] == "_"):
            pos += 1
        else:
            break
    return pos


class _Parser:
    """Recursive-descent parser over a type-name token stream."""

    def __init__(self, tokens: list[_Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> TypeExpr:
        expr = self._parse_type()
        self._expect(_TokenType.EOF)
        return expr

    def _current(self) -> _Token:
        return self._tokens[self._pos]

    def _check(self, *types: _TokenType) -> bool:
        return self._current().type in types

    def _advance(self) -> _Token:
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, *types: _TokenType) -> _Token:
        tok = self._current()
        if tok.type not in types:
            expected = ", ".join(repr(t.value) for t in types)
            got = tok.value or "end of input"
            raise TypeGrammarError(f"Expected {expected}, got {got!r}", tok.column)
        return self._advance()

    def _parse_type(self) -> TypeExpr:
        expr: TypeExpr = self._parse_primary()
        while self._check(_TokenType.QUESTION, _TokenType.LBRACKET):
            if self._advance().type == _TokenType.QUESTION:
                expr = NullableType(expr)
            else:
                self._expect(_TokenType.RBRACKET)
                expr = ArrayType(expr)
        return expr

    def _parse_primary(self) -> NamedType:
        name = self._expect(_TokenType.NAME).value
        if not self._check(_TokenType.LANGLE):
            return NamedType(name)
        self._advance()  # consume <
        arguments = [self._parse_type()]
        while self._check(_TokenType.COMMA):
            self._advance()  # consume ,
            arguments.append(self._parse_type())
        self._expect(_TokenType.RANGLE)
        return NamedType(name, tuple(arguments))
