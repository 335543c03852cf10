# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of source-language type names into TypeScript type text."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tsdecl.translation.type_parser import (
    ArrayType,
    NamedType,
    NullableType,
    TypeExpr,
    TypeGrammarError,
    collection_element,
    dictionary_arguments,
    format_type,
    parse_type,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_TYPE_TRANSLATIONS: dict[str, str] = {
    # Numbers
    "int": "number",
    "uint": "number",
    "long": "number",
    "ulong": "number",
    "short": "number",
    "ushort": "number",
    "byte": "number",
    "sbyte": "number",
    "float": "number",
    "double": "number",
    "decimal": "number",
    "Int16": "number",
    "Int32": "number",
    "Int64": "number",
    "UInt16": "number",
    "UInt32": "number",
    "UInt64": "number",
    "Single": "number",
    "Double": "number",
    "Decimal": "number",
    # Booleans
    "bool": "boolean",
    "Boolean": "boolean",
    # Serialized as strings
    "string": "string",
    "String": "string",
    "char": "string",
    "Char": "string",
    "DateTime": "string",
    "DateTimeOffset": "string",
    "DateOnly": "string",
    "TimeOnly": "string",
    "TimeSpan": "string",
    "Guid": "string",
    # Untyped
    "dynamic": "any",
    "object": "any",
    "Object": "any",
    "void": "void",
}


class TypeTranslator:
    """Translates type names using the default table extended by custom entries.

    Custom entries override defaults. Names missing from the table pass
    through unchanged, so user-defined types keep their names.
    """

    def __init__(self, custom_translations: Mapping[str, str] | None = None) -> None:
        self._table: dict[str, str] = {**DEFAULT_TYPE_TRANSLATIONS, **(custom_translations or {})}

    def translate(self, text: str) -> str:
        """Translate a type name as used for a member, parameter, or return type.

        A trailing ``?`` never changes the result; callers surface optionality
        on the owning identifier instead.
        """
        text = text.strip()
        try:
            expr = parse_type(text)
        except TypeGrammarError as exc:
            logger.debug("Passing through type %r unchanged: %s", text, exc)
            return self._translate_unparsed(text)
        return self._translate(expr)

    def translate_index_signature(self, text: str) -> str:
        """Translate a dictionary type into an index signature, e.g. ``[key: string]: number``.

        Raises:
            ValueError: If *text* is not a dictionary type.
        """
        try:
            parts = dictionary_arguments(parse_type(text.strip()))
        except TypeGrammarError as exc:
            raise ValueError(f"Not a dictionary type: {text!r}") from exc
        if parts is None:
            raise ValueError(f"Not a dictionary type: {text!r}")
        key, value = parts
        return f"[key: {self._translate(key)}]: {self._translate(value)}"

    def translate_leaf(self, name: str) -> str:
        """Look up a plain type name in the translation table."""
        return self._table.get(name, name)

    # ------------------------------------------------------------------
    # Expression translation
    # ------------------------------------------------------------------

    def _translate(self, expr: TypeExpr) -> str:
        if isinstance(expr, ArrayType):
            return f"{self._translate(expr.element)}[]"
        if isinstance(expr, NullableType):
            return self._translate(expr.inner)
        if expr.is_simple:
            return self.translate_leaf(expr.name)

        element = collection_element(expr)
        if element is not None:
            return f"{self._translate(element)}[]"

        parts = dictionary_arguments(expr)
        if parts is not None:
            key, value = parts
            return f"Record<{self._translate(key)}, {self._translate(value)}>"

        return self._translate_generic(expr)

    def _translate_generic(self, expr: NamedType) -> str:
        """Translate an unknown generic, preferring a table entry for its full text."""
        full_name = format_type(expr)
        if full_name in self._table:
            return self._table[full_name]
        arguments = ", ".join(self._translate(arg) for arg in expr.arguments)
        return f"{self.translate_leaf(expr.name)}<{arguments}>"

    def _translate_unparsed(self, text: str) -> str:
        """Fallback for text outside the grammar: honour ``[]`` and ``?`` suffixes, then look up."""
        if text.endswith("[]"):
            return f"{self._translate_unparsed(text[:-2].rstrip())}[]"
        if text.endswith("?"):
            return self._translate_unparsed(text[:-1].rstrip())
        return self.translate_leaf(text)
