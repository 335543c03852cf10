# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the type-name parser."""

import pytest

from tsdecl.translation.type_parser import (
    ArrayType,
    NamedType,
    NullableType,
    TypeGrammarError,
    collection_element,
    dictionary_arguments,
    format_type,
    is_dictionary_type,
    parse_type,
)

# ###############
# Plain Names
# ###############


class TestNames:
    def test_simple_name(self) -> None:
        assert parse_type("Foo") == NamedType("Foo")

    def test_name_with_digits_and_underscore(self) -> None:
        assert parse_type("_Foo2Bar") == NamedType("_Foo2Bar")

    def test_dotted_name(self) -> None:
        expr = parse_type("System.Int32")
        assert expr == NamedType("System.Int32")
        assert isinstance(expr, NamedType)
        assert expr.base_name == "Int32"

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_type("  Foo  ") == NamedType("Foo")

    def test_simple_name_is_simple(self) -> None:
        expr = parse_type("Foo")
        assert isinstance(expr, NamedType)
        assert expr.is_simple


# ###############
# Generics
# ###############


class TestGenerics:
    def test_single_argument(self) -> None:
        assert parse_type("List<int>") == NamedType("List", (NamedType("int"),))

    def test_two_arguments_with_spaces(self) -> None:
        assert parse_type("Dictionary<string , Foo>") == NamedType(
            "Dictionary", (NamedType("string"), NamedType("Foo"))
        )

    def test_nested_generics_close_with_double_angle(self) -> None:
        expr = parse_type("List<Dictionary<string,List<Foo>>>")
        assert expr == NamedType(
            "List",
            (
                NamedType(
                    "Dictionary",
                    (NamedType("string"), NamedType("List", (NamedType("Foo"),))),
                ),
            ),
        )

    def test_generic_is_not_simple(self) -> None:
        expr = parse_type("List<int>")
        assert isinstance(expr, NamedType)
        assert not expr.is_simple


# ###############
# Suffixes
# ###############


class TestSuffixes:
    def test_array(self) -> None:
        assert parse_type("int[]") == ArrayType(NamedType("int"))

    def test_nullable(self) -> None:
        assert parse_type("int?") == NullableType(NamedType("int"))

    def test_array_of_nullable(self) -> None:
        assert parse_type("int?[]") == ArrayType(NullableType(NamedType("int")))

    def test_nullable_generic(self) -> None:
        assert parse_type("List<int>?") == NullableType(NamedType("List", (NamedType("int"),)))

    def test_jagged_array(self) -> None:
        assert parse_type("int[][]") == ArrayType(ArrayType(NamedType("int")))

    def test_array_inside_generic(self) -> None:
        assert parse_type("List<Foo[]>") == NamedType("List", (ArrayType(NamedType("Foo")),))


# ###############
# Errors
# ###############


class TestErrors:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "List<int",
            "List<>",
            "int[",
            "(int, string)",
            "Foo Bar",
            "int*",
            "Dictionary<string,>",
        ],
    )
    def test_rejected(self, text: str) -> None:
        with pytest.raises(TypeGrammarError):
            parse_type(text)

    def test_error_reports_column(self) -> None:
        with pytest.raises(TypeGrammarError) as exc_info:
            parse_type("List<int")
        assert exc_info.value.column == 9
        assert "Column 9" in str(exc_info.value)


# ###############
# Helpers
# ###############


class TestHelpers:
    def test_format_type_normalizes_spacing(self) -> None:
        assert format_type(parse_type("Dictionary<string,List<int?>>[]")) == "Dictionary<string, List<int?>>[]"

    def test_collection_element(self) -> None:
        assert collection_element(parse_type("IEnumerable<Foo>")) == NamedType("Foo")

    def test_collection_element_qualified_name(self) -> None:
        assert collection_element(parse_type("System.Collections.Generic.List<Foo>")) == NamedType("Foo")

    def test_collection_with_two_arguments_is_not_a_collection(self) -> None:
        assert collection_element(parse_type("List<Foo, Bar>")) is None

    def test_dictionary_arguments(self) -> None:
        assert dictionary_arguments(parse_type("IDictionary<string, int>")) == (
            NamedType("string"),
            NamedType("int"),
        )

    def test_dictionary_key_must_be_a_plain_name(self) -> None:
        assert dictionary_arguments(parse_type("Dictionary<List<int>, Foo>")) is None

    def test_dictionary_arguments_ignores_nullable(self) -> None:
        assert dictionary_arguments(parse_type("Dictionary<string, int>?")) is not None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Dictionary<string, string>", True),
            ("IDictionary<string,Foo>", True),
            ("SortedDictionary<int, List<Foo>>", True),
            ("IReadOnlyDictionary<string, int>?", True),
            ("Dictionary<string, string>[]", False),
            ("List<string>", False),
            ("Dictionary<string>", False),
            ("Dictionary<List<int>, Foo>", False),
            ("Dictionary<int[], Foo>", False),
            ("Dictionary<string?, Foo>", False),
            ("IController<Controller>", False),
            ("not a type", False),
        ],
    )
    def test_is_dictionary_type(self, text: str, expected: bool) -> None:
        assert is_dictionary_type(text) is expected
