# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for rendering models, enums, and contracts."""

from tsdecl.config.options import CamelCaseOptions, ConverterOptions
from tsdecl.model.entities import (
    ContractDef,
    EnumDef,
    EnumValue,
    ExtraInfo,
    Member,
    ModelDef,
    Operation,
    Parameter,
)
from tsdecl.translation.emitter import DeclarationEmitter

# ###############
# Test Helpers
# ###############


def _emitter(**options: object) -> DeclarationEmitter:
    return DeclarationEmitter(ConverterOptions(**options))


def _colors() -> EnumDef:
    return EnumDef(
        identifier="Color",
        values=(EnumValue(identifier="Red"), EnumValue(identifier="DarkGreen"), EnumValue(identifier="Blue")),
    )


# ###############
# Models
# ###############


class TestRenderModel:
    def test_basic_interface(self) -> None:
        model = ModelDef(
            name="Foo",
            members=(Member(identifier="Bar", type="string"), Member(identifier="Baz", type="int?")),
        )
        assert _emitter().render_model(model, "Models/Foo.cs") == [
            "// Models/Foo.cs",
            "export interface Foo {",
            "    Bar: string;",
            "    Baz?: number;",
            "}",
            "",
        ]

    def test_base_types(self) -> None:
        model = ModelDef(name="A", base_types=("B", "C"))
        rows = _emitter(omit_file_path_comment=True).render_model(model, "A.cs")
        assert rows[0] == "export interface A extends B, C {"

    def test_index_signature_precedes_members(self) -> None:
        model = ModelDef(
            name="Bag",
            index_signature="Dictionary<string, int>",
            members=(Member(identifier="Name", type="string"),),
        )
        rows = _emitter(omit_file_path_comment=True).render_model(model, "Bag.cs")
        assert rows[:3] == ["export interface Bag {", "    [key: string]: number;", "    Name: string;"]

    def test_omit_semicolon(self) -> None:
        model = ModelDef(name="Foo", index_signature="Dictionary<string, Foo>", members=(Member(identifier="Bar", type="int"),))
        rows = _emitter(omit_semicolon=True, omit_file_path_comment=True).render_model(model, "Foo.cs")
        assert rows[1:3] == ["    [key: string]: Foo", "    Bar: number"]

    def test_comments_are_emitted_only_when_enabled(self) -> None:
        model = ModelDef(
            name="Foo",
            extra_info=ExtraInfo(summary="A foo."),
            members=(Member(identifier="Bar", type="string", extra_info=ExtraInfo(obsolete=True)),),
        )
        plain = _emitter(omit_file_path_comment=True).render_model(model, "Foo.cs")
        assert not any("/**" in row for row in plain)

        documented = _emitter(omit_file_path_comment=True, include_comments=True).render_model(model, "Foo.cs")
        assert documented == [
            "/**",
            " * A foo.",
            " */",
            "export interface Foo {",
            "    /**",
            "     * @deprecated",
            "     */",
            "    Bar: string;",
            "}",
            "",
        ]


class TestRenderMember:
    def test_optional_marker_comes_from_type(self) -> None:
        assert _emitter().render_member(Member(identifier="Baz", type="List<int>?")) == "Baz?: number[]"

    def test_array_of_nullable_is_not_optional(self) -> None:
        assert _emitter().render_member(Member(identifier="Baz", type="int?[]")) == "Baz: number[]"

    def test_identifier_is_truncated_to_first_token(self) -> None:
        member = Member(identifier="Count = 0", type="int")
        assert _emitter().render_member(member) == "Count: number"

    def test_camel_case(self) -> None:
        member = Member(identifier="FirstName", type="string?")
        assert _emitter(camel_case=True).render_member(member) == "firstName?: string"

    def test_camel_case_options(self) -> None:
        emitter = _emitter(camel_case=True, camel_case_options=CamelCaseOptions(pascal_case=True))
        assert emitter.render_member(Member(identifier="first_name", type="string")) == "FirstName: string"

    def test_emit_default_value_is_ignored_by_default(self) -> None:
        member = Member(identifier="Flag", type="bool", extra_info=ExtraInfo(emit_default_value=False))
        assert _emitter().render_member(member) == "Flag: boolean"

    def test_validate_emit_default_value_marks_member_optional(self) -> None:
        member = Member(identifier="Flag", type="bool", extra_info=ExtraInfo(emit_default_value=False))
        assert _emitter(validate_emit_default_value=True).render_member(member) == "Flag?: boolean"

    def test_custom_type_translation(self) -> None:
        member = Member(identifier="Sku", type="ProductCode")
        assert _emitter(custom_type_translations={"ProductCode": "string"}).render_member(member) == "Sku: string"


# ###############
# Enums
# ###############


class TestRenderEnum:
    def test_string_enum(self) -> None:
        assert _emitter(omit_file_path_comment=True).render_enum(_colors(), "Color.cs") == [
            "export enum Color {",
            "    Red = 'Red',",
            "    DarkGreen = 'DarkGreen',",
            "    Blue = 'Blue',",
            "}",
            "",
        ]

    def test_string_enum_camel_case_values(self) -> None:
        rows = _emitter(omit_file_path_comment=True, camel_case_enums=True).render_enum(_colors(), "Color.cs")
        assert rows[2] == "    DarkGreen = 'darkGreen',"

    def test_numeric_enum_uses_ordinal_positions(self) -> None:
        rows = _emitter(omit_file_path_comment=True, numeric_enums=True).render_enum(_colors(), "Color.cs")
        assert rows[1:4] == ["    Red = 0,", "    DarkGreen = 1,", "    Blue = 2,"]

    def test_explicit_value_overrides_only_its_entry(self) -> None:
        enum = EnumDef(
            identifier="Level",
            values=(EnumValue(identifier="A"), EnumValue(identifier="B", value="10"), EnumValue(identifier="C")),
        )
        rows = _emitter(omit_file_path_comment=True, numeric_enums=True).render_enum(enum, "Level.cs")
        assert rows[1:4] == ["    A = 0,", "    B = 10,", "    C = 2,"]

    def test_union_of_literals(self) -> None:
        options = {"omit_file_path_comment": True, "string_literal_types_instead_of_enums": True}
        assert _emitter(**options).render_enum(_colors(), "Color.cs") == [
            "export type Color =",
            "    'Red' |",
            "    'DarkGreen' |",
            "    'Blue';",
            "",
        ]

    def test_union_of_literals_without_semicolon(self) -> None:
        options = {
            "omit_file_path_comment": True,
            "string_literal_types_instead_of_enums": True,
            "omit_semicolon": True,
            "camel_case_enums": True,
        }
        rows = _emitter(**options).render_enum(_colors(), "Color.cs")
        assert rows[1:4] == ["    'red' |", "    'darkGreen' |", "    'blue'"]

    def test_empty_union(self) -> None:
        enum = EnumDef(identifier="Nothing")
        options = {"omit_file_path_comment": True, "string_literal_types_instead_of_enums": True}
        assert _emitter(**options).render_enum(enum, "Nothing.cs") == ["export type Nothing =", "    never;", ""]

    def test_value_comments_only_in_enumeration_mode(self) -> None:
        enum = EnumDef(
            identifier="Level",
            values=(EnumValue(identifier="Low", extra_info=ExtraInfo(summary="Lowest.")),),
        )
        enumeration = _emitter(omit_file_path_comment=True, include_comments=True).render_enum(enum, "Level.cs")
        assert enumeration[1:4] == ["    /**", "     * Lowest.", "     */"]

        options = {
            "omit_file_path_comment": True,
            "include_comments": True,
            "string_literal_types_instead_of_enums": True,
        }
        union = _emitter(**options).render_enum(enum, "Level.cs")
        assert not any("Lowest" in row for row in union)

    def test_path_comment(self) -> None:
        assert _emitter().render_enum(_colors(), "Enums/Color.cs")[0] == "// Enums/Color.cs"


# ###############
# Contracts
# ###############


class TestRenderContract:
    def test_signatures(self) -> None:
        contract = ContractDef(
            name="IOrderService",
            operations=(
                Operation(
                    identifier="GetOrder",
                    return_type="Order",
                    parameters=(Parameter(identifier="id", type="int"), Parameter(identifier="full", type="bool?")),
                ),
                Operation(identifier="ListOrders", return_type="List<Order>"),
            ),
        )
        assert _emitter().render_contract(contract, "IOrderService.cs") == [
            "// IOrderService.cs",
            "export interface IOrderService {",
            "    GetOrder(id: number, full: boolean): Order",
            "",
            "    ListOrders(): Order[]",
            "",
            "}",
        ]

    def test_camel_case_applies_to_operations_and_parameters(self) -> None:
        operation = Operation(
            identifier="GetOrder",
            return_type="void",
            parameters=(Parameter(identifier="OrderId", type="Guid"),),
        )
        assert _emitter(camel_case=True).render_signature(operation) == "getOrder(orderId: string): void"

    def test_operation_comment(self) -> None:
        contract = ContractDef(
            name="IService",
            operations=(Operation(identifier="Ping", return_type="void", extra_info=ExtraInfo(summary="Ping.")),),
        )
        rows = _emitter(omit_file_path_comment=True, include_comments=True).render_contract(contract, "x.cs")
        assert rows == ["export interface IService {", "    /**", "     * Ping.", "     */", "    Ping(): void", "", "}"]
