# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of IR declarations as TypeScript declaration rows.

Every ``render_*`` method returns a list of single-line rows; the caller
joins them and applies namespace indentation.
"""

from __future__ import annotations

from tsdecl.config.options import ConverterOptions
from tsdecl.model.entities import ContractDef, EnumDef, ExtraInfo, Member, ModelDef, Operation
from tsdecl.translation.casing import camel_case
from tsdecl.translation.comments import format_comment
from tsdecl.translation.type_translator import TypeTranslator

# ###############
# Public Interface
# ###############

INDENT = "    "


class DeclarationEmitter:
    """Renders models, enums, and contracts according to converter options."""

    def __init__(self, options: ConverterOptions) -> None:
        self._options = options
        self._types = TypeTranslator(options.custom_type_translations)
        self._terminator = "" if options.omit_semicolon else ";"

    def render_model(self, model: ModelDef, relative_path: str) -> list[str]:
        """Render a model as ``export interface``, members in declaration order."""
        rows: list[str] = []
        self._append_path_comment(rows, relative_path)
        self._append_comment(rows, model.extra_info, "")

        extends = f" extends {', '.join(model.base_types)}" if model.base_types else ""
        rows.append(f"export interface {model.name}{extends} {{")

        if model.index_signature:
            signature = self._types.translate_index_signature(model.index_signature)
            rows.append(f"{INDENT}{signature}{self._terminator}")

        for member in model.members:
            self._append_comment(rows, member.extra_info, INDENT)
            rows.append(f"{INDENT}{self.render_member(member)}{self._terminator}")

        rows.append("}")
        rows.append("")
        return rows

    def render_member(self, member: Member) -> str:
        """Render ``identifier[?]: type`` for one model member."""
        # Only the first whitespace-delimited token of a stored identifier is a name.
        tokens = member.identifier.split()
        identifier = self.convert_identifier(tokens[0] if tokens else member.identifier)
        if self._is_optional(member):
            identifier += "?"
        return f"{identifier}: {self._types.translate(member.type)}"

    def render_enum(self, enum: EnumDef, relative_path: str) -> list[str]:
        """Render an enum as a string-literal union or as an ``export enum`` block."""
        rows: list[str] = []
        self._append_path_comment(rows, relative_path)
        self._append_comment(rows, enum.extra_info, "")

        if self._options.string_literal_types_instead_of_enums:
            rows.append(f"export type {enum.identifier} =")
            if not enum.values:
                rows.append(f"{INDENT}never{self._terminator}")
            last = len(enum.values) - 1
            for index, value in enumerate(enum.values):
                delimiter = self._terminator if index == last else " |"
                rows.append(f"{INDENT}'{self._enum_string(value.identifier)}'{delimiter}")
            rows.append("")
            return rows

        rows.append(f"export enum {enum.identifier} {{")
        for index, value in enumerate(enum.values):
            self._append_comment(rows, value.extra_info, INDENT)
            if self._options.numeric_enums:
                literal = value.value if value.value is not None else str(index)
            else:
                literal = f"'{self._enum_string(value.identifier)}'"
            rows.append(f"{INDENT}{value.identifier} = {literal},")
        rows.append("}")
        rows.append("")
        return rows

    def render_contract(self, contract: ContractDef, relative_path: str) -> list[str]:
        """Render a contract as an interface of method signatures, one blank row after each."""
        rows: list[str] = []
        self._append_path_comment(rows, relative_path)
        self._append_comment(rows, contract.extra_info, "")

        rows.append(f"export interface {contract.name} {{")
        for operation in contract.operations:
            self._append_comment(rows, operation.extra_info, INDENT)
            rows.append(f"{INDENT}{self.render_signature(operation)}")
            rows.append("")
        rows.append("}")
        return rows

    def render_signature(self, operation: Operation) -> str:
        parameters = ", ".join(
            f"{self.convert_identifier(parameter.identifier)}: {self._types.translate(parameter.type)}"
            for parameter in operation.parameters
        )
        return_type = self._types.translate(operation.return_type)
        return f"{self.convert_identifier(operation.identifier)}({parameters}): {return_type}"

    def convert_identifier(self, identifier: str) -> str:
        """Apply the configured casing to a member, operation, or parameter name."""
        if not self._options.camel_case:
            return identifier
        case_options = self._options.camel_case_options
        return camel_case(
            identifier,
            pascal_case=case_options.pascal_case,
            preserve_consecutive_uppercase=case_options.preserve_consecutive_uppercase,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_optional(self, member: Member) -> bool:
        if member.type.rstrip().endswith("?"):
            return True
        return self._options.validate_emit_default_value and not member.extra_info.emit_default_value

    def _enum_string(self, identifier: str) -> str:
        return camel_case(identifier) if self._options.camel_case_enums else identifier

    def _append_path_comment(self, rows: list[str], relative_path: str) -> None:
        if not self._options.omit_file_path_comment:
            rows.append(f"// {relative_path}")

    def _append_comment(self, rows: list[str], extra_info: ExtraInfo, indentation: str) -> None:
        if not self._options.include_comments:
            return
        block = format_comment(extra_info, indentation)
        if block is not None:
            rows.extend(block.split("\n"))
