# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Converter options and their YAML/JSON loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############


class OptionsError(Exception):
    """Raised when an options file cannot be read or is invalid."""


class CamelCaseOptions(BaseModel):
    """Fine tuning for identifier case conversion."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    pascal_case: bool = Field(alias="pascalCase", default=False)
    preserve_consecutive_uppercase: bool = Field(alias="preserveConsecutiveUppercase", default=False)


class ConverterOptions(BaseModel):
    """Everything that changes the generated declaration text.

    The options value is immutable and passed explicitly to every stage.
    Keys are accepted in camelCase (as written in options files) or by
    field name.

    Attributes:
        namespace: Wrap the output in ``declare module <namespace> { ... }``.
        camel_case: Convert member and parameter identifiers to camelCase.
        camel_case_options: Tuning for the identifier conversion.
        camel_case_enums: Convert string enum values to camelCase.
        numeric_enums: Emit enum members with numeric values instead of strings.
        string_literal_types_instead_of_enums: Emit enums as unions of string literals.
        omit_semicolon: Leave out statement terminators on member and enum lines.
        omit_file_path_comment: Leave out the ``// <path>`` line before each declaration.
        include_comments: Emit documentation comments.
        custom_type_translations: Extra or overriding entries for the type table.
        validate_emit_default_value: Mark members whose default value is not
            serialized (``EmitDefaultValue = false``) as optional.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    namespace: str | None = None
    camel_case: bool = Field(alias="camelCase", default=False)
    camel_case_options: CamelCaseOptions = Field(alias="camelCaseOptions", default_factory=CamelCaseOptions)
    camel_case_enums: bool = Field(alias="camelCaseEnums", default=False)
    numeric_enums: bool = Field(alias="numericEnums", default=False)
    string_literal_types_instead_of_enums: bool = Field(alias="stringLiteralTypesInsteadOfEnums", default=False)
    omit_semicolon: bool = Field(alias="omitSemicolon", default=False)
    omit_file_path_comment: bool = Field(alias="omitFilePathComment", default=False)
    include_comments: bool = Field(alias="includeComments", default=False)
    custom_type_translations: dict[str, str] = Field(alias="customTypeTranslations", default_factory=dict)
    validate_emit_default_value: bool = Field(alias="validateEmitDefaultValue", default=False)


def load_options(path: Path) -> ConverterOptions:
    """Load converter options from a YAML or JSON file.

    An empty file yields the default options.

    Args:
        path: Path to the options file.

    Returns:
        A validated ConverterOptions instance.

    Raises:
        OptionsError: If the file cannot be read, is not valid YAML, or does
            not match the options schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise OptionsError(f"Options file not found: {path}") from None
    except OSError as exc:
        raise OptionsError(f"Cannot read options file '{path}': {exc}") from exc

    return parse_options(raw, source_label=str(path))


def parse_options(text: str, source_label: str = "<string>") -> ConverterOptions:
    """Parse options from YAML (or JSON) text.

    Raises:
        OptionsError: If the text is not valid YAML or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise OptionsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OptionsError(f"{source_label}: options must be a mapping")

    try:
        return ConverterOptions.model_validate(data)
    except ValidationError as exc:
        raise OptionsError(f"Invalid options in {source_label}: {exc}") from exc
