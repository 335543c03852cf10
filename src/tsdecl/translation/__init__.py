# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of IR declarations into TypeScript declaration text."""

from tsdecl.translation.casing import camel_case
from tsdecl.translation.comments import format_comment, replace_comment_tags
from tsdecl.translation.converter import convert_contracts, convert_models
from tsdecl.translation.emitter import DeclarationEmitter
from tsdecl.translation.type_parser import TypeGrammarError, is_dictionary_type, parse_type
from tsdecl.translation.type_translator import DEFAULT_TYPE_TRANSLATIONS, TypeTranslator

__all__ = [
    "convert_models",
    "convert_contracts",
    "DeclarationEmitter",
    "TypeTranslator",
    "DEFAULT_TYPE_TRANSLATIONS",
    "TypeGrammarError",
    "parse_type",
    "is_dictionary_type",
    "camel_case",
    "format_comment",
    "replace_comment_tags",
]
