# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation and attribute facts shared by every declaration kind."""

from __future__ import annotations

import re
from collections.abc import Sequence

from tsdecl.model.entities import ExtraInfo
from tsdecl.syntax.nodes import AttributeNode, DocumentedNode

# ###############
# Public Interface
# ###############

OBSOLETE_ATTRIBUTE = "Obsolete"
DATA_MEMBER_ATTRIBUTE = "DataMember"


def extract_extra_info(node: DocumentedNode) -> ExtraInfo:
    """Collect deprecation, doc comment, and serialization facts for a node."""
    obsolete = find_attribute(node.attributes, OBSOLETE_ATTRIBUTE)
    return ExtraInfo(
        obsolete=obsolete is not None,
        obsolete_message=_obsolete_message(obsolete) if obsolete is not None else None,
        summary=extract_summary(node.documentation),
        remarks=extract_section(node.documentation, "remarks"),
        emit_default_value=extract_emit_default_value(node.attributes),
    )


def attribute_name(attribute: AttributeNode) -> str:
    """Normalize an attribute name: ``System.ObsoleteAttribute`` -> ``Obsolete``."""
    name = attribute.name.strip().rsplit(".", 1)[-1]
    if name.endswith("Attribute") and name != "Attribute":
        name = name[: -len("Attribute")]
    return name


def find_attribute(attributes: Sequence[AttributeNode], name: str) -> AttributeNode | None:
    """Return the first attribute with the given normalized name."""
    for attribute in attributes:
        if attribute_name(attribute) == name:
            return attribute
    return None


def extract_emit_default_value(attributes: Sequence[AttributeNode]) -> bool:
    """False only for an explicit ``[DataMember(EmitDefaultValue = false)]``."""
    data_member = find_attribute(attributes, DATA_MEMBER_ATTRIBUTE)
    if data_member is None:
        return True
    for argument in data_member.arguments:
        if argument.name is not None:
            if argument.name.strip() == "EmitDefaultValue" and argument.value.strip().lower() == "false":
                return False
        elif _EMIT_DEFAULT_VALUE_FALSE.match(argument.value):
            return False
    return True


def extract_summary(documentation: str | None) -> str | None:
    """Return the ``<summary>`` text, or ``<inheritdoc/>`` for inherited documentation."""
    summary = extract_section(documentation, "summary")
    if summary is None and documentation and _INHERITDOC.search(documentation):
        return "<inheritdoc/>"
    return summary


def extract_section(documentation: str | None, tag: str) -> str | None:
    """Return the inner text of an XML doc comment section.

    ``///`` markers and indentation are stripped line by line and blank
    leading or trailing lines are dropped. Inner markup is kept verbatim.
    """
    if not documentation:
        return None
    text = _DOC_MARKER.sub("", documentation)
    match = re.search(rf"<{tag}\s*>(.*?)</{tag}\s*>", text, re.DOTALL | re.IGNORECASE)
    if match is None:
        return None
    lines = [line.strip() for line in match.group(1).splitlines()]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) or None


def unquote(value: str) -> str:
    """Decode a string literal as written in source (regular or verbatim ``@"..."``)."""
    value = value.strip()
    if value.startswith('@"') and value.endswith('"') and len(value) >= 3:
        return value[2:-1].replace('""', '"')
    if value.startswith('"') and value.endswith('"') and len(value) >= 2:
        return _ESCAPE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), value[1:-1])
    return value


# ################
# Implementation
# ################

_DOC_MARKER = re.compile(r"^[ \t]*///", re.MULTILINE)
_INHERITDOC = re.compile(r"<inheritdoc\b[^>]*/>", re.IGNORECASE)
_EMIT_DEFAULT_VALUE_FALSE = re.compile(r"^\s*EmitDefaultValue\s*=\s*false\s*$", re.IGNORECASE)
_ESCAPE = re.compile(r"\\(.)")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def _obsolete_message(attribute: AttributeNode) -> str | None:
    for argument in attribute.arguments:
        if argument.name is None:
            return unquote(argument.value)
    return None
