# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of extracted documentation as TSDoc comment blocks."""

import re

from tsdecl.model.entities import ExtraInfo

# ###############
# Public Interface
# ###############


def format_comment(extra_info: ExtraInfo, indentation: str = "") -> str | None:
    """Render a ``/** ... */`` block for a declaration.

    Only declarations with a summary or an obsolete marker get a block;
    remarks alone are not enough.

    Args:
        extra_info: The documentation facts of the declaration.
        indentation: Prefix for every line of the block.

    Returns:
        The comment block as a multi-line string, or None if there is
        nothing to document.
    """
    if not extra_info.obsolete and not extra_info.summary:
        return None

    lines = [f"{indentation}/**"]

    if extra_info.summary:
        lines.extend(_comment_lines(extra_info.summary, indentation))
    if extra_info.remarks:
        lines.append(f"{indentation} *")
        lines.append(f"{indentation} * @remarks")
        lines.extend(_comment_lines(extra_info.remarks, indentation))

    if extra_info.obsolete:
        if extra_info.summary:
            lines.append(f"{indentation} *")
        message = ""
        if extra_info.obsolete_message:
            message = f" {replace_comment_tags(extra_info.obsolete_message)}"
        lines.append(f"{indentation} * @deprecated{message}")

    lines.append(f"{indentation} */")
    return "\n".join(lines)


def replace_comment_tags(text: str) -> str:
    """Rewrite XML doc cross-references into TSDoc tags.

    This is plain text substitution: referenced symbols are not resolved.

    - ``<see cref="X"/>`` becomes ``{@link X}``
    - ``<see cref="X">label</see>`` becomes ``{@link X | label}``
    - ``<inheritdoc/>`` becomes ``@inheritDoc``
    """
    text = _SEE_CREF_EMPTY.sub(r"{@link \1}", text)
    text = _SEE_CREF_LABELLED.sub(r"{@link \1 | \2}", text)
    return text.replace("<inheritdoc/>", "@inheritDoc")


# ################
# Implementation
# ################

_SEE_CREF_EMPTY = re.compile(r'<see cref="([^"]+)"\s*/>', re.IGNORECASE)
_SEE_CREF_LABELLED = re.compile(r'<see cref="([^"]+)">(.+?)</see>', re.IGNORECASE)
_LINE_BREAK = re.compile(r"\r?\n")


def _comment_lines(text: str, indentation: str) -> list[str]:
    return [f"{indentation} * {replace_comment_tags(line)}" for line in _LINE_BREAK.split(text)]
