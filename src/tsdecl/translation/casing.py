# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier case conversion.

Follows the rules of the ``camelcase`` npm package so that generated
declarations match the property names produced by JavaScript tooling:
word boundaries are separators (``_ . - space``), lower-to-upper
transitions, and the end of an uppercase run followed by a lowercase
letter (``URLValue`` -> ``urlValue``).
"""

import re

# ###############
# Public Interface
# ###############


def camel_case(
    text: str,
    *,
    pascal_case: bool = False,
    preserve_consecutive_uppercase: bool = False,
) -> str:
    """Convert *text* to camelCase (or PascalCase).

    Args:
        text: The identifier to convert.
        pascal_case: Upper-case the first character.
        preserve_consecutive_uppercase: Keep runs of capitals such as ``BAR``
            in ``fooBAR`` instead of lower-casing them.

    Returns:
        The converted identifier. Conversion is a pure function of its
        inputs, so the same identifier always converts the same way.
    """
    text = text.strip()
    if not text:
        return ""
    if len(text) == 1:
        return text.upper() if pascal_case else text.lower()

    if text != text.lower():
        text = _split_case_boundaries(text)

    text = _LEADING_SEPARATORS.sub("", text)
    if preserve_consecutive_uppercase:
        text = _lower_leading_capital(text)
    else:
        text = text.lower()

    if pascal_case:
        text = text[:1].upper() + text[1:]

    text = _SEPARATORS_AND_IDENTIFIER.sub(lambda m: m.group(1).upper(), text)
    return _NUMBERS_AND_IDENTIFIER.sub(lambda m: m.group(0).upper(), text)


# ################
# Implementation
# ################

_LEADING_SEPARATORS = re.compile(r"^[_.\- ]+")
_SEPARATORS_AND_IDENTIFIER = re.compile(r"[_.\- ]+(\w|$)")
_NUMBERS_AND_IDENTIFIER = re.compile(r"\d+(\w|$)")


def _is_lower(ch: str) -> bool:
    return ch.lower() == ch and ch.upper() != ch


def _is_upper(ch: str) -> bool:
    return ch.upper() == ch and ch.lower() != ch


def _split_case_boundaries(text: str) -> str:
    """Insert ``-`` at every case boundary so the later passes treat it as a separator."""
    last_lower = False
    last_upper = False
    last_last_upper = False
    i = 0
    while i < len(text):
        ch = text[i]
        if last_lower and ch.isupper():
            text = f"{text[:i]}-{text[i:]}"
            last_lower = False
            last_last_upper = last_upper
            last_upper = True
            i += 1
        elif last_upper and last_last_upper and ch.islower():
            # The previous capital starts the next word: FOOBar -> FOO-Bar.
            text = f"{text[: i - 1]}-{text[i - 1 :]}"
            last_last_upper = last_upper
            last_upper = False
            last_lower = True
        else:
            last_lower = _is_lower(ch)
            last_last_upper = last_upper
            last_upper = _is_upper(ch)
        i += 1
    return text


def _lower_leading_capital(text: str) -> str:
    """Lower-case a leading capital unless it starts an uppercase run."""
    if text[:1].isupper() and not text[1:2].isupper():
        return text[0].lower() + text[1:]
    return text
