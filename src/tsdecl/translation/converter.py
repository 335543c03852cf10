# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry points turning source units into one block of declaration text.

Units are rendered independently and concatenated in input order, so the
same units and options always produce byte-identical output.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tsdecl.config.options import ConverterOptions
from tsdecl.model.entities import SourceUnit
from tsdecl.translation.emitter import INDENT, DeclarationEmitter

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def convert_models(units: Iterable[SourceUnit], options: ConverterOptions) -> str:
    """Render the models and enums of every unit.

    Within a unit, models come first, then enums, each in declaration order.
    Units that produce no declarations are dropped.
    """
    emitter = DeclarationEmitter(options)
    blocks: list[list[str]] = []
    for unit in units:
        rows: list[str] = []
        for model in unit.models:
            rows.extend(emitter.render_model(model, unit.relative_path))
        for enum in unit.enums:
            rows.extend(emitter.render_enum(enum, unit.relative_path))
        logger.debug(
            "%s: %d model(s), %d enum(s)", unit.relative_path, len(unit.models), len(unit.enums)
        )
        blocks.append(rows)
    return _aggregate(blocks, options.namespace)


def convert_contracts(units: Iterable[SourceUnit], options: ConverterOptions) -> str:
    """Render the service contracts of every unit."""
    emitter = DeclarationEmitter(options)
    blocks: list[list[str]] = []
    for unit in units:
        rows: list[str] = []
        for contract in unit.contracts:
            rows.extend(emitter.render_contract(contract, unit.relative_path))
        logger.debug("%s: %d contract(s)", unit.relative_path, len(unit.contracts))
        blocks.append(rows)
    return _aggregate(blocks, options.namespace)


# ################
# Implementation
# ################


def _aggregate(blocks: list[list[str]], namespace: str | None) -> str:
    """Join per-unit rows, dropping empty units and wrapping in ``declare module`` if requested."""
    if namespace:
        content = ["\n".join(_indent(row) for row in rows) for rows in blocks]
    else:
        content = ["\n".join(rows) for rows in blocks]
    content = [text for text in content if text]

    if namespace:
        return "\n".join([f"declare module {namespace} {{", *content, "}"])
    return "\n".join(content)


def _indent(row: str) -> str:
    return f"{INDENT}{row}" if row else row
