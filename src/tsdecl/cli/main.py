# Copyright 2026 tsdecl Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the tsdecl command-line interface."""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from yachalk import chalk

from tsdecl.config.options import ConverterOptions, OptionsError, load_options
from tsdecl.extraction.artifact import ArtifactError, read_units
from tsdecl.model.entities import SourceUnit
from tsdecl.translation.converter import convert_contracts, convert_models

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the tsdecl CLI."""
    parser = argparse.ArgumentParser(
        prog="tsdecl",
        description="tsdecl - TypeScript declarations from C# models and service contracts",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # models subcommand
    models_parser = subparsers.add_parser(
        "models",
        help="Generate interfaces and enums from extracted models",
        description="Translate the models and enums of a declaration file into TypeScript.",
    )
    _add_conversion_arguments(models_parser)

    # contracts subcommand
    contracts_parser = subparsers.add_parser(
        "contracts",
        help="Generate interfaces from extracted service contracts",
        description="Translate the service contracts of a declaration file into TypeScript.",
    )
    _add_conversion_arguments(contracts_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    _configure_logging(verbose=args.verbose)
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_Converter = Callable[[Sequence[SourceUnit], ConverterOptions], str]


def _add_conversion_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        help="JSON declaration file produced by the C# extractor",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Options file in YAML or JSON (default: built-in defaults)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="File to write the declarations to (default: stdout)",
    )
    parser.add_argument(
        "--base-dir",
        help="Directory that file path comments are relative to (default: current directory)",
    )


def _configure_logging(*, verbose: bool) -> None:
    """Send tsdecl log records to stderr, at debug level when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("tsdecl")
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[tsdecl] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "models":
        return _cmd_convert(args, convert_models)
    if args.command == "contracts":
        return _cmd_convert(args, convert_contracts)
    return 0


def _error(message: str) -> None:
    print(chalk.red(f"Error: {message}"), file=sys.stderr)


def _cmd_convert(args: argparse.Namespace, convert: _Converter) -> int:
    """Handle the models and contracts subcommands."""
    input_path = Path(args.input)
    base_dir = Path(args.base_dir).resolve() if args.base_dir else None

    if base_dir is not None and not base_dir.is_dir():
        _error(f"base directory '{base_dir}' does not exist.")
        return 1

    try:
        options = load_options(Path(args.config)) if args.config else ConverterOptions()
    except OptionsError as exc:
        _error(str(exc))
        return 1

    try:
        units = read_units(input_path, base_dir)
    except ArtifactError as exc:
        _error(str(exc))
        return 1

    text = convert(units, options)

    if args.output is None:
        print(text)
        return 0

    output_path = Path(args.output)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        _error(f"cannot write '{output_path}': {exc}")
        return 1

    print(f"Wrote {len(units)} file(s) to '{output_path}'.")
    return 0
