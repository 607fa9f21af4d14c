# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the TemplateParser command-line interface."""

import argparse
import logging
import sys
from pathlib import Path
from typing import cast

from yachalk import chalk

from templateparser.model.values import TypedValue
from templateparser.parser.lexer import TokenKind, strip_comments, token_name
from templateparser.templates.config import TemplateFileError, load_template_file
from templateparser.validation.line import TemplateEntry, parse_line

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the TemplateParser CLI."""
    parser = argparse.ArgumentParser(
        prog="templateparser",
        description="TemplateParser: tokenize assembler-like lines and validate them against templates",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a single line against a template",
        description="Tokenize one line, validate it against a named template and print the values.",
    )
    parse_parser.add_argument("template_file", help="YAML file defining the templates")
    parse_parser.add_argument("template", help="Name of the template to validate against")
    parse_parser.add_argument("line", help="The line of text to parse")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check every line of a source file against a template",
        description=(
            "Parse each line of a source file independently against a named template. "
            "Lines that are empty once comments are removed are skipped."
        ),
    )
    check_parser.add_argument("template_file", help="YAML file defining the templates")
    check_parser.add_argument("template", help="Name of the template to validate against")
    check_parser.add_argument("source", help="Text file whose lines are checked")

    args = parser.parse_args()
    _configure_logging(args.verbose)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "parse":
        return _cmd_parse(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _load_template(template_file: str, name: str) -> list[TemplateEntry] | None:
    """Load a named template, printing the error and returning None on failure."""
    try:
        return load_template_file(Path(template_file)).get(name)
    except TemplateFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    template = _load_template(args.template_file, args.template)
    if template is None:
        return 1

    result = parse_line(args.line, template)
    if not result.success:
        print(chalk.red(f"Failed parse of '{args.line}'"))
        print(result.error)
        return 1

    print(chalk.green(f"Successful parse of '{args.line}'"))
    for index, obj in enumerate(result.objects):
        print(f"  {index} {_format_object(obj)}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    template = _load_template(args.template_file, args.template)
    if template is None:
        return 1

    source = Path(args.source)
    try:
        lines = source.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        print(f"Error: source file '{source}' does not exist.", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: cannot read source file: {exc}", file=sys.stderr)
        return 1

    checked = 0
    failed = 0
    for line_number, line in enumerate(lines, start=1):
        if not strip_comments(line).strip():
            continue
        checked += 1
        result = parse_line(line, template)
        if result.success:
            print(chalk.green(f"  PASS  {source}:{line_number}: {line.strip()}"))
        else:
            failed += 1
            print(chalk.red(f"  FAIL  {source}:{line_number}: {line.strip()}"))
            print(f"        {result.error}")

    logger.debug("Checked %d line(s) of %s, %d failed", checked, source, failed)
    summary = f"{checked} line(s) checked, {failed} failed."
    print(chalk.red(summary) if failed else chalk.green(summary))
    return 1 if failed else 0


def _format_object(obj: TypedValue) -> str:
    """Render a value from parse_line, which always tags it with its token kind."""
    kind = cast(TokenKind, obj.kind)
    ok, number, _ = obj.get_integer()
    if ok:
        return f"{token_name(kind)} 0x{number:x}"
    text = obj.get_string().value
    if kind is TokenKind.QUOTED_STRING:
        return f"{token_name(kind)} {text}"
    return f"{token_name(kind)} {text!r}"
