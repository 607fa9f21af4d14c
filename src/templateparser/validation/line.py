# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line parsing and template validation.

A line is case-folded, stripped of its comment and tokenized. Each token
except UNKNOWN becomes a TypedValue, and the resulting sequence is checked
position by position against a caller-supplied template of expected kinds.

Every outcome is reported through a ParseResult; nothing here raises for
malformed input.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from templateparser.model.values import INTEGER_KINDS, UINT64_MAX, TypedValue
from templateparser.parser.lexer import REGISTER_MARKER, Token, TokenKind, strip_comments, token_name, tokenize

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

EMPTY_INPUT_MESSAGE = "No tokens found"
INVALID_NUMBER_MESSAGE = "Invalid number"
LENGTH_MISMATCH_MESSAGE = "Object list and template list length do not match"


@dataclass(frozen=True)
class TemplateEntry:
    """The expected kind of one position in a line.

    Attributes:
        expected_kind: Token kind the object at this position must have.
        error_label: Caller-supplied text appended to a type mismatch message.
    """

    expected_kind: TokenKind
    error_label: str = ""


Template = Sequence[TemplateEntry]


class ParseErrorKind(Enum):
    """Reasons a line can fail to parse."""

    EMPTY_INPUT = "empty-input"
    INVALID_NUMBER = "invalid-number"
    LENGTH_MISMATCH = "length-mismatch"
    TYPE_MISMATCH = "type-mismatch"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one line against a template.

    Unpacks as ``(objects, success, error)``.

    Attributes:
        objects: Values produced so far. Empty for EMPTY_INPUT and
            LENGTH_MISMATCH; partial or complete for the other failures.
        success: True if the line matched the template.
        error: Empty on success, otherwise a human-readable message.
        error_kind: The failure category, or None on success.
        position: Index into ``objects`` of the offending value for
            INVALID_NUMBER and TYPE_MISMATCH, otherwise None.
    """

    objects: list[TypedValue] = field(default_factory=list)
    success: bool = False
    error: str = ""
    error_kind: ParseErrorKind | None = None
    position: int | None = None

    def __iter__(self):
        return iter((self.objects, self.success, self.error))

    def __bool__(self) -> bool:
        return self.success


def parse_line(text: str, template: Template) -> ParseResult:
    """Parse a line of text and validate it against a template.

    Steps:

    1. Lower-case the text, drop everything from the first ``;`` and tokenize.
    2. Convert every non-UNKNOWN token into a TypedValue. Identifier, macro and
       quoted-string tokens keep their text; numeric tokens are read as base-16
       unsigned 64-bit integers (register tokens without their marker). The
       first token that cannot be read stops the parse.
    3. Require as many values as template entries.
    4. Require each value's kind to equal the expected kind at its position.

    Args:
        text: The raw line.
        template: Expected kinds, one entry per value.

    Returns:
        A :class:`ParseResult`; ``success`` is True only if every step passed.
    """
    tokens = tokenize(strip_comments(text.lower()))
    if not tokens:
        return _fail(text, ParseErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    objects: list[TypedValue] = []
    for token in tokens:
        if token.kind is TokenKind.UNKNOWN:
            continue
        if token.kind in INTEGER_KINDS:
            value = _parse_hex(token)
            if value is None:
                descriptor = f"{token.text!r} is not a valid hex number"
                objects.append(TypedValue.of_integer(0, descriptor, token.kind))
                return _fail(
                    text,
                    ParseErrorKind.INVALID_NUMBER,
                    INVALID_NUMBER_MESSAGE,
                    objects,
                    position=len(objects) - 1,
                )
            objects.append(TypedValue.of_integer(value, "", token.kind))
        else:
            objects.append(TypedValue.of_string(token.text, "", token.kind))

    if len(objects) != len(template):
        return _fail(text, ParseErrorKind.LENGTH_MISMATCH, LENGTH_MISMATCH_MESSAGE)

    for index, (obj, entry) in enumerate(zip(objects, template)):
        if obj.kind != entry.expected_kind:
            message = _type_mismatch_message(entry, obj)
            return _fail(text, ParseErrorKind.TYPE_MISMATCH, message, objects, position=index)

    return ParseResult(objects=objects, success=True)


# ################
# Implementation
# ################


def _parse_hex(token: Token) -> int | None:
    """Read a numeric token as an unsigned 64-bit integer, or None if it is not one."""
    digits = token.text
    if token.kind is TokenKind.REGISTER:
        digits = digits[len(REGISTER_MARKER) :]
    try:
        value = int(digits, 16)
    except ValueError:
        return None
    if value > UINT64_MAX:
        return None
    return value


def _type_mismatch_message(entry: TemplateEntry, obj: TypedValue) -> str:
    expected = entry.expected_kind
    actual = obj.kind if obj.kind is not None else TokenKind.UNKNOWN
    return (
        f"Expected type ({int(expected)}){token_name(expected)} "
        f"but got type ({int(actual)}){token_name(actual)}: {entry.error_label}"
    )


def _fail(
    text: str,
    kind: ParseErrorKind,
    message: str,
    objects: list[TypedValue] | None = None,
    position: int | None = None,
) -> ParseResult:
    logger.debug("Parse of %r failed (%s): %s", text, kind.value, message)
    return ParseResult(
        objects=objects if objects is not None else [],
        success=False,
        error=message,
        error_kind=kind,
        position=position,
    )
