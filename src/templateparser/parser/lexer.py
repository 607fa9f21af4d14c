# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for single lines of assembler-like text.

Converts one line into a sequence of tokens by trying a fixed, ordered list
of anchored patterns at each scan position. The first pattern that matches
wins, regardless of how long a later pattern's match would have been.
"""

import enum
import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

REGISTER_MARKER = "r"
MACRO_MARKER = "@"
COMMENT_DELIMITER = ";"


class TokenKind(enum.IntEnum):
    """All token kinds produced by the tokenizer.

    The ordinals are stable and appear in diagnostic messages.
    """

    IDENTIFIER = 0
    QUOTED_STRING = 1
    UINT64 = 2
    UINT32 = 3
    UINT16 = 4
    UINT8 = 5
    REGISTER = 6
    MACRO = 7
    UNKNOWN = 255


# Display names used for diagnostics. Must cover every TokenKind.
TOKEN_NAMES: dict[TokenKind, str] = {
    TokenKind.IDENTIFIER: "Identifier",
    TokenKind.QUOTED_STRING: "QuotedString",
    TokenKind.UINT64: "Uint64",
    TokenKind.UINT32: "Uint32",
    TokenKind.UINT16: "Uint16",
    TokenKind.UINT8: "Uint8",
    TokenKind.REGISTER: "Register",
    TokenKind.MACRO: "Macro",
    TokenKind.UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class Token:
    """A classified substring of the input line.

    Attributes:
        kind: The kind of token.
        text: The exact matched text, including quotes and marker characters.
    """

    kind: TokenKind
    text: str


# Ordered by priority, most specific first. Reordering changes how
# ambiguous input (e.g. "abc", which is both an identifier and a hex run)
# is classified.
PATTERNS: tuple[tuple[re.Pattern[str], TokenKind], ...] = (
    (re.compile(r'"[^"]*"'), TokenKind.QUOTED_STRING),
    (re.compile(re.escape(MACRO_MARKER) + r"[a-zA-Z][a-zA-Z0-9_]*"), TokenKind.MACRO),
    (re.compile(r"[a-zA-Z][a-zA-Z][a-zA-Z0-9_]*"), TokenKind.IDENTIFIER),
    (re.compile(r"[0-9a-fA-F]{9,16}"), TokenKind.UINT64),
    (re.compile(r"[0-9a-fA-F]{5,8}"), TokenKind.UINT32),
    (re.compile(r"[0-9a-fA-F]{3,4}"), TokenKind.UINT16),
    (re.compile(r"[0-9a-fA-F]{1,2}"), TokenKind.UINT8),
    (re.compile(re.escape(REGISTER_MARKER) + r"[0-9a-fA-F]*"), TokenKind.REGISTER),
)


def token_name(kind: TokenKind) -> str:
    """Return the display name of a token kind."""
    return TOKEN_NAMES[kind]


def kind_from_name(name: str) -> TokenKind:
    """Look up a token kind by its display name.

    Raises:
        ValueError: If no kind has the given display name.
    """
    for kind, display in TOKEN_NAMES.items():
        if display == name:
            return kind
    raise ValueError(f"Unknown token kind name: {name!r}")


def strip_comments(text: str) -> str:
    """Return the part of text before the first comment delimiter."""
    pos = text.find(COMMENT_DELIMITER)
    if pos > -1:
        return text[:pos]
    return text


def tokenize(line: str) -> list[Token]:
    """Tokenize a single line of text.

    Every character of the input ends up in exactly one token. Characters
    that no pattern accepts (including whitespace) become single-character
    UNKNOWN tokens, so the scan always advances and always terminates.

    Args:
        line: The text to scan. Comments are not stripped here.

    Returns:
        The tokens in left-to-right order.
    """
    tokens: list[Token] = []
    offset = 0
    length = len(line)

    while offset < length:
        token = _match_at(line, offset)
        tokens.append(token)
        offset += len(token.text)

    return tokens


# ################
# Implementation
# ################


def _match_at(line: str, offset: int) -> Token:
    """Return the token starting at offset, falling back to a one-character UNKNOWN."""
    for pattern, kind in PATTERNS:
        match = pattern.match(line, offset)
        # An empty match must not be emitted: the scan would not advance.
        if match is not None and match.end() > offset:
            return Token(kind, match.group(0))
    return Token(TokenKind.UNKNOWN, line[offset])
