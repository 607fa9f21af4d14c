# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model, comment stripping and the line tokenizer."""

from templateparser.parser.lexer import (
    COMMENT_DELIMITER,
    MACRO_MARKER,
    PATTERNS,
    REGISTER_MARKER,
    TOKEN_NAMES,
    Token,
    TokenKind,
    kind_from_name,
    strip_comments,
    token_name,
    tokenize,
)

__all__ = [
    "COMMENT_DELIMITER",
    "MACRO_MARKER",
    "PATTERNS",
    "REGISTER_MARKER",
    "TOKEN_NAMES",
    "Token",
    "TokenKind",
    "kind_from_name",
    "strip_comments",
    "token_name",
    "tokenize",
]
