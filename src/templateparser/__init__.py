# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer and template validator for line-oriented assembler-like input."""

from templateparser.model.values import AccessResult, TypedValue, ValueType
from templateparser.parser.lexer import Token, TokenKind, strip_comments, token_name, tokenize
from templateparser.validation.line import (
    ParseErrorKind,
    ParseResult,
    Template,
    TemplateEntry,
    parse_line,
)

__version__ = "0.1.0"

__all__ = [
    "AccessResult",
    "ParseErrorKind",
    "ParseResult",
    "Template",
    "TemplateEntry",
    "Token",
    "TokenKind",
    "TypedValue",
    "ValueType",
    "parse_line",
    "strip_comments",
    "token_name",
    "tokenize",
]
