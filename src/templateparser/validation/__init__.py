# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Template validation of parsed lines."""

from templateparser.validation.line import (
    ParseErrorKind,
    ParseResult,
    Template,
    TemplateEntry,
    parse_line,
)

__all__ = [
    "ParseErrorKind",
    "ParseResult",
    "Template",
    "TemplateEntry",
    "parse_line",
]
