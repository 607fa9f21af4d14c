# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Object model for parsed line values."""

from templateparser.model.values import (
    INTEGER_KINDS,
    MISMATCHED_TYPE,
    STRING_KINDS,
    UINT64_MAX,
    AccessResult,
    TypedValue,
    ValueType,
)

__all__ = [
    "INTEGER_KINDS",
    "MISMATCHED_TYPE",
    "STRING_KINDS",
    "UINT64_MAX",
    "AccessResult",
    "TypedValue",
    "ValueType",
]
