# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tagged values produced from tokens by the line parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, model_validator

from templateparser.parser.lexer import TokenKind

# ###############
# Public Interface
# ###############

UINT64_MAX = 2**64 - 1

STRING_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.IDENTIFIER, TokenKind.QUOTED_STRING, TokenKind.MACRO},
)

INTEGER_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.UINT64, TokenKind.UINT32, TokenKind.UINT16, TokenKind.UINT8, TokenKind.REGISTER},
)

MISMATCHED_TYPE = "Mismatched object type"

T = TypeVar("T")


class ValueType(Enum):
    """The representation held by a TypedValue."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class AccessResult(Generic[T]):
    """Outcome of reading a TypedValue through a typed accessor.

    Unpacks as ``(ok, value, error)``.

    Attributes:
        ok: True if the requested representation matched.
        value: The held value, or the representation's zero value on failure.
        error: Empty on success, otherwise a description of the mismatch.
    """

    ok: bool
    value: T
    error: str = ""

    def __iter__(self):
        return iter((self.ok, self.value, self.error))


class TypedValue(BaseModel):
    """A string, unsigned 64-bit integer or boolean tagged with its token kind.

    ``value_type`` is the discriminant checked by the accessors. ``kind`` is
    the token kind the value came from: it must belong to the representation's
    kind set (``STRING_KINDS`` or ``INTEGER_KINDS``), or be None when the value
    was not produced from a token. Booleans never carry a kind.
    """

    value_type: ValueType = ValueType.STRING
    kind: TokenKind | None = None
    value: str | int | bool = ""
    descriptor: str = ""

    @model_validator(mode="after")
    def _check_representation(self) -> TypedValue:
        _check_consistent(self.value_type, self.kind, self.value)
        return self

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of_string(cls, value: str, descriptor: str = "", kind: TokenKind | None = TokenKind.IDENTIFIER) -> TypedValue:
        """Create a value holding a string."""
        obj = cls()
        obj.set_string(value, descriptor, kind)
        return obj

    @classmethod
    def of_integer(cls, value: int, descriptor: str = "", kind: TokenKind | None = TokenKind.UINT64) -> TypedValue:
        """Create a value holding an unsigned 64-bit integer."""
        obj = cls()
        obj.set_integer(value, descriptor, kind)
        return obj

    @classmethod
    def of_boolean(cls, value: bool, descriptor: str = "") -> TypedValue:
        """Create a value holding a boolean."""
        obj = cls()
        obj.set_boolean(value, descriptor)
        return obj

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_string(self, value: str, descriptor: str = "", kind: TokenKind | None = TokenKind.IDENTIFIER) -> None:
        """Overwrite this value with a string.

        Raises:
            ValueError: If value is not a str or kind is not a string kind.
        """
        self._assign(ValueType.STRING, kind, value, descriptor)

    def set_integer(self, value: int, descriptor: str = "", kind: TokenKind | None = TokenKind.UINT64) -> None:
        """Overwrite this value with an unsigned 64-bit integer.

        Raises:
            ValueError: If value is out of range or kind is not an integer kind.
        """
        self._assign(ValueType.INTEGER, kind, value, descriptor)

    def set_boolean(self, value: bool, descriptor: str = "") -> None:
        """Overwrite this value with a boolean."""
        self._assign(ValueType.BOOLEAN, None, value, descriptor)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_string(self) -> AccessResult[str]:
        """Return the held string, or a failed result if another representation is held."""
        if self.value_type is not ValueType.STRING:
            return AccessResult(False, "", self._mismatch(ValueType.STRING))
        return AccessResult(True, str(self.value))

    def get_integer(self) -> AccessResult[int]:
        """Return the held integer, or a failed result if another representation is held."""
        if self.value_type is not ValueType.INTEGER:
            return AccessResult(False, 0, self._mismatch(ValueType.INTEGER))
        return AccessResult(True, int(self.value))

    def get_boolean(self) -> AccessResult[bool]:
        """Return the held boolean, or a failed result if another representation is held."""
        if self.value_type is not ValueType.BOOLEAN:
            return AccessResult(False, False, self._mismatch(ValueType.BOOLEAN))
        return AccessResult(True, bool(self.value))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _assign(self, value_type: ValueType, kind: TokenKind | None, value: str | int | bool, descriptor: str) -> None:
        _check_consistent(value_type, kind, value)
        self.value_type = value_type
        self.kind = kind
        self.value = value
        self.descriptor = descriptor

    def _mismatch(self, requested: ValueType) -> str:
        return f"{MISMATCHED_TYPE}: holds {self.value_type.value}, requested {requested.value}"


# ################
# Implementation
# ################


def _check_consistent(value_type: ValueType, kind: TokenKind | None, value: object) -> None:
    """Raise ValueError unless value and kind fit the given representation."""
    if value_type is ValueType.STRING:
        if not isinstance(value, str):
            raise ValueError(f"String value expected, got {type(value).__name__}")
        if kind is not None and kind not in STRING_KINDS:
            raise ValueError(f"Token kind {kind.name} cannot hold a string")
    elif value_type is ValueType.INTEGER:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Integer value expected, got {type(value).__name__}")
        if not 0 <= value <= UINT64_MAX:
            raise ValueError(f"Integer value {value} does not fit in 64 unsigned bits")
        if kind is not None and kind not in INTEGER_KINDS:
            raise ValueError(f"Token kind {kind.name} cannot hold an integer")
    else:
        if not isinstance(value, bool):
            raise ValueError(f"Boolean value expected, got {type(value).__name__}")
        if kind is not None:
            raise ValueError("Boolean values do not carry a token kind")
