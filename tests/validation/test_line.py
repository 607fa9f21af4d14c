# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for line parsing and template validation."""

import logging

import pytest

from templateparser.model.values import ValueType
from templateparser.parser.lexer import TokenKind
from templateparser.validation.line import (
    EMPTY_INPUT_MESSAGE,
    INVALID_NUMBER_MESSAGE,
    LENGTH_MISMATCH_MESSAGE,
    ParseErrorKind,
    ParseResult,
    TemplateEntry,
    parse_line,
)

# ###############
# Test Helpers
# ###############


def _template(*kinds: TokenKind) -> list[TemplateEntry]:
    """Create a template whose labels name the position."""
    return [TemplateEntry(kind, f"position {index}") for index, kind in enumerate(kinds)]


def _mov64_template() -> list[TemplateEntry]:
    """The three-operand register move template."""
    return [
        TemplateEntry(TokenKind.IDENTIFIER, "Expected an identifier"),
        TemplateEntry(TokenKind.REGISTER, "Expected a destination register"),
        TemplateEntry(TokenKind.REGISTER, "Expected a source register"),
    ]


def _kinds(result: ParseResult) -> list[TokenKind | None]:
    return [obj.kind for obj in result.objects]


# ###############
# Successful Parses
# ###############


class TestSuccess:
    def test_register_move(self) -> None:
        result = parse_line("mov64 r10 r11", _mov64_template())

        assert result.success
        assert result.error == ""
        assert result.error_kind is None
        assert result.position is None
        assert _kinds(result) == [TokenKind.IDENTIFIER, TokenKind.REGISTER, TokenKind.REGISTER]
        assert result.objects[0].get_string().value == "mov64"
        assert result.objects[1].get_integer().value == 0x10
        assert result.objects[2].get_integer().value == 0x11

    def test_result_unpacks_as_triple(self) -> None:
        objects, ok, error = parse_line("mov64 r10 r11", _mov64_template())
        assert ok is True
        assert error == ""
        assert len(objects) == 3

    def test_result_truthiness_follows_success(self) -> None:
        assert parse_line("mov64 r10 r11", _mov64_template())
        assert not parse_line("mov64 bob alice", _mov64_template())

    def test_input_is_case_folded(self) -> None:
        result = parse_line("MOV64 R10 R1F", _mov64_template())
        assert result.success
        assert result.objects[0].get_string().value == "mov64"
        assert result.objects[2].get_integer().value == 0x1F

    def test_trailing_comment_is_ignored(self) -> None:
        assert parse_line("mov64 r10 r11 ; copy r11 into r10", _mov64_template()).success

    def test_separators_are_ignored(self) -> None:
        assert parse_line("\tmov64\tr10,  r11", _mov64_template()).success

    def test_hex_widths(self) -> None:
        template = _template(
            TokenKind.IDENTIFIER, TokenKind.UINT8, TokenKind.UINT16, TokenKind.UINT32, TokenKind.UINT64
        )
        result = parse_line("ld 1f 123 12345 123456789", template)
        assert result.success
        assert [obj.get_integer().value for obj in result.objects[1:]] == [0x1F, 0x123, 0x12345, 0x123456789]

    def test_sixteen_digit_run_is_uint64_unless_it_starts_with_letters(self) -> None:
        result = parse_line("ffffffffffffffff", [])
        # "ff..." starts with two letters and is therefore an identifier.
        assert result.error_kind is ParseErrorKind.LENGTH_MISMATCH
        result = parse_line("0fffffffffffffff", _template(TokenKind.UINT64))
        assert result.objects[0].get_integer().value == 0x0FFFFFFFFFFFFFFF

    def test_largest_register(self) -> None:
        # A leading zero keeps the marker and payload from reading as an identifier.
        result = parse_line("r0" + "f" * 16, _template(TokenKind.REGISTER))
        assert result.success
        assert result.objects[0].get_integer().value == 2**64 - 1

    def test_quoted_string_keeps_quotes_and_is_lowercased(self) -> None:
        result = parse_line('print "Hello World"', _template(TokenKind.IDENTIFIER, TokenKind.QUOTED_STRING))
        assert result.success
        assert result.objects[1].get_string().value == '"hello world"'

    def test_macro(self) -> None:
        result = parse_line("call @Target", _template(TokenKind.IDENTIFIER, TokenKind.MACRO))
        assert result.success
        assert result.objects[1].get_string().value == "@target"
        assert result.objects[1].value_type is ValueType.STRING

    def test_values_have_empty_descriptors(self) -> None:
        result = parse_line("mov64 r10 r11", _mov64_template())
        assert all(obj.descriptor == "" for obj in result.objects)

    def test_whitespace_only_line_matches_empty_template(self) -> None:
        result = parse_line("   ", [])
        assert result.success
        assert result.objects == []


# ###############
# Empty Input
# ###############


class TestEmptyInput:
    @pytest.mark.parametrize("line", ["", "; only a comment", ";", ";mov64 r10 r11"])
    def test_no_tokens(self, line: str) -> None:
        result = parse_line(line, _mov64_template())
        assert not result.success
        assert result.error_kind is ParseErrorKind.EMPTY_INPUT
        assert result.error == EMPTY_INPUT_MESSAGE
        assert result.objects == []

    def test_empty_input_fails_even_for_empty_template(self) -> None:
        assert parse_line("", []).error_kind is ParseErrorKind.EMPTY_INPUT


# ###############
# Invalid Numbers
# ###############


class TestInvalidNumber:
    def test_bare_register_marker(self) -> None:
        result = parse_line("mov64 r r11", _mov64_template())

        assert not result.success
        assert result.error_kind is ParseErrorKind.INVALID_NUMBER
        assert result.error == INVALID_NUMBER_MESSAGE
        assert result.position == 1

    def test_processing_stops_at_failing_token(self) -> None:
        result = parse_line("mov64 r r11", _mov64_template())
        # The source register after the failure is never converted.
        assert _kinds(result) == [TokenKind.IDENTIFIER, TokenKind.REGISTER]

    def test_failing_object_is_zero_with_descriptor(self) -> None:
        failed = parse_line("mov64 r r11", _mov64_template()).objects[-1]
        assert failed.get_integer().value == 0
        assert "not a valid hex number" in failed.descriptor

    def test_register_wider_than_64_bits(self) -> None:
        result = parse_line("r1" + "0" * 16, _template(TokenKind.REGISTER))
        assert result.error_kind is ParseErrorKind.INVALID_NUMBER
        assert result.position == 0

    def test_invalid_number_reported_before_length_check(self) -> None:
        result = parse_line("r", _mov64_template())
        assert result.error_kind is ParseErrorKind.INVALID_NUMBER


# ###############
# Length Mismatch
# ###############


class TestLengthMismatch:
    def test_too_few_objects(self) -> None:
        result = parse_line("mov64 r10", _mov64_template())
        assert not result.success
        assert result.error_kind is ParseErrorKind.LENGTH_MISMATCH
        assert result.error == LENGTH_MISMATCH_MESSAGE
        assert result.objects == []
        assert result.position is None

    def test_too_many_objects(self) -> None:
        result = parse_line("mov64 r10 r11 r12", _mov64_template())
        assert result.error_kind is ParseErrorKind.LENGTH_MISMATCH
        assert result.objects == []

    def test_missing_separator_merges_tokens(self) -> None:
        # "mov64r10" is a single identifier.
        result = parse_line("mov64r10 r11", _mov64_template())
        assert result.error_kind is ParseErrorKind.LENGTH_MISMATCH

    def test_whitespace_only_line_against_non_empty_template(self) -> None:
        result = parse_line("  \t", _mov64_template())
        assert result.error_kind is ParseErrorKind.LENGTH_MISMATCH


# ###############
# Type Mismatch
# ###############


class TestTypeMismatch:
    def test_names_are_not_registers(self) -> None:
        result = parse_line("mov64 bob alice", _mov64_template())

        assert not result.success
        assert result.error_kind is ParseErrorKind.TYPE_MISMATCH
        assert result.position == 1
        assert result.error == (
            "Expected type (6)Register but got type (0)Identifier: Expected a destination register"
        )

    def test_register_marker_followed_by_letter_is_an_identifier(self) -> None:
        result = parse_line("mov64 ra rb", _mov64_template())
        assert result.error_kind is ParseErrorKind.TYPE_MISMATCH
        assert result.position == 1
        assert _kinds(result) == [TokenKind.IDENTIFIER] * 3
        assert result.error == (
            "Expected type (6)Register but got type (0)Identifier: Expected a destination register"
        )

    def test_objects_are_kept_for_diagnostics(self) -> None:
        result = parse_line("mov64 bob alice", _mov64_template())
        assert _kinds(result) == [TokenKind.IDENTIFIER] * 3
        assert [obj.get_string().value for obj in result.objects] == ["mov64", "bob", "alice"]

    def test_first_mismatch_is_reported(self) -> None:
        result = parse_line("mov64 r10 alice", _mov64_template())
        assert result.position == 2
        assert result.error.endswith(": Expected a source register")

    def test_comparison_is_positional(self) -> None:
        template = _template(TokenKind.REGISTER, TokenKind.IDENTIFIER, TokenKind.REGISTER)
        result = parse_line("mov64 r10 r11", template)
        assert result.position == 0
        assert result.error == "Expected type (6)Register but got type (0)Identifier: position 0"

    def test_two_letter_hex_is_an_identifier(self) -> None:
        template = [
            TemplateEntry(TokenKind.IDENTIFIER, "Expected an identifier"),
            TemplateEntry(TokenKind.UINT8, "Expected a byte"),
        ]
        result = parse_line("ld ff", template)
        assert result.error == "Expected type (5)Uint8 but got type (0)Identifier: Expected a byte"
        assert parse_line("ld 0f", template).success

    def test_wider_hex_does_not_match_narrower_kind(self) -> None:
        result = parse_line("ld 0ff", _template(TokenKind.IDENTIFIER, TokenKind.UINT8))
        assert result.error.startswith("Expected type (5)Uint8 but got type (4)Uint16")


# ###############
# Logging
# ###############


def test_failures_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="templateparser.validation.line")
    parse_line("; nothing", _mov64_template())
    assert "empty-input" in caplog.text
    assert EMPTY_INPUT_MESSAGE in caplog.text


def test_success_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="templateparser.validation.line")
    parse_line("mov64 r10 r11", _mov64_template())
    assert caplog.records == []
