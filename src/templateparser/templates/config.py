# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for line template files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from templateparser.parser.lexer import TokenKind, kind_from_name
from templateparser.validation.line import TemplateEntry

# ###############
# Public Interface
# ###############


class TemplateFileError(Exception):
    """Raised when a template file is invalid or cannot be loaded."""


@dataclass
class TemplateSet:
    """Named templates loaded from a template file.

    Attributes:
        templates: Mapping of template name to its ordered entries.
    """

    templates: dict[str, list[TemplateEntry]] = field(default_factory=dict)

    def names(self) -> list[str]:
        """Return the template names in file order."""
        return list(self.templates)

    def get(self, name: str) -> list[TemplateEntry]:
        """Return the template with the given name.

        Raises:
            TemplateFileError: If no template has that name.
        """
        if name not in self.templates:
            available = ", ".join(self.templates) or "<none>"
            raise TemplateFileError(f"Unknown template '{name}' (available: {available})")
        return self.templates[name]


def load_template_file(path: Path) -> TemplateSet:
    """Load and parse a YAML template file.

    Args:
        path: Path to the template file.

    Returns:
        A TemplateSet populated from the file.

    Raises:
        TemplateFileError: If the file cannot be read or its content is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise TemplateFileError(f"Template file not found: {path}") from None
    except OSError as exc:
        raise TemplateFileError(f"Cannot read template file: {exc}") from exc

    return parse_template_text(text, source_label=str(path))


def parse_template_text(text: str, source_label: str = "<string>") -> TemplateSet:
    """Parse template YAML text into a TemplateSet.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        TemplateFileError: If the YAML is invalid or its structure is wrong.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TemplateFileError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise TemplateFileError(f"{source_label}: template file must be a YAML mapping")
    if "templates" not in data:
        raise TemplateFileError(f"{source_label}: missing required field 'templates'")

    raw_templates = data["templates"]
    if not isinstance(raw_templates, dict):
        raise TemplateFileError(f"{source_label}: 'templates' must be a mapping of name to entry list")

    templates: dict[str, list[TemplateEntry]] = {}
    for name, raw_entries in raw_templates.items():
        location = f"{source_label}: templates.{name}"
        if not isinstance(raw_entries, list):
            raise TemplateFileError(f"{location} must be a list of entries")
        templates[str(name)] = [
            _parse_entry(entry, f"{location}[{index}]") for index, entry in enumerate(raw_entries)
        ]

    return TemplateSet(templates=templates)


# ################
# Implementation
# ################


def _require_string(mapping: dict[str, object], key: str, location: str) -> str:
    """Extract a required string field from a mapping, raising TemplateFileError if missing."""
    if key not in mapping:
        raise TemplateFileError(f"{location}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise TemplateFileError(f"{location}: '{key}' must be a string")
    return value


def _parse_entry(entry: object, location: str) -> TemplateEntry:
    """Parse a single template entry from the YAML list."""
    if not isinstance(entry, dict):
        raise TemplateFileError(f"{location} must be a YAML mapping")

    kind_name = _require_string(entry, "kind", location)
    label = _require_string(entry, "label", location)

    try:
        kind = kind_from_name(kind_name)
    except ValueError:
        raise TemplateFileError(f"{location}: unknown token kind '{kind_name}'") from None
    if kind is TokenKind.UNKNOWN:
        raise TemplateFileError(f"{location}: 'Unknown' cannot appear in a template")

    return TemplateEntry(expected_kind=kind, error_label=label)
