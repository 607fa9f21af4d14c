# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading line templates from YAML files."""

from templateparser.templates.config import (
    TemplateFileError,
    TemplateSet,
    load_template_file,
    parse_template_text,
)

__all__ = [
    "TemplateFileError",
    "TemplateSet",
    "load_template_file",
    "parse_template_text",
]
