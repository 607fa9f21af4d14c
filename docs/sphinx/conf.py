# Copyright 2026 TemplateParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for TemplateParser documentation."""

project = "TemplateParser"
author = "TemplateParser Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
