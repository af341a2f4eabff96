"""Shared constants for analysis prompting."""

from __future__ import annotations

DOC_CHAR_BUDGET = 2000
DESCRIPTOR_CHAR_BUDGET = 1000
CODE_LISTING_LIMIT = 30
TRUNCATION_MARKER = "...[truncated]"

ISSUE_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Missing", "Important documentation that should exist but doesn't"),
    ("Outdated", "Documentation that doesn't match the current code"),
    ("Unclear", "Documentation that is confusing or poorly written"),
    ("Broken Links", "Links that don't work or point to wrong locations"),
)

ISSUE_FIELDS: tuple[str, ...] = (
    "Type (missing/outdated/unclear/broken-link)",
    "Severity (high/medium/low)",
    "Effort (high/medium/low) to fix",
    "Title (brief description)",
    "Description (detailed explanation)",
    "File (if applicable)",
    "Line number (if applicable)",
    "Suggestion (how to fix it)",
)

EXAMPLE_ISSUE_JSON = """[
  {
    "type": "missing",
    "severity": "high",
    "effort": "low",
    "title": "Missing installation instructions",
    "description": "The README lacks clear installation instructions for new users",
    "file": "README.md",
    "suggestion": "Add a section with step-by-step installation instructions"
  }
]"""


__all__ = [
    "CODE_LISTING_LIMIT",
    "DESCRIPTOR_CHAR_BUDGET",
    "DOC_CHAR_BUDGET",
    "EXAMPLE_ISSUE_JSON",
    "ISSUE_CATEGORIES",
    "ISSUE_FIELDS",
    "TRUNCATION_MARKER",
]
