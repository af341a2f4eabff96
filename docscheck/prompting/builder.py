"""Builds the documentation analysis prompt for the model."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from ..classifier import is_project_descriptor
from .constants import (
    CODE_LISTING_LIMIT,
    DESCRIPTOR_CHAR_BUDGET,
    DOC_CHAR_BUDGET,
    EXAMPLE_ISSUE_JSON,
    ISSUE_CATEGORIES,
    ISSUE_FIELDS,
    TRUNCATION_MARKER,
)


class PromptBuilder:
    """Renders documentation content and project structure into one instruction text.

    Output depends only on the arguments, so identical inputs always produce
    byte-identical prompts.
    """

    PREAMBLE = (
        "You are a documentation analysis expert. Please analyze the following "
        "repository's documentation for completeness, accuracy, and clarity."
    )

    CLOSING_NOTE = (
        "Focus on the most important issues that would help users understand and use "
        "this project effectively."
    )

    def __init__(
        self,
        *,
        doc_char_budget: int = DOC_CHAR_BUDGET,
        descriptor_char_budget: int = DESCRIPTOR_CHAR_BUDGET,
        code_listing_limit: int = CODE_LISTING_LIMIT,
    ) -> None:
        self.doc_char_budget = doc_char_budget
        self.descriptor_char_budget = descriptor_char_budget
        self.code_listing_limit = code_listing_limit

    def build(self, documentation: Mapping[str, str], code_structure: str) -> str:
        """Return the analysis prompt for the given documentation and structure summary."""
        parts: List[str] = [
            self.PREAMBLE,
            "",
            "Here is the project structure:",
            code_structure,
            "",
            "Here are the documentation files:",
        ]
        for path, content in documentation.items():
            parts.append("")
            parts.append(f"--- {path} ---")
            parts.append(self._truncate(content))
        parts.append("")
        parts.append(self._instructions())
        return "\n".join(parts)

    def build_code_structure(
        self,
        descriptors: Mapping[str, str],
        code_files: Sequence[str],
    ) -> str:
        """Summarize project descriptors and a bounded listing of code files."""
        lines: List[str] = ["Project Structure:"]
        for path, content in descriptors.items():
            if not is_project_descriptor(path):
                continue
            lines.append("")
            lines.append(f"{path}:")
            lines.append(f"{content[: self.descriptor_char_budget]}...")
        lines.append("")
        lines.append("Code Files:")
        lines.extend(code_files[: self.code_listing_limit])
        return "\n".join(lines)

    def _truncate(self, content: str) -> str:
        if len(content) <= self.doc_char_budget:
            return content
        return content[: self.doc_char_budget] + TRUNCATION_MARKER

    @classmethod
    def _instructions(cls) -> str:
        lines: List[str] = [
            "",
            "Please analyze the documentation and identify issues in the following categories:",
        ]
        for index, (name, meaning) in enumerate(ISSUE_CATEGORIES, start=1):
            lines.append(f"{index}. **{name}**: {meaning}")
        lines.append("")
        lines.append("For each issue, provide:")
        lines.extend(f"- {field}" for field in ISSUE_FIELDS)
        lines.append("")
        lines.append("Please return your analysis as a JSON array of issues in this exact format:")
        lines.append(EXAMPLE_ISSUE_JSON)
        lines.append("")
        lines.append(cls.CLOSING_NOTE)
        return "\n".join(lines)


__all__ = ["PromptBuilder"]
