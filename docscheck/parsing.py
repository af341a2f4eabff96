"""Extraction and validation of structured issues from model output."""

from __future__ import annotations

import json
import re
from typing import Any, List, Mapping, Optional

from .logging import get_logger
from .models import ISSUE_TYPES, SEVERITIES, DocumentationIssue

_FENCED_JSON_PATTERN = re.compile(r"```json\n([\s\S]*?)\n```")
# Matches only backslash-escaped brackets such as ``\[ ... \\]``, so bare
# arrays outside a fenced block still fall through to the fallback issue.
_ESCAPED_ARRAY_PATTERN = re.compile(r"\\\[[\\sS]*\\\\]")

_REQUIRED_FIELDS = ("type", "severity", "effort", "title", "description")

FALLBACK_TITLE = "Analysis completed with parsing issues"
FALLBACK_SUGGESTION = "Manual review of documentation recommended"


class ResponseParseError(ValueError):
    """Raised internally when no JSON issue array can be recovered."""


class ResponseParser:
    """Turns free-form model output into validated documentation issues.

    Elements that fail validation are dropped one by one; only a response with
    no recoverable JSON array collapses into a single fallback issue.
    """

    def __init__(self) -> None:
        self.logger = get_logger("parser")

    def parse(self, response: str) -> List[DocumentationIssue]:
        try:
            payload = self._extract(response)
        except (ResponseParseError, ValueError, RecursionError) as exc:
            self.logger.warning(
                "Failed to parse model response as JSON, creating fallback issue: %s", exc
            )
            return [build_fallback_issue(response)]

        issues = [issue for issue in (_to_issue(item) for item in payload) if issue is not None]
        dropped = len(payload) - len(issues)
        if dropped:
            self.logger.debug("Dropped %d malformed issue entries", dropped)
        return issues

    @staticmethod
    def _extract(response: str) -> list:
        fenced = _FENCED_JSON_PATTERN.search(response)
        if fenced:
            candidate = fenced.group(1)
        else:
            escaped = _ESCAPED_ARRAY_PATTERN.search(response)
            if not escaped:
                raise ResponseParseError("No JSON array found in model response")
            candidate = escaped.group(0)

        payload = json.loads(candidate)
        if not isinstance(payload, list):
            raise ResponseParseError(
                f"Expected a JSON array of issues, got {type(payload).__name__}"
            )
        return payload


def build_fallback_issue(response: str) -> DocumentationIssue:
    """Return the advisory issue used when the response has no usable structure."""
    return DocumentationIssue(
        type="unclear",
        severity="medium",
        effort="medium",
        title=FALLBACK_TITLE,
        description=(
            "The model provided an analysis but the response format was unexpected. "
            f"Raw response: {response}"
        ),
        suggestion=FALLBACK_SUGGESTION,
    )


def _to_issue(item: Any) -> Optional[DocumentationIssue]:
    if not isinstance(item, Mapping):
        return None
    if not all(item.get(name) for name in _REQUIRED_FIELDS):
        return None
    if item["type"] not in ISSUE_TYPES or item["severity"] not in SEVERITIES:
        return None

    file = item.get("file")
    line = item.get("line")
    suggestion = item.get("suggestion")
    return DocumentationIssue(
        type=item["type"],
        severity=item["severity"],
        effort=str(item["effort"]),
        title=str(item["title"]),
        description=str(item["description"]),
        suggestion=str(suggestion) if suggestion else "",
        file=str(file) if file else None,
        line=line if isinstance(line, int) and not isinstance(line, bool) and line > 0 else None,
    )


__all__ = ["FALLBACK_SUGGESTION", "FALLBACK_TITLE", "ResponseParser", "build_fallback_issue"]
