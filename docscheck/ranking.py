"""Ordering and aggregation of documentation issues."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .models import AnalysisSummary, DocumentationIssue

_SEVERITY_ORDER = {"high": 0, "medium": 1, "low": 2}
_EFFORT_ORDER = {"low": 0, "medium": 1, "high": 2}


def _rank_key(issue: DocumentationIssue) -> tuple[int, int]:
    return (
        _SEVERITY_ORDER.get(issue.severity, len(_SEVERITY_ORDER)),
        _EFFORT_ORDER.get(issue.effort, len(_EFFORT_ORDER)),
    )


def rank_issues(issues: Iterable[DocumentationIssue]) -> List[DocumentationIssue]:
    """Most severe first; within a severity, cheapest fix first. Ties keep input order."""
    return sorted(issues, key=_rank_key)


def build_summary(issues: Sequence[DocumentationIssue]) -> AnalysisSummary:
    """Count issues overall and per severity bucket."""
    return AnalysisSummary(
        total_issues=len(issues),
        high_severity=sum(1 for issue in issues if issue.severity == "high"),
        medium_severity=sum(1 for issue in issues if issue.severity == "medium"),
        low_severity=sum(1 for issue in issues if issue.severity == "low"),
    )


__all__ = ["build_summary", "rank_issues"]
