"""Core data models shared across docs-check components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

ISSUE_TYPES: Tuple[str, ...] = ("missing", "outdated", "unclear", "broken-link")
SEVERITIES: Tuple[str, ...] = ("high", "medium", "low")
EFFORTS: Tuple[str, ...] = ("high", "medium", "low")


@dataclass(frozen=True)
class RepositoryRef:
    """GitHub repository identity derived from a user-supplied URL."""

    owner: str
    repo: str
    url: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def to_dict(self) -> Dict[str, str]:
        return {"owner": self.owner, "repo": self.repo, "url": self.url}


@dataclass(frozen=True)
class DocumentationIssue:
    """A single documentation finding reported by the model."""

    type: str
    severity: str
    effort: str
    title: str
    description: str
    suggestion: str = ""
    file: Optional[str] = None
    line: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": self.type,
            "severity": self.severity,
            "effort": self.effort,
            "title": self.title,
            "description": self.description,
            "suggestion": self.suggestion,
        }
        if self.file is not None:
            payload["file"] = self.file
        if self.line is not None:
            payload["line"] = self.line
        return payload


@dataclass(frozen=True)
class AnalysisSummary:
    """Issue counts per severity bucket."""

    total_issues: int
    high_severity: int
    medium_severity: int
    low_severity: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalIssues": self.total_issues,
            "highSeverity": self.high_severity,
            "mediumSeverity": self.medium_severity,
            "lowSeverity": self.low_severity,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one documentation analysis run."""

    repository: RepositoryRef
    issues: Tuple[DocumentationIssue, ...]
    summary: AnalysisSummary
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "repository": self.repository.to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
            "summary": self.summary.to_dict(),
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class ActionResult:
    """Remote GitHub object created from an analysis."""

    type: str
    url: str
    number: int

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "url": self.url, "number": self.number}


__all__ = [
    "EFFORTS",
    "ISSUE_TYPES",
    "SEVERITIES",
    "ActionResult",
    "AnalysisResult",
    "AnalysisSummary",
    "DocumentationIssue",
    "RepositoryRef",
]
