"""Rendering of analysis results for terminals, JSON consumers and GitHub."""

from __future__ import annotations

import json
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..models import AnalysisResult, DocumentationIssue, RepositoryRef

_TEMPLATES_DIR = Path(__file__).with_name("templates")


def issue_location(issue: DocumentationIssue) -> str:
    """Return ``file`` or ``file:line`` for an issue, or an empty string."""
    if not issue.file:
        return ""
    if issue.line:
        return f"{issue.file}:{issue.line}"
    return issue.file


class ReportRenderer:
    """Renders results through the Jinja2 templates shipped with the package."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories = [str(templates_dir)] if templates_dir else []
        directories.append(str(_TEMPLATES_DIR))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters["location"] = issue_location

    def render_text(self, result: AnalysisResult) -> str:
        return self._render("report.txt.j2", result)

    @staticmethod
    def render_json(result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2)

    def render_issue_body(
        self,
        issue: DocumentationIssue,
        repository: RepositoryRef,
        timestamp: str,
    ) -> str:
        template = self._env.get_template("issue_body.md.j2")
        return template.render(issue=issue, repository=repository, timestamp=timestamp)

    def render_review_document(self, result: AnalysisResult) -> str:
        return self._render("review.md.j2", result)

    def render_pull_request_body(self, result: AnalysisResult, review_path: str) -> str:
        return self._render("pr_body.md.j2", result, review_path=review_path)

    def _render(self, template_name: str, result: AnalysisResult, **extra: object) -> str:
        template = self._env.get_template(template_name)
        return template.render(
            repository=result.repository,
            issues=result.issues,
            summary=result.summary,
            timestamp=result.timestamp,
            **extra,
        )


__all__ = ["ReportRenderer", "issue_location"]
