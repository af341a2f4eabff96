"""Tests for text, JSON and markdown rendering."""

from __future__ import annotations

import json

from docscheck.models import AnalysisResult, AnalysisSummary, DocumentationIssue, RepositoryRef
from docscheck.reporting.renderer import ReportRenderer, issue_location

REPOSITORY = RepositoryRef(owner="acme", repo="widgets", url="https://github.com/acme/widgets.git")


def _result(*issues: DocumentationIssue) -> AnalysisResult:
    return AnalysisResult(
        repository=REPOSITORY,
        issues=tuple(issues),
        summary=AnalysisSummary(
            total_issues=len(issues),
            high_severity=sum(1 for issue in issues if issue.severity == "high"),
            medium_severity=sum(1 for issue in issues if issue.severity == "medium"),
            low_severity=sum(1 for issue in issues if issue.severity == "low"),
        ),
        timestamp="2024-05-01T12:00:00Z",
    )


INSTALL = DocumentationIssue(
    type="missing",
    severity="high",
    effort="low",
    title="Installation steps missing",
    description="README never explains how to install.",
    suggestion="Add an Installation section",
    file="README.md",
    line=4,
)
TONE = DocumentationIssue(
    type="unclear",
    severity="low",
    effort="medium",
    title="Jargon in guide",
    description="Terms are not defined.",
)


def test_issue_location_formats() -> None:
    assert issue_location(INSTALL) == "README.md:4"
    assert issue_location(TONE) == ""
    assert issue_location(DocumentationIssue("missing", "low", "low", "t", "d", file="a.md")) == "a.md"


def test_text_report_lists_summary_and_issues() -> None:
    text = ReportRenderer().render_text(_result(INSTALL, TONE))

    lines = text.splitlines()
    assert lines[0] == "Documentation Analysis Results for acme/widgets"
    assert lines[1] == "-" * 50
    assert "Total Issues: 2" in lines
    assert "High Severity: 1" in lines
    assert "Low Severity: 1" in lines
    assert "[HIGH] [LOW EFFORT] Installation steps missing" in lines
    assert "File: README.md:4" in lines
    assert "Suggestion: Add an Installation section" in lines
    assert "[LOW] [MEDIUM EFFORT] Jargon in guide" in lines
    assert text.index("Installation steps missing") < text.index("Jargon in guide")


def test_text_report_without_issues_omits_section() -> None:
    text = ReportRenderer().render_text(_result())

    assert "Total Issues: 0" in text
    assert "Issues Found:" not in text


def test_json_report_matches_result_shape() -> None:
    data = json.loads(ReportRenderer.render_json(_result(INSTALL)))

    assert set(data) == {"repository", "issues", "summary", "timestamp"}
    assert data["issues"][0]["line"] == 4
    assert data["summary"]["highSeverity"] == 1


def test_issue_body_includes_details() -> None:
    body = ReportRenderer().render_issue_body(INSTALL, REPOSITORY, "2024-05-01T12:00:00Z")

    assert "**Severity:** high" in body
    assert "`README.md:4`" in body
    assert "README never explains how to install." in body
    assert "### Suggested fix" in body
    assert "acme/widgets" in body


def test_issue_body_skips_optional_sections() -> None:
    body = ReportRenderer().render_issue_body(TONE, REPOSITORY, "ts")

    assert "**File:**" not in body
    assert "Suggested fix" not in body


def test_review_document_groups_by_severity() -> None:
    document = ReportRenderer().render_review_document(_result(INSTALL, TONE))

    assert document.startswith("# Documentation Review")
    assert "| **Total** | **2** |" in document
    assert "## High severity" in document
    assert "## Low severity" in document
    assert "## Medium severity" not in document
    assert "- [ ] **Installation steps missing**" in document
    assert document.index("## High severity") < document.index("## Low severity")


def test_pull_request_body_mentions_review_file() -> None:
    body = ReportRenderer().render_pull_request_body(_result(INSTALL), "DOCUMENTATION_REVIEW.md")

    assert "`DOCUMENTATION_REVIEW.md`" in body
    assert "1 documentation issue found" in body
    assert "- High severity: 1" in body


def test_custom_templates_directory_overrides_defaults(tmp_path) -> None:
    (tmp_path / "report.txt.j2").write_text(
        "{{ repository.full_name }}: {{ summary.total_issues }}\n", encoding="utf-8"
    )

    text = ReportRenderer(templates_dir=tmp_path).render_text(_result(TONE))

    assert text == "acme/widgets: 1\n"
