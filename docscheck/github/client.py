"""GitHub issue and pull request creation through the GitHub CLI."""

from __future__ import annotations

import os
import re
import subprocess
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from ..config import DEFAULT_BRANCH_PREFIX, DEFAULT_LABELS
from ..errors import GitHubError, GitOperationError
from ..git.operations import GitOperations
from ..logging import get_logger
from ..models import ActionResult, AnalysisResult, RepositoryRef
from ..reporting.renderer import ReportRenderer

Runner = Callable[..., str]

REVIEW_FILENAME = "DOCUMENTATION_REVIEW.md"
_NUMBER_PATTERN = re.compile(r"/(?:issues|pull)/(\d+)\s*$")


class GitHubClient:
    """Files analysis findings as GitHub issues or a pull request.

    The token is handed to ``gh`` and ``git`` through the subprocess
    environment of each call.
    """

    def __init__(
        self,
        token: str,
        *,
        git: GitOperations | None = None,
        runner: Runner | None = None,
        renderer: ReportRenderer | None = None,
        labels: Sequence[str] = DEFAULT_LABELS,
        branch_prefix: str = DEFAULT_BRANCH_PREFIX,
    ) -> None:
        if not token:
            raise GitHubError("A GitHub token is required to create issues or pull requests")
        self._token = token
        self._runner = runner or self._default_runner
        self.git = git or GitOperations(Path.cwd(), runner=runner)
        self.renderer = renderer or ReportRenderer()
        self.labels = [label for label in labels if label]
        self.branch_prefix = branch_prefix.rstrip("/") or DEFAULT_BRANCH_PREFIX
        self.logger = get_logger("github")

    def create_issues_from_analysis(
        self,
        repository: RepositoryRef,
        result: AnalysisResult,
    ) -> List[ActionResult]:
        """Open one GitHub issue per finding, in ranked order."""
        created: List[ActionResult] = []
        for issue in result.issues:
            body = self.renderer.render_issue_body(issue, repository, result.timestamp)
            args = [
                "gh",
                "issue",
                "create",
                "--repo",
                repository.full_name,
                "--title",
                f"[Docs] {issue.title}",
                "--body",
                body,
            ]
            for label in self.labels:
                args.extend(["--label", label])
            output = self._gh(args, action=f"create issue '{issue.title}'")
            created.append(self._to_action("issue", output))
            self.logger.debug("Created issue %s", created[-1].url)
        return created

    def create_pull_request_with_fixes(
        self,
        repository: RepositoryRef,
        result: AnalysisResult,
        repo_path: str | Path,
    ) -> Optional[ActionResult]:
        """Commit a review checklist to a new branch and open a pull request for it."""
        if not result.issues:
            self.logger.info("No documentation issues found; skipping pull request")
            return None

        repo = Path(repo_path)
        branch_name = f"{self.branch_prefix}/review-{int(time.time())}"
        review_path = repo / REVIEW_FILENAME
        env = self._env()
        try:
            self.git.ensure_clean_working_directory(repo)
            self.git.create_branch(repo, branch_name)
            review_path.write_text(self.renderer.render_review_document(result), encoding="utf-8")
            self.git.commit_changes(
                repo,
                f"docs: add documentation review ({result.summary.total_issues} issues)",
                [REVIEW_FILENAME],
            )
            self.git.push_branch(
                repo, branch_name, env=env, credential_helper="!gh auth git-credential"
            )
        except (GitOperationError, OSError) as exc:
            raise GitHubError(f"Failed to prepare pull request branch: {exc}") from exc

        output = self._gh(
            [
                "gh",
                "pr",
                "create",
                "--repo",
                repository.full_name,
                "--head",
                branch_name,
                "--title",
                f"docs: address {result.summary.total_issues} documentation issues",
                "--body",
                self.renderer.render_pull_request_body(result, REVIEW_FILENAME),
            ],
            action="create pull request",
            cwd=repo,
        )
        action = self._to_action("pull-request", output)
        self.logger.debug("Created pull request %s", action.url)
        return action

    # ------------------------------------------------------------------
    # Helpers

    def _env(self) -> dict[str, str]:
        env = os.environ.copy()
        env["GH_TOKEN"] = self._token
        env["GITHUB_TOKEN"] = self._token
        return env

    def _gh(self, args: Iterable[str], *, action: str, cwd: Path | None = None) -> str:
        try:
            return self._runner(
                args, cwd=cwd or Path.cwd(), env=self._env(), capture_output=True
            )
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit code {exc.returncode}"
            raise GitHubError(f"Failed to {action}: {detail}") from exc
        except OSError as exc:
            raise GitHubError(f"Failed to {action}: {exc}") from exc

    @staticmethod
    def _to_action(kind: str, output: str) -> ActionResult:
        url = ""
        for line in reversed(output.strip().splitlines()):
            if line.strip().startswith("https://"):
                url = line.strip()
                break
        match = _NUMBER_PATTERN.search(url)
        if not match:
            raise GitHubError(f"Unexpected gh output, no {kind} URL found: {output.strip()!r}")
        return ActionResult(type=kind, url=url, number=int(match.group(1)))

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            env=env,
            check=True,
            text=True,
            capture_output=True,
        )
        if capture_output:
            return completed.stdout
        return ""


__all__ = ["GitHubClient", "REVIEW_FILENAME"]
