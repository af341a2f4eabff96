"""Pipeline orchestration for documentation analysis runs."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

from .classifier import is_project_descriptor
from .content_loader import ContentLoader
from .errors import AnalysisError
from .llm.client import AnalysisClient
from .logging import get_logger
from .models import AnalysisResult, RepositoryRef
from .parsing import ResponseParser
from .prompting.builder import PromptBuilder
from .ranking import build_summary, rank_issues
from .repo_scanner import RepoScanner


class DocumentationAnalyzer:
    """Coordinates scan, prompt, model call, parsing and ranking for one repository."""

    def __init__(
        self,
        client: AnalysisClient,
        *,
        scanner: RepoScanner | None = None,
        loader: ContentLoader | None = None,
        prompt_builder: PromptBuilder | None = None,
        parser: ResponseParser | None = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.client = client
        self.scanner = scanner or RepoScanner()
        self.loader = loader or ContentLoader()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.parser = parser or ResponseParser()
        self.timeout = timeout
        self.logger = get_logger("analyzer")

    async def analyze_documentation(
        self,
        repo_path: str | Path,
        repository: RepositoryRef,
    ) -> AnalysisResult:
        """Analyze the working tree at ``repo_path`` and return the ranked findings."""
        stage = "scan"
        try:
            self.logger.info("Analyzing documentation for %s", repository.full_name)
            scan = self.scanner.scan(repo_path)

            stage = "load documentation"
            documentation = self.loader.load(repo_path, scan.documentation)

            stage = "summarize code structure"
            descriptor_paths = [path for path in scan.code if is_project_descriptor(path)]
            descriptors = self.loader.load(repo_path, descriptor_paths, skip_unreadable=True)
            code_structure = self.prompt_builder.build_code_structure(descriptors, scan.code)

            stage = "build prompt"
            prompt = self.prompt_builder.build(documentation, code_structure)

            stage = "call model"
            response = await self.client.run(
                prompt, working_directory=repo_path, timeout=self.timeout
            )

            stage = "parse response"
            issues = self.parser.parse(response)

            stage = "rank issues"
            ranked = rank_issues(issues)
            summary = build_summary(ranked)
            self.logger.debug("Analysis produced %d issues", summary.total_issues)

            timestamp = datetime.now(UTC).isoformat(timespec="milliseconds")
            return AnalysisResult(
                repository=repository,
                issues=tuple(ranked),
                summary=summary,
                timestamp=timestamp.replace("+00:00", "Z"),
            )
        except Exception as exc:
            raise AnalysisError(f"Failed to analyze documentation ({stage}): {exc}") from exc


__all__ = ["DocumentationAnalyzer"]
