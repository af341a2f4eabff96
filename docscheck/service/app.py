"""FastAPI application entrypoint for docs-check service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..analyzer import DocumentationAnalyzer
from ..config import AppConfig, load_config
from ..errors import AnalysisError, ConfigError, GitOperationError, InvalidRepositoryURL
from ..git.operations import GitOperations
from ..llm.client import ClaudeAnalysisClient
from ..logging import get_logger
from ..models import AnalysisResult
from ..repository import parse_github_url


class AnalyzeRequest(BaseModel):
    url: str
    timeout: Optional[float] = None


class RepositoryPayload(BaseModel):
    owner: str
    repo: str
    url: str


class IssuePayload(BaseModel):
    type: str
    severity: str
    effort: str
    title: str
    description: str
    suggestion: str = ""
    file: Optional[str] = None
    line: Optional[int] = None


class SummaryPayload(BaseModel):
    totalIssues: int
    highSeverity: int
    mediumSeverity: int
    lowSeverity: int


class AnalyzeResponse(BaseModel):
    repository: RepositoryPayload
    issues: List[IssuePayload]
    summary: SummaryPayload
    timestamp: str


class HealthResponse(BaseModel):
    status: str


class RepositoryAnalysisRunner:
    """Clones a repository, analyzes it and always removes the clone."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.git = GitOperations(config.temp_directory)
        self.logger = get_logger("service")

    async def analyze(self, url: str, *, timeout: Optional[float] = None) -> AnalysisResult:
        repository = parse_github_url(url)
        client = ClaudeAnalysisClient(
            self.config.anthropic_api_key,
            model=self.config.llm.model,
            max_turns=self.config.llm.max_turns,
            permission_mode=self.config.llm.permission_mode,
            timeout=self.config.llm.timeout,
        )
        analyzer = DocumentationAnalyzer(client, timeout=timeout)

        repo_path = await asyncio.to_thread(self.git.clone_repository, repository.url)
        try:
            return await analyzer.analyze_documentation(repo_path, repository)
        finally:
            await asyncio.to_thread(self.git.cleanup, repo_path)


def _default_runner() -> RepositoryAnalysisRunner:
    return RepositoryAnalysisRunner(load_config())


def create_app(
    runner_factory: Callable[[], Any] = _default_runner,
) -> FastAPI:
    """Create the FastAPI application exposing documentation analysis."""
    app = FastAPI(title="docs-check service", version="1.0.0")

    async def get_runner() -> Any:
        # Built per request so every run gets fresh configuration and clients.
        return runner_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
    async def analyze(
        payload: AnalyzeRequest,
        runner: Any = Depends(get_runner),
    ) -> Dict[str, Any]:
        result = await runner.analyze(payload.url, timeout=payload.timeout)
        return result.to_dict()

    @app.exception_handler(InvalidRepositoryURL)
    async def invalid_url_handler(_: Any, exc: InvalidRepositoryURL) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(GitOperationError)
    async def git_error_handler(_: Any, exc: GitOperationError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(AnalysisError)
    async def analysis_error_handler(_: Any, exc: AnalysisError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    return app


def run_service(host: str = "0.0.0.0", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)


__all__ = ["RepositoryAnalysisRunner", "create_app", "run_service"]
