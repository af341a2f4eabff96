"""CLI entrypoint for docs-check."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .analyzer import DocumentationAnalyzer
from .config import AppConfig, load_config
from .errors import DocsCheckError
from .git.operations import GitOperations
from .github.client import GitHubClient
from .llm.client import ClaudeAnalysisClient
from .logging import configure_logging, get_logger
from .models import AnalysisResult, RepositoryRef
from .reporting.renderer import ReportRenderer
from .repository import parse_github_url


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-check",
        description="Check documentation quality using Claude and GitHub integration.",
    )
    parser.add_argument("github_url", help="GitHub repository URL to analyze.")
    parser.add_argument(
        "--create-issues",
        action="store_true",
        help="Create GitHub issues for found problems.",
    )
    parser.add_argument(
        "--create-pr",
        action="store_true",
        help="Create a pull request with a documentation review checklist.",
    )
    parser.add_argument(
        "--output-format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .docs-check.yml file (defaults to ./.docs-check.yml when present).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Give up on the model call after this many seconds.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docs-check."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        _run(args)
    except DocsCheckError as exc:
        logger.debug("docs-check failed", exc_info=bool(args.verbose))
        parser.exit(1, f"Error: {exc}\n")
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=bool(args.verbose))
        hint = "" if args.verbose else " (run with --verbose for details)"
        parser.exit(1, f"Error: {exc}{hint}\n")


def _run(args: argparse.Namespace) -> None:
    logger = get_logger("cli")
    wants_github = bool(args.create_issues or args.create_pr)
    config = load_config(args.config, require_github_token=wants_github)
    repository = parse_github_url(args.github_url)

    logger.debug("Repository: %s", repository.full_name)
    git = GitOperations(config.temp_directory)
    analyzer = _build_analyzer(config, timeout=args.timeout)
    renderer = ReportRenderer()

    logger.info("Cloning %s into %s", repository.url, config.temp_directory)
    with git.cloned(repository.url) as repo_path:
        logger.info("Analyzing documentation with Claude")
        result = asyncio.run(analyzer.analyze_documentation(repo_path, repository))

        if args.output_format == "json":
            print(renderer.render_json(result))
        else:
            print(renderer.render_text(result), end="")

        if wants_github:
            github = GitHubClient(
                config.github_token or "",
                git=git,
                renderer=renderer,
                labels=config.github.labels,
                branch_prefix=config.github.branch_prefix,
            )
            _publish(args, github, repository, result, repo_path)

    logger.debug("Analysis complete")


def _build_analyzer(config: AppConfig, *, timeout: float | None) -> DocumentationAnalyzer:
    client = ClaudeAnalysisClient(
        config.anthropic_api_key,
        model=config.llm.model,
        max_turns=config.llm.max_turns,
        permission_mode=config.llm.permission_mode,
        timeout=config.llm.timeout,
    )
    return DocumentationAnalyzer(client, timeout=timeout)


def _publish(
    args: argparse.Namespace,
    github: GitHubClient,
    repository: RepositoryRef,
    result: AnalysisResult,
    repo_path: Path,
) -> None:
    text_mode = args.output_format == "text"

    if args.create_issues and result.issues:
        created = github.create_issues_from_analysis(repository, result)
        if text_mode:
            print(f"\nCreated {len(created)} GitHub issues:")
            for action in created:
                print(f"- Issue #{action.number}: {action.url}")

    if args.create_pr:
        pull_request = github.create_pull_request_with_fixes(repository, result, repo_path)
        if pull_request and text_mode:
            print(f"\nCreated pull request #{pull_request.number}: {pull_request.url}")


if __name__ == "__main__":
    main(sys.argv[1:])
