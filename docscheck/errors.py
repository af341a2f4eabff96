"""Error types raised by docs-check components."""

from __future__ import annotations


class DocsCheckError(RuntimeError):
    """Base class for failures surfaced to the CLI and service."""


class ConfigError(DocsCheckError):
    """Raised when configuration or credentials are missing or malformed."""


class InvalidRepositoryURL(DocsCheckError):
    """Raised when a repository URL is not a GitHub repository URL."""


class GitOperationError(DocsCheckError):
    """Raised when a git command against a working tree fails."""


class AnalysisError(DocsCheckError):
    """Raised when the documentation analysis pipeline fails."""


class GitHubError(DocsCheckError):
    """Raised when creating remote issues or pull requests fails."""


__all__ = [
    "AnalysisError",
    "ConfigError",
    "DocsCheckError",
    "GitHubError",
    "GitOperationError",
    "InvalidRepositoryURL",
]
