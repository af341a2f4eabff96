"""GitHub integration for filing analysis results."""

from .client import GitHubClient

__all__ = ["GitHubClient"]
