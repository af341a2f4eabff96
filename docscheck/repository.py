"""GitHub repository URL handling."""

from __future__ import annotations

import re

from .errors import InvalidRepositoryURL
from .models import RepositoryRef

_GITHUB_URL_PATTERN = re.compile(
    r"^https://github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?(?:/.*)?$"
)


def parse_github_url(url: str) -> RepositoryRef:
    """Return the repository reference for a ``https://github.com/<owner>/<repo>`` URL."""
    match = _GITHUB_URL_PATTERN.match(url.strip())
    if not match:
        raise InvalidRepositoryURL(f"Invalid GitHub URL: {url}")
    owner = match.group("owner")
    repo = match.group("repo")
    return RepositoryRef(
        owner=owner,
        repo=repo,
        url=f"https://github.com/{owner}/{repo}.git",
    )


__all__ = ["parse_github_url"]
