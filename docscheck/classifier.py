"""Path-based classification of documentation and code files."""

from __future__ import annotations

import re

_DOC_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\.md$", re.IGNORECASE),
    re.compile(r"\.rst$", re.IGNORECASE),
    re.compile(r"\.txt$", re.IGNORECASE),
    re.compile(r"readme", re.IGNORECASE),
    re.compile(r"changelog", re.IGNORECASE),
    re.compile(r"contributing", re.IGNORECASE),
    re.compile(r"license", re.IGNORECASE),
    re.compile(r"(?:^|/)docs?/", re.IGNORECASE),
)

_CODE_EXTENSION_PATTERN = re.compile(
    r"\.(js|jsx|ts|tsx|py|java|cpp|c|h|cs|php|rb|go|rust|rs)$", re.IGNORECASE
)

PROJECT_DESCRIPTORS: tuple[str, ...] = (
    "package.json",
    "requirements.txt",
    "Cargo.toml",
    "pom.xml",
)

_DESCRIPTOR_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(re.escape(name) + "$", re.IGNORECASE) for name in PROJECT_DESCRIPTORS
)


def _normalise(path: str) -> str:
    return path.replace("\\", "/")


def is_documentation(path: str) -> bool:
    """Return True when the relative path looks like user-facing documentation."""
    target = _normalise(path)
    return any(pattern.search(target) for pattern in _DOC_PATTERNS)


def is_code(path: str) -> bool:
    """Return True for source files and known project descriptors."""
    target = _normalise(path)
    if _CODE_EXTENSION_PATTERN.search(target):
        return True
    return any(pattern.search(target) for pattern in _DESCRIPTOR_PATTERNS)


def is_project_descriptor(path: str) -> bool:
    """Return True when the path names a package manifest or build descriptor."""
    target = _normalise(path)
    return any(name in target for name in PROJECT_DESCRIPTORS)


__all__ = ["PROJECT_DESCRIPTORS", "is_code", "is_documentation", "is_project_descriptor"]
