"""Throwaway working trees shaped like the clones docs-check analyzes."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from docscheck.repo_scanner import DEFAULT_FILE_LIMIT, RepoScanner, ScanResult


class RepoBuilder:
    """Writes files under ``<tmp>/repo`` and scans them with the real scanner."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write ``relative path -> text`` entries, creating parent directories."""
        for relative, content in files.items():
            target = self.root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

    def write_bytes(self, relative: str, payload: bytes) -> Path:
        """Write raw bytes, for NUL-laden or non-UTF-8 files."""
        target = self.root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)
        return target

    def fill(self, pattern: str, count: int, content: str = "x\n") -> list[str]:
        """Create ``count`` files named ``pattern.format(index)``; returns their paths."""
        paths = [pattern.format(index) for index in range(count)]
        self.write({path: content for path in paths})
        return paths

    def unreadable(self, relative: str) -> str:
        """Put a directory where a file is expected so reads fail even as root."""
        (self.root / relative).mkdir(parents=True)
        return relative

    def scan(self, limit: int = DEFAULT_FILE_LIMIT) -> ScanResult:
        return RepoScanner(limit=limit).scan(self.root)

    def path(self) -> Path:
        return self.root


__all__ = ["RepoBuilder"]
