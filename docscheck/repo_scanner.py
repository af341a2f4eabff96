"""Repository scanning for documentation and code files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

from .classifier import is_code, is_documentation
from .logging import get_logger

DEFAULT_FILE_LIMIT = 50

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "dist",
    "build",
    ".next",
    "coverage",
    "target",
    "__pycache__",
}


@dataclass(frozen=True)
class ScanResult:
    """Relative paths of documentation and code files, in traversal order."""

    documentation: Tuple[str, ...]
    code: Tuple[str, ...]


class RepoScanner:
    """Walks a working tree and samples documentation and code files."""

    def __init__(self, limit: int = DEFAULT_FILE_LIMIT) -> None:
        self.limit = limit
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path) -> ScanResult:
        """Return up to ``limit`` documentation paths and ``limit`` code paths under root."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Repository path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Repository path is not a directory: {root}")

        documentation: List[str] = []
        code: List[str] = []
        for rel_path in self._iter_files(root_path):
            if len(documentation) < self.limit and is_documentation(rel_path):
                documentation.append(rel_path)
            if len(code) < self.limit and is_code(rel_path):
                code.append(rel_path)
            if len(documentation) >= self.limit and len(code) >= self.limit:
                break

        self.logger.debug(
            "Scanner found %d documentation and %d code files", len(documentation), len(code)
        )
        return ScanResult(documentation=tuple(documentation), code=tuple(code))

    def _iter_files(self, root: Path) -> Iterator[str]:
        def _on_error(error: OSError) -> None:
            self.logger.warning("Could not read directory %s: %s", error.filename, error.strerror)

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)

            for filename in sorted(filenames):
                if not (current_dir / filename).is_file():
                    continue
                yield f"{rel_dir}/{filename}" if rel_dir else filename


__all__ = ["DEFAULT_FILE_LIMIT", "RepoScanner", "ScanResult"]
