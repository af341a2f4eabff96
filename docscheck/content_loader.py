"""Loading file contents for prompt construction."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable

from .logging import get_logger

UNREADABLE_PLACEHOLDER = "[Could not read file]"


class ContentLoader:
    """Reads repository files independently, tolerating per-file failures."""

    def __init__(self) -> None:
        self.logger = get_logger("loader")

    def load(
        self,
        root: str | Path,
        paths: Iterable[str],
        *,
        skip_unreadable: bool = False,
    ) -> Dict[str, str]:
        """Return ``path -> text`` for each relative path under root.

        Unreadable files map to :data:`UNREADABLE_PLACEHOLDER`, or are left out
        entirely when ``skip_unreadable`` is set. NUL bytes are stripped.
        """
        root_path = Path(root)
        contents: Dict[str, str] = {}
        for rel_path in paths:
            try:
                text = (root_path / rel_path).read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                if skip_unreadable:
                    self.logger.debug("Skipping unreadable file %s: %s", rel_path, exc)
                    continue
                self.logger.warning("Could not read file %s: %s", rel_path, exc)
                contents[rel_path] = UNREADABLE_PLACEHOLDER
                continue
            contents[rel_path] = text.replace("\0", "")
        return contents


__all__ = ["ContentLoader", "UNREADABLE_PLACEHOLDER"]
