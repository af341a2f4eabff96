from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_docscheck_logger() -> Iterator[None]:
    """Undo CLI logging configuration so caplog keeps seeing docscheck records."""
    yield
    logger = logging.getLogger("docscheck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    for name in ("claude_agent_sdk", "httpx"):
        logging.getLogger(name).setLevel(logging.NOTSET)
