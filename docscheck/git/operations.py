"""Git working-tree operations used around an analysis run."""

from __future__ import annotations

import os
import shutil
import subprocess
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, Sequence

from ..errors import GitOperationError
from ..logging import get_logger

Runner = Callable[..., str]


class GitOperations:
    """Clones repositories into a scratch directory and manages branches there."""

    def __init__(self, base_directory: str | Path, runner: Runner | None = None) -> None:
        self.base_directory = Path(base_directory)
        self._runner = runner or self._default_runner
        self.logger = get_logger("git")

    def clone_repository(self, repo_url: str) -> Path:
        """Shallow-clone ``repo_url`` into a fresh directory and return its path."""
        repo_name = repo_url.rstrip("/").rsplit("/", 1)[-1]
        if repo_name.endswith(".git"):
            repo_name = repo_name[: -len(".git")]
        clone_directory = self.base_directory / f"{repo_name}-{int(time.time() * 1000)}"
        try:
            self.base_directory.mkdir(parents=True, exist_ok=True)
            self._run(
                [
                    "git",
                    "clone",
                    "--depth",
                    "1",
                    "--single-branch",
                    repo_url,
                    str(clone_directory),
                ],
                cwd=self.base_directory,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitOperationError(
                f"Failed to clone repository {repo_url}: {_describe(exc)}"
            ) from exc
        self.logger.debug("Cloned %s into %s", repo_url, clone_directory)
        return clone_directory

    @contextmanager
    def cloned(self, repo_url: str) -> Iterator[Path]:
        """Clone ``repo_url`` for the duration of the block, then clean it up."""
        clone_directory = self.clone_repository(repo_url)
        try:
            yield clone_directory
        finally:
            self.cleanup(clone_directory)

    def create_branch(self, repo_path: str | Path, branch_name: str) -> None:
        try:
            self._run(["git", "checkout", "-b", branch_name], cwd=Path(repo_path))
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitOperationError(
                f"Failed to create branch {branch_name}: {_describe(exc)}"
            ) from exc

    def commit_changes(
        self,
        repo_path: str | Path,
        message: str,
        files: Sequence[str] | None = None,
    ) -> None:
        """Stage ``files`` (or every change) and commit them."""
        repo = Path(repo_path)
        env = os.environ.copy()
        env.setdefault("GIT_AUTHOR_NAME", "docs-check")
        env.setdefault("GIT_AUTHOR_EMAIL", "docs-check@users.noreply.github.com")
        env.setdefault("GIT_COMMITTER_NAME", env["GIT_AUTHOR_NAME"])
        env.setdefault("GIT_COMMITTER_EMAIL", env["GIT_AUTHOR_EMAIL"])
        try:
            if files:
                self._run(["git", "add", *files], cwd=repo)
            else:
                self._run(["git", "add", "."], cwd=repo)
            self._run(["git", "commit", "-m", message], cwd=repo, env=env)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitOperationError(f"Failed to commit changes: {_describe(exc)}") from exc

    def push_branch(
        self,
        repo_path: str | Path,
        branch_name: str,
        remote: str = "origin",
        *,
        env: dict[str, str] | None = None,
        credential_helper: str | None = None,
    ) -> None:
        """Push ``branch_name``; ``credential_helper`` applies to this push only."""
        args = ["git"]
        if credential_helper:
            args.extend(["-c", "credential.helper=", "-c", f"credential.helper={credential_helper}"])
        args.extend(["push", "--set-upstream", remote, branch_name])
        try:
            self._run(args, cwd=Path(repo_path), env=env)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitOperationError(
                f"Failed to push branch {branch_name}: {_describe(exc)}"
            ) from exc

    def has_uncommitted_changes(self, repo_path: str | Path) -> bool:
        try:
            status = self._run(
                ["git", "status", "--porcelain"], cwd=Path(repo_path), capture_output=True
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitOperationError(
                f"Failed to check repository status: {_describe(exc)}"
            ) from exc
        return bool(status.strip())

    def ensure_clean_working_directory(self, repo_path: str | Path) -> None:
        if self.has_uncommitted_changes(repo_path):
            raise GitOperationError(
                "Repository has uncommitted changes. Cannot proceed with branch operations."
            )

    def cleanup(self, repo_path: str | Path) -> None:
        """Remove a clone; failures are logged and never raised."""
        try:
            shutil.rmtree(repo_path)
        except FileNotFoundError:
            return
        except OSError as exc:
            self.logger.warning("Failed to cleanup directory %s: %s", repo_path, exc)

    # ------------------------------------------------------------------
    # Helpers

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        return self._runner(args, cwd=cwd, env=env, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            env=env,
            check=True,
            text=True,
            capture_output=True,
        )
        if capture_output:
            return completed.stdout
        return ""


def _describe(exc: BaseException) -> str:
    if isinstance(exc, subprocess.CalledProcessError):
        detail = (exc.stderr or exc.stdout or "").strip()
        return detail or f"exit code {exc.returncode}"
    return str(exc)


__all__ = ["GitOperations"]
