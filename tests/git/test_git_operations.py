"""Tests for git working-tree operations."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pytest

from docscheck.errors import GitOperationError
from docscheck.git.operations import GitOperations


class RecordingRunner:
    def __init__(self, outputs: dict[str, str] | None = None, fail_on: str | None = None) -> None:
        self.calls: list[tuple[list[str], Path, dict | None, bool]] = []
        self.outputs = outputs or {}
        self.fail_on = fail_on

    def __call__(self, args, cwd, env=None, capture_output=False):  # type: ignore[no-untyped-def]
        args = list(args)
        self.calls.append((args, Path(cwd), env, capture_output))
        if self.fail_on and self.fail_on in args:
            raise subprocess.CalledProcessError(128, args, output="", stderr="fatal: boom\n")
        return self.outputs.get(" ".join(args[:2]), "")


def test_clone_uses_shallow_single_branch(tmp_path: Path) -> None:
    runner = RecordingRunner()
    git = GitOperations(tmp_path / "work", runner=runner)

    clone = git.clone_repository("https://github.com/acme/widgets.git")

    args, cwd, _, _ = runner.calls[0]
    assert args[:6] == [
        "git",
        "clone",
        "--depth",
        "1",
        "--single-branch",
        "https://github.com/acme/widgets.git",
    ]
    assert args[6] == str(clone)
    assert cwd == tmp_path / "work"
    assert clone.parent == tmp_path / "work"
    assert clone.name.startswith("widgets-")
    assert clone.name.split("-")[-1].isdigit()


def test_clone_failure_raises_git_error(tmp_path: Path) -> None:
    git = GitOperations(tmp_path, runner=RecordingRunner(fail_on="clone"))

    with pytest.raises(GitOperationError) as excinfo:
        git.clone_repository("https://github.com/acme/missing.git")

    assert "Failed to clone repository https://github.com/acme/missing.git" in str(excinfo.value)
    assert "fatal: boom" in str(excinfo.value)


def test_cloned_removes_directory_even_when_block_fails(tmp_path: Path) -> None:
    def runner(args, cwd, env=None, capture_output=False):  # type: ignore[no-untyped-def]
        args = list(args)
        if args[1] == "clone":
            Path(args[-1]).mkdir(parents=True)
            (Path(args[-1]) / "README.md").write_text("# hi", encoding="utf-8")
        return ""

    git = GitOperations(tmp_path, runner=runner)
    seen: list[Path] = []

    with pytest.raises(RuntimeError):
        with git.cloned("https://github.com/acme/widgets") as clone:
            seen.append(clone)
            assert (clone / "README.md").exists()
            raise RuntimeError("analysis blew up")

    assert seen and not seen[0].exists()


def test_cleanup_logs_and_swallows_errors(tmp_path: Path, monkeypatch, caplog) -> None:
    def fail(path):  # type: ignore[no-untyped-def]
        raise PermissionError("denied")

    monkeypatch.setattr("docscheck.git.operations.shutil.rmtree", fail)
    git = GitOperations(tmp_path, runner=RecordingRunner())

    with caplog.at_level(logging.WARNING, logger="docscheck"):
        git.cleanup(tmp_path / "clone")

    assert any("Failed to cleanup directory" in record.getMessage() for record in caplog.records)


def test_cleanup_of_missing_directory_is_silent(tmp_path: Path, caplog) -> None:
    git = GitOperations(tmp_path, runner=RecordingRunner())

    with caplog.at_level(logging.WARNING, logger="docscheck"):
        git.cleanup(tmp_path / "never-created")

    assert not caplog.records


def test_commit_stages_files_then_commits(tmp_path: Path) -> None:
    runner = RecordingRunner()
    git = GitOperations(tmp_path, runner=runner)

    git.commit_changes(tmp_path, "docs: add review", ["DOCUMENTATION_REVIEW.md"])

    assert runner.calls[0][0] == ["git", "add", "DOCUMENTATION_REVIEW.md"]
    assert runner.calls[1][0] == ["git", "commit", "-m", "docs: add review"]
    env = runner.calls[1][2]
    assert env is not None and env["GIT_AUTHOR_NAME"]


def test_commit_without_files_stages_everything(tmp_path: Path) -> None:
    runner = RecordingRunner()
    GitOperations(tmp_path, runner=runner).commit_changes(tmp_path, "msg")

    assert runner.calls[0][0] == ["git", "add", "."]


def test_push_with_credential_helper(tmp_path: Path) -> None:
    runner = RecordingRunner()
    git = GitOperations(tmp_path, runner=runner)

    git.push_branch(
        tmp_path,
        "docs-check/review-1",
        env={"GH_TOKEN": "t"},
        credential_helper="!gh auth git-credential",
    )

    args, cwd, env, _ = runner.calls[0]
    assert args == [
        "git",
        "-c",
        "credential.helper=",
        "-c",
        "credential.helper=!gh auth git-credential",
        "push",
        "--set-upstream",
        "origin",
        "docs-check/review-1",
    ]
    assert cwd == tmp_path
    assert env == {"GH_TOKEN": "t"}


def test_create_branch_failure_raises(tmp_path: Path) -> None:
    git = GitOperations(tmp_path, runner=RecordingRunner(fail_on="checkout"))

    with pytest.raises(GitOperationError, match="Failed to create branch feature"):
        git.create_branch(tmp_path, "feature")


def test_uncommitted_changes_detection(tmp_path: Path) -> None:
    dirty = GitOperations(tmp_path, runner=RecordingRunner({"git status": " M README.md\n"}))
    clean = GitOperations(tmp_path, runner=RecordingRunner())

    assert dirty.has_uncommitted_changes(tmp_path) is True
    assert clean.has_uncommitted_changes(tmp_path) is False
    clean.ensure_clean_working_directory(tmp_path)
    with pytest.raises(GitOperationError, match="uncommitted changes"):
        dirty.ensure_clean_working_directory(tmp_path)
