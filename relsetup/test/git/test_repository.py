"""Tests for git/repository.py."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from relsetup.core.result import Err, Ok
from relsetup.git.repository import GitError, Repository, git_available
from relsetup.platform.process import ProcessError

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise RuntimeError(
            f"git {' '.join(args)} failed (code {result.returncode}): {result.stderr.strip()}"
        )
    return result.stdout.strip()


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    _git(tmp_path, "init", "-b", "main")
    _git(tmp_path, "config", "user.email", "test@example.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "tag.gpgSign", "false")
    (tmp_path / "README.md").write_text("hello\n", encoding="utf-8")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init", "--no-gpg-sign")
    return tmp_path


@requires_git
class TestRepositoryWithGit:
    def test_tag_missing(self, repo_dir: Path) -> None:
        assert Repository(repo_dir).tag_exists("v1.0.0") is False

    def test_create_then_exists(self, repo_dir: Path) -> None:
        repo = Repository(repo_dir)

        assert repo.create_tag("v1.0.0") == Ok(None)
        assert repo.tag_exists("v1.0.0") is True
        assert _git(repo_dir, "tag", "--list") == "v1.0.0"

    def test_branch_name_is_not_a_tag(self, repo_dir: Path) -> None:
        assert Repository(repo_dir).tag_exists("main") is False

    def test_create_existing_tag_fails_without_overwrite(self, repo_dir: Path) -> None:
        repo = Repository(repo_dir)
        repo.create_tag("v1.0.0")
        first = _git(repo_dir, "rev-parse", "v1.0.0")

        result = repo.create_tag("v1.0.0")

        assert isinstance(result, Err)
        assert result.error.command == "tag v1.0.0"
        assert _git(repo_dir, "rev-parse", "v1.0.0") == first

    def test_not_a_repository(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
        repo = Repository(tmp_path)

        assert repo.tag_exists("v1.0.0") is False
        assert isinstance(repo.create_tag("v1.0.0"), Err)


class TestRepositoryMocked:
    def test_tag_exists_queries_tag_ref(self, tmp_path: Path) -> None:
        with patch("relsetup.git.repository.run_process", return_value=Ok("abc\n")) as run:
            assert Repository(tmp_path).tag_exists("v2.0.0") is True

        cmd = run.call_args.args[0]
        assert cmd == ["git", "-C", str(tmp_path), "rev-parse", "-q", "--verify", "refs/tags/v2.0.0"]

    def test_tag_exists_false_on_any_failure(self, tmp_path: Path) -> None:
        error = ProcessError(command=("git",), returncode=-1, stdout="", stderr="not found")
        with patch("relsetup.git.repository.run_process", return_value=Err(error)):
            assert Repository(tmp_path).tag_exists("v2.0.0") is False

    def test_create_tag_error_message(self, tmp_path: Path) -> None:
        error = ProcessError(
            command=("git", "tag"),
            returncode=128,
            stdout="",
            stderr="fatal: tag 'v2.0.0' already exists\n",
        )
        with patch("relsetup.git.repository.run_process", return_value=Err(error)):
            result = Repository(tmp_path).create_tag("v2.0.0")

        assert result == Err(
            GitError(
                command="tag v2.0.0",
                message="fatal: tag 'v2.0.0' already exists",
                returncode=128,
            )
        )


def test_git_available_follows_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("relsetup.git.repository.which", lambda name: None)
    assert git_available() is False

    monkeypatch.setattr("relsetup.git.repository.which", lambda name: f"/usr/bin/{name}")
    assert git_available() is True
