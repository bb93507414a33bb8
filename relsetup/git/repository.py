"""Git repository abstraction.

Only the tag operations the setup flow needs are exposed.

Usage:
    repo = Repository(Path.cwd())
    if not repo.tag_exists("v1.2.3"):
        repo.create_tag("v1.2.3")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relsetup.core.result import Err, Ok, Result, is_ok
from relsetup.platform.process import ProcessError, which
from relsetup.platform.process import run as run_process

__all__ = ["GitError", "Repository", "git_available"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


def git_available() -> bool:
    """True if a ``git`` executable is on PATH."""
    return which("git") is not None


class Repository:
    """Git repository rooted at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def tag_exists(self, name: str) -> bool:
        """Check whether a tag exists locally.

        Any failure of the query (missing tag, not a repository, git absent)
        counts as "does not exist".
        """
        result = self._run(["rev-parse", "-q", "--verify", f"refs/tags/{name}"])
        return is_ok(result)

    def create_tag(self, name: str) -> Result[None, GitError]:
        """Create a lightweight tag at HEAD. Never overwrites an existing tag.

        Returns:
            Ok(None) on success
            Err(GitError) on failure
        """
        result = self._run(["tag", name])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=f"tag {name}",
                        message=e.stderr.strip() or "git tag failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(_):
                return Ok(None)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)
