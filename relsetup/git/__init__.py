"""Git operations used by the setup flow."""

from relsetup.git.repository import GitError, Repository, git_available

__all__ = [
    "GitError",
    "Repository",
    "git_available",
]
