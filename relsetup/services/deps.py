"""semantic-release dev dependency installation."""

from __future__ import annotations

from pathlib import Path

from relsetup.core.result import Result
from relsetup.platform.process import ProcessError, run_silent

__all__ = ["RELEASE_PACKAGES", "DependencyInstaller", "install_command"]

RELEASE_PACKAGES: tuple[str, ...] = (
    "semantic-release",
    "@semantic-release/changelog",
    "@semantic-release/git",
    "@semantic-release/github",
    "@semantic-release/npm",
)


def install_command() -> list[str]:
    return ["npm", "install", "-D", *RELEASE_PACKAGES]


class DependencyInstaller:
    def __init__(self, root: Path) -> None:
        self._root = root

    def install(self) -> Result[None, ProcessError]:
        """Run npm in the project root with output streamed to the terminal."""
        return run_silent(install_command(), cwd=self._root)
