from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from relsetup.core.result import Ok, Result, is_err
from relsetup.core.settings import ResolvedSettings
from relsetup.git.repository import Repository, git_available
from relsetup.output.console import ConsoleProtocol, Style
from relsetup.platform.files import write_text
from relsetup.services.deps import DependencyInstaller
from relsetup.services.manifest import (
    MANIFEST_FILENAME,
    ManifestError,
    load_manifest,
    patch_repository,
    render_manifest,
    version_tag,
)
from relsetup.services.templates import (
    RELEASERC_PATH,
    WORKFLOW_FILENAME,
    WORKFLOW_PATH,
    render_release_config,
    render_workflow,
)

__all__ = ["SetupActions", "SetupReport", "SetupService", "ShellActions"]


class SetupActions(Protocol):
    """External side effects of the setup flow.

    ``install_dependencies`` and ``create_tag`` are fire-and-forget: their
    outcome is never reported back to the orchestrator.
    """

    def git_available(self) -> bool: ...

    def install_dependencies(self) -> None: ...

    def tag_exists(self, name: str) -> bool: ...

    def create_tag(self, name: str) -> None: ...


class ShellActions:
    """SetupActions backed by npm and git in the project root."""

    def __init__(self, root: Path) -> None:
        self._installer = DependencyInstaller(root)
        self._repo = Repository(root)

    def git_available(self) -> bool:
        return git_available()

    def install_dependencies(self) -> None:
        # npm prints its own errors; a failed install does not stop setup.
        self._installer.install()

    def tag_exists(self, name: str) -> bool:
        return self._repo.tag_exists(name)

    def create_tag(self, name: str) -> None:
        # Not a repository, no commits or no git: the tag is skipped silently.
        self._repo.create_tag(name)


@dataclass(frozen=True, slots=True)
class SetupReport:
    """What a setup run wrote to disk."""

    releaserc: Path
    workflow: Path
    manifest_patched: bool = False
    tag: str | None = None
    tag_created: bool = False


class SetupService:
    def __init__(
        self,
        *,
        root: Path,
        console: ConsoleProtocol,
        actions: SetupActions,
    ) -> None:
        self._root = root
        self._console = console
        self._actions = actions

    def start(self) -> None:
        """Print the banner and warn when git is missing.

        Called before prompting. A missing git only warns: the tag steps
        later in the run will then fail quietly.
        """
        self._console.print("Starting CI/CD Setup...", Style.HEADER)
        if not self._actions.git_available():
            self._console.warning("git is not installed. some automatic detection might fail.")

    def run(self, settings: ResolvedSettings) -> Result[SetupReport, ManifestError]:
        """Install, write the release files, patch package.json, tag.

        Steps run once, in order, with no rollback. OSError from file writes
        propagates to the caller.

        Args:
            settings: Resolved owner, repository name and install choice.

        Returns:
            Ok(SetupReport), or Err(ManifestError) when package.json exists
            but is not a JSON object. Files written before that point stay.
        """
        if settings.install_deps:
            self._console.step("Installing dependencies...")
            self._actions.install_dependencies()

        releaserc = self._write_release_config()
        workflow = self._write_workflow()

        self._console.step(f"Updating {MANIFEST_FILENAME} repository URL...")
        manifest_path = self._root / MANIFEST_FILENAME
        if not manifest_path.exists():
            report = SetupReport(releaserc=releaserc, workflow=workflow)
        else:
            patched = self._patch_manifest(manifest_path, settings)
            if is_err(patched):
                return patched
            tag = patched.value
            created = self._ensure_tag(tag) if tag else False
            report = SetupReport(
                releaserc=releaserc,
                workflow=workflow,
                manifest_patched=True,
                tag=tag,
                tag_created=created,
            )

        self._print_next_steps(settings)
        return Ok(report)

    def _write_release_config(self) -> Path:
        self._console.step(f"Creating {RELEASERC_PATH}...")
        path = self._root / RELEASERC_PATH
        write_text(path, render_release_config())
        return path

    def _write_workflow(self) -> Path:
        self._console.step(f"Creating {WORKFLOW_PATH}...")
        path = self._root / WORKFLOW_PATH
        write_text(path, render_workflow())
        return path

    def _patch_manifest(
        self, path: Path, settings: ResolvedSettings
    ) -> Result[str | None, ManifestError]:
        """Rewrite the repository field; return the version tag, if any."""
        loaded = load_manifest(path)
        if is_err(loaded):
            return loaded

        manifest = patch_repository(loaded.value, settings.owner, settings.repo_name)
        write_text(path, render_manifest(manifest))
        return Ok(version_tag(manifest))

    def _ensure_tag(self, tag: str) -> bool:
        if self._actions.tag_exists(tag):
            self._console.newline()
            self._console.print(f"Tag {tag} already exists.", Style.DIM)
            return False

        self._console.step(f"Creating git tag {tag}...")
        self._actions.create_tag(tag)
        self._console.success(f"Tag {tag} created.")
        return True

    def _print_next_steps(self, settings: ResolvedSettings) -> None:
        c = self._console
        c.newline()
        c.success("Setup Complete!")
        c.header("Next Steps:")
        c.print("1. Go to npmjs.com -> Your Package -> Settings -> Trusted Publishing")
        c.print("2. Connect GitHub Actions:")
        c.print(f"   - Owner: {settings.owner}")
        c.print(f"   - Repo: {settings.repo_name}")
        c.print(f"   - Workflow: {WORKFLOW_FILENAME}")
        c.print("3. Push changes:")
        c.print("   git add .", Style.BOLD)
        c.print('   git commit -m "ci: setup"', Style.BOLD)
        c.print("   git push --follow-tags", Style.BOLD)
