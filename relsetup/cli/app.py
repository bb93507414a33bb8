from __future__ import annotations

from pathlib import Path

import typer

from relsetup import __version__
from relsetup.cli.context import build_context
from relsetup.core.errors import ErrorCode
from relsetup.core.result import is_err
from relsetup.core.settings import SetupOptions, resolve_settings
from relsetup.services.setup import SetupService


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.command()
def setup(
    owner: str | None = typer.Option(None, "--owner", "-o", help="GitHub owner/organization"),
    repo: str | None = typer.Option(None, "--repo", "-r", help="Repository name"),
    deps: bool | None = typer.Option(
        None,
        "--deps/--no-deps",
        help="Install semantic-release dev dependencies (prompts when omitted)",
    ),
    cwd: Path | None = typer.Option(
        None,
        "--cwd",
        help="Project directory (defaults to the current directory)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Setup semantic-release CI/CD for your project.

    Writes .releaserc.json and .github/workflows/release.yml, points
    package.json at the GitHub repository and tags the current version.
    Prompts only for values not given as options.
    """
    ctx = build_context(cwd)
    service = SetupService(root=ctx.root, console=ctx.console, actions=ctx.actions)
    service.start()

    settings = resolve_settings(
        SetupOptions(owner=owner, repo_name=repo, install_deps=deps),
        ctx.prompter,
        default_repo_name=ctx.root.name,
    )

    result = service.run(settings)
    if is_err(result):
        ctx.console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def main() -> None:
    app()
