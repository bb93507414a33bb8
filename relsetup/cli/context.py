from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relsetup.cli.prompts import TyperPrompter
from relsetup.core.errors import ErrorCode
from relsetup.core.settings import Prompter
from relsetup.output.console import ConsoleProtocol, RichConsole
from relsetup.services.setup import SetupActions, ShellActions


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    console: ConsoleProtocol
    prompter: Prompter
    actions: SetupActions


def build_context(cwd: Path | None = None) -> CLIContext:
    try:
        root = (cwd or Path.cwd()).expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --cwd: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not root.is_dir():
        typer.echo(f"error: '{root}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    console = RichConsole()
    return CLIContext(
        root=root,
        console=console,
        prompter=TyperPrompter(),
        actions=ShellActions(root),
    )
