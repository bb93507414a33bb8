"""Interactive answers via typer prompts."""

from __future__ import annotations

import typer


class TyperPrompter:
    """Prompter that asks on the terminal.

    Without a default, click asks again until the answer is non-empty.
    """

    def text(self, message: str, *, default: str | None = None) -> str:
        value: str = typer.prompt(message, default=default or None, type=str)
        return value

    def confirm(self, message: str, *, default: bool) -> bool:
        return typer.confirm(message, default=default)
