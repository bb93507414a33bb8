"""Setup settings: explicit options merged with interactive answers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "OWNER_PROMPT",
    "REPO_PROMPT",
    "DEPS_PROMPT",
    "Prompter",
    "ResolvedSettings",
    "SetupOptions",
    "resolve_settings",
]

OWNER_PROMPT = "What is your GitHub username/organization?"
REPO_PROMPT = "What is your repository name?"
DEPS_PROMPT = "Do you want to install semantic-release dependencies now?"


@dataclass(frozen=True, slots=True)
class SetupOptions:
    """Values given on the command line. None means "not supplied"."""

    owner: str | None = None
    repo_name: str | None = None
    install_deps: bool | None = None


@dataclass(frozen=True, slots=True)
class ResolvedSettings:
    """Fully resolved settings threaded through the setup steps."""

    owner: str
    repo_name: str
    install_deps: bool


class Prompter(Protocol):
    """Source of interactive answers.

    ``text`` must only return non-empty strings; implementations re-ask
    until they get one.
    """

    def text(self, message: str, *, default: str | None = None) -> str: ...

    def confirm(self, message: str, *, default: bool) -> bool: ...


def resolve_settings(
    options: SetupOptions,
    prompter: Prompter,
    *,
    default_repo_name: str,
) -> ResolvedSettings:
    """Fill unset options from the prompter.

    Explicit values win and are taken as-is, without validation: an empty
    ``--owner ""`` reaches the generated files unchanged.

    Args:
        options: Explicit values from flags.
        prompter: Answer source for the missing values.
        default_repo_name: Suggested repository name (working directory name).

    Returns:
        ResolvedSettings with every field set.
    """
    owner = options.owner
    if owner is None:
        owner = prompter.text(OWNER_PROMPT)

    repo_name = options.repo_name
    if repo_name is None:
        repo_name = prompter.text(REPO_PROMPT, default=default_repo_name)

    install_deps = options.install_deps
    if install_deps is None:
        install_deps = prompter.confirm(DEPS_PROMPT, default=True)

    return ResolvedSettings(owner=owner, repo_name=repo_name, install_deps=install_deps)
