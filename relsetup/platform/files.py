"""Filesystem helpers for generated files."""

from __future__ import annotations

from pathlib import Path

__all__ = ["write_text"]


def write_text(path: Path, content: str) -> None:
    """Overwrite path with content, creating parent directories as needed.

    A plain full overwrite: a crash mid-write leaves a truncated file, which
    the next run replaces. OSError is left to the caller.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)
