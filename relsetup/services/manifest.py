"""package.json patching."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from relsetup.core.result import Err, Ok, Result
from relsetup.core.structured import StrDict, as_str_dict, get_str

__all__ = [
    "MANIFEST_FILENAME",
    "ManifestError",
    "load_manifest",
    "patch_repository",
    "render_manifest",
    "repository_url",
    "version_tag",
]

MANIFEST_FILENAME = "package.json"


@dataclass(frozen=True, slots=True)
class ManifestError:
    """package.json could not be parsed."""

    message: str
    path: Path


def repository_url(owner: str, repo_name: str) -> str:
    return f"https://github.com/{owner}/{repo_name}.git"


def load_manifest(path: Path) -> Result[StrDict, ManifestError]:
    """Read and parse a package.json.

    Read errors (missing file, permissions) are not caught.

    Returns:
        Ok(manifest) on success, Err(ManifestError) for invalid JSON or a
        non-object root.
    """
    text = path.read_text(encoding="utf-8")
    try:
        data: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ManifestError(f"Invalid JSON in {path.name}: {e}", path=path))

    manifest = as_str_dict(data)
    if manifest is None:
        return Err(ManifestError(f"{path.name} root must be a JSON object", path=path))
    return Ok(manifest)


def patch_repository(manifest: StrDict, owner: str, repo_name: str) -> StrDict:
    """Return a copy of manifest with its ``repository`` field replaced.

    Other keys keep their values and order. An existing ``repository`` key
    keeps its position; a new one is appended.
    """
    patched = dict(manifest)
    patched["repository"] = {"type": "git", "url": repository_url(owner, repo_name)}
    return patched


def render_manifest(manifest: StrDict) -> str:
    return json.dumps(manifest, indent=2, ensure_ascii=False)


def version_tag(manifest: StrDict) -> str | None:
    """``v<version>`` when the manifest declares a non-empty version string."""
    version = get_str(manifest, "version")
    if version is None:
        return None
    return f"v{version}"
