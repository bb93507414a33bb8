"""Fixed content of the generated semantic-release files.

Both renderers are pure: identical inputs give byte-identical output, so
re-running setup leaves the files unchanged.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import PurePosixPath

__all__ = [
    "RELEASE_BRANCHES",
    "RELEASERC_PATH",
    "WORKFLOW_DIR",
    "WORKFLOW_FILENAME",
    "WORKFLOW_PATH",
    "release_config",
    "render_release_config",
    "render_workflow",
]

RELEASE_BRANCHES: tuple[str, ...] = ("main", "beta", "develop")

RELEASERC_PATH = PurePosixPath(".releaserc.json")
WORKFLOW_DIR = PurePosixPath(".github/workflows")
WORKFLOW_FILENAME = "release.yml"
WORKFLOW_PATH = WORKFLOW_DIR / WORKFLOW_FILENAME

_GIT_COMMIT_MESSAGE = "chore(release): ${nextRelease.version} [skip ci]\n\n${nextRelease.notes}"


def release_config() -> dict[str, object]:
    """Build the .releaserc.json structure.

    ``main`` is the stable channel; ``beta`` and ``develop`` publish
    pre-releases labelled ``beta`` and ``dev``.
    """
    return {
        "branches": [
            "main",
            {"name": "beta", "prerelease": True},
            {"name": "develop", "prerelease": "dev"},
        ],
        "plugins": [
            "@semantic-release/commit-analyzer",
            "@semantic-release/release-notes-generator",
            ["@semantic-release/changelog", {"changelogFile": "CHANGELOG.md"}],
            "@semantic-release/npm",
            [
                "@semantic-release/git",
                {
                    "assets": ["package.json", "CHANGELOG.md"],
                    "message": _GIT_COMMIT_MESSAGE,
                },
            ],
            "@semantic-release/github",
        ],
    }


def render_release_config() -> str:
    """Serialize the release config as 2-space indented JSON."""
    return json.dumps(release_config(), indent=2, ensure_ascii=False)


def _ref_condition(branches: Sequence[str]) -> str:
    refs = " || ".join(f"github.ref == 'refs/heads/{b}'" for b in branches)
    return f"github.event_name == 'push' && ({refs})"


def render_workflow(branches: Sequence[str] = RELEASE_BRANCHES) -> str:
    """Render the GitHub Actions release workflow.

    Two jobs: ``test`` runs on every push to ``branches``; ``release``
    needs ``test`` and only runs for pushes to those same branches.

    Args:
        branches: Branches that trigger the workflow and may release.

    Returns:
        Workflow YAML text ending with a newline.
    """
    setup_node = [
        "      - name: Setup Node.js",
        "        uses: actions/setup-node@v4",
        "        with:",
        "          node-version: 22",
        "          cache: 'npm'",
    ]

    lines = [
        "name: Release",
        "",
        "on:",
        "  push:",
        "    branches:",
        *(f"      - {b}" for b in branches),
        "    paths-ignore:",
        "      - '**.md'",
        "      - '.gitignore'",
        "",
        "jobs:",
        "  test:",
        "    name: Test",
        "    runs-on: ubuntu-latest",
        "    steps:",
        "      - name: Checkout",
        "        uses: actions/checkout@v4",
        "",
        *setup_node,
        "",
        "      - name: Install Dependencies",
        "        run: npm ci",
        "",
        "      - name: Lint",
        "        run: npm run lint --if-present",
        "",
        "      - name: Test",
        "        run: npm run test --if-present",
        "",
        "      - name: Build",
        "        run: npm run build --if-present",
        "",
        "  release:",
        "    name: Release",
        "    needs: test",
        f"    if: {_ref_condition(branches)}",
        "    runs-on: ubuntu-latest",
        "    permissions:",
        "      contents: write",
        "      issues: write",
        "      pull-requests: write",
        "      id-token: write",
        "    steps:",
        "      - name: Checkout",
        "        uses: actions/checkout@v4",
        "        with:",
        "          fetch-depth: 0",
        "",
        *setup_node,
        "          registry-url: 'https://registry.npmjs.org'",
        "",
        "      - name: Install Dependencies",
        "        run: npm ci",
        "",
        "      - name: Build",
        "        run: npm run build --if-present",
        "",
        "      - name: Semantic Release",
        "        env:",
        "          GITHUB_TOKEN: ${{ secrets.GITHUB_TOKEN }}",
        "        run: npx semantic-release",
    ]
    return "\n".join(lines) + "\n"
