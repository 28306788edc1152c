"""Test configuration and fixtures for regfind."""

from pathlib import Path
from typing import Iterable

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def make_tree(base: Path, paths: Iterable[str]) -> Path:
    """Create files (and their parent directories) below base.

    Paths ending in "/" create empty directories instead of files.
    """
    for relative in paths:
        target = base / relative
        if relative.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"contents of {relative}\n")
    return base


@pytest.fixture
def sample_tree(tmp_path):
    """A small project tree with hidden and dependency directories."""
    return make_tree(
        tmp_path,
        [
            ".git/config",
            ".env",
            "src/main.x",
            "src/util.x",
            "src/.cache/stale.x",
            "node_modules/pkg/index.x",
            "my-venv-backup/lib.x",
            "docs/guide.md",
            "docs/empty/",
            "README.md",
        ],
    )


@pytest.fixture
def tree_factory():
    """Return the make_tree helper for tests that build their own layout."""
    return make_tree
