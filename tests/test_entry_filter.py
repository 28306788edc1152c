"""Unit tests for the entry filter."""

from unittest.mock import MagicMock

import pytest

from regfind.entry import Entry
from regfind.entry_filter import EntryFilter
from regfind.exclusion_rules.composite_rules import CompositeExclusionRules
from regfind.exclusion_rules.git_rules import GitIgnoreExclusionRules
from regfind.types import EntryType


def directory(name: str, depth: int = 1) -> Entry:
    return Entry(f"/root/{name}", name, EntryType.DIRECTORY, depth=depth)


@pytest.mark.parametrize(
    "name",
    [".git", ".hidden", "node_modules", "venv", ".venv", "my-venv-backup", "old_node_modules", "repo.git"],
)
def test_prunes_hidden_and_library_directories(name):
    assert EntryFilter().should_prune(directory(name))


@pytest.mark.parametrize("name", ["src", "docs", "vendor", "environment", "git", "modules"])
def test_keeps_ordinary_directories(name):
    assert not EntryFilter().should_prune(directory(name))


def test_prunes_hidden_files():
    assert EntryFilter().should_prune(Entry("/root/.env", ".env", EntryType.FILE, depth=1))


def test_root_is_never_pruned():
    assert not EntryFilter().should_prune(directory(".hidden-root", depth=0))


def test_filter_is_callable():
    entry_filter = EntryFilter()
    assert entry_filter(directory("node_modules")) is True


def test_custom_rules_are_used():
    rules = MagicMock()
    rules.exclude.return_value = True
    entry_filter = EntryFilter(rules)
    entry = directory("anything")

    assert entry_filter.should_prune(entry)
    rules.exclude.assert_called_once_with(entry)


def test_create_without_gitignore(tmp_path):
    entry_filter = EntryFilter.create(tmp_path)
    assert isinstance(entry_filter.rules, CompositeExclusionRules)
    assert len(entry_filter.rules.rules) == 2


def test_create_with_gitignore(tmp_path):
    entry_filter = EntryFilter.create(tmp_path, respect_gitignore=True)
    rules = entry_filter.rules.rules
    assert len(rules) == 3
    assert isinstance(rules[-1], GitIgnoreExclusionRules)
