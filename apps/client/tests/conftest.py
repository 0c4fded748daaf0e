"""Shared fixtures for gitlanes client tests.

Provides an isolated user config and a small git repository with a merged
feature branch for the TUI to open.
"""
from __future__ import annotations

from pathlib import Path

import pytest
from git import Actor
from git import Repo

from gitlanes_core import config as config_module


AUTHOR = Actor("Test User", "test@example.com")


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the real user config out of client runs."""
    user_config = tmp_path / "home" / "config.json"
    monkeypatch.setattr(config_module, "USER_CONFIG_PATH", user_config)
    return user_config


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    """Repository with ``main`` and a merged ``feature`` branch."""
    root = tmp_path / "repo"
    repo = Repo.init(root, initial_branch="main")
    marker = root / "history.txt"

    def commit(message: str, parents: list | None = None, head: bool = True):
        marker.write_text(f"{message}\n")
        repo.index.add([str(marker)])
        return repo.index.commit(
            message,
            parent_commits=parents,
            head=head,
            author=AUTHOR,
            committer=AUTHOR,
        )

    base = commit("Initial commit")
    feature = commit("Add feature", parents=[base], head=False)
    repo.create_head("feature", feature)
    commit("Mainline work")
    commit("Merge feature", parents=[repo.head.commit, feature])
    return root
