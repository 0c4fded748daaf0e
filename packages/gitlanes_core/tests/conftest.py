"""Shared test configuration and fixtures for gitlanes_core tests.

Provides:
- ``make_commit``: factory for commit descriptors with short readable ids.
- Ready-made commit windows (linear, feature branch, independent branches,
  octopus, criss-cross) and seeded random DAG windows.
- ``git_repo``: a throwaway git repository built with GitPython.
"""
from __future__ import annotations

import random
from pathlib import Path
from typing import Callable

import pytest
from git import Actor
from git import Repo

from gitlanes_core.models import CommitDescriptor


AUTHOR = Actor("Test User", "test@example.com")


# ---- Commit Window Fixtures ----------------------------------------------------------------------------------


@pytest.fixture
def make_commit() -> Callable[..., CommitDescriptor]:
    """Factory for commit descriptors."""

    def _make(
            commit_id: str,
            parents: tuple[str, ...] | list[str] = (),
            names: tuple[str, ...] | list[str] = (),
    ) -> CommitDescriptor:
        return CommitDescriptor.create(
            commit_id=commit_id,
            parent_ids=parents,
            author="Test User",
            timestamp=1_700_000_000,
            message=f"Commit {commit_id}",
            names=names,
        )

    return _make


@pytest.fixture
def linear_window(make_commit) -> list[CommitDescriptor]:
    """C4 -> C3 -> C2 -> C1."""
    return [
        make_commit("C4", ["C3"], ["HEAD -> main"]),
        make_commit("C3", ["C2"]),
        make_commit("C2", ["C1"]),
        make_commit("C1"),
    ]


@pytest.fixture
def feature_window(make_commit) -> list[CommitDescriptor]:
    """Branch ``feature`` forked at B1 with F1, F2, merged by M.

    Newest first: N, M, A2, F2, F1, B1, A0.
    """
    return [
        make_commit("N", ["M"], ["HEAD -> main"]),
        make_commit("M", ["A2", "F2"]),
        make_commit("A2", ["B1"]),
        make_commit("F2", ["F1"], ["feature"]),
        make_commit("F1", ["B1"]),
        make_commit("B1", ["A0"]),
        make_commit("A0"),
    ]


@pytest.fixture
def independent_window(make_commit) -> list[CommitDescriptor]:
    """Two unrelated, unnamed lineages X and Y that never meet."""
    return [
        make_commit("X2", ["X1"]),
        make_commit("Y2", ["Y1"]),
        make_commit("X1"),
        make_commit("Y1"),
    ]


@pytest.fixture
def octopus_window(make_commit) -> list[CommitDescriptor]:
    """Merge commit O with three parents."""
    return [
        make_commit("O", ["P1", "P2", "P3"]),
        make_commit("P1"),
        make_commit("P2"),
        make_commit("P3"),
    ]


@pytest.fixture
def criss_cross_window(make_commit) -> list[CommitDescriptor]:
    """Merge X whose parents sit in lanes on both sides of it."""
    return [
        make_commit("A", ["B"]),
        make_commit("X0", ["X"]),
        make_commit("Z", ["W"]),
        make_commit("C", ["Y"]),
        make_commit("X", ["B", "Y"]),
        make_commit("B"),
        make_commit("W"),
        make_commit("Y"),
    ]


def _random_window(seed: int, size: int = 40) -> list[CommitDescriptor]:
    rng = random.Random(seed)
    commits = []
    for index in range(size):
        earlier = [f"R{i}" for i in range(index)]
        count = min(rng.choice((0, 1, 1, 1, 2, 2, 3)), len(earlier))
        names = [f"branch-{index}"] if rng.random() < 0.2 else []
        commits.append(CommitDescriptor.create(
            commit_id=f"R{index}",
            parent_ids=rng.sample(earlier, count),
            author="Test User",
            timestamp=1_700_000_000 + index,
            message=f"Commit R{index}",
            names=names,
        ))
    # Built oldest first, laid out newest first.
    commits.reverse()
    return commits


@pytest.fixture
def make_random_window() -> Callable[..., list[CommitDescriptor]]:
    """Factory for seeded random DAG windows."""
    return _random_window


@pytest.fixture
def random_window() -> list[CommitDescriptor]:
    """Seeded random DAG with merges, octopus merges and many roots."""
    return _random_window(7)


# ---- Git Repository Fixtures --------------------------------------------------------------------------------


def _commit(
        repo: Repo,
        root: Path,
        message: str,
        parents: list | None = None,
        head: bool = True,
):
    marker = root / "history.txt"
    marker.write_text(f"{message}\n")
    repo.index.add([str(marker)])
    return repo.index.commit(
        message,
        parent_commits=parents,
        head=head,
        author=AUTHOR,
        committer=AUTHOR,
    )


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Repo:
    """Initialized repository without commits."""
    return Repo.init(tmp_path / "repo", initial_branch="main")


@pytest.fixture
def git_repo(empty_git_repo: Repo) -> dict:
    """Repository with a merged feature branch, a tag and an unmerged side branch.

    History (newest first)::

        merge (main)  <- c2, f1
        c2
        f1 (feature)  <- c1
        s1 (side)     <- c1
        c1 (tag v1.0)
    """
    repo = empty_git_repo
    root = Path(repo.working_tree_dir)

    c1 = _commit(repo, root, "Initial commit")
    repo.create_tag("v1.0", ref=c1)

    f1 = _commit(repo, root, "Feature work", parents=[c1], head=False)
    repo.create_head("feature", f1)

    s1 = _commit(repo, root, "Side work", parents=[c1], head=False)
    repo.create_head("side", s1)

    c2 = _commit(repo, root, "Mainline work")
    merge = _commit(repo, root, "Merge feature", parents=[c2, f1])

    return {
        "repo": repo,
        "root": root,
        "c1": c1,
        "c2": c2,
        "f1": f1,
        "s1": s1,
        "merge": merge,
    }
