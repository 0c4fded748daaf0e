"""Commit source backed by a git repository.

Reads a window of commits in reverse-topological order through GitPython
and attaches branch, tag and HEAD names to the commits they point at.

Execution Context:
    Library module - imported by the CLI and the TUI client

Dependencies:
    - GitPython: Repository access

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import logging
from pathlib import Path

from git import Head
from git import RemoteReference
from git import Repo
from git import TagReference
from git.exc import GitCommandError
from git.exc import InvalidGitRepositoryError
from git.exc import NoSuchPathError

from gitlanes_core.config import DEFAULT_MAX_COMMITS
from gitlanes_core.models import HEAD_ARROW
from gitlanes_core.models import HEAD_NAME
from gitlanes_core.models import TAG_PREFIX
from gitlanes_core.models import CommitDescriptor

logger = logging.getLogger(__name__)


# ---- Commit Source Class ------------------------------------------------------------------------------------


class GitCommitSource:
    """Reads commit windows from a git working tree.

    Attributes:
        repo: GitPython repository handle.
        root: Working tree root.
    """

    def __init__(
            self,
            path: Path | str | None = None,
    ) -> None:
        """Open the repository containing ``path``.

        Args:
            path: Directory inside the repository (defaults to cwd).

        Raises:
            RuntimeError: If no git repository contains ``path``.
        """
        start = Path(path or Path.cwd())
        try:
            self.repo = Repo(start, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as repo_error:
            msg = f"Not a git repository: {start}"
            raise RuntimeError(msg) from repo_error
        self.root = Path(self.repo.working_tree_dir or self.repo.git_dir)

    @property
    def remote_names(
            self,
    ) -> list[str]:
        return [remote.name for remote in self.repo.remotes]

    def current_branch(
            self,
    ) -> str | None:
        """Checked-out branch name, None when HEAD is detached or unborn."""
        head = self.repo.head
        if head.is_detached:
            return None
        try:
            return head.reference.name
        except (TypeError, ValueError):
            return None

    def attached_names(
            self,
    ) -> dict[str, list[str]]:
        """Names attached to each commit, keyed by commit hash.

        The checked-out branch appears as ``HEAD -> <branch>``, a detached
        HEAD as ``HEAD``, tags as ``tag: <name>``, remote branches as
        ``<remote>/<branch>``.
        """
        names: dict[str, list[str]] = {}
        if not self.repo.head.is_valid():
            return names

        checked_out = self.current_branch()
        head_sha = self.repo.head.commit.hexsha
        if checked_out is None:
            names.setdefault(head_sha, []).append(HEAD_NAME)
        else:
            names.setdefault(head_sha, []).append(f"{HEAD_ARROW}{checked_out}")

        for reference in self.repo.references:
            try:
                target = reference.commit.hexsha
            except ValueError:
                # Tags on trees or blobs
                continue
            if isinstance(reference, Head):
                if reference.name == checked_out:
                    continue
                names.setdefault(target, []).append(reference.name)
            elif isinstance(reference, RemoteReference):
                if reference.name.endswith(f"/{HEAD_NAME}"):
                    continue
                names.setdefault(target, []).append(reference.name)
            elif isinstance(reference, TagReference):
                names.setdefault(target, []).append(f"{TAG_PREFIX}{reference.name}")
        return names

    def load_commits(
            self,
            max_count: int = DEFAULT_MAX_COMMITS,
            all_branches: bool = True,
    ) -> list[CommitDescriptor]:
        """Read a commit window, children before parents.

        Args:
            max_count: Maximum number of commits to read.
            all_branches: Start from every branch and tag, not just HEAD.

        Returns:
            Commit descriptors in reverse-topological order.

        Raises:
            RuntimeError: If git fails to walk the history.
        """
        revs = ["--branches", "--remotes", "--tags"] if all_branches and self.repo.references else []
        if self.repo.head.is_valid():
            revs.append(HEAD_NAME)
        if not revs:
            logger.debug(f"No commits yet in {self.root}")
            return []

        names = self.attached_names()
        try:
            commits = [
                CommitDescriptor.create(
                    commit_id=commit.hexsha,
                    parent_ids=[parent.hexsha for parent in commit.parents],
                    author=commit.author.name or "",
                    timestamp=commit.authored_date,
                    message=str(commit.summary),
                    names=names.get(commit.hexsha, []),
                )
                for commit in self.repo.iter_commits(revs, max_count=max_count, topo_order=True)
            ]
        except GitCommandError as git_error:
            msg = f"Failed to read history from {self.root}: {git_error}"
            raise RuntimeError(msg) from git_error

        logger.debug(f"Loaded {len(commits)} commits from {self.root}")
        return commits


# ---- Convenience Functions ----------------------------------------------------------------------------------


def load_commits(
        path: Path | str | None = None,
        max_count: int = DEFAULT_MAX_COMMITS,
        all_branches: bool = True,
) -> list[CommitDescriptor]:
    """Read a commit window from the repository containing ``path``."""
    return GitCommitSource(path).load_commits(max_count=max_count, all_branches=all_branches)


def current_branch(
        path: Path | str | None = None,
) -> str | None:
    """Checked-out branch of the repository containing ``path``."""
    return GitCommitSource(path).current_branch()
