"""Commit search and window filtering.

Search finds the rows of a built graph that match a query, so a viewer can
jump between them. Filtering narrows a commit window before it is laid out,
reconnecting the kept commits through the ones that were dropped.

Execution Context:
    Library module - used by the CLI graph command and the TUI client

Dependencies:
    - dataclasses: Filter settings

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import replace
from enum import Enum
from typing import Iterable
from typing import Sequence

from gitlanes_core.models import CommitDescriptor
from gitlanes_core.models import GraphRow

logger = logging.getLogger(__name__)


# ---- Search --------------------------------------------------------------------------------------------------


class SearchType(Enum):
    """Commit field a search looks at."""

    MESSAGE = "message"
    AUTHOR = "author"
    HASH = "hash"

    def next(self) -> SearchType:
        """Following search type, wrapping around."""
        members = list(SearchType)
        return members[(members.index(self) + 1) % len(members)]


QUERY_PREFIXES = {
    "author:": SearchType.AUTHOR,
    "hash:": SearchType.HASH,
    "message:": SearchType.MESSAGE,
}


def parse_query(
        text: str,
        default: SearchType = SearchType.MESSAGE,
) -> tuple[str, SearchType]:
    """Split an optional ``author:``/``hash:``/``message:`` prefix off a query.

    Args:
        text: Query as typed.
        default: Search type when no prefix is given.

    Returns:
        Tuple of (query, search type).
    """
    stripped = text.strip()
    lowered = stripped.lower()
    for prefix, search_type in QUERY_PREFIXES.items():
        if lowered.startswith(prefix):
            return stripped[len(prefix):].strip(), search_type
    return stripped, default


def find_commits(
        rows: Sequence[GraphRow],
        query: str,
        search_type: SearchType = SearchType.MESSAGE,
) -> list[int]:
    """Indices of the rows whose commit matches ``query``.

    Message and author searches are case-insensitive substring matches.
    Hash searches match a prefix of the full id. An empty query matches
    nothing.

    Args:
        rows: Graph rows, newest first.
        query: Text to look for.
        search_type: Field to search.

    Returns:
        Matching row indices in display order.
    """
    if not query:
        return []
    needle = query.lower()
    matches = [
        index for index, row in enumerate(rows)
        if _matches(row, needle, search_type)
    ]
    logger.debug(f"Search {search_type.value} {query!r}: {len(matches)} match(es)")
    return matches


def _matches(
        row: GraphRow,
        needle: str,
        search_type: SearchType,
) -> bool:
    node = row.node
    if search_type is SearchType.AUTHOR:
        return needle in node.author.lower()
    if search_type is SearchType.HASH:
        return node.id.lower().startswith(needle)
    return needle in node.message.lower()


def next_match(
        matches: Sequence[int],
        current: int,
) -> int | None:
    """First match after ``current``, wrapping to the first match."""
    if not matches:
        return None
    for index in matches:
        if index > current:
            return index
    return matches[0]


def previous_match(
        matches: Sequence[int],
        current: int,
) -> int | None:
    """Last match before ``current``, wrapping to the last match."""
    if not matches:
        return None
    for index in reversed(matches):
        if index < current:
            return index
    return matches[-1]


# ---- Filter --------------------------------------------------------------------------------------------------


@dataclass
class CommitFilter:
    """Criteria a commit must meet to stay in the window.

    Attributes:
        author: Case-insensitive substring of the author name.
        message: Case-insensitive substring of the commit message.
        since: Earliest timestamp kept, inclusive.
        until: Latest timestamp kept, inclusive.
    """

    author: str | None = None
    message: str | None = None
    since: int | None = None
    until: int | None = None

    def is_active(self) -> bool:
        """Check whether any criterion is set."""
        return any(value is not None for value in (self.author, self.message, self.since, self.until))

    def clear(self) -> None:
        """Drop every criterion."""
        self.author = None
        self.message = None
        self.since = None
        self.until = None

    def matches(
            self,
            commit: CommitDescriptor,
    ) -> bool:
        """Check a single commit against every set criterion."""
        if self.author is not None and self.author.lower() not in commit.author.lower():
            return False
        if self.message is not None and self.message.lower() not in commit.message.lower():
            return False
        if self.since is not None and commit.timestamp < self.since:
            return False
        if self.until is not None and commit.timestamp > self.until:
            return False
        return True

    def apply(
            self,
            commits: Iterable[CommitDescriptor],
    ) -> list[CommitDescriptor]:
        """Keep the matching commits and reconnect them across dropped ones.

        A kept commit's parents are replaced by their nearest kept ancestors
        inside the window, so the graph still shows how the matches relate.
        Parents outside the window are left as they are.

        Args:
            commits: Window in reverse-topological order.

        Returns:
            Kept commits, in the same order.
        """
        window = list(commits)
        if not self.is_active():
            return window

        in_window = {commit.id for commit in window}
        # Dropped commit id -> kept ancestors standing in for it.
        resolved: dict[str, tuple[str, ...]] = {}
        kept: list[CommitDescriptor] = []

        for commit in reversed(window):
            parents: list[str] = []
            for parent_id in commit.parent_ids:
                if parent_id in in_window:
                    candidates = resolved.get(parent_id, (parent_id,))
                else:
                    candidates = (parent_id,)
                for candidate in candidates:
                    if candidate not in parents:
                        parents.append(candidate)

            if self.matches(commit):
                kept.append(replace(commit, parent_ids=tuple(parents)))
            else:
                resolved[commit.id] = tuple(parents)

        kept.reverse()
        logger.debug(f"Filter kept {len(kept)} of {len(window)} commit(s)")
        return kept
