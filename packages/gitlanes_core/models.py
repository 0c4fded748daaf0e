"""Data models for the gitlanes commit graph.

Defines the input commit descriptors, the laid-out commit nodes, and the
row/cell structures handed to presentation layers.

Execution Context:
    Library module - imported by other gitlanes_core modules

Dependencies:
    - dataclasses: Data class decorators
    - enum: Edge and ref classification

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Iterable


# ---- Enumerations -------------------------------------------------------------------------------------------


class EdgeType(Enum):
    """What a lane draws in a graph row.

    Every connection span starts at the commit's lane. When spans leave it
    on both sides the commit lane is FORK_BOTH. CROSS marks a span passing
    over a lane whose own lineage continues straight down; a lane shared by
    several spans of the same commit stays HORIZONTAL.
    """

    VERTICAL = "vertical"
    FORK_RIGHT = "fork_right"
    FORK_LEFT = "fork_left"
    FORK_BOTH = "fork_both"
    MERGE_FROM_RIGHT = "merge_from_right"
    MERGE_FROM_LEFT = "merge_from_left"
    HORIZONTAL = "horizontal"
    CROSS = "cross"

    @property
    def is_fork(self) -> bool:
        return self in (EdgeType.FORK_RIGHT, EdgeType.FORK_LEFT, EdgeType.FORK_BOTH)

    @property
    def is_merge(self) -> bool:
        return self in (EdgeType.MERGE_FROM_RIGHT, EdgeType.MERGE_FROM_LEFT)

    @property
    def is_span_interior(self) -> bool:
        return self in (EdgeType.HORIZONTAL, EdgeType.CROSS)


class RefType(Enum):
    """Kind of name attached to a commit."""

    HEAD = "head"
    LOCAL_BRANCH = "local_branch"
    REMOTE_BRANCH = "remote_branch"
    TAG = "tag"


TAG_PREFIX = "tag: "
HEAD_NAME = "HEAD"
HEAD_ARROW = "HEAD -> "


def classify_ref(
        name: str,
        remote_names: Iterable[str] = ("origin",),
) -> tuple[RefType, str]:
    """Classify an attached name and return its display form.

    Args:
        name: Attached name as produced by the commit source
            (``HEAD``, ``HEAD -> main``, ``tag: v1.0``, ``origin/main``, ``main``).
        remote_names: Known remote names, used to spot remote branches.

    Returns:
        Tuple of (ref type, bare name). ``HEAD -> main`` is reported as HEAD
        with bare name ``main``.
    """
    if name == HEAD_NAME:
        return RefType.HEAD, HEAD_NAME
    if name.startswith(HEAD_ARROW):
        return RefType.HEAD, name[len(HEAD_ARROW):]
    if name.startswith(TAG_PREFIX):
        return RefType.TAG, name[len(TAG_PREFIX):]
    remote, sep, _ = name.partition("/")
    if sep and remote in set(remote_names):
        return RefType.REMOTE_BRANCH, name
    return RefType.LOCAL_BRANCH, name


# ---- Input Model --------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class CommitDescriptor:
    """Commit as supplied by the commit source.

    Attributes:
        id: Stable commit identifier (full hash).
        parent_ids: Ordered parent identifiers; the first is the mainline.
        author: Author name.
        timestamp: Authored-at time in epoch seconds.
        message: Commit summary line.
        names: Attached names (branches, tags, HEAD).
    """

    id: str
    parent_ids: tuple[str, ...] = ()
    author: str = ""
    timestamp: int = 0
    message: str = ""
    names: tuple[str, ...] = ()

    @classmethod
    def create(
            cls,
            commit_id: str,
            parent_ids: Iterable[str] = (),
            author: str = "",
            timestamp: int = 0,
            message: str = "",
            names: Iterable[str] = (),
    ) -> CommitDescriptor:
        """Create a descriptor, normalizing sequences to tuples."""
        return cls(
            id=commit_id,
            parent_ids=tuple(parent_ids),
            author=author,
            timestamp=timestamp,
            message=message,
            names=tuple(names),
        )

    @classmethod
    def from_dict(
            cls,
            data: dict[str, Any],
    ) -> CommitDescriptor:
        """Create descriptor from dictionary.

        Args:
            data: Dictionary with ``id`` and optional ``parent_ids``,
                ``author``, ``timestamp``, ``message``, ``names``.

        Returns:
            CommitDescriptor instance.
        """
        return cls.create(
            commit_id=data["id"],
            parent_ids=data.get("parent_ids", ()),
            author=data.get("author", ""),
            timestamp=int(data.get("timestamp", 0)),
            message=data.get("message", ""),
            names=data.get("names", ()),
        )


# ---- Layout Model -------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class CommitNode:
    """Commit placed on the graph.

    Attributes:
        id: Commit identifier.
        parent_ids: Ordered parent identifiers.
        author: Author name.
        timestamp: Authored-at time in epoch seconds.
        message: Commit summary line.
        names: Attached names.
        lane: Assigned lane index.
        color: Assigned color index.
    """

    id: str
    parent_ids: tuple[str, ...]
    author: str
    timestamp: int
    message: str
    names: tuple[str, ...]
    lane: int
    color: int

    @classmethod
    def from_descriptor(
            cls,
            commit: CommitDescriptor,
            lane: int,
            color: int,
    ) -> CommitNode:
        return cls(
            id=commit.id,
            parent_ids=commit.parent_ids,
            author=commit.author,
            timestamp=commit.timestamp,
            message=commit.message,
            names=commit.names,
            lane=lane,
            color=color,
        )

    @property
    def short_id(self) -> str:
        """Abbreviated identifier (7 characters)."""
        return self.id[:7]

    @property
    def is_merge(self) -> bool:
        return len(self.parent_ids) > 1


@dataclass(frozen=True)
class GraphCell:
    """One lane's contribution to a row.

    Attributes:
        edge: What the lane draws.
        color: Color index of the lineage the cell belongs to.
    """

    edge: EdgeType
    color: int


@dataclass(frozen=True)
class ConnectionRow:
    """Segments drawn between a commit row and the next one.

    Attributes:
        cells: One optional cell per lane, in lane order.
    """

    cells: tuple[GraphCell | None, ...] = ()

    @property
    def width(self) -> int:
        return len(self.cells)

    def cell(self, lane: int) -> GraphCell | None:
        """Cell at ``lane``, or None when the lane is empty or out of range."""
        if 0 <= lane < len(self.cells):
            return self.cells[lane]
        return None


@dataclass(frozen=True)
class GraphRow:
    """Laid-out commit row.

    Attributes:
        node: The commit drawn on this row.
        cells: Lane occupancy when the commit is drawn; the node's own lane
            carries the node's color.
        connection: Transition to the next row, None for the last row.
    """

    node: CommitNode
    cells: tuple[GraphCell | None, ...] = field(default_factory=tuple)
    connection: ConnectionRow | None = None

    @property
    def width(self) -> int:
        return len(self.cells)
