"""Commit graph builder.

Lays out an ordered commit window as graph rows: one row per commit with
the lane snapshot at that commit and the connection row to the next commit.

Execution Context:
    Library module - imported by the CLI and the TUI client

Dependencies:
    - gitlanes_core.lanes: Lane allocation
    - gitlanes_core.colors: Color binding
    - gitlanes_core.edges: Transition classification

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import logging
from typing import Iterable
from typing import Sequence

from gitlanes_core.colors import DEFAULT_PALETTE_SIZE
from gitlanes_core.colors import ColorAssigner
from gitlanes_core.edges import classify_transition
from gitlanes_core.lanes import LaneAllocator
from gitlanes_core.models import CommitDescriptor
from gitlanes_core.models import CommitNode
from gitlanes_core.models import EdgeType
from gitlanes_core.models import GraphCell
from gitlanes_core.models import GraphRow

logger = logging.getLogger(__name__)


# ---- Graph Builder ------------------------------------------------------------------------------------------


class GraphBuilder:
    """Builds graph rows from a reverse-topological commit window.

    Each ``build`` call starts from fresh lane and color state, so the same
    window always lays out the same way.

    Attributes:
        palette_size: Number of color indices handed out.
        remote_names: Remote names used when reading attached names.
    """

    def __init__(
            self,
            palette_size: int = DEFAULT_PALETTE_SIZE,
            remote_names: Iterable[str] = ("origin",),
    ) -> None:
        self.palette_size = palette_size
        self.remote_names = tuple(remote_names)

    def build(
            self,
            commits: Iterable[CommitDescriptor],
    ) -> list[GraphRow]:
        """Lay out commits, children before parents.

        Args:
            commits: Commit window in reverse-topological order.

        Returns:
            One GraphRow per commit; only the last has no connection row.
        """
        window = list(commits)
        names_by_id = {commit.id: commit.names for commit in window}

        allocator = LaneAllocator(ColorAssigner(self.palette_size, self.remote_names))
        rows: list[GraphRow] = []
        last = len(window) - 1

        for position, commit in enumerate(window):
            lane = allocator.assign(commit.id, commit.names)

            before = allocator.snapshot()
            cells = tuple(
                GraphCell(EdgeType.VERTICAL, state.color)
                if not state.is_free and state.color is not None else None
                for state in before
            )
            node = CommitNode.from_descriptor(commit, lane, allocator.color_of(lane) or 0)

            links = allocator.assign_parents(
                lane,
                commit.parent_ids,
                lambda parent_id: names_by_id.get(parent_id, ()),
            )
            allocator.compact()

            connection = None
            if position < last:
                connection = classify_transition(before, allocator.snapshot(), lane, links)

            rows.append(GraphRow(node=node, cells=cells, connection=connection))

        logger.debug(
            f"Built graph: {len(rows)} rows, peak width {allocator.peak_width}, "
            f"final width {allocator.width}"
        )
        return rows


# ---- Convenience Functions ----------------------------------------------------------------------------------


def build_graph(
        commits: Iterable[CommitDescriptor],
        palette_size: int = DEFAULT_PALETTE_SIZE,
        remote_names: Iterable[str] = ("origin",),
) -> list[GraphRow]:
    """Build graph rows with a one-off builder."""
    return GraphBuilder(palette_size=palette_size, remote_names=remote_names).build(commits)


def graph_width(
        rows: Sequence[GraphRow],
) -> int:
    """Rendering width: most lanes used by any node or connection row."""
    width = 0
    for row in rows:
        width = max(width, row.width)
        if row.connection is not None:
            width = max(width, row.connection.width)
    return width
