"""Edge classification between consecutive commit rows.

Turns the lane state before and after a commit into a connection row. Each
fork is drawn as a bounded span: the fork cell in the commit's lane, the
horizontal run strictly between, and the merge cell in the parent's lane.
Nothing outside a span is ever marked horizontal, and a span running over
a lane whose lineage continues marks that lane as a crossing.

Execution Context:
    Library module - used by gitlanes_core.graph

Dependencies:
    - gitlanes_core.models: Cell and edge types

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from typing import Sequence

from gitlanes_core.lanes import Lane
from gitlanes_core.lanes import ParentLink
from gitlanes_core.models import ConnectionRow
from gitlanes_core.models import EdgeType
from gitlanes_core.models import GraphCell


# ---- Span Helpers -------------------------------------------------------------------------------------------


def span_edges(
        link: ParentLink,
) -> tuple[EdgeType, EdgeType]:
    """Fork and merge edge types for a link, by direction."""
    if link.target > link.source:
        return EdgeType.FORK_RIGHT, EdgeType.MERGE_FROM_LEFT
    return EdgeType.FORK_LEFT, EdgeType.MERGE_FROM_RIGHT


def _unique_links(
        links: Sequence[ParentLink],
) -> list[ParentLink]:
    seen: set[tuple[int, int]] = set()
    unique = []
    for link in links:
        if link.source == link.target or (link.source, link.target) in seen:
            continue
        seen.add((link.source, link.target))
        unique.append(link)
    return unique


# ---- Classification -----------------------------------------------------------------------------------------


def _fork_edge(
        directions: set[EdgeType],
) -> EdgeType:
    if len(directions) > 1:
        return EdgeType.FORK_BOTH
    return next(iter(directions))


def classify_transition(
        before: Sequence[Lane],
        after: Sequence[Lane],
        lane: int,
        links: Sequence[ParentLink],
) -> ConnectionRow:
    """Classify what each lane draws between a commit and the next row.

    Args:
        before: Lanes when the commit is drawn (its own lane included).
        after: Lanes once parents are assigned and trailing lanes compacted.
        lane: Lane of the commit.
        links: Parents continuing in a lane other than ``lane``.

    Returns:
        Connection row, as wide as the compacted lane list or the furthest
        lane a span reaches, whichever is larger.
    """
    spans = _unique_links(links)
    width = len(after)
    for link in spans:
        width = max(width, link.source + 1, link.target + 1)

    cells: list[GraphCell | None] = [None] * width
    passing: set[int] = set()

    # Pass-through lanes
    for index, state in enumerate(after):
        if state.is_free or state.color is None:
            continue
        if index == lane:
            cells[index] = GraphCell(EdgeType.VERTICAL, state.color)
        elif index < len(before) and before[index].waiting_for == state.waiting_for:
            cells[index] = GraphCell(EdgeType.VERTICAL, state.color)
            passing.add(index)

    # Span interiors; the first span through a lane gives its color
    interior: dict[int, int] = {}
    for link in spans:
        low, high = sorted((link.source, link.target))
        for index in range(low + 1, high):
            interior.setdefault(index, link.color)

    # Span endpoints; a source with spans on both sides forks both ways
    forks: dict[int, tuple[set[EdgeType], int]] = {}
    merges: dict[int, GraphCell] = {}
    for link in spans:
        fork, merge = span_edges(link)
        directions, _ = forks.setdefault(link.source, (set(), link.color))
        directions.add(fork)
        merges.setdefault(link.target, GraphCell(merge, link.color))

    for index, color in interior.items():
        if index in forks or index in merges:
            continue
        edge = EdgeType.CROSS if index in passing else EdgeType.HORIZONTAL
        cells[index] = GraphCell(edge, color)

    for index, cell in merges.items():
        cells[index] = cell
    for index, (directions, color) in forks.items():
        cells[index] = GraphCell(_fork_edge(directions), color)

    return ConnectionRow(cells=tuple(cells))
