"""Tests for edge classification between rows.

Execution Context:
    Test module - run via pytest

Dependencies:
    - pytest: Test framework
    - gitlanes_core.edges: Module under test
"""
from __future__ import annotations

from gitlanes_core.edges import classify_transition, span_edges
from gitlanes_core.lanes import Lane, ParentLink
from gitlanes_core.models import EdgeType, GraphCell


def _edges(row) -> list[EdgeType | None]:
    return [cell.edge if cell else None for cell in row.cells]


# ---- Span Direction Tests ------------------------------------------------------------------------------------


class TestSpanEdges:
    """Tests for span_edges()."""

    def test_rightward(self) -> None:
        """Test a span to the right forks right and merges from the left."""
        link = ParentLink(source=0, target=2, color=1)
        assert span_edges(link) == (EdgeType.FORK_RIGHT, EdgeType.MERGE_FROM_LEFT)

    def test_leftward(self) -> None:
        """Test a span to the left forks left and merges from the right."""
        link = ParentLink(source=2, target=0, color=1)
        assert span_edges(link) == (EdgeType.FORK_LEFT, EdgeType.MERGE_FROM_RIGHT)


# ---- Transition Tests ----------------------------------------------------------------------------------------


class TestClassifyTransition:
    """Tests for classify_transition()."""

    def test_pass_through(self) -> None:
        """Test continuing lanes draw verticals in their colors."""
        before = [Lane("C", 0), Lane("X", 1)]
        after = [Lane("P", 0), Lane("X", 1)]

        row = classify_transition(before, after, lane=0, links=[])

        assert row.cells == (GraphCell(EdgeType.VERTICAL, 0), GraphCell(EdgeType.VERTICAL, 1))

    def test_fork_right_span(self) -> None:
        """Test a span runs horizontally to its merge and crosses live lanes."""
        before = [Lane("M", 0), Lane("Y", 1), Lane()]
        after = [Lane("A", 0), Lane("Y", 1), Lane(), Lane("F", 4)]
        link = ParentLink(source=0, target=3, color=4)

        row = classify_transition(before, after, lane=0, links=[link])

        assert _edges(row) == [
            EdgeType.FORK_RIGHT,
            EdgeType.CROSS,
            EdgeType.HORIZONTAL,
            EdgeType.MERGE_FROM_LEFT,
        ]
        assert {cell.color for cell in row.cells} == {4}

    def test_fork_left_after_compaction(self) -> None:
        """Test a lineage merging away keeps its lane in the connection row."""
        before = [Lane("B", 0), Lane("F1", 2)]
        after = [Lane("B", 0)]
        link = ParentLink(source=1, target=0, color=2)

        row = classify_transition(before, after, lane=1, links=[link])

        assert row.width == 2
        assert _edges(row) == [EdgeType.MERGE_FROM_RIGHT, EdgeType.FORK_LEFT]
        assert row.cells[1].color == 2

    def test_shared_run_stays_horizontal(self) -> None:
        """Test a free lane inside two spans of one commit is a plain run."""
        before = [Lane("O", 0)]
        after = [Lane("P1", 0), Lane(), Lane("P2", 1), Lane("P3", 2)]
        links = [
            ParentLink(source=0, target=2, color=1),
            ParentLink(source=0, target=3, color=2),
        ]

        row = classify_transition(before, after, lane=0, links=links)

        assert _edges(row) == [
            EdgeType.FORK_RIGHT,
            EdgeType.HORIZONTAL,
            EdgeType.MERGE_FROM_LEFT,
            EdgeType.MERGE_FROM_LEFT,
        ]
        assert row.cells[0].color == 1
        assert row.cells[3].color == 2

    def test_criss_cross_forks_both_ways(self) -> None:
        """Test spans leaving on both sides share one both-ways fork."""
        before = [Lane("B", 0), Lane("X", 1), Lane("W", 2), Lane("Y", 3)]
        after = [Lane("B", 0), Lane(), Lane("W", 2), Lane("Y", 3)]
        links = [
            ParentLink(source=1, target=0, color=1),
            ParentLink(source=1, target=3, color=3),
        ]

        row = classify_transition(before, after, lane=1, links=links)

        assert _edges(row) == [
            EdgeType.MERGE_FROM_RIGHT,
            EdgeType.FORK_BOTH,
            EdgeType.CROSS,
            EdgeType.MERGE_FROM_LEFT,
        ]
        assert row.cells[0].color == 1
        assert row.cells[2].color == 3
        assert row.cells[3].color == 3

    def test_both_ways_with_left_run(self) -> None:
        """Test the left span of a both-ways fork keeps its own run."""
        before = [Lane("B", 5), Lane("W", 6), Lane("X", 7)]
        after = [Lane("B", 5), Lane("W", 6), Lane(), Lane("Q", 8)]
        links = [
            ParentLink(source=2, target=0, color=7),
            ParentLink(source=2, target=3, color=8),
        ]

        row = classify_transition(before, after, lane=2, links=links)

        assert _edges(row) == [
            EdgeType.MERGE_FROM_RIGHT,
            EdgeType.CROSS,
            EdgeType.FORK_BOTH,
            EdgeType.MERGE_FROM_LEFT,
        ]

    def test_duplicate_links_collapse(self) -> None:
        """Test repeated links draw one span."""
        before = [Lane("M", 0), Lane()]
        after = [Lane("A", 0), Lane(), Lane("F", 2)]
        link = ParentLink(source=0, target=2, color=2)

        row = classify_transition(before, after, lane=0, links=[link, link])

        assert _edges(row) == [EdgeType.FORK_RIGHT, EdgeType.HORIZONTAL, EdgeType.MERGE_FROM_LEFT]

    def test_root_commit(self) -> None:
        """Test a root in the only lane leaves an empty row."""
        row = classify_transition([Lane("R", 0)], [], lane=0, links=[])

        assert row.cells == ()

    def test_root_beside_live_lane(self) -> None:
        """Test a root leaves its lane empty while others continue."""
        before = [Lane("R", 0), Lane("X", 1)]
        after = [Lane(), Lane("X", 1)]

        row = classify_transition(before, after, lane=0, links=[])

        assert _edges(row) == [None, EdgeType.VERTICAL]

    def test_new_lane_without_span_is_empty(self) -> None:
        """Test a lane opened for an unrelated commit draws nothing yet."""
        before = [Lane("C", 0)]
        after = [Lane("P", 0), Lane("Z", 3)]

        row = classify_transition(before, after, lane=0, links=[])

        assert _edges(row) == [EdgeType.VERTICAL, None]
