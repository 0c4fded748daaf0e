"""Lane allocation for the commit graph.

Tracks which lanes are waiting for which commit, hands out lanes to new
lineages, frees them when a lineage merges away, and compacts trailing free
lanes so the graph width follows the number of live branches.

Execution Context:
    Library module - used by gitlanes_core.graph

Dependencies:
    - gitlanes_core.colors: Color binding for new lanes

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import replace
from typing import Callable
from typing import Iterable
from typing import Sequence

from gitlanes_core.colors import ColorAssigner

logger = logging.getLogger(__name__)


# ---- Data Classes -------------------------------------------------------------------------------------------


@dataclass
class Lane:
    """Active lane slot.

    Attributes:
        waiting_for: Identifier of the next commit expected in this lane,
            None when the lane is free.
        color: Color index bound to the lineage in this lane.
    """

    waiting_for: str | None = None
    color: int | None = None

    @property
    def is_free(self) -> bool:
        return self.waiting_for is None


@dataclass(frozen=True)
class ParentLink:
    """A parent that continues in a lane other than its child's.

    Attributes:
        source: Lane of the child commit.
        target: Lane the parent lineage continues in.
        color: Color index of the segment joining them.
    """

    source: int
    target: int
    color: int


def _no_names(commit_id: str) -> tuple[str, ...]:
    return ()


# ---- Lane Allocator -----------------------------------------------------------------------------------------


class LaneAllocator:
    """Owns the list of active lanes for one graph build.

    Attributes:
        colors: Color assigner used when a lane is created.
        lanes: Active lanes in lane order; free lanes stay in place.
        peak_width: Largest number of lanes held at any time.
    """

    def __init__(
            self,
            colors: ColorAssigner | None = None,
    ) -> None:
        self.colors = colors or ColorAssigner()
        self.lanes: list[Lane] = []
        self.peak_width = 0
        self._waiting: dict[str, int] = {}

    @property
    def width(self) -> int:
        return len(self.lanes)

    def find(
            self,
            commit_id: str,
    ) -> int | None:
        """Lane waiting for ``commit_id``, if any."""
        return self._waiting.get(commit_id)

    def color_of(
            self,
            index: int,
    ) -> int | None:
        return self.lanes[index].color

    def snapshot(self) -> tuple[Lane, ...]:
        """Copy of the current lane list."""
        return tuple(replace(lane) for lane in self.lanes)

    def _first_free(self) -> int | None:
        for index, lane in enumerate(self.lanes):
            if lane.is_free:
                return index
        return None

    def assign(
            self,
            commit_id: str,
            names: Iterable[str] = (),
    ) -> int:
        """Lane for ``commit_id``.

        Reuses the lane waiting for the commit; otherwise claims the first
        free lane or appends one, binding a fresh color from ``names``.

        Args:
            commit_id: Commit the lane will carry.
            names: Names attached to that commit, when known.

        Returns:
            Lane index.
        """
        existing = self._waiting.get(commit_id)
        if existing is not None:
            return existing

        index = self._first_free()
        if index is None:
            self.lanes.append(Lane())
            index = len(self.lanes) - 1
            self.peak_width = max(self.peak_width, len(self.lanes))

        lane = self.lanes[index]
        lane.waiting_for = commit_id
        lane.color = self.colors.bind(names)
        self._waiting[commit_id] = index
        logger.debug(f"Lane {index} created for {commit_id[:8]} (color {lane.color})")
        return index

    def release(
            self,
            index: int,
    ) -> None:
        """Free a lane without removing it from the list."""
        lane = self.lanes[index]
        if lane.waiting_for is not None and self._waiting.get(lane.waiting_for) == index:
            del self._waiting[lane.waiting_for]
        lane.waiting_for = None
        lane.color = None

    def assign_parents(
            self,
            index: int,
            parent_ids: Sequence[str],
            names_of: Callable[[str], Iterable[str]] = _no_names,
    ) -> list[ParentLink]:
        """Hand the commit's lane over to its parents.

        The first parent continues in the commit's lane with its color,
        unless another lane already waits for it, in which case the commit's
        lane is freed and joins that lane. Every other parent gets its lane
        through ``assign``.

        Args:
            index: Lane of the commit being processed.
            parent_ids: Ordered parent identifiers of the commit.
            names_of: Lookup of attached names for a parent identifier.

        Returns:
            Links for every parent that continues outside ``index``.
        """
        lane = self.lanes[index]
        if lane.waiting_for is not None and self._waiting.get(lane.waiting_for) == index:
            del self._waiting[lane.waiting_for]
        lane.waiting_for = None

        if not parent_ids:
            self.release(index)
            return []

        links: list[ParentLink] = []
        first = parent_ids[0]
        target = self._waiting.get(first)
        if target is None:
            lane.waiting_for = first
            self._waiting[first] = index
        else:
            links.append(ParentLink(source=index, target=target, color=lane.color or 0))
            self.release(index)
            logger.debug(f"Lane {index} joins lane {target} at {first[:8]}")

        for parent_id in parent_ids[1:]:
            target = self.assign(parent_id, names_of(parent_id))
            if target != index:
                links.append(
                    ParentLink(source=index, target=target, color=self.lanes[target].color or 0)
                )
        return links

    def compact(self) -> int:
        """Drop trailing free lanes.

        Returns:
            Number of lanes removed.
        """
        removed = 0
        while self.lanes and self.lanes[-1].is_free:
            self.lanes.pop()
            removed += 1
        return removed
