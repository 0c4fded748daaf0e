"""Branch legend for the commit graph.

Collects the branch names visible near the top of the graph together with
the color index of the lane that carries them.

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable
from typing import Sequence

from gitlanes_core.models import GraphRow
from gitlanes_core.models import RefType
from gitlanes_core.models import classify_ref


DEFAULT_SCAN_ROWS = 20
DEFAULT_MAX_ENTRIES = 5


@dataclass(frozen=True)
class LegendEntry:
    """Branch name shown in the legend with its color index."""

    name: str
    color: int


def collect_legend(
        rows: Sequence[GraphRow],
        scan_rows: int = DEFAULT_SCAN_ROWS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        remote_names: Iterable[str] = ("origin",),
) -> list[LegendEntry]:
    """Local branches and HEAD found in the first ``scan_rows`` rows.

    Tags and remote branches are left out. Names appear once, in the order
    they are first met.

    Args:
        rows: Graph rows, newest first.
        scan_rows: Number of rows to scan.
        max_entries: Maximum entries returned.
        remote_names: Known remote names.

    Returns:
        Legend entries.
    """
    remotes = tuple(remote_names)
    entries: list[LegendEntry] = []
    seen: set[str] = set()
    for row in rows[:scan_rows]:
        for name in row.node.names:
            ref_type, bare = classify_ref(name, remotes)
            if ref_type not in (RefType.LOCAL_BRANCH, RefType.HEAD):
                continue
            if bare in seen:
                continue
            seen.add(bare)
            entries.append(LegendEntry(name=bare, color=row.node.color))
    return entries[:max_entries]


def collect_legend_colors(
        rows: Sequence[GraphRow],
        scan_rows: int = DEFAULT_SCAN_ROWS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
) -> list[int]:
    """Color indices for the compact legend, one per distinct name of any kind."""
    colors: list[int] = []
    seen: set[str] = set()
    for row in rows[:scan_rows]:
        for name in row.node.names:
            if name in seen or len(colors) >= max_entries:
                continue
            seen.add(name)
            colors.append(row.node.color)
    return colors
