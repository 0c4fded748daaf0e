"""Visual line indexing and selection over graph rows.

Every graph row is displayed as a node line followed by a connector line,
except the last row, which has no connector. A list of N rows therefore
spans 2N - 1 visual lines, and the node line of commit i sits at 2i.

Execution Context:
    Library module - imported by the CLI and the TUI client

Dependencies:
    - gitlanes_core.models: GraphRow

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from typing import Sequence

from gitlanes_core.models import GraphRow


DEFAULT_VISIBLE_HEIGHT = 10


# ---- Visual Line Helpers ------------------------------------------------------------------------------------


def visual_offset(
        commit_index: int,
) -> int:
    """Visual line holding the node of ``commit_index``."""
    return 2 * commit_index


def visual_length(
        row_count: int,
) -> int:
    """Number of visual lines for ``row_count`` rows (2N - 1, or 0)."""
    return 2 * row_count - 1 if row_count > 0 else 0


def clamp_visual_line(
        line: int,
        row_count: int,
) -> int:
    """Clamp a visual line into the displayable range.

    Returns 0 when there are no rows.
    """
    length = visual_length(row_count)
    if length == 0:
        return 0
    return max(0, min(line, length - 1))


def commit_index_at(
        line: int,
        row_count: int,
) -> int | None:
    """Commit owning a visual line; connector lines belong to the row above.

    Returns:
        Commit index, or None when the line is outside the graph.
    """
    if line < 0 or line >= visual_length(row_count):
        return None
    return line // 2


# ---- Selection ----------------------------------------------------------------------------------------------


class GraphSelection:
    """Selection cursor over graph rows with scroll tracking.

    ``scroll_offset`` is measured in visual lines and keeps the selected
    node line inside a window of ``visible_height`` lines.

    Attributes:
        rows: Rows being navigated.
        visible_height: Number of visual lines the view can show.
    """

    def __init__(
            self,
            rows: Sequence[GraphRow] = (),
            visible_height: int = DEFAULT_VISIBLE_HEIGHT,
    ) -> None:
        self.rows: list[GraphRow] = list(rows)
        self.visible_height = max(1, visible_height)
        self.selected = 0
        self.scroll_offset = 0

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def selected_row(self) -> GraphRow | None:
        if not self.rows:
            return None
        return self.rows[self.selected]

    @property
    def selected_line(self) -> int:
        """Visual line of the selected node."""
        return visual_offset(self.selected)

    def set_rows(
            self,
            rows: Sequence[GraphRow],
    ) -> None:
        """Replace rows, clamping the selection to the new length."""
        self.rows = list(rows)
        if self.selected >= len(self.rows):
            self.selected = max(0, len(self.rows) - 1)
        self._adjust_scroll()

    def set_visible_height(
            self,
            height: int,
    ) -> None:
        self.visible_height = max(1, height)
        self._adjust_scroll()

    def select(
            self,
            index: int,
    ) -> None:
        """Select ``index``, clamped to the available rows."""
        if not self.rows:
            self.selected = 0
        else:
            self.selected = max(0, min(index, len(self.rows) - 1))
        self._adjust_scroll()

    def select_next(self) -> None:
        self.select(self.selected + 1)

    def select_previous(self) -> None:
        self.select(self.selected - 1)

    def page_down(self) -> None:
        # A page holds visible_height lines, i.e. half as many commits
        self.select(self.selected + max(1, self.visible_height // 2))

    def page_up(self) -> None:
        self.select(self.selected - max(1, self.visible_height // 2))

    def select_first(self) -> None:
        self.select(0)

    def select_last(self) -> None:
        self.select(len(self.rows) - 1)

    def _adjust_scroll(self) -> None:
        total = visual_length(len(self.rows))
        line = self.selected_line
        if line < self.scroll_offset:
            self.scroll_offset = line
        elif line >= self.scroll_offset + self.visible_height:
            self.scroll_offset = line - self.visible_height + 1
        max_offset = max(0, total - self.visible_height)
        self.scroll_offset = max(0, min(self.scroll_offset, max_offset))
