"""Lane color assignment.

Binds a color index to each lane when it is created. Named lineages get a
color derived from their name so the same branch keeps its color across
rebuilds; anonymous lineages draw from a round-robin counter.

Execution Context:
    Library module - used by the lane allocator

Dependencies:
    - zlib: Stable name hashing

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import logging
import zlib
from typing import Iterable

from gitlanes_core.models import RefType
from gitlanes_core.models import classify_ref

logger = logging.getLogger(__name__)


# ---- Configuration Constants ---------------------------------------------------------------------------------


DEFAULT_PALETTE_SIZE = 12

# Lower rank wins when several names are attached to one commit
_REF_RANK = {
    RefType.HEAD: 0,
    RefType.LOCAL_BRANCH: 0,
    RefType.REMOTE_BRANCH: 1,
    RefType.TAG: 2,
}


# ---- Name Selection -----------------------------------------------------------------------------------------


def color_key(
        names: Iterable[str],
        remote_names: Iterable[str] = ("origin",),
) -> str | None:
    """Pick the name a lineage is colored by.

    Local branches win over remote branches, which win over tags. Remote
    branches lose their remote prefix so ``origin/feature`` and ``feature``
    share a color. A bare ``HEAD`` never names a lineage.

    Args:
        names: Names attached to the commit.
        remote_names: Known remote names.

    Returns:
        The chosen name, or None when no name qualifies.
    """
    remotes = tuple(remote_names)
    best: tuple[int, int, str] | None = None
    for position, name in enumerate(names):
        ref_type, bare = classify_ref(name, remotes)
        if ref_type is RefType.HEAD and bare == "HEAD":
            continue
        if ref_type is RefType.REMOTE_BRANCH:
            bare = bare.split("/", 1)[1]
        if not bare:
            continue
        candidate = (_REF_RANK[ref_type], position, bare)
        if best is None or candidate < best:
            best = candidate
    return best[2] if best else None


def name_color(
        name: str,
        palette_size: int = DEFAULT_PALETTE_SIZE,
) -> int:
    """Deterministic color index for a name.

    Uses CRC-32 so the result does not depend on interpreter hash seeding.
    """
    return zlib.crc32(name.encode("utf-8")) % palette_size


# ---- Color Assigner -----------------------------------------------------------------------------------------


class ColorAssigner:
    """Hands out color indices for newly created lanes.

    Attributes:
        palette_size: Number of distinct colors available.
        remote_names: Remote names used when classifying attached names.
    """

    def __init__(
            self,
            palette_size: int = DEFAULT_PALETTE_SIZE,
            remote_names: Iterable[str] = ("origin",),
    ) -> None:
        if palette_size < 1:
            msg = f"Palette size must be positive, got {palette_size}"
            raise ValueError(msg)
        self.palette_size = palette_size
        self.remote_names = tuple(remote_names)
        self._next = 0

    def next_color(self) -> int:
        """Next color from the round-robin counter."""
        color = self._next % self.palette_size
        self._next += 1
        return color

    def bind(
            self,
            names: Iterable[str] = (),
    ) -> int:
        """Color for a lane being created for a commit carrying ``names``.

        Args:
            names: Names attached to the commit the lane is created for.

        Returns:
            Color index in ``range(palette_size)``.
        """
        key = color_key(names, self.remote_names)
        if key is not None:
            color = name_color(key, self.palette_size)
            logger.debug(f"Lane colored {color} from name '{key}'")
            return color
        return self.next_color()
