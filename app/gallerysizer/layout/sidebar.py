"""Sidebar capacity helpers."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Optional

from app.gallerysizer.config import (
    DEFAULT_TILE_AR,
    DEFAULT_TILE_WIDTH,
    MAX_ONSCREEN_TILES,
    MAX_TILES_GRID_SIZE,
)
from app.gallerysizer.layout.geometry import Container


@dataclass(frozen=True)
class SidebarCapacity:
    max_columns: int
    total: int


def get_sidebar_max_tiles(container: Optional[Container]) -> Optional[SidebarCapacity]:
    """How many default-sized tiles fit in a sidebar container.

    Returns None without a container. Both counts are at least 1 and capped
    by MAX_ONSCREEN_TILES.
    """

    if container is None:
        return None

    max_columns = min(
        MAX_TILES_GRID_SIZE,
        max(1, math.floor(container.width / DEFAULT_TILE_WIDTH)),
    )
    # ideal height under default AR
    tile_height = DEFAULT_TILE_WIDTH / DEFAULT_TILE_AR
    total = min(
        MAX_ONSCREEN_TILES,
        max(1, math.floor(container.height / tile_height) * max_columns),
    )
    return SidebarCapacity(max_columns=max_columns, total=total)
