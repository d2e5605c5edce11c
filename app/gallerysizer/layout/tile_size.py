"""Gallery tile size calculator.

Determines how to size ``n`` tiles relative to their container, optimizing
for both tile aspect ratio and screen coverage.

Pipeline: candidate column counts (see ``columns``) -> one ``TileCandidate``
per count -> pick the largest tile -> format as CSS lengths.

Everything here is pure; UI layers read the container size and apply the
returned lengths themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Iterable, Optional

from app.gallerysizer.config import CAPPED_MAX_TILE_AR, DEFAULT_MAX_TILE_AR
from app.gallerysizer.layout.columns import determine_columns
from app.gallerysizer.layout.geometry import Container

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileCandidate:
    columns: int
    rows: int
    width: float
    height: float
    area: float


@dataclass(frozen=True)
class TileSize:
    """Tile size as CSS lengths.

    width: percentage of the container width, truncated to one decimal.
    height / max_width: pixels.
    """

    width: str
    height: str
    max_width: str

    def to_dict(self) -> dict[str, str]:
        return {"width": self.width, "height": self.height, "maxWidth": self.max_width}


EMPTY_TILE_SIZE = TileSize(width="0%", height="0px", max_width="0px")


def max_tile_aspect_ratio(max_columns: Optional[int] = None) -> float:
    return CAPPED_MAX_TILE_AR if _column_cap(max_columns) else DEFAULT_MAX_TILE_AR


def _column_cap(max_columns: Optional[int]) -> Optional[int]:
    if max_columns is None or max_columns <= 0:
        return None
    return int(max_columns)


def define_tile(
    *,
    n: int,
    min_tile_aspect_ratio: float,
    max_tile_aspect_ratio: float,
    container_width: float,
    container_height: float,
    columns: int,
) -> TileCandidate:
    """Evaluate the tile geometry for a fixed column count."""

    if columns <= 0:
        raise ValueError("columns must be > 0")

    rows = math.ceil(n / columns)

    # Fill available x space completely.
    raw_width = math.floor(container_width / columns)

    # Apply aspect ratio to x to determine y, then keep tiles from being taller
    # than the container once x is filled (e.g. n=1 in a wide container).
    ideal_height = raw_width / min_tile_aspect_ratio
    constrained_height = container_height / rows
    height = min(ideal_height, constrained_height)
    width = float(min(height * max_tile_aspect_ratio, raw_width))

    return TileCandidate(
        columns=columns,
        rows=rows,
        width=width,
        height=height,
        area=width * height,
    )


def select_tile(candidates: Iterable[TileCandidate]) -> TileCandidate:
    """Pick the largest tile; for the same area prefer more columns."""

    best: Optional[TileCandidate] = None
    for candidate in candidates:
        if best is None or (candidate.area, candidate.columns) > (best.area, best.columns):
            best = candidate
    if best is None:
        raise ValueError("candidates must not be empty")
    return best


def best_tile(
    *,
    n: int,
    container: Optional[Container],
    min_tile_aspect_ratio: float,
    max_columns: Optional[int] = None,
) -> Optional[TileCandidate]:
    """Choose the column count and tile geometry for ``n`` tiles.

    Returns None when there is nothing to lay out (n <= 0 or no container).
    A non-positive ``max_columns`` means no column cap.
    """

    if container is None or container.is_empty() or n <= 0:
        return None
    if min_tile_aspect_ratio <= 0:
        raise ValueError("min_tile_aspect_ratio must be > 0")

    cap = _column_cap(max_columns)
    max_ar = max_tile_aspect_ratio(cap)

    # Ideal blend of rows and columns from comparing tile and container aspects.
    ideal_column_to_row_ratio = container.aspect_ratio / min_tile_aspect_ratio

    column_counts = determine_columns(
        n=n,
        ideal_column_to_row_ratio=ideal_column_to_row_ratio,
        single_row_ratio_threshold=max_ar * 2,
    )
    candidates = [
        define_tile(
            n=n,
            min_tile_aspect_ratio=min_tile_aspect_ratio,
            max_tile_aspect_ratio=max_ar,
            container_width=container.width,
            container_height=container.height,
            columns=min(cap, c) if cap else c,
        )
        for c in column_counts
    ]
    best = select_tile(candidates)

    logger.debug(
        "n=%d container=%sx%s candidates=%s -> columns=%d rows=%d tile=%.1fx%.1f",
        n,
        container.width,
        container.height,
        [c.columns for c in candidates],
        best.columns,
        best.rows,
        best.width,
        best.height,
    )
    return best


def format_tile_size(candidate: TileCandidate, *, max_tile_aspect_ratio: float) -> TileSize:
    # Truncate rather than round so that `columns` tiles never add up to more
    # than 100% and wrap onto an extra row.
    percent = math.floor((100 / candidate.columns) * 10) / 10
    return TileSize(
        width=f"{percent}%",
        height=f"{candidate.height}px",
        max_width=f"{max_tile_aspect_ratio * candidate.height}px",
    )


def gallery_mode_tile_size(
    *,
    n: int,
    container: Optional[Container],
    min_tile_aspect_ratio: float,
    max_columns: Optional[int] = None,
) -> TileSize:
    """Size ``n`` gallery tiles for ``container``.

    min_tile_aspect_ratio: lower limit of the tile aspect ratio
    (16:9 ~= 1.77). max_columns: upper limit of the columns, None/0 for none.

    Returns EMPTY_TILE_SIZE when there are no tiles or no container.
    """

    best = best_tile(
        n=n,
        container=container,
        min_tile_aspect_ratio=min_tile_aspect_ratio,
        max_columns=max_columns,
    )
    if best is None:
        return EMPTY_TILE_SIZE
    return format_tile_size(best, max_tile_aspect_ratio=max_tile_aspect_ratio(max_columns))


def describe_layout(container: Container, candidate: TileCandidate) -> str:
    """One-line summary of a layout, e.g. for a debug overlay or the CLI."""

    def fmt(value: float) -> str:
        return f"{round(1e3 * value) / 1e3:.3f}"

    return " ".join(
        [
            f"Box={container.width:g}x{container.height:g}",
            f"BoxAR={fmt(container.aspect_ratio)}",
            f"TileAR={fmt(candidate.width / candidate.height if candidate.height else 0)}",
            f"Columns={candidate.columns}",
            f"Rows={candidate.rows}",
        ]
    )
