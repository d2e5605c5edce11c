"""Candidate column counts for gallery layouts."""

from __future__ import annotations

import math

from app.gallerysizer.config import SQUARE_TILE_COUNTS


def determine_columns(
    *,
    n: int,
    ideal_column_to_row_ratio: float,
    single_row_ratio_threshold: float,
) -> tuple[int, ...]:
    """Return the distinct column counts worth evaluating for ``n`` tiles.

    Policy:
    - one tile fills the container regardless of aspect ratio
    - two tiles sit side by side only if the container is wide enough
    - otherwise bracket the analytic optimum, plus a square grid for square
      counts and a single row for ultra wide containers

    At most four candidates are returned, in first-seen order.
    """

    if n <= 0:
        raise ValueError("n must be > 0")

    if n == 1:
        return (1,)

    if n == 2:
        return (2,) if ideal_column_to_row_ratio > 1 else (1,)

    # Given rows = columns / i (ideal column:row ratio)
    # and rows * columns >= n (enough spaces for all tiles):
    # c^2 / i >= n
    # => c >= sqrt(n * i)
    c = max(1, math.floor(math.sqrt(n * ideal_column_to_row_ratio)))

    candidates: list[int] = []
    if n in SQUARE_TILE_COUNTS:
        candidates.append(math.isqrt(n))
    if ideal_column_to_row_ratio >= single_row_ratio_threshold:
        candidates.append(n)
    # larger tile AR, then smaller tile AR
    candidates.extend((c, c + 1))

    unique: list[int] = []
    for columns in candidates:
        if columns > 0 and columns not in unique:
            unique.append(columns)
    return tuple(unique)
