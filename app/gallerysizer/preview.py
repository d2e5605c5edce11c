"""Render a computed gallery layout to an image.

Developer aid for eyeballing layouts without a browser. Tiles are placed the
way a centered, wrapping flex container would place them: full rows of
``columns`` tiles, each row centered, the whole grid centered vertically.
"""

from __future__ import annotations

import math
from pathlib import Path

from PIL import Image, ImageDraw

from app.gallerysizer.config import BACKGROUND_COLOR, TILE_COLOR, TILE_OUTLINE_COLOR
from app.gallerysizer.layout.geometry import Container
from app.gallerysizer.layout.tile_size import TileCandidate


def tile_boxes(
    *, n: int, container: Container, candidate: TileCandidate
) -> list[tuple[int, int, int, int]]:
    """Return (left, top, right, bottom) pixel boxes for ``n`` tiles."""

    tile_w = int(candidate.width)
    tile_h = int(candidate.height)
    if n <= 0 or tile_w <= 0 or tile_h <= 0:
        return []

    columns = candidate.columns
    rows = math.ceil(n / columns)
    top = int((container.height - rows * tile_h) // 2)

    boxes: list[tuple[int, int, int, int]] = []
    for row in range(rows):
        in_row = min(columns, n - row * columns)
        left = int((container.width - in_row * tile_w) // 2)
        y = top + row * tile_h
        for i in range(in_row):
            x = left + i * tile_w
            boxes.append((x, y, x + tile_w, y + tile_h))
    return boxes


def render_preview(*, n: int, container: Container, candidate: TileCandidate) -> Image.Image:
    size = (max(1, int(round(container.width))), max(1, int(round(container.height))))
    image = Image.new("RGB", size, BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    for left, top, right, bottom in tile_boxes(n=n, container=container, candidate=candidate):
        draw.rectangle(
            (left, top, right - 1, bottom - 1),
            fill=TILE_COLOR,
            outline=TILE_OUTLINE_COLOR,
        )
    return image


def save_preview(image: Image.Image, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    image.save(out, format="PNG")
    return out
