from __future__ import annotations

import argparse
import json
import logging
from typing import Optional, Sequence

from app.gallerysizer.config import DEFAULT_MIN_TILE_AR, DEFAULT_RESOLUTION
from app.gallerysizer.layout.sidebar import get_sidebar_max_tiles
from app.gallerysizer.layout.tile_size import (
    best_tile,
    describe_layout,
    gallery_mode_tile_size,
)
from app.gallerysizer.preview import render_preview, save_preview
from app.gallerysizer.utils.resolution import container_from_resolution


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gallery mode tile size calculator")
    parser.add_argument("-n", "--tiles", type=int, required=True, help="Number of tiles")
    parser.add_argument(
        "--resolution",
        default=DEFAULT_RESOLUTION,
        help="Container size in pixels, e.g. 1920x1080",
    )
    parser.add_argument(
        "--portrait", action="store_true", help="Swap the resolution to portrait orientation"
    )
    parser.add_argument(
        "--aspect-ratio",
        type=float,
        default=DEFAULT_MIN_TILE_AR,
        help="Minimum tile aspect ratio (width / height)",
    )
    parser.add_argument(
        "--max-columns", type=int, default=0, help="Column cap, 0 for no cap"
    )
    parser.add_argument("--sidebar", action="store_true", help="Also report sidebar capacity")
    parser.add_argument("--preview", metavar="PATH", help="Write a PNG preview of the layout")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    container = container_from_resolution(args.resolution, portrait=args.portrait)
    if container is None:
        parser.error(f"invalid resolution: {args.resolution!r}")
    if args.aspect_ratio <= 0:
        parser.error("--aspect-ratio must be > 0")

    size = gallery_mode_tile_size(
        n=args.tiles,
        container=container,
        min_tile_aspect_ratio=args.aspect_ratio,
        max_columns=args.max_columns,
    )
    tile = best_tile(
        n=args.tiles,
        container=container,
        min_tile_aspect_ratio=args.aspect_ratio,
        max_columns=args.max_columns,
    )
    sidebar = get_sidebar_max_tiles(container) if args.sidebar else None

    if args.json:
        payload: dict = {"tileSize": size.to_dict()}
        if tile is not None:
            payload["columns"] = tile.columns
            payload["rows"] = tile.rows
        if sidebar is not None:
            payload["sidebar"] = {"maxColumns": sidebar.max_columns, "total": sidebar.total}
        print(json.dumps(payload))
    else:
        print(f"width={size.width} height={size.height} maxWidth={size.max_width}")
        if tile is not None:
            print(describe_layout(container, tile))
        if sidebar is not None:
            print(f"Sidebar: maxColumns={sidebar.max_columns} total={sidebar.total}")

    if args.preview:
        if tile is None:
            parser.error("nothing to preview, --tiles must be > 0")
        image = render_preview(n=args.tiles, container=container, candidate=tile)
        out = save_preview(image, args.preview)
        print(f"Preview: {out.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
