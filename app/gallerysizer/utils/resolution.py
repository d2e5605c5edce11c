from __future__ import annotations

import re
from typing import Optional

from app.gallerysizer.layout.geometry import Container

_NON_DIGITS = re.compile(r"\D+")


def parse_resolution(value: str) -> Optional[tuple[int, int]]:
    """Parse a resolution such as ``"1920x1080"`` or ``"1280 × 720 (HD)"``.

    - Splits on anything that is not a digit
    - Uses the first two numbers as (width, height)
    - Returns None when fewer than two non-zero numbers are present
    """
    numbers = [int(part) for part in _NON_DIGITS.split(value) if part]
    if len(numbers) < 2:
        return None
    width, height = numbers[0], numbers[1]
    if width <= 0 or height <= 0:
        return None
    return width, height


def container_from_resolution(value: str, *, portrait: bool = False) -> Optional[Container]:
    parsed = parse_resolution(value)
    if parsed is None:
        return None
    width, height = parsed
    if portrait:
        width, height = height, width
    return Container(width=width, height=height)
