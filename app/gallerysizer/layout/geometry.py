from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Container:
    """Pixel box the tiles are laid out in (clientWidth x clientHeight)."""

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0
