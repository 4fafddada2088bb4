"""Shared geometry for every flow resolver.

All resolvers use the same unit, gaps and padding so a pile looks the same
size whichever flow is active. Coordinates are viewport-local, origin at the
top-left corner of the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

FLAKE_UNIT = 320
GAP_X = 12
GAP_Y = 12
PAD_X = 16
PAD_Y = 8


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: Rect) -> bool:
        """True when the interiors intersect (shared edges do not count)."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def contains(self, rect: Rect, *, pad_x: float = 0, pad_y: float = 0) -> bool:
        """Whether ``rect`` fits inside this size with the given inner padding."""
        return (
            rect.x >= pad_x
            and rect.y >= pad_y
            and rect.right <= self.width - pad_x
            and rect.bottom <= self.height - pad_y
        )


@dataclass(frozen=True)
class LayoutResult:
    """Output of one layout pass.

    placed: ids of every tile that received a rectangle.
    rects: tile id -> rectangle, same keys as ``placed``. Read-only.
    canvas: bounding box the caller must allocate, padding included.
    """

    placed: FrozenSet[str] = frozenset()
    rects: Mapping[str, Rect] = field(default_factory=lambda: MappingProxyType({}))
    canvas: Size = Size(0, 0)


def usable_width(container_width: float) -> float:
    """Horizontal room left for tiles once the side padding is taken."""
    return max(0, container_width - 2 * PAD_X)


def measured_height(heights: Mapping[str, float], tile_id: str) -> Optional[float]:
    """Height for ``tile_id``, or None when it has not been measured yet.

    Zero and negative heights count as unmeasured.
    """
    height = heights.get(tile_id)
    if height is None or height <= 0:
        return None
    return height


def empty_result() -> LayoutResult:
    return LayoutResult()


def build_result(rects: Dict[str, Rect], canvas: Size) -> LayoutResult:
    """Freeze a resolver's scratch rectangles into a result."""
    return LayoutResult(
        placed=frozenset(rects),
        rects=MappingProxyType(dict(rects)),
        canvas=canvas,
    )
