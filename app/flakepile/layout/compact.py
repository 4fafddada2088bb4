"""Single-column stacking for narrow containers."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping

from app.flakepile.flakes import Tile
from app.flakepile.layout.geometry import (
    GAP_Y,
    PAD_X,
    PAD_Y,
    LayoutResult,
    Rect,
    Size,
    build_result,
    measured_height,
    usable_width,
)
from app.flakepile.layout.options import CompactFlow


def resolve_compact(
    tiles: Iterable[Tile],
    heights: Mapping[str, float],
    options: CompactFlow,
) -> LayoutResult:
    """Stack tiles top to bottom at full width and natural height.

    Tile width units, elastic flags and the max-height cap do not apply here,
    even when the same pile caps heights in the other flows.
    """

    width = usable_width(options.container_width)
    rects: Dict[str, Rect] = {}
    y = 0.0
    for tile in tiles:
        height = measured_height(heights, tile.id)
        if height is None:
            continue
        rects[tile.id] = Rect(x=PAD_X, y=PAD_Y + y, width=width, height=height)
        y += height + GAP_Y

    canvas = Size(
        width=max(options.container_width, 2 * PAD_X),
        height=PAD_Y + y + PAD_Y,
    )
    return build_result(rects, canvas)
