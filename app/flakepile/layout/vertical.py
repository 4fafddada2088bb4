"""Vertical masonry: balanced columns, filled shortest-column-first.

Given a known container width and measured tile heights, compute stable
positions for every tile. Heights are an input; this module never measures.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping

from app.flakepile.flakes import Tile
from app.flakepile.layout.columns import column_basis
from app.flakepile.layout.geometry import (
    GAP_X,
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
from app.flakepile.layout.options import VerticalFlow


def column_left(column: int, *, columns: int, column_width: float, usable: float) -> float:
    """X offset of ``column`` when ``columns`` columns are centered between the side paddings."""
    offset = column - columns / 2
    return PAD_X + usable / 2 + offset * column_width + (offset + 0.5) * GAP_X


def resolve_vertical(
    tiles: Iterable[Tile],
    heights: Mapping[str, float],
    options: VerticalFlow,
) -> LayoutResult:
    """Compute rectangles and canvas size for a vertical pass.

    Algorithm: greedy assignment to the shortest column.
    """

    usable = usable_width(options.container_width)
    col_w, columns = column_basis(
        container_width=usable,
        tile_width=options.nominal_width,
        elastic=options.elastic_width,
    )
    max_height = options.max_height
    col_heights = [0.0 for _ in range(columns)]

    rects: Dict[str, Rect] = {}
    for tile in tiles:
        height = measured_height(heights, tile.id)
        if height is None:
            continue

        # Select shortest column (stable: choose lowest index on ties).
        col = min(range(columns), key=lambda c: col_heights[c])
        if max_height is not None and height > max_height:
            height = max_height

        rects[tile.id] = Rect(
            x=column_left(col, columns=columns, column_width=col_w, usable=usable),
            y=PAD_Y + col_heights[col],
            width=col_w,
            height=height,
        )
        col_heights[col] += height + GAP_Y

    tallest = max(col_heights) - (GAP_Y if rects else 0)
    canvas = Size(
        width=max(options.container_width, 2 * PAD_X),
        height=max(0, tallest) + 2 * PAD_Y,
    )
    return build_result(rects, canvas)
