"""Horizontal masonry: fixed-width columns that wrap left to right.

Tiles fill a column top to bottom until the next one would overflow the
usable height, then a new column starts to the right. With elastic height,
tiles clipped by the max-height cap share whatever space their column has
left over once it is closed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence

from app.flakepile.flakes import Tile
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
)
from app.flakepile.layout.options import HorizontalFlow


@dataclass
class _Slot:
    id: str
    natural: float
    allocated: float


def share_leftover(natural: Sequence[float], allocated: Sequence[float], leftover: float) -> List[float]:
    """Water-fill ``leftover`` across entries allocated below their natural height.

    Max-min fair share: each round either splits what is left evenly between
    every entry still short, or, when the smallest deficit is below the even
    split, tops every short entry up by that deficit and drops the satisfied
    entry. No entry ever exceeds its natural height, and the total handed out
    never exceeds ``leftover``.
    """

    result = [float(a) for a in allocated]
    pending = [i for i, a in enumerate(result) if natural[i] > a]

    while pending and leftover > 0:
        # Lowest index wins on equal deficits.
        least = min(pending, key=lambda i: natural[i] - result[i])
        deficit = natural[least] - result[least]
        each = leftover / len(pending)

        if each <= deficit:
            for i in pending:
                result[i] += each
            break

        for i in pending:
            result[i] += deficit
        leftover -= deficit * len(pending)
        pending.remove(least)

    return result


def _close_column(
    rects: Dict[str, Rect],
    slots: List[_Slot],
    *,
    column: int,
    width: float,
    usable_height: float,
    elastic: bool,
) -> None:
    if not slots:
        return

    heights = [s.allocated for s in slots]
    if elastic:
        used = sum(heights) + GAP_Y * (len(slots) - 1)
        heights = share_leftover([s.natural for s in slots], heights, usable_height - used)

    x = PAD_X + (width + GAP_X) * column
    y = PAD_Y
    for slot, height in zip(slots, heights):
        rects[slot.id] = Rect(x=x, y=y, width=width, height=height)
        y += height + GAP_Y


def resolve_horizontal(
    tiles: Iterable[Tile],
    heights: Mapping[str, float],
    options: HorizontalFlow,
) -> LayoutResult:
    width = options.nominal_width
    usable_height = max(0, options.container_height - 2 * PAD_Y)
    max_height = usable_height
    if options.max_height is not None:
        max_height = min(options.max_height, usable_height)

    rects: Dict[str, Rect] = {}
    column = 0
    column_height = 0.0
    slots: List[_Slot] = []

    for tile in tiles:
        height = measured_height(heights, tile.id)
        if height is None:
            continue

        capped = min(height, max_height)
        # A tile that does not fit starts a new column, unless the column is empty.
        if column_height > 0 and column_height + capped > usable_height:
            _close_column(
                rects,
                slots,
                column=column,
                width=width,
                usable_height=usable_height,
                elastic=options.elastic_height,
            )
            slots = []
            column += 1
            column_height = 0.0

        slots.append(_Slot(id=tile.id, natural=height, allocated=capped))
        column_height += capped + GAP_Y

    _close_column(
        rects,
        slots,
        column=column,
        width=width,
        usable_height=usable_height,
        elastic=options.elastic_height,
    )

    columns = column + 1
    canvas = Size(
        width=PAD_X * 2 + width * columns + GAP_X * (columns + 1),
        height=max(options.container_height, 2 * PAD_Y),
    )
    return build_result(rects, canvas)
