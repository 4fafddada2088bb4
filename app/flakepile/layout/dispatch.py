"""Entry points used by the renderer: one layout pass, and the width basis."""

from __future__ import annotations

from typing import Iterable, Mapping, Union

from app.flakepile.flakes import Tile
from app.flakepile.layout.columns import column_basis
from app.flakepile.layout.compact import resolve_compact
from app.flakepile.layout.geometry import FLAKE_UNIT, LayoutResult, usable_width
from app.flakepile.layout.horizontal import resolve_horizontal
from app.flakepile.layout.options import (
    CompactFlow,
    Flow,
    FlowOptions,
    HorizontalFlow,
    LayoutOptions,
    VerticalFlow,
)
from app.flakepile.layout.vertical import resolve_vertical


def compute_layout(
    tiles: Iterable[Tile],
    heights: Mapping[str, float],
    options: Union[LayoutOptions, FlowOptions],
) -> LayoutResult:
    """Lay out ``tiles`` (in order) with the resolver for the active flow.

    Recomputes the whole layout every call; nothing is cached between passes.
    """

    flow = options.as_flow() if isinstance(options, LayoutOptions) else options

    if isinstance(flow, VerticalFlow):
        return resolve_vertical(tiles, heights, flow)
    if isinstance(flow, HorizontalFlow):
        return resolve_horizontal(tiles, heights, flow)
    if isinstance(flow, CompactFlow):
        return resolve_compact(tiles, heights, flow)
    raise TypeError(f"unsupported layout options: {type(options).__name__}")


def compute_unconstrained_width(flow: Flow | str, options: LayoutOptions) -> float:
    """Tile width for ``flow`` before any heights are known.

    Callers use this to pick a wrap width for content they are about to
    measure. Vertical elastic flow uses the stretched column width and
    horizontal flow the nominal width. Compact flow returns its real full
    width instead of the nominal one, because compact tiles never use
    tile width units.
    """

    flow = Flow(flow)
    nominal = FLAKE_UNIT * options.tile_width_units
    if flow is Flow.VERTICAL:
        if not options.elastic_width:
            return nominal
        width, _ = column_basis(
            container_width=usable_width(options.container_width),
            tile_width=nominal,
            elastic=True,
        )
        return width
    if flow is Flow.HORIZONTAL:
        return nominal
    return usable_width(options.container_width)
