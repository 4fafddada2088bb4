"""Column-count helpers for vertical masonry."""

from __future__ import annotations

from typing import Tuple

from app.flakepile.layout.geometry import GAP_X


def choose_columns(*, container_width: float, tile_width: float, gutter: float = GAP_X) -> int:
    """Largest column count that fits ``tile_width`` columns, at least 1.

    Never raises: a container narrower than one tile still gets one column.
    """

    # We want the largest N such that:
    # N*w + (N-1)*gutter <= container
    # => N <= (container+gutter)/(w+gutter)
    denom = tile_width + gutter
    if denom <= 0:
        return 1
    return max(1, int((container_width + gutter) // denom))


def column_basis(
    *,
    container_width: float,
    tile_width: float,
    elastic: bool = False,
    gutter: float = GAP_X,
) -> Tuple[float, int]:
    """Return (column_width, column_count) for a vertical pass.

    Policy:
    - tile at least as wide as the container -> one column, container wide
    - elastic -> as many columns as fit, stretched to fill the container
    - otherwise -> as many fixed-width columns as fit, no stretching
    """

    if tile_width >= container_width:
        return max(0, container_width), 1

    columns = choose_columns(container_width=container_width, tile_width=tile_width, gutter=gutter)
    if elastic:
        return (container_width - gutter * (columns - 1)) / columns, columns
    return tile_width, columns
