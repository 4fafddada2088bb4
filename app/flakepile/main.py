from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from app.flakepile.flakes import Tile
from app.flakepile.layout.dispatch import compute_layout
from app.flakepile.layout.geometry import LayoutResult
from app.flakepile.layout.options import Flow, LayoutOptions
from app.flakepile.layout.preview import save_preview


def synthetic_pile(heights: Sequence[float]) -> tuple[list[Tile], dict[str, float]]:
    """Tiles named flake-1..flake-N with the given measured heights."""
    tiles = [Tile(id=f"flake-{i}", name=f"Flake {i}") for i in range(1, len(heights) + 1)]
    return tiles, {t.id: h for t, h in zip(tiles, heights)}


def run_layout_smoke(
    heights: Sequence[float],
    options: LayoutOptions,
    preview_path: str | None = None,
) -> LayoutResult:
    tiles, height_map = synthetic_pile(heights)
    result = compute_layout(tiles, height_map, options)

    print(f"Flakepile layout ({options.flow.value})")
    print(f"Canvas: {result.canvas.width:g} x {result.canvas.height:g}")
    print(f"Placed tiles: {len(result.placed)}/{len(tiles)}")
    for tile in tiles:
        rect = result.rects.get(tile.id)
        if rect is None:
            continue
        print(f"  {tile.id}: x={rect.x:g} y={rect.y:g} w={rect.width:g} h={rect.height:g}")

    if preview_path:
        out = save_preview(result, preview_path)
        print(f"Preview: {Path(out).resolve()}")
    return result


def options_from_args(args: argparse.Namespace) -> LayoutOptions:
    return LayoutOptions(
        flow=Flow(args.flow),
        tile_width_units=args.tile_width,
        elastic_width=args.elastic_width,
        enable_max_height=args.max_height is not None,
        max_height_units=args.max_height if args.max_height is not None else 1,
        elastic_height=args.elastic_height,
        container_width=args.container_width,
        container_height=args.container_height,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flakepile masonry layout smoke runner")
    parser.add_argument("heights", nargs="*", type=float, help="Measured tile heights, in order")
    parser.add_argument("--flow", default=Flow.VERTICAL.value, choices=[f.value for f in Flow])
    parser.add_argument("--container-width", type=float, default=1000)
    parser.add_argument("--container-height", type=float, default=800)
    parser.add_argument("--tile-width", type=float, default=1, help="Tile width in flake units")
    parser.add_argument("--elastic-width", action="store_true")
    parser.add_argument("--max-height", type=float, default=None, help="Max tile height in flake units")
    parser.add_argument("--elastic-height", action="store_true")
    parser.add_argument("--preview", default=None, help="Write a PNG preview to this path")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    run_layout_smoke(args.heights, options_from_args(args), args.preview)


if __name__ == "__main__":
    main()
