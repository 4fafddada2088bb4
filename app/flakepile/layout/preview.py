"""Rasterize a LayoutResult for eyeballing layouts outside the host app."""

from __future__ import annotations

import math
from pathlib import Path

from PIL import Image, ImageDraw

from app.flakepile.layout.geometry import LayoutResult

BACKGROUND = (30, 30, 30)
TILE_FILL = (138, 180, 248)
TILE_OUTLINE = (240, 240, 240)
LABEL = (20, 20, 20)


def render_preview(result: LayoutResult, *, scale: float = 1.0) -> Image.Image:
    """Draw every placed rectangle onto a canvas-sized image."""

    if scale <= 0:
        raise ValueError("scale must be > 0")

    width = max(1, math.ceil(result.canvas.width * scale))
    height = max(1, math.ceil(result.canvas.height * scale))
    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    # Sorted so the same result always produces the same pixels.
    for tile_id in sorted(result.rects):
        rect = result.rects[tile_id]
        box = (
            round(rect.x * scale),
            round(rect.y * scale),
            round(rect.right * scale) - 1,
            round(rect.bottom * scale) - 1,
        )
        # Too small to show at this scale.
        if box[2] < box[0] or box[3] < box[1]:
            continue
        draw.rectangle(box, fill=TILE_FILL, outline=TILE_OUTLINE)
        draw.text((box[0] + 4, box[1] + 2), tile_id, fill=LABEL)

    return img


def save_preview(result: LayoutResult, path: str | Path, *, scale: float = 1.0) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    render_preview(result, scale=scale).save(out, format="PNG")
    return out
