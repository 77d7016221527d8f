from __future__ import annotations
import colorsys
import os
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

RGBA = Tuple[int, int, int, int]

GRID_LINE: RGBA = (60, 60, 60, 255)
MARKER: RGBA = (235, 120, 20, 255)   # carrot orange

def region_color(region: int, n_regions: int) -> RGBA:
    # Evenly spaced pastel hues; stable for a given region count
    h = (region % max(1, n_regions)) / max(1, n_regions)
    r, g, b = colorsys.hls_to_rgb(h, 0.78, 0.55)
    return (int(r * 255), int(g * 255), int(b * 255), 255)

def render_board(
    regions: Sequence[int],
    size: int,
    *,
    marks: Optional[Sequence[bool]] = None,
    cell: int = 48,
    margin: int = 4,
) -> Image.Image:
    """
    Draw the region map as colored cells with grid lines; when `marks` is given,
    put a dot on every marked cell (pass the solution to reveal it).
    """
    if len(regions) != size * size:
        raise ValueError(f"expected {size * size} regions, got {len(regions)}")
    n = max(regions) + 1
    side = size * cell + 2 * margin
    img = Image.new("RGBA", (side, side), (255, 255, 255, 255))
    draw = ImageDraw.Draw(img)
    for idx, reg in enumerate(regions):
        r, c = divmod(idx, size)
        x0 = margin + c * cell
        y0 = margin + r * cell
        draw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=region_color(reg, n), outline=GRID_LINE)
        if marks is not None and marks[idx]:
            pad = cell // 4
            draw.ellipse((x0 + pad, y0 + pad, x0 + cell - 1 - pad, y0 + cell - 1 - pad), fill=MARKER)
    return img

def save_board(img: Image.Image, out_png: str) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
