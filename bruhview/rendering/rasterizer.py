from __future__ import annotations

import io
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..errors import EncodingError
from ..format.types import Pixel
from ..settings import RenderSettings

Band = Tuple[int, int]


def split_bands(height: int, band_rows: int) -> List[Band]:
    """Split the canvas rows into disjoint [start, end) bands."""
    band_rows = max(1, band_rows)
    return [(start, min(height, start + band_rows)) for start in range(0, height, band_rows)]


def paint_band(pixels: Sequence[Pixel], width: int, band: Band) -> Image.Image:
    """Paint the rows of one band onto a private band image.

    Each pixel covers a 1x1 cell at (i % width, i // width); adjacent cells of
    the same color in a row are filled as one rectangle.
    """
    start, end = band
    img = Image.new("RGB", (width, end - start))
    draw = ImageDraw.Draw(img)
    for y in range(start, end):
        row = pixels[y * width : (y + 1) * width]
        span_start = 0
        for x in range(1, width + 1):
            if x < width and row[x] == row[span_start]:
                continue
            draw.rectangle((span_start, y - start, x - 1, y - start), fill=tuple(row[span_start]))
            span_start = x
    return img


def paint_canvas(
    pixels: Sequence[Pixel],
    width: int,
    height: int,
    settings: Optional[RenderSettings] = None,
) -> Image.Image:
    """Paint a flat pixel buffer onto a width x height canvas in parallel."""
    settings = settings or RenderSettings()
    if width <= 0 or height <= 0:
        raise EncodingError(f"Cannot rasterize a {width}x{height} image")
    if len(pixels) != width * height:
        raise EncodingError(f"Pixel buffer holds {len(pixels)} pixels, expected {width * height}")
    bands = split_bands(height, settings.band_rows)
    with ThreadPoolExecutor(max_workers=settings.workers) as executor:
        painted = list(executor.map(lambda band: paint_band(pixels, width, band), bands))
    canvas = Image.new("RGB", (width, height))
    for (start, _end), band_img in zip(bands, painted):
        canvas.paste(band_img, (0, start))
    return canvas


def encode_png(canvas: Image.Image) -> bytes:
    out = io.BytesIO()
    try:
        canvas.save(out, format="PNG", compress_level=9)
    except (OSError, ValueError) as exc:
        raise EncodingError(f"PNG encoding failed: {exc}") from exc
    return out.getvalue()


def rasterize(
    pixels: Sequence[Pixel],
    width: int,
    height: int,
    settings: Optional[RenderSettings] = None,
) -> bytes:
    """Rasterize a pixel buffer and return PNG bytes."""
    return encode_png(paint_canvas(pixels, width, height, settings))
