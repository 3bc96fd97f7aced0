from .rasterizer import encode_png, paint_band, paint_canvas, rasterize, split_bands
from .source import SUPPORTED_EXTENSIONS, PixelSource

__all__ = [
    "encode_png",
    "paint_band",
    "paint_canvas",
    "PixelSource",
    "rasterize",
    "split_bands",
    "SUPPORTED_EXTENSIONS",
]
