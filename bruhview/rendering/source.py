from __future__ import annotations

import os
from typing import Set

from PIL import Image, ImageOps

from ..format.types import PixelGrid

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff", ".webp"}


class PixelSource:
    """Loads image files through Pillow as opaque RGB pixel grids."""

    def load(self, path: str) -> PixelGrid:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported file extension: {ext}")
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
        img = self._normalize_image(self._load_image(path))
        return PixelGrid(width=img.width, height=img.height, pixels=list(img.getdata()))

    @staticmethod
    def _load_image(path: str) -> Image.Image:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return img.copy()

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        # Alpha is dropped, not composited: every pixel is treated as opaque.
        if img.mode != "RGB":
            return img.convert("RGB")
        return img
