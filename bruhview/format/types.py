from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

Pixel = Tuple[int, int, int]

MAX_RUN_LENGTH = 255
DEFAULT_COLOR: Pixel = (0, 0, 0)


@dataclass(frozen=True)
class Run:
    """A run of identical pixels in scan order."""

    length: int
    color: Pixel

    def __post_init__(self) -> None:
        if not 1 <= self.length <= MAX_RUN_LENGTH:
            raise ValueError(f"Run length must be in 1..{MAX_RUN_LENGTH}, got {self.length}")
        if len(self.color) != 3 or any(not 0 <= channel <= 255 for channel in self.color):
            raise ValueError(f"Color must be an RGB triplet of bytes, got {self.color!r}")


@dataclass(frozen=True)
class PixelGrid:
    """Row-major RGB pixels with their dimensions."""

    width: int
    height: int
    pixels: List[Pixel]

    def validate(self) -> None:
        """Validate that the pixel count matches the dimensions."""
        if self.width < 0 or self.height < 0:
            raise ValueError("Dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("Pixels length must equal width * height")


@dataclass(frozen=True)
class ContainerHeader:
    width: int
    height: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height
