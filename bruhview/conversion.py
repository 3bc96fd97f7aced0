from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .format import BRUH_EXTENSION, HEADER_SIZE, decode_runs, encode_grid, expanded_length
from .format import read_container, write_container
from .rendering import PixelSource, rasterize
from .settings import RenderSettings


@dataclass(frozen=True)
class DecodedImage:
    """Rendered PNG bytes handed from the decoder to the viewer."""

    width: int
    height: int
    png: bytes


@dataclass(frozen=True)
class ContainerSummary:
    width: int
    height: int
    runs: int
    expanded_pixels: int
    file_size: int

    @property
    def raw_size(self) -> int:
        return self.width * self.height * 3

    @property
    def ratio(self) -> float:
        payload = self.file_size - HEADER_SIZE
        if payload <= 0:
            return 0.0
        return self.raw_size / payload


def bruh_path_for(path: str) -> Path:
    """Return the sibling path with the image extension replaced by .bruh."""
    return Path(path).with_suffix(BRUH_EXTENSION)


def compile_image(path: str, output: Optional[str] = None, source: Optional[PixelSource] = None) -> Path:
    """Encode an image file to BRUH and return the written path."""
    source = source or PixelSource()
    grid = source.load(path)
    runs = encode_grid(grid)
    destination = Path(output) if output else bruh_path_for(path)
    write_container(str(destination), grid.width, grid.height, runs)
    return destination


def open_bruh(path: str, settings: Optional[RenderSettings] = None) -> DecodedImage:
    """Decode a BRUH file and rasterize it into in-memory PNG bytes."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    header, runs = read_container(path)
    pixels = decode_runs(header.width, header.height, runs)
    png = rasterize(pixels, header.width, header.height, settings)
    return DecodedImage(width=header.width, height=header.height, png=png)


def describe_container(path: str) -> ContainerSummary:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    header, runs = read_container(path)
    return ContainerSummary(
        width=header.width,
        height=header.height,
        runs=len(runs),
        expanded_pixels=expanded_length(runs),
        file_size=os.path.getsize(path),
    )
