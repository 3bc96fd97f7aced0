from __future__ import annotations

from typing import Iterable, List, Sequence

from ..errors import OutOfBoundsError
from .container import check_pixel_count
from .types import DEFAULT_COLOR, MAX_RUN_LENGTH, Pixel, PixelGrid, Run


def encode_runs(pixels: Iterable[Pixel]) -> List[Run]:
    """RLE-encode RGB pixels in scan order, capping runs at 255."""
    runs: List[Run] = []
    last_color: Pixel = DEFAULT_COLOR
    run_length = 0
    for pixel in pixels:
        color = (pixel[0], pixel[1], pixel[2])
        if color == last_color and run_length < MAX_RUN_LENGTH:
            run_length += 1
        else:
            if run_length > 0:
                runs.append(Run(run_length, last_color))
            last_color = color
            run_length = 1
    if run_length > 0:
        runs.append(Run(run_length, last_color))
    return runs


def encode_grid(grid: PixelGrid) -> List[Run]:
    """Encode a whole pixel grid in row-major order."""
    grid.validate()
    return encode_runs(grid.pixels)


def decode_runs(width: int, height: int, runs: Sequence[Run]) -> List[Pixel]:
    """Expand runs into a flat row-major buffer of width * height pixels.

    Slots not covered by any run keep the default color. Runs that would
    write past the end of the buffer raise OutOfBoundsError before any
    out-of-range write happens.
    """
    check_pixel_count(width, height)
    total = width * height
    buffer: List[Pixel] = [DEFAULT_COLOR] * total
    pos = 0
    for index, run in enumerate(runs):
        end = pos + run.length
        if end > total:
            raise OutOfBoundsError(
                f"Run {index} ends at pixel {end}, past the {width}x{height} buffer ({total} pixels)"
            )
        buffer[pos:end] = [run.color] * run.length
        pos = end
    return buffer


def expanded_length(runs: Iterable[Run]) -> int:
    """Return the number of pixels the runs expand to."""
    return sum(run.length for run in runs)
