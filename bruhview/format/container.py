from __future__ import annotations

import os
from typing import List, Sequence, Tuple

from PIL import Image

from ..errors import FormatError
from .types import ContainerHeader, Run

BRUH_EXTENSION = ".bruh"
BYTE_ORDER = "little"
HEADER_SIZE = 8
RECORD_SIZE = 4
MAX_DIMENSION = 0xFFFFFFFF
FALLBACK_MAX_PIXELS = 0x10000000


def max_pixel_count() -> int:
    """Largest pixel count a decoded buffer may hold, following Pillow's bomb limit."""
    limit = Image.MAX_IMAGE_PIXELS
    return int(limit) if limit else FALLBACK_MAX_PIXELS


def check_pixel_count(width: int, height: int) -> None:
    limit = max_pixel_count()
    if width * height > limit:
        raise FormatError(
            f"Malformed BRUH data: {width}x{height} image exceeds the {limit} pixel limit"
        )


def pack_header(width: int, height: int) -> bytes:
    """Pack width and height as two little-endian uint32 values."""
    for name, value in (("width", width), ("height", height)):
        if not 0 <= value <= MAX_DIMENSION:
            raise FormatError(f"Image {name} {value} does not fit in uint32")
    return width.to_bytes(4, BYTE_ORDER, signed=False) + height.to_bytes(4, BYTE_ORDER, signed=False)


def pack_record(run: Run) -> bytes:
    """Pack one run as a length byte followed by R, G, B."""
    red, green, blue = run.color
    return bytes([run.length, red, green, blue])


def pack_container(width: int, height: int, runs: Sequence[Run]) -> bytes:
    """Serialize dimensions and runs into the BRUH byte layout."""
    out = bytearray(pack_header(width, height))
    for run in runs:
        out += pack_record(run)
    return bytes(out)


def unpack_header(data: bytes) -> ContainerHeader:
    if len(data) < HEADER_SIZE:
        raise FormatError(f"Malformed BRUH data: header needs {HEADER_SIZE} bytes, got {len(data)}")
    width = int.from_bytes(data[0:4], BYTE_ORDER, signed=False)
    height = int.from_bytes(data[4:8], BYTE_ORDER, signed=False)
    header = ContainerHeader(width=width, height=height)
    check_pixel_count(header.width, header.height)
    return header


def unpack_container(data: bytes) -> Tuple[ContainerHeader, List[Run]]:
    """Parse BRUH bytes into a header and the list of runs."""
    header = unpack_header(data)
    body = len(data) - HEADER_SIZE
    if body % RECORD_SIZE != 0:
        raise FormatError(
            f"Malformed BRUH data: record region of {body} bytes is not a multiple of {RECORD_SIZE}"
        )
    runs: List[Run] = []
    for offset in range(HEADER_SIZE, len(data), RECORD_SIZE):
        run_length = data[offset]
        if run_length == 0:
            raise FormatError(f"Malformed BRUH data: zero-length run at offset {offset}")
        runs.append(Run(run_length, (data[offset + 1], data[offset + 2], data[offset + 3])))
    return header, runs


def write_container(path: str, width: int, height: int, runs: Sequence[Run]) -> None:
    """Write a fresh BRUH file, truncating any existing content."""
    data = pack_container(width, height, runs)
    with open(path, "wb") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())


def read_container(path: str) -> Tuple[ContainerHeader, List[Run]]:
    """Read a BRUH file fully into memory and parse it."""
    with open(path, "rb") as handle:
        data = handle.read()
    return unpack_container(data)
