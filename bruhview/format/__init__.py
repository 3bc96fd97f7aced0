from .container import (
    BRUH_EXTENSION,
    HEADER_SIZE,
    RECORD_SIZE,
    pack_container,
    pack_header,
    pack_record,
    read_container,
    unpack_container,
    unpack_header,
    write_container,
)
from .encoding import decode_runs, encode_grid, encode_runs, expanded_length
from .types import DEFAULT_COLOR, MAX_RUN_LENGTH, ContainerHeader, Pixel, PixelGrid, Run

__all__ = [
    "BRUH_EXTENSION",
    "ContainerHeader",
    "DEFAULT_COLOR",
    "decode_runs",
    "encode_grid",
    "encode_runs",
    "expanded_length",
    "HEADER_SIZE",
    "MAX_RUN_LENGTH",
    "pack_container",
    "pack_header",
    "pack_record",
    "Pixel",
    "PixelGrid",
    "read_container",
    "RECORD_SIZE",
    "Run",
    "unpack_container",
    "unpack_header",
    "write_container",
]
