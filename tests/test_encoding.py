import math

import pytest

from bruhview.errors import FormatError, OutOfBoundsError
from bruhview.format import DEFAULT_COLOR, PixelGrid, Run, decode_runs, encode_grid, encode_runs

BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


def test_encode_2x2_black_is_one_run():
    grid = PixelGrid(width=2, height=2, pixels=[BLACK] * 4)
    assert encode_grid(grid) == [Run(4, BLACK)]


def test_encode_300_red_splits_at_255():
    runs = encode_runs([RED] * 300)
    assert runs == [Run(255, RED), Run(45, RED)]


@pytest.mark.parametrize("count", [256, 510, 511, 1000])
def test_single_color_run_count(count):
    runs = encode_runs([BLUE] * count)
    assert len(runs) == math.ceil(count / 255)
    assert all(run.length <= 255 for run in runs)
    assert sum(run.length for run in runs) == count


def test_encode_empty_grid():
    assert encode_grid(PixelGrid(width=0, height=0, pixels=[])) == []


def test_encode_changes_color():
    pixels = [RED, RED, BLUE, RED, BLACK, BLACK]
    assert encode_runs(pixels) == [Run(2, RED), Run(1, BLUE), Run(1, RED), Run(2, BLACK)]


def test_leading_black_is_not_merged_into_phantom_run():
    assert encode_runs([BLACK]) == [Run(1, BLACK)]


def test_encode_drops_extra_channels():
    assert encode_runs([(1, 2, 3, 0), (1, 2, 3, 255)]) == [Run(2, (1, 2, 3))]


def test_encode_is_deterministic():
    pixels = [(i % 7, i % 3, 9) for i in range(400)]
    assert encode_runs(pixels) == encode_runs(list(pixels))


@pytest.mark.parametrize(
    "width,height,pixels",
    [
        (0, 0, []),
        (1, 1, [(12, 34, 56)]),
        (20, 20, [RED] * 400),
        (3, 2, [RED, BLUE, BLUE, BLACK, (1, 1, 1), (1, 1, 1)]),
    ],
)
def test_round_trip(width, height, pixels):
    grid = PixelGrid(width=width, height=height, pixels=pixels)
    assert decode_runs(width, height, encode_grid(grid)) == pixels


def test_decode_overflow_raises():
    with pytest.raises(OutOfBoundsError):
        decode_runs(2, 2, [Run(3, RED), Run(2, BLUE)])


def test_decode_short_stream_keeps_default():
    pixels = decode_runs(2, 2, [Run(1, RED)])
    assert pixels == [RED, DEFAULT_COLOR, DEFAULT_COLOR, DEFAULT_COLOR]


def test_grid_validation_rejects_wrong_length():
    with pytest.raises(ValueError):
        encode_grid(PixelGrid(width=2, height=2, pixels=[RED]))


@pytest.mark.parametrize("length", [0, 256])
def test_run_rejects_out_of_range_length(length):
    with pytest.raises(ValueError):
        Run(length, RED)


def test_decode_rejects_unallocatable_dimensions():
    with pytest.raises(FormatError):
        decode_runs(0xFFFFFFFF, 0xFFFFFFFF, [Run(1, RED)])
