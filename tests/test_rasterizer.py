import io

import pytest
from PIL import Image

from bruhview.errors import EncodingError
from bruhview.rendering import paint_canvas, rasterize, split_bands
from bruhview.settings import RenderSettings


def _pattern(width, height):
    return [((x * 40) % 256, (y * 60) % 256, (x + y) % 2 * 255) for y in range(height) for x in range(width)]


def _png_pixels(data):
    with Image.open(io.BytesIO(data)) as img:
        assert img.format == "PNG"
        return img.size, list(img.convert("RGB").getdata())


def test_rasterize_reproduces_pixels():
    pixels = _pattern(5, 3)
    size, decoded = _png_pixels(rasterize(pixels, 5, 3))
    assert size == (5, 3)
    assert decoded == pixels


def test_rasterize_single_pixel():
    size, decoded = _png_pixels(rasterize([(10, 20, 30)], 1, 1))
    assert size == (1, 1)
    assert decoded == [(10, 20, 30)]


def test_rasterize_flat_rows():
    pixels = [(255, 0, 0)] * 8 + [(0, 0, 255)] * 8
    _, decoded = _png_pixels(rasterize(pixels, 4, 4))
    assert decoded == pixels


@pytest.mark.parametrize("workers,band_rows", [(1, 1), (2, 3), (8, 64)])
def test_worker_count_does_not_change_output(workers, band_rows):
    pixels = _pattern(17, 11)
    canvas = paint_canvas(pixels, 17, 11, RenderSettings(workers=workers, band_rows=band_rows))
    assert list(canvas.getdata()) == pixels


@pytest.mark.parametrize("width,height", [(0, 0), (0, 5), (5, 0)])
def test_rasterize_rejects_empty_canvas(width, height):
    with pytest.raises(EncodingError):
        rasterize([], width, height)


def test_rasterize_rejects_mismatched_buffer():
    with pytest.raises(EncodingError):
        rasterize([(0, 0, 0)] * 3, 2, 2)


def test_split_bands_cover_all_rows():
    assert split_bands(10, 4) == [(0, 4), (4, 8), (8, 10)]
    assert split_bands(0, 4) == []
    assert split_bands(3, 0) == [(0, 1), (1, 2), (2, 3)]


def test_render_settings_read_env(monkeypatch):
    monkeypatch.setenv("BRUH_WORKERS", "3")
    assert RenderSettings().workers == 3
    monkeypatch.setenv("BRUH_WORKERS", "zero")
    with pytest.raises(ValueError):
        RenderSettings()
