"""
Test Configuration
==================

Pytest fixtures and test configuration for the filmstrip splitter.
"""

from typing import List, Sequence, Tuple

import cv2
import numpy as np
import pytest

from filmstrip_splitter.codec import encode_surface
from filmstrip_splitter.errors import EncodeError
from filmstrip_splitter.models.surface import PixelSurface


Color = Tuple[int, int, int, int]


BAND_COLORS: List[Color] = [
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (0, 0, 255, 128),
    (12, 34, 56, 0),
]


def banded_surface(
    width: int,
    band_height: int,
    colors: Sequence[Color],
    extra_rows: int = 0,
    extra_color: Color = (200, 200, 200, 255),
) -> PixelSurface:
    """Vertical stack of solid bands, plus optional trailing rows."""
    height = band_height * len(colors) + extra_rows
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    for i, color in enumerate(colors):
        pixels[i * band_height:(i + 1) * band_height] = color
    if extra_rows:
        pixels[height - extra_rows:] = extra_color
    return PixelSurface(pixels)


def unique_row_surface(width: int, height: int) -> PixelSurface:
    """Every row has a distinct color; every column a distinct alpha."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    rows = np.arange(height)
    pixels[:, :, 0] = (rows % 256)[:, np.newaxis]
    pixels[:, :, 1] = (rows // 256)[:, np.newaxis]
    pixels[:, :, 2] = 7
    pixels[:, :, 3] = (np.arange(width) % 256)[np.newaxis, :]
    return PixelSurface(pixels)


def encode_rgba_png(surface: PixelSurface) -> bytes:
    """Encode with OpenCV directly, independent of the package encoder."""
    bgra = cv2.cvtColor(np.array(surface.pixels), cv2.COLOR_RGBA2BGRA)
    ok, buffer = cv2.imencode(".png", bgra)
    assert ok
    return buffer.tobytes()


def failing_encoder(fail_at: int):
    """Wrap encode_surface so the Nth call (0-based) raises EncodeError."""
    calls = {"count": 0}
    
    def encode(surface, **kwargs):
        if calls["count"] == fail_at:
            raise EncodeError(f"cannot encode {surface!r}")
        calls["count"] += 1
        return encode_surface(surface, **kwargs)
    
    return encode


@pytest.fixture
def scenario_a_surface():
    """100x400 source of four solid 100-row bands."""
    return banded_surface(width=100, band_height=100, colors=BAND_COLORS)


@pytest.fixture
def scenario_b_surface():
    """100x401 source: four 100-row bands plus one extra row."""
    return banded_surface(width=100, band_height=100, colors=BAND_COLORS, extra_rows=1)


@pytest.fixture
def filmstrip_png(tmp_path, scenario_a_surface):
    """Scenario A source written to disk as PNG."""
    path = tmp_path / "knob.png"
    path.write_bytes(encode_rgba_png(scenario_a_surface))
    return path


@pytest.fixture
def uneven_filmstrip_png(tmp_path, scenario_b_surface):
    """Scenario B source written to disk as PNG."""
    path = tmp_path / "uneven.png"
    path.write_bytes(encode_rgba_png(scenario_b_surface))
    return path
