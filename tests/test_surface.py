"""
Pixel Surface Tests
===================
"""

import numpy as np
import pytest

from filmstrip_splitter.models.surface import PixelSurface


class TestPixelSurface:
    """Layout and immutability of PixelSurface."""
    
    def test_byte_length_matches_dimensions(self):
        surface = PixelSurface.blank(3, 5)
        assert surface.size == (3, 5)
        assert len(surface.tobytes()) == 3 * 5 * 4
        assert surface.nbytes == 60
    
    def test_from_bytes_is_row_major_rgba(self):
        data = bytes(range(2 * 2 * 4))
        surface = PixelSurface.from_bytes(2, 2, data)
        
        assert surface.pixel(0, 0) == (0, 1, 2, 3)
        assert surface.pixel(1, 0) == (4, 5, 6, 7)
        assert surface.pixel(0, 1) == (8, 9, 10, 11)
        assert surface.tobytes() == data
    
    def test_from_bytes_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            PixelSurface.from_bytes(2, 2, b"\x00" * 15)
    
    @pytest.mark.parametrize("shape", [(4, 4), (4, 4, 3), (0, 4, 4), (4, 0, 4)])
    def test_rejects_invalid_shape(self, shape):
        with pytest.raises(ValueError):
            PixelSurface(np.zeros(shape, dtype=np.uint8))
    
    def test_rejects_non_uint8(self):
        with pytest.raises(ValueError):
            PixelSurface(np.zeros((2, 2, 4), dtype=np.uint16))
    
    def test_pixels_are_read_only(self):
        surface = PixelSurface.blank(2, 2)
        with pytest.raises(ValueError):
            surface.pixels[0, 0] = (1, 2, 3, 4)
    
    def test_caller_array_writes_do_not_reach_surface(self):
        array = np.zeros((2, 2, 4), dtype=np.uint8)
        surface = PixelSurface(array)
        before = hash(surface)
        
        array[0, 0] = 1
        
        assert array[0, 0, 0] == 1
        assert surface.pixel(0, 0) == (0, 0, 0, 0)
        assert hash(surface) == before
        assert not np.shares_memory(array, surface.pixels)
    
    def test_pixel_out_of_range(self):
        surface = PixelSurface.blank(2, 2)
        with pytest.raises(IndexError):
            surface.pixel(2, 0)
    
    def test_equality_by_content(self):
        a = PixelSurface.from_bytes(1, 1, b"\x01\x02\x03\x04")
        b = PixelSurface.from_bytes(1, 1, b"\x01\x02\x03\x04")
        c = PixelSurface.from_bytes(1, 1, b"\x01\x02\x03\x05")
        assert a == b
        assert a != c
    
    def test_rows_view_is_clipped(self):
        surface = PixelSurface.from_bytes(1, 3, bytes(range(12)))
        assert surface.rows(1, 10).shape == (2, 1, 4)
        assert surface.rows(-5, 1).tobytes() == bytes(range(4))
