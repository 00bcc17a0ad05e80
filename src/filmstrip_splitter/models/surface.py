"""
Pixel Surface
=============

In-memory decoded bitmap with explicit width, height and RGBA bytes.

Layout Contract:
    - numpy array of shape (height, width, 4), dtype uint8
    - Row-major, 4 bytes per pixel in R, G, B, A order
    - tobytes() length is always width * height * 4

Design Rules:
    - Surfaces are read-only once constructed
    - No sparse or compressed representation
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


CHANNELS = 4


@dataclass(frozen=True, slots=True)
class PixelSurface:
    """
    Dense RGBA pixel surface.
    
    The pixels are copied once on construction and the copy is marked
    read-only, so a decoded source can be shared with every frame
    extraction and its content (and hash) never changes.
    
    Attributes:
        pixels: (H, W, 4) uint8 array, row-major RGBA
    """
    
    pixels: np.ndarray
    
    def __post_init__(self) -> None:
        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise ValueError(f"pixels must be a numpy array, got {type(pixels).__name__}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"pixels must be uint8, got {pixels.dtype}")
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise ValueError(f"pixels must have shape (H, W, 4), got {pixels.shape}")
        if pixels.shape[0] <= 0 or pixels.shape[1] <= 0:
            raise ValueError(f"surface dimensions must be positive, got {pixels.shape[1]}x{pixels.shape[0]}")
        
        # Private copy; later writes to the caller's array cannot reach the surface
        pixels = np.array(pixels, dtype=np.uint8, order="C", copy=True)
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)
    
    @classmethod
    def blank(cls, width: int, height: int) -> "PixelSurface":
        """Zero-filled (transparent black) surface."""
        if width <= 0 or height <= 0:
            raise ValueError(f"surface dimensions must be positive, got {width}x{height}")
        return cls(np.zeros((height, width, CHANNELS), dtype=np.uint8))
    
    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelSurface":
        """
        Build a surface from a raw row-major RGBA byte sequence.
        
        Args:
            width: Surface width in pixels
            height: Surface height in pixels
            data: Exactly width * height * 4 bytes
            
        Raises:
            ValueError: If dimensions or length do not match
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"surface dimensions must be positive, got {width}x{height}")
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise ValueError(f"expected {expected} bytes for {width}x{height}, got {len(data)}")
        array = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNELS)
        return cls(array)
    
    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])
    
    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])
    
    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.width, self.height
    
    @property
    def nbytes(self) -> int:
        return self.width * self.height * CHANNELS
    
    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the (R, G, B, A) tuple at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} surface")
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)
    
    def rows(self, start: int, stop: int) -> np.ndarray:
        """Read-only view of rows [start, stop), clipped to the surface."""
        return self.pixels[max(0, start):min(stop, self.height)]
    
    def tobytes(self) -> bytes:
        return self.pixels.tobytes()
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelSurface):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)
    
    def __hash__(self) -> int:
        return hash((self.pixels.shape, self.pixels.tobytes()))
    
    def __repr__(self) -> str:
        return f"PixelSurface({self.width}x{self.height})"
