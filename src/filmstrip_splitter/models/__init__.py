"""
Data Models
===========

Re-exports the splitter's data models for convenient access.

Models:
    - PixelSurface: Dense RGBA bitmap
    - FilmstripSpec: Immutable decomposition request
    - Frame: One extracted band
    - DimensionWarning: Non-fatal remainder-row notice
    - SplitResult: Summary of a completed run
"""

from filmstrip_splitter.models.surface import PixelSurface
from filmstrip_splitter.models.frame import DimensionWarning, FilmstripSpec, Frame
from filmstrip_splitter.models.result import SplitResult

__all__ = [
    "PixelSurface",
    "FilmstripSpec",
    "Frame",
    "DimensionWarning",
    "SplitResult",
]
