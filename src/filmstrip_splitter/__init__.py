"""
Filmstrip Splitter
==================

Splits a vertically stacked sprite sheet ("filmstrip"), as produced by
knob/slider graphics generators, into numbered frame images.

Components:
    - codec: Image bytes <-> RGBA PixelSurface (OpenCV)
    - extractor: Equal-height band extraction (the core)
    - sink: Atomic frame file writer
    - driver: decode -> extract -> encode -> persist pipeline
    - cli: Command line boundary and exit codes

Example:
    from filmstrip_splitter import split_filmstrip
    
    result = split_filmstrip("knob.png", "frames", frame_count=128)
    for warning in result.warnings:
        print(warning.message)
"""

__version__ = "0.1.0"

from filmstrip_splitter.errors import (  # noqa: E402
    ArgumentError,
    DecodeError,
    DimensionError,
    EncodeError,
    PersistError,
    SplitterError,
)
from filmstrip_splitter.models import (  # noqa: E402
    DimensionWarning,
    FilmstripSpec,
    Frame,
    PixelSurface,
    SplitResult,
)
from filmstrip_splitter.extractor import FrameExtractor, extract_frames  # noqa: E402
from filmstrip_splitter.driver import (  # noqa: E402
    FilmstripSplitter,
    SplitRequest,
    split_filmstrip,
)

__all__ = [
    "__version__",
    "SplitterError",
    "ArgumentError",
    "DecodeError",
    "DimensionError",
    "EncodeError",
    "PersistError",
    "PixelSurface",
    "FilmstripSpec",
    "Frame",
    "DimensionWarning",
    "SplitResult",
    "FrameExtractor",
    "extract_frames",
    "FilmstripSplitter",
    "SplitRequest",
    "split_filmstrip",
]
