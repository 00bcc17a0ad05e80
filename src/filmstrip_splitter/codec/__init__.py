"""
Codec Module
============

Decode/encode adapters between image bytes and PixelSurfaces.

Components:
    - decode_image / read_image: bytes or file -> RGBA surface
    - encode_surface: RGBA surface -> lossless image bytes
"""

from filmstrip_splitter.codec.decoder import decode_image, read_image
from filmstrip_splitter.codec.encoder import (
    DEFAULT_FORMAT,
    SUPPORTED_FORMATS,
    encode_surface,
    extension_for,
)


__all__ = [
    "decode_image",
    "read_image",
    "encode_surface",
    "extension_for",
    "SUPPORTED_FORMATS",
    "DEFAULT_FORMAT",
]
