"""
Image Encoder
=============

Serializes RGBA PixelSurfaces to lossless image bytes.

Design Rules:
    - Lossless formats only (PNG, BMP, TIFF)
    - Deterministic: identical surface + parameters -> identical bytes
    - Fails with EncodeError, never returns partial output
"""

import logging
from typing import Dict

import cv2

from filmstrip_splitter.errors import EncodeError
from filmstrip_splitter.models.surface import PixelSurface


logger = logging.getLogger(__name__)


# Format name -> file extension
SUPPORTED_FORMATS: Dict[str, str] = {
    "png": "png",
    "bmp": "bmp",
    "tiff": "tiff",
}

DEFAULT_FORMAT = "png"

_RGBA_TO_BGRA = [2, 1, 0, 3]


def extension_for(image_format: str) -> str:
    """
    File extension for an output format.
    
    Raises:
        EncodeError: If the format is not supported
    """
    try:
        return SUPPORTED_FORMATS[image_format.lower()]
    except KeyError:
        raise EncodeError(
            f"Unsupported output format: {image_format!r} "
            f"(expected one of {', '.join(SUPPORTED_FORMATS)})"
        ) from None


def encode_surface(
    surface: PixelSurface,
    image_format: str = DEFAULT_FORMAT,
    png_compression: int = 3,
) -> bytes:
    """
    Encode a surface to image bytes.
    
    Args:
        surface: RGBA surface to encode
        image_format: One of SUPPORTED_FORMATS
        png_compression: zlib level 0-9, PNG only
        
    Returns:
        Encoded image bytes
        
    Raises:
        EncodeError: On unsupported format or OpenCV failure
    """
    extension = extension_for(image_format)
    
    params = []
    if extension == "png":
        if not 0 <= png_compression <= 9:
            raise EncodeError(f"PNG compression must be in [0, 9], got {png_compression}")
        params = [cv2.IMWRITE_PNG_COMPRESSION, png_compression]
    
    # Fancy indexing copies, so the read-only source is never handed to OpenCV
    bgra = surface.pixels[:, :, _RGBA_TO_BGRA]

    try:
        ok, buffer = cv2.imencode(f".{extension}", bgra, params)
    except cv2.error as e:
        raise EncodeError(f"Failed to encode {surface!r} as {extension}: {e}") from e
    
    if not ok:
        raise EncodeError(f"Failed to encode {surface!r} as {extension}")
    
    return buffer.tobytes()
