"""
Image Decoder
=============

Decodes raw image bytes into RGBA PixelSurfaces.

Design Rules:
    - This is the ONLY place in the codebase that decodes images
    - Output is always 8-bit, 4-channel RGBA
    - Fails fast with DecodeError on corrupt or unsupported input
    - No side effects beyond reading the input file

Channel Normalization:
    (H, W)       grayscale        -> R=G=B=gray, A=255
    (H, W, 1)    grayscale        -> R=G=B=gray, A=255
    (H, W, 2)    gray + alpha     -> R=G=B=gray, A=alpha
    (H, W, 3)    BGR              -> RGB, A=255
    (H, W, 4)    BGRA             -> RGBA
    16-bit input is reduced to its high byte.
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from filmstrip_splitter.errors import DecodeError
from filmstrip_splitter.models.surface import PixelSurface


logger = logging.getLogger(__name__)


def decode_image(data: bytes) -> PixelSurface:
    """
    Decode an encoded image buffer to an RGBA surface.
    
    Args:
        data: Encoded image bytes (PNG, BMP, TIFF, ...)
        
    Returns:
        PixelSurface with the decoded pixels
        
    Raises:
        DecodeError: If the buffer is empty, not an image, or has
            an unsupported channel layout
    """
    if not data:
        raise DecodeError("Input image buffer is empty")
    
    try:
        nparr = np.frombuffer(data, np.uint8)
        decoded = cv2.imdecode(nparr, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise DecodeError(f"Image decode failed: {e}") from e
    
    if decoded is None:
        raise DecodeError("Failed to decode image: unrecognized or corrupt image data")
    
    rgba = _to_rgba8(decoded)
    logger.debug(f"Decoded image {rgba.shape[1]}x{rgba.shape[0]} from {len(data)} bytes")
    return PixelSurface(rgba)


def read_image(path: Union[str, Path]) -> PixelSurface:
    """
    Read and decode an image file.
    
    Raises:
        DecodeError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise DecodeError(f"Cannot read input image {path}: {e.strerror or e}") from e
    
    try:
        return decode_image(data)
    except DecodeError as e:
        raise DecodeError(f"{path}: {e}") from e


def _to_rgba8(decoded: np.ndarray) -> np.ndarray:
    """Normalize an OpenCV-decoded array to (H, W, 4) uint8 RGBA."""
    if decoded.dtype == np.uint16:
        decoded = (decoded >> 8).astype(np.uint8)
    elif decoded.dtype != np.uint8:
        raise DecodeError(f"Unsupported image sample type: {decoded.dtype}")
    
    if decoded.ndim == 2:
        decoded = decoded[:, :, np.newaxis]
    if decoded.ndim != 3:
        raise DecodeError(f"Invalid image shape: {decoded.shape}")
    
    channels = decoded.shape[2]
    if channels == 1:
        return cv2.cvtColor(decoded, cv2.COLOR_GRAY2RGBA)
    if channels == 2:
        gray = decoded[:, :, 0]
        rgba = np.empty(decoded.shape[:2] + (4,), dtype=np.uint8)
        rgba[:, :, 0] = gray
        rgba[:, :, 1] = gray
        rgba[:, :, 2] = gray
        rgba[:, :, 3] = decoded[:, :, 1]
        return rgba
    if channels == 3:
        return cv2.cvtColor(decoded, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGBA)
    
    raise DecodeError(f"Unsupported channel count: {channels}")
