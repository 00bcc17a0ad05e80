"""
Error Taxonomy
==============

Typed exceptions raised by the splitter pipeline.

Design Rules:
    - Core stages raise these, never exit the process
    - Only the CLI boundary maps them to exit codes
    - Every fatal category derives from SplitterError

Non-fatal remainder loss is NOT an exception. See
filmstrip_splitter.models.frame.DimensionWarning.
"""


class SplitterError(Exception):
    """Base class for all fatal splitter errors."""
    pass


class ArgumentError(SplitterError):
    """Raised for missing or invalid run input (e.g. frame count <= 0)."""
    pass


class DecodeError(SplitterError):
    """Raised when the input buffer is not a readable image."""
    pass


class DimensionError(SplitterError):
    """
    Raised when the source cannot be split into the requested frames.
    
    Happens when the frame count exceeds the source height, or when
    the remainder policy is "error" and the height does not divide evenly.
    """
    pass


class EncodeError(SplitterError):
    """Raised when a frame cannot be serialized."""
    pass


class PersistError(SplitterError):
    """Raised when a frame cannot be written to disk."""
    pass
