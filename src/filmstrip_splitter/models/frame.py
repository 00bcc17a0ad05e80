"""
Frame Models
============

Data models describing a decomposition request and its products.

Lifecycle:
    FilmstripSpec -> FrameExtractor -> Frame -> Encoder + Sink -> discarded

Frames are not retained after persistence.
"""

from dataclasses import dataclass

from filmstrip_splitter.errors import ArgumentError
from filmstrip_splitter.models.surface import PixelSurface


@dataclass(frozen=True, slots=True)
class FilmstripSpec:
    """
    Immutable decomposition request.
    
    Attributes:
        source: Decoded filmstrip surface
        frame_count: Number of frames stacked vertically (> 0)
        prefix: Output filename prefix (non-empty)
    """
    
    source: PixelSurface
    frame_count: int
    prefix: str = "frame"
    
    def __post_init__(self) -> None:
        if isinstance(self.frame_count, bool) or not isinstance(self.frame_count, int):
            raise ArgumentError(f"Invalid frame count: {self.frame_count!r}")
        if self.frame_count <= 0:
            raise ArgumentError(f"Invalid frame count: {self.frame_count}")
        if not self.prefix:
            raise ArgumentError("Frame prefix must be a non-empty string")
    
    def __repr__(self) -> str:
        return (
            f"FilmstripSpec(source={self.source!r}, "
            f"frame_count={self.frame_count}, "
            f"prefix={self.prefix!r})"
        )


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One extracted horizontal band of the filmstrip.
    
    Attributes:
        index: 0-based position from the top of the filmstrip
        surface: Band pixels, owned solely by this frame
    """
    
    index: int
    surface: PixelSurface
    
    @property
    def width(self) -> int:
        return self.surface.width
    
    @property
    def height(self) -> int:
        return self.surface.height
    
    def __repr__(self) -> str:
        return f"Frame(index={self.index}, size={self.width}x{self.height})"


@dataclass(frozen=True, slots=True)
class DimensionWarning:
    """
    Non-fatal notice that the source height does not divide evenly.
    
    The bottom `discarded_rows` rows of the source are assigned to no
    frame. Logged at WARNING level and returned with the run result.
    
    Attributes:
        source_height: Height of the source surface
        frame_count: Requested number of frames
        frame_height: floor(source_height / frame_count)
        discarded_rows: source_height mod frame_count
    """
    
    source_height: int
    frame_count: int
    frame_height: int
    discarded_rows: int
    
    @property
    def message(self) -> str:
        return (
            f"Image height ({self.source_height}) is not evenly divisible "
            f"by frame count ({self.frame_count}); "
            f"discarding {self.discarded_rows} bottom row(s)"
        )
    
    def __str__(self) -> str:
        return self.message
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "source_height": self.source_height,
            "frame_count": self.frame_count,
            "frame_height": self.frame_height,
            "discarded_rows": self.discarded_rows,
        }
