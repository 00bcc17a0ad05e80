"""
Run Result
==========

Summary returned by the driver after a completed run.
"""

from dataclasses import dataclass, field
from typing import Tuple

from filmstrip_splitter.models.frame import DimensionWarning


@dataclass(frozen=True, slots=True)
class SplitResult:
    """
    Outcome of a full decomposition run.
    
    Attributes:
        source_width: Width of the decoded filmstrip
        source_height: Height of the decoded filmstrip
        frame_height: Height of every extracted frame
        frame_count: Number of frames written
        output_paths: Written files, in frame index order
        warnings: Non-fatal dimension warnings raised during the run
        bytes_written: Total encoded bytes persisted
    """
    
    source_width: int
    source_height: int
    frame_height: int
    frame_count: int
    output_paths: Tuple[str, ...]
    warnings: Tuple[DimensionWarning, ...] = field(default_factory=tuple)
    bytes_written: int = 0
    
    @property
    def frame_width(self) -> int:
        return self.source_width
    
    @property
    def discarded_rows(self) -> int:
        return self.source_height - self.frame_height * self.frame_count
    
    def __repr__(self) -> str:
        return (
            f"SplitResult(frames={self.frame_count}, "
            f"frame={self.frame_width}x{self.frame_height}, "
            f"warnings={len(self.warnings)})"
        )
    
    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "source_width": self.source_width,
            "source_height": self.source_height,
            "frame_width": self.frame_width,
            "frame_height": self.frame_height,
            "frame_count": self.frame_count,
            "output_paths": list(self.output_paths),
            "warnings": [w.to_dict() for w in self.warnings],
            "bytes_written": self.bytes_written,
        }
