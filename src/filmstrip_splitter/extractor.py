"""
Frame Extractor
===============

Partitions a filmstrip surface into N equal-height horizontal bands.

Algorithm:
    frame_height = floor(H / N)
    frame i covers source rows [i * frame_height, (i + 1) * frame_height)
    rows [N * frame_height, H) belong to no frame (remainder)

Design Rules:
    - frame_height is computed ONCE per run, never per frame
    - Pixels are copied unchanged (no blending, no color transform)
    - Each frame owns a fresh array; the source is never mutated
    - Reads never go past the source; rows that would are left zero-filled
    - No I/O; the caller reports the plan warning
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from filmstrip_splitter.errors import ArgumentError, DimensionError
from filmstrip_splitter.models.frame import DimensionWarning, Frame
from filmstrip_splitter.models.surface import CHANNELS, PixelSurface


logger = logging.getLogger(__name__)


REMAINDER_WARN = "warn"
REMAINDER_ERROR = "error"
REMAINDER_POLICIES = (REMAINDER_WARN, REMAINDER_ERROR)


@dataclass(frozen=True, slots=True)
class ExtractionPlan:
    """
    Per-run frame geometry.
    
    Attributes:
        source_height: Height of the filmstrip
        frame_count: Requested frames
        frame_height: Uniform band height
        warning: Set when rows are discarded, None otherwise
    """
    
    source_height: int
    frame_count: int
    frame_height: int
    warning: Optional[DimensionWarning] = None
    
    @property
    def remainder_rows(self) -> int:
        return self.source_height - self.frame_height * self.frame_count
    
    def band(self, index: int) -> Tuple[int, int]:
        """Source row range [y_start, y_end) for a frame index."""
        if not 0 <= index < self.frame_count:
            raise IndexError(f"frame index {index} out of range [0, {self.frame_count})")
        y_start = index * self.frame_height
        return y_start, y_start + self.frame_height


def plan_extraction(
    source_height: int,
    frame_count: int,
    remainder_policy: str = REMAINDER_WARN,
) -> ExtractionPlan:
    """
    Derive the frame height and remainder for a run.
    
    Args:
        source_height: Height of the source surface
        frame_count: Number of frames (> 0)
        remainder_policy: "warn" discards remainder rows with a warning,
            "error" refuses uneven splits
            
    Returns:
        ExtractionPlan for the run
        
    Raises:
        ArgumentError: If frame_count <= 0 or the policy is unknown
        DimensionError: If frames would be zero rows tall, or the split is
            uneven under the "error" policy
    """
    if isinstance(frame_count, bool) or not isinstance(frame_count, int) or frame_count <= 0:
        raise ArgumentError(f"Invalid frame count: {frame_count!r}")
    if remainder_policy not in REMAINDER_POLICIES:
        raise ArgumentError(f"Unknown remainder policy: {remainder_policy!r}")
    
    frame_height = source_height // frame_count
    if frame_height == 0:
        raise DimensionError(
            f"Frame count ({frame_count}) exceeds image height ({source_height}); "
            f"frames would be empty"
        )
    
    remainder = source_height % frame_count
    warning = None
    if remainder:
        warning = DimensionWarning(
            source_height=source_height,
            frame_count=frame_count,
            frame_height=frame_height,
            discarded_rows=remainder,
        )
        if remainder_policy == REMAINDER_ERROR:
            raise DimensionError(warning.message)
    
    return ExtractionPlan(
        source_height=source_height,
        frame_count=frame_count,
        frame_height=frame_height,
        warning=warning,
    )


class FrameExtractor:
    """
    Extracts frames from a decoded filmstrip.
    
    Frames are produced lazily and in ascending index order when
    iterated, so each one can be encoded, persisted and dropped before
    the next is allocated.
    
    Example:
        extractor = FrameExtractor(surface, frame_count=128)
        for frame in extractor:
            save(frame)
    """
    
    def __init__(
        self,
        source: PixelSurface,
        frame_count: int,
        remainder_policy: str = REMAINDER_WARN,
    ) -> None:
        """
        Initialize extractor and compute the frame geometry.
        
        Args:
            source: Filmstrip surface (read-only)
            frame_count: Number of frames stacked vertically
            remainder_policy: See plan_extraction
        """
        self._source = source
        self._plan = plan_extraction(source.height, frame_count, remainder_policy)
    
    @property
    def source(self) -> PixelSurface:
        return self._source
    
    @property
    def plan(self) -> ExtractionPlan:
        return self._plan
    
    @property
    def frame_height(self) -> int:
        return self._plan.frame_height
    
    @property
    def frame_width(self) -> int:
        return self._source.width
    
    def band(self, index: int) -> Tuple[int, int]:
        return self._plan.band(index)
    
    def extract(self, index: int) -> Frame:
        """
        Copy one band of the source into a new frame.
        
        Args:
            index: Frame index in [0, frame_count)
            
        Returns:
            Frame of size source.width x frame_height
        """
        y_start, _ = self._plan.band(index)
        width = self._source.width
        frame_height = self._plan.frame_height
        
        target = np.zeros((frame_height, width, CHANNELS), dtype=np.uint8)
        
        # Bound check: copy only rows that exist in the source
        available = max(0, min(frame_height, self._source.height - y_start))
        if available < frame_height:
            logger.error(
                f"Frame {index} band overruns source "
                f"({y_start}+{frame_height} > {self._source.height}); "
                f"zero-filling {frame_height - available} row(s)"
            )
        if available:
            target[:available] = self._source.pixels[y_start:y_start + available]
        
        return Frame(index=index, surface=PixelSurface(target))
    
    def __iter__(self) -> Iterator[Frame]:
        for index in range(self._plan.frame_count):
            yield self.extract(index)
    
    def __len__(self) -> int:
        return self._plan.frame_count


def extract_frames(
    source: PixelSurface,
    frame_count: int,
    remainder_policy: str = REMAINDER_WARN,
) -> List[Frame]:
    """Extract every frame of a filmstrip, index 0 first."""
    return list(FrameExtractor(source, frame_count, remainder_policy))
