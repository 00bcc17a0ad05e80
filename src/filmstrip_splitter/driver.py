"""
Split Driver
============

Orchestrates decode -> extract -> encode -> persist for a filmstrip.

Pipeline:
    1. Read and decode the input image (once)
    2. Plan frame geometry, surface any DimensionWarning
    3. Ensure the output directory exists
    4. For each frame index in ascending order:
       extract -> encode -> write {output_dir}/{prefix}_{index}.{ext}
    5. Return a SplitResult

Design Rules:
    - Configuration is passed in; no global state
    - First failure aborts the run; no retries, no rollback
    - Frames written before a failure stay on disk
    - Raises typed errors; process exit codes belong to the CLI
"""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from filmstrip_splitter.codec import encode_surface, extension_for, read_image
from filmstrip_splitter.config import Settings
from filmstrip_splitter.errors import ArgumentError
from filmstrip_splitter.extractor import FrameExtractor
from filmstrip_splitter.models.frame import DimensionWarning, FilmstripSpec
from filmstrip_splitter.models.result import SplitResult
from filmstrip_splitter.sink import FileSink


logger = logging.getLogger(__name__)


DEFAULT_FRAME_COUNT = 128
DEFAULT_PREFIX = "frame"


class SplitRequest(BaseModel):
    """
    One decomposition job.
    
    Attributes:
        input_path: Filmstrip image to read
        output_dir: Directory receiving the frames
        frame_count: Frames stacked in the filmstrip
        prefix: Output filename prefix
    """
    
    input_path: Path = Field(..., description="Input filmstrip image")
    output_dir: Path = Field(..., description="Output directory for frames")
    frame_count: int = Field(
        default=DEFAULT_FRAME_COUNT,
        gt=0,
        description="Number of frames in the filmstrip",
    )
    prefix: str = Field(
        default=DEFAULT_PREFIX,
        min_length=1,
        description="Filename prefix for output frames",
    )


def frame_filename(prefix: str, index: int, extension: str) -> str:
    """
    Output filename for a frame: {prefix}_{index}.{extension}.
    
    The index is not zero-padded.
    """
    return f"{prefix}_{index}.{extension}"


class FilmstripSplitter:
    """
    Runs the split pipeline with explicit settings.
    
    Example:
        splitter = FilmstripSplitter(load_config())
        result = splitter.run(SplitRequest(
            input_path="knob.png",
            output_dir="frames",
            frame_count=128,
        ))
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        sink: Optional[FileSink] = None,
    ) -> None:
        """
        Initialize splitter.
        
        Args:
            settings: Configuration; defaults when None
            sink: Frame writer; a new FileSink when None
        """
        self.settings = settings or Settings()
        self.sink = sink or FileSink()
    
    def run(self, request: SplitRequest) -> SplitResult:
        """
        Split one filmstrip into frame files.
        
        Args:
            request: Input, output and frame parameters
            
        Returns:
            SplitResult describing the written frames
            
        Raises:
            ArgumentError: Invalid frame count or prefix
            DecodeError: Input cannot be read or decoded
            DimensionError: Frames cannot be laid out on the source
            EncodeError: A frame cannot be encoded
            PersistError: A frame cannot be written
        """
        logger.info(f"Loading filmstrip: {request.input_path}")
        source = read_image(request.input_path)
        
        spec = FilmstripSpec(
            source=source,
            frame_count=request.frame_count,
            prefix=request.prefix,
        )
        return self.split(spec, request.output_dir)
    
    def split(self, spec: FilmstripSpec, output_dir: Path) -> SplitResult:
        """Split an already-decoded filmstrip into frame files."""
        output_settings = self.settings.output
        extension = extension_for(output_settings.format)
        
        extractor = FrameExtractor(
            spec.source,
            spec.frame_count,
            remainder_policy=self.settings.split.remainder_policy,
        )
        plan = extractor.plan
        
        logger.info(f"Image dimensions: {spec.source.width}x{spec.source.height}")
        logger.info(f"Frame dimensions: {extractor.frame_width}x{plan.frame_height}")
        logger.info(f"Number of frames: {plan.frame_count}")
        
        warnings: List[DimensionWarning] = []
        if plan.warning is not None:
            warnings.append(plan.warning)
            logger.warning(f"Warning: {plan.warning.message}")
        
        output_dir = self.sink.ensure_directory(output_dir)
        logger.info(f"Output directory: {output_dir}")
        
        bytes_before = self.sink.bytes_written
        interval = self.settings.split.progress_interval
        output_paths: List[str] = []
        
        for frame in extractor:
            data = encode_surface(
                frame.surface,
                image_format=output_settings.format,
                png_compression=output_settings.png_compression,
            )
            path = output_dir / frame_filename(spec.prefix, frame.index, extension)
            self.sink.write(path, data)
            output_paths.append(str(path))
            
            done = frame.index + 1
            if done % interval == 0 or done == plan.frame_count:
                logger.info(f"Saved {done}/{plan.frame_count} frames")
        
        result = SplitResult(
            source_width=spec.source.width,
            source_height=spec.source.height,
            frame_height=plan.frame_height,
            frame_count=plan.frame_count,
            output_paths=tuple(output_paths),
            warnings=tuple(warnings),
            bytes_written=self.sink.bytes_written - bytes_before,
        )
        logger.info(f"Successfully split {result.frame_count} frames to {output_dir}")
        return result


def split_filmstrip(
    input_path: Path,
    output_dir: Path,
    frame_count: int = DEFAULT_FRAME_COUNT,
    prefix: str = DEFAULT_PREFIX,
    settings: Optional[Settings] = None,
) -> SplitResult:
    """
    Library entry point: split one filmstrip with the given settings.
    
    Raises:
        ArgumentError: If the request parameters are invalid
    """
    try:
        request = SplitRequest(
            input_path=input_path,
            output_dir=output_dir,
            frame_count=frame_count,
            prefix=prefix,
        )
    except ValueError as e:
        raise ArgumentError(f"Invalid split request: {e}") from e
    return FilmstripSplitter(settings).run(request)
