"""
Command Line Interface
======================

    filmstrip-splitter <input.png> <output_dir> [frames] [--prefix NAME]

This is the ONLY place that turns errors into exit codes:
    0 - all frames written
    1 - usage error, invalid frame count, or any pipeline failure
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from filmstrip_splitter import __version__
from filmstrip_splitter.codec import SUPPORTED_FORMATS
from filmstrip_splitter.config import Settings, load_config, setup_logging
from filmstrip_splitter.driver import FilmstripSplitter, SplitRequest
from filmstrip_splitter.errors import ArgumentError, SplitterError
from filmstrip_splitter.extractor import REMAINDER_ERROR


logger = logging.getLogger(__name__)


USAGE = """\
Usage: filmstrip-splitter <input.png> <output_dir> [frames]

Arguments:
  input.png   - Input filmstrip image (knob/slider generator output)
  output_dir  - Output directory for individual frames
  frames      - Number of frames (default: 128)

Options:
  --prefix    - Filename prefix for output frames (default: 'frame')
  --format    - Output image format: png, bmp or tiff (default: png)
  --strict    - Fail instead of discarding rows when height is uneven
  --config    - YAML configuration file
  --log-level - Logging level (default: INFO)

Example:
  filmstrip-splitter knob.png frames/ 128
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""
    
    def error(self, message: str) -> None:
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="filmstrip-splitter",
        description="Split a vertical filmstrip image into individual frames.",
    )
    parser.add_argument("input", nargs="?", help="Input filmstrip image")
    parser.add_argument("output_dir", nargs="?", help="Output directory for frames")
    parser.add_argument("frames", nargs="?", help="Number of frames (default: 128)")
    parser.add_argument("--prefix", default=None, help="Filename prefix (default: 'frame')")
    parser.add_argument(
        "--format",
        dest="image_format",
        choices=sorted(SUPPORTED_FORMATS),
        default=None,
        help="Output image format (default: png)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when image height is not divisible by the frame count",
    )
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--log-level", default=None, help="Logging level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_frame_count(value: Optional[str], default: int) -> int:
    """
    Parse the optional positional frame count.
    
    Raises:
        ArgumentError: If the value is not a positive integer
    """
    if value is None:
        return default
    try:
        text = value.strip()
        # ASCII digits only: no sign, underscores or Unicode digits
        if not (text.isascii() and text.isdigit()):
            raise ValueError(value)
        frame_count = int(text)
    except ValueError:
        raise ArgumentError(f"Invalid frame count: {value}") from None
    if frame_count <= 0:
        raise ArgumentError(f"Invalid frame count: {value}")
    return frame_count


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return settings updated with command line options."""
    split = settings.split
    output = settings.output
    log = settings.logging
    
    if args.prefix is not None:
        split = split.model_copy(update={"prefix": args.prefix})
    if args.strict:
        split = split.model_copy(update={"remainder_policy": REMAINDER_ERROR})
    if args.image_format is not None:
        output = output.model_copy(update={"format": args.image_format})
    if args.log_level is not None:
        log = log.model_copy(update={"level": args.log_level})
    
    return settings.model_copy(update={"split": split, "output": output, "logging": log})


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the splitter from command line arguments.
    
    Args:
        argv: Arguments without the program name; sys.argv[1:] when None
        
    Returns:
        Process exit status
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1
    
    if not args.input or not args.output_dir:
        print(USAGE, file=sys.stderr)
        return 1
    
    try:
        settings = apply_overrides(load_config(args.config), args)
        setup_logging(settings)
        
        logger.info("Filmstrip Splitter")
        logger.info("=" * 18)
        
        frame_count = parse_frame_count(args.frames, settings.split.default_frame_count)
        try:
            request = SplitRequest(
                input_path=args.input,
                output_dir=args.output_dir,
                frame_count=frame_count,
                prefix=settings.split.prefix,
            )
        except ValidationError as e:
            raise ArgumentError(f"Invalid arguments: {e}") from e
        
        FilmstripSplitter(settings).run(request)
        
    except SplitterError as e:
        logger.debug("Split failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    return 0
