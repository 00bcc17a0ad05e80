"""
Filmstrip Splitter Configuration
================================

This module handles configuration for the splitter.

Configuration Sources (in order of precedence):
    1. Command line options (applied by the CLI)
    2. YAML file passed explicitly with --config
    3. Default values (lowest priority)

There is no implicit config search and no environment lookup: a
Settings value is built once and passed into the driver.

Example config.yaml:
    split:
      default_frame_count: 64
      prefix: knob
      remainder_policy: error
    output:
      format: png
      png_compression: 6
    logging:
      level: DEBUG
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from filmstrip_splitter.codec.encoder import SUPPORTED_FORMATS
from filmstrip_splitter.errors import ArgumentError
from filmstrip_splitter.extractor import REMAINDER_POLICIES


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class SplitConfig(BaseModel):
    """Decomposition configuration."""
    
    default_frame_count: int = Field(
        default=128,
        gt=0,
        description="Frame count used when none is given on the command line",
    )
    prefix: str = Field(
        default="frame",
        min_length=1,
        description="Output filename prefix",
    )
    remainder_policy: str = Field(
        default="warn",
        description="Uneven height handling: 'warn' (discard rows) or 'error'",
    )
    progress_interval: int = Field(
        default=10,
        ge=1,
        description="Log progress every N frames",
    )
    
    @field_validator("remainder_policy")
    @classmethod
    def _check_policy(cls, value: str) -> str:
        value = value.lower()
        if value not in REMAINDER_POLICIES:
            raise ValueError(f"must be one of {', '.join(REMAINDER_POLICIES)}")
        return value


class OutputConfig(BaseModel):
    """Frame encoding configuration."""
    
    format: str = Field(default="png", description="Output format: png, bmp or tiff")
    png_compression: int = Field(
        default=3,
        ge=0,
        le=9,
        description="PNG zlib compression level",
    )
    
    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_FORMATS:
            raise ValueError(f"must be one of {', '.join(SUPPORTED_FORMATS)}")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""
    
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for the filmstrip splitter.
    
    Built from defaults and an optional YAML file, then passed
    explicitly to FilmstripSplitter.
    """
    
    split: SplitConfig = Field(default_factory=SplitConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load configuration from an optional YAML file.
    
    Args:
        config_path: Path to a YAML config file, or None for defaults
        
    Returns:
        Settings: Loaded configuration
        
    Raises:
        ArgumentError: If the file is missing, unparsable or invalid
    """
    config_data = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ArgumentError(f"Config file not found: {path}")
        
        logger.info(f"Loading config from: {path}")
        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ArgumentError(f"Cannot read config file {path}: {e}") from e
        
        if not isinstance(config_data, dict):
            raise ArgumentError(f"Config file {path} must contain a mapping")
    
    try:
        return Settings.model_validate(config_data)
    except ValidationError as e:
        raise ArgumentError(f"Invalid configuration: {e}") from e


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    
    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
