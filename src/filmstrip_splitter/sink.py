"""
File Sink
=========

Persists encoded frames to disk.

Design Rules:
    - Writes are whole-file: temp file in the target directory, then
      os.replace over the destination
    - A failed write never leaves a truncated destination file
    - Every OSError surfaces as PersistError; no retries
"""

import logging
import os
from pathlib import Path
from typing import Union

from filmstrip_splitter.errors import PersistError


logger = logging.getLogger(__name__)


PathLike = Union[str, Path]


class FileSink:
    """
    Atomic file writer with directory creation.
    
    Attributes:
        files_written: Number of successful writes
        bytes_written: Total bytes persisted
    """
    
    def __init__(self) -> None:
        self._files_written: int = 0
        self._bytes_written: int = 0
    
    @property
    def files_written(self) -> int:
        return self._files_written
    
    @property
    def bytes_written(self) -> int:
        return self._bytes_written
    
    def ensure_directory(self, path: PathLike) -> Path:
        """
        Create a directory and its ancestors if missing.
        
        Raises:
            PersistError: If the path cannot be created or is not a directory
        """
        path = Path(path)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistError(f"Cannot create output directory {path}: {e.strerror or e}") from e
        return path
    
    def write(self, path: PathLike, data: bytes) -> Path:
        """
        Write bytes as the complete content of a file.
        
        Args:
            path: Destination file, overwritten if present
            data: Full file content
            
        Returns:
            The destination path
            
        Raises:
            PersistError: On any filesystem failure
        """
        path = Path(path)
        self.ensure_directory(path.parent)
        
        tmp_name = str(path.with_name(f".{path.name}.{os.getpid()}.tmp"))
        created = False
        try:
            # 0666 filtered by the umask, as open() does
            fd = os.open(tmp_name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
            created = True
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            created = False
        except OSError as e:
            raise PersistError(f"Failed to write {path}: {e.strerror or e}") from e
        finally:
            if created:
                self._discard(tmp_name)
        
        self._files_written += 1
        self._bytes_written += len(data)
        logger.debug(f"Wrote {len(data)} bytes to {path}")
        return path
    
    @staticmethod
    def _discard(tmp_name: str) -> None:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove temporary file {tmp_name}: {e}")
