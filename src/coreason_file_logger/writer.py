# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Destination file handling: open, rotate, append."""

from pathlib import Path
from typing import BinaryIO, Optional

from coreason_file_logger.config import FileLoggerConfig
from coreason_file_logger.exceptions import LogWriteError
from coreason_file_logger.models import RotationPolicy
from coreason_file_logger.utils.logger import logger


def backup_path_for(path: Path) -> Path:
    """Return '<path>.bak' for a log file path."""
    return path.with_name(path.name + FileLoggerConfig.BACKUP_SUFFIX)


class LogFileWriter:
    """
    Owns the open log file handle.

    Not thread-safe: a single consumer drives it. The size check uses a byte
    counter seeded from the file size at open time, so no stat() per write.
    """

    def __init__(
        self,
        max_bytes: int = FileLoggerConfig.MAX_FILE_SIZE,
        rotation_policy: RotationPolicy = RotationPolicy.RENAME,
    ) -> None:
        """
        Initialize the writer.

        Args:
            max_bytes: Size threshold in bytes above which the file is rotated.
            rotation_policy: Whether a full file is renamed to .bak or deleted.
        """
        self.max_bytes = max_bytes
        self.rotation_policy = rotation_policy
        self._handle: Optional[BinaryIO] = None
        self._bound_path: Optional[Path] = None
        self._size = 0

    @property
    def bound_path(self) -> Optional[Path]:
        """Path of the currently open file, or None."""
        return self._bound_path if self._handle is not None else None

    @property
    def size(self) -> int:
        """Bytes in the bound file as tracked by the writer."""
        return self._size

    def ensure_open(self, path: Path) -> None:
        """
        Make sure the handle is open and bound to path.

        Args:
            path: Target log file.

        Raises:
            LogWriteError: If the file or its parent directory cannot be created.
        """
        path = Path(path)
        if self._handle is not None and self._bound_path == path:
            return

        if self._handle is not None:
            logger.info(f"Switching log file from {self._bound_path} to {path}")
        self.close()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = open(path, "ab")
            self._bound_path = path
            self._size = path.stat().st_size
        except OSError as e:
            self.close()
            raise LogWriteError(f"Failed to open log file {path}: {e}") from e

    def rotate_if_needed(self, path: Path) -> bool:
        """
        Rotate the bound file once it has grown past max_bytes.

        With RENAME the file becomes '<path>.bak' (replacing any older backup);
        with DELETE it is removed. Either way the handle is closed, so the
        next ensure_open() starts a fresh file.

        Returns:
            True if a rotation happened.

        Raises:
            LogWriteError: If the backup cannot be replaced or the file moved.
        """
        path = Path(path)
        if self._handle is None or self._bound_path != path or self._size <= self.max_bytes:
            return False

        logger.info(f"Log file {path} reached {self._size} bytes, rotating ({self.rotation_policy.value})")
        self.close()
        try:
            if self.rotation_policy is RotationPolicy.DELETE:
                path.unlink(missing_ok=True)
            else:
                backup = backup_path_for(path)
                backup.unlink(missing_ok=True)
                if path.exists():
                    path.rename(backup)
        except OSError as e:
            raise LogWriteError(f"Failed to rotate log file {path}: {e}") from e
        return True

    def append(self, data: bytes) -> None:
        """
        Append raw bytes to the open file. No flush per call.

        Raises:
            LogWriteError: If no file is open or the write fails.
        """
        if self._handle is None:
            raise LogWriteError("No log file is open")
        try:
            self._handle.write(data)
        except OSError as e:
            raise LogWriteError(f"Failed to append to {self._bound_path}: {e}") from e
        self._size += len(data)

    def write(self, path: Path, data: bytes) -> bool:
        """
        Open, rotate if needed, and append in one step.

        Failures are logged and the handle is dropped so the next call
        reopens from scratch. Never raises.

        Returns:
            True if the data was handed to the file.
        """
        try:
            self.ensure_open(path)
            if self.rotate_if_needed(path):
                self.ensure_open(path)
            self.append(data)
            return True
        except LogWriteError as e:
            logger.error(f"Log write failed: {e}")
            self.close()
            return False

    def flush(self) -> None:
        """Flush buffered bytes, dropping the handle if that fails."""
        if self._handle is None:
            return
        try:
            self._handle.flush()
        except OSError as e:
            logger.error(f"Failed to flush {self._bound_path}: {e}")
            self.close()

    def close(self) -> None:
        """Flush and close the handle. Safe to call repeatedly."""
        handle, self._handle = self._handle, None
        self._bound_path = None
        self._size = 0
        if handle is None:
            return
        try:
            handle.flush()
        except OSError as e:
            logger.warning(f"Failed to flush log file on close: {e}")
        finally:
            try:
                handle.close()
            except OSError as e:
                logger.warning(f"Failed to close log file: {e}")
