# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Configuration module for the asynchronous file logger."""

from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coreason_file_logger.models import RotationPolicy


class FileLoggerConfig:
    """Configuration constants for the file logger pipeline."""

    # Destination
    DEFAULT_LOG_PATH: Final[Path] = Path("app.log")
    BACKUP_SUFFIX: Final[str] = ".bak"
    ENCODING: Final[str] = "utf-8"
    ENCODING_ERRORS: Final[str] = "backslashreplace"  # keep undecodable input visible instead of failing

    # Rotation
    MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MiB

    # Queue / Worker
    DEFAULT_CAPACITY: Final[int] = 1000
    POLL_TIMEOUT: Final[float] = 0.5  # seconds
    JOIN_TIMEOUT: Final[float] = 5.0  # seconds
    WORKER_THREAD_NAME: Final[str] = "FileLogger-Worker"

    # Line layout
    PLACEHOLDER: Final[str] = "{}"
    TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class FileLoggerSettings(BaseModel):
    """
    Runtime settings for a FileLogger instance.
    """

    model_config = ConfigDict(frozen=True)

    path: Path = Field(default=FileLoggerConfig.DEFAULT_LOG_PATH, description="Initial target log file")
    capacity: int = Field(default=FileLoggerConfig.DEFAULT_CAPACITY, gt=0, description="Bounded queue size")
    max_bytes: int = Field(default=FileLoggerConfig.MAX_FILE_SIZE, gt=0, description="Rotation threshold")
    rotation_policy: RotationPolicy = RotationPolicy.RENAME
    poll_timeout: float = Field(default=FileLoggerConfig.POLL_TIMEOUT, gt=0)
    join_timeout: float = Field(default=FileLoggerConfig.JOIN_TIMEOUT, ge=0)
    mirror_to_console: bool = Field(default=True, description="Mirror every entry to stdout")
    register_atexit: bool = Field(default=False, description="Call stop() from an atexit hook")

    @field_validator("path", mode="before")
    @classmethod
    def reject_empty_path(cls, value: Any) -> Any:
        """Reject empty, whitespace-only or '.' paths; they resolve to the current directory."""
        if value is None or Path(str(value).strip()) == Path("."):
            raise ValueError("Log path must not be empty")
        return value
