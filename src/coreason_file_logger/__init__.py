# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Asynchronous append-only file logger."""

from coreason_file_logger.config import FileLoggerConfig, FileLoggerSettings
from coreason_file_logger.logger import FileLogger, SourceLogger
from coreason_file_logger.models import LogLevel, RotationPolicy

__all__ = [
    "FileLogger",
    "FileLoggerConfig",
    "FileLoggerSettings",
    "LogLevel",
    "RotationPolicy",
    "SourceLogger",
]
