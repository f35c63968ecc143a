# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Custom exceptions for the file logger."""


class FileLoggerError(Exception):
    """Base exception for the file logger."""


class LogWriteError(FileLoggerError):
    """Raised when the destination file cannot be opened, rotated or appended to."""


class InvalidSettingsError(FileLoggerError):
    """Raised when logger settings fail validation."""
