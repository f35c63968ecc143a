# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Enums and Pydantic models shared across the logger pipeline."""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """Level tag written into each entry."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class WorkerState(str, Enum):
    """Lifecycle of the background worker loop."""

    RUNNING = "RUNNING"
    DRAINING = "DRAINING"
    STOPPED = "STOPPED"


class RotationPolicy(str, Enum):
    """What happens to the active file once it crosses the size threshold."""

    RENAME = "rename"  # keep the previous file as <path>.bak
    DELETE = "delete"


class Value(BaseModel):
    """
    A plain positional argument, substituted into a placeholder.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = Field(description="Any object; rendered with str()")


class ErrorValue(BaseModel):
    """
    A trailing exception argument, appended with its traceback.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: BaseException


LogArgument = Union[Value, ErrorValue]
