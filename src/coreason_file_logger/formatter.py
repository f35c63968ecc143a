# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Message formatting: placeholder substitution and entry rendering."""

import threading
import traceback
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Optional

from coreason_file_logger.config import FileLoggerConfig
from coreason_file_logger.models import ErrorValue, LogArgument, LogLevel, Value
from coreason_file_logger.utils.logger import logger


def tag_arguments(args: Sequence[Any]) -> list[LogArgument]:
    """
    Wrap raw positional arguments into the Value | ErrorValue union.

    Only the last position is inspected: an exception there becomes an
    ErrorValue, every other argument (exceptions included) is a plain Value.

    Args:
        args: Raw positional arguments from the call site.

    Returns:
        The tagged arguments, in the same order.
    """
    # Unvalidated construction; only a BaseException is ever wrapped in ErrorValue.
    tagged: list[LogArgument] = [Value.model_construct(value=arg) for arg in args]
    if args and isinstance(args[-1], BaseException):
        tagged[-1] = ErrorValue.model_construct(error=args[-1])
    return tagged


def _safe_str(value: Any) -> str:
    """str() that degrades to a marker instead of raising."""
    try:
        return str(value)
    except Exception as e:
        logger.warning(f"Failed to render log argument of type {type(value).__name__}: {e}")
        return f"<unrenderable {type(value).__name__}>"


def _format_error(error: BaseException) -> str:
    """Render an exception's description and traceback."""
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def substitute(template: str, values: Sequence[Any]) -> str:
    """
    Replace '{}' placeholders in order with the string form of values.

    Substitution stops when either placeholders or values run out; leftover
    placeholders stay literal and leftover values are ignored.
    """
    placeholder = FileLoggerConfig.PLACEHOLDER
    parts: list[str] = []
    cursor = 0
    for value in values:
        idx = template.find(placeholder, cursor)
        if idx == -1:
            break
        parts.append(template[cursor:idx])
        parts.append(_safe_str(value))
        cursor = idx + len(placeholder)
    parts.append(template[cursor:])
    return "".join(parts)


def format_message(template: Optional[str], *args: Any) -> Optional[str]:
    """
    Render a message template with positional arguments.

    If the last argument is an exception it is not substituted; its
    description and traceback are appended on the following lines instead.

    Args:
        template: Template containing zero or more '{}' placeholders.
        *args: Positional arguments.

    Returns:
        The rendered message, or the template unchanged if it is None.
    """
    if template is None:
        return template

    try:
        tagged = tag_arguments(args)
        values = [arg.value for arg in tagged if isinstance(arg, Value)]
        message = substitute(template, values)

        if tagged and isinstance(tagged[-1], ErrorValue):
            trace = _format_error(tagged[-1].error).rstrip("\n")
            message = f"{message}\n{trace}"
        return message
    except Exception as e:
        logger.error(f"Failed to format log message {template!r}: {e}")
        return template


def render_entry(
    level: LogLevel,
    source: str,
    message: Optional[str],
    *,
    thread: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> str:
    """
    Build the final line written to the log file.

    Layout: '<timestamp> [<thread>] [<level>] <source> - <message>\\n'.
    """
    ts = timestamp or datetime.now()
    thread_name = thread if thread is not None else threading.current_thread().name
    stamp = f"{ts.strftime(FileLoggerConfig.TIMESTAMP_FORMAT)}.{ts.microsecond // 1000:03d}"
    return f"{stamp} [{thread_name}] [{LogLevel(level).value}] {source} - {message}\n"
