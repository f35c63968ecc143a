# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Front-end API: the FileLogger context and per-source loggers."""

import atexit
from pathlib import Path
from types import TracebackType
from typing import Any, Optional, Union

from coreason_file_logger.config import FileLoggerSettings
from coreason_file_logger.formatter import format_message, render_entry
from coreason_file_logger.log_queue import BoundedLogQueue
from coreason_file_logger.models import LogLevel
from coreason_file_logger.utils.logger import logger
from coreason_file_logger.worker import LogWorker
from coreason_file_logger.writer import LogFileWriter


class FileLogger:
    """
    Asynchronous append-only file logger.

    Producers call enqueue() (usually through a SourceLogger) and never block;
    a single LogWorker thread persists entries in FIFO order. Call start()
    once and stop() during application shutdown.
    """

    def __init__(self, settings: Optional[FileLoggerSettings] = None) -> None:
        """
        Initialize the logger context. The worker is not started yet.

        Args:
            settings: Runtime settings. Defaults to FileLoggerSettings().
        """
        self.settings = settings or FileLoggerSettings()
        self.queue = BoundedLogQueue(self.settings.capacity)
        self.target_path: Path = Path(self.settings.path)
        self.running = True
        self.worker = LogWorker(
            self,
            LogFileWriter(
                max_bytes=self.settings.max_bytes,
                rotation_policy=self.settings.rotation_policy,
            ),
        )
        self._stopped = False

    @property
    def dropped(self) -> int:
        """Entries discarded because the queue was full."""
        return self.queue.dropped

    def start(self) -> "FileLogger":
        """Start the background worker."""
        if self._stopped:
            logger.warning("FileLogger.start() called after stop(); ignoring")
            return self
        self.worker.start()
        if self.settings.register_atexit:
            atexit.register(self.stop)
        logger.debug(f"FileLogger started, writing to {self.target_path}")
        return self

    def stop(self) -> None:
        """
        Stop accepting entries and flush everything queued before this call.

        The worker is given join_timeout seconds to drain on its own; whatever
        is left afterwards is written synchronously from the calling thread.
        """
        if self._stopped:
            return
        self._stopped = True
        self.running = False

        if not self.worker.join(self.settings.join_timeout):
            logger.warning("Log worker did not finish in time, draining synchronously")
        remaining = self.worker.drain()
        if remaining:
            logger.debug(f"Drained {remaining} log entries during shutdown")

        if self.settings.register_atexit:
            atexit.unregister(self.stop)
        if self.dropped:
            logger.warning(f"FileLogger dropped {self.dropped} entries because the queue was full")

    def set_path(self, new_path: Union[str, Path, None]) -> bool:
        """
        Point subsequent writes at a different file.

        The worker picks the new path up on its next cycle; entries already
        queued may land in either file.

        Returns:
            False if new_path is empty or None, True otherwise.
        """
        if new_path is None or not str(new_path).strip():
            logger.warning(f"Rejected empty log path: {new_path!r}")
            return False
        self.target_path = Path(new_path)
        return True

    def enqueue(self, level: LogLevel, source: str, template: Optional[str], *args: Any) -> bool:
        """
        Format an entry and hand it to the queue without blocking.

        Returns:
            True if the entry was queued; False if it was dropped, rejected
            after shutdown, or could not be built.
        """
        if not self.running:
            return False
        try:
            message = format_message(template, *args)
            entry = render_entry(level, source, message)
            return self.queue.offer(entry)
        except Exception as e:
            logger.error(f"FileLogger enqueue failed: {e}")
            return False

    def get_logger(self, name: Union[str, type]) -> "SourceLogger":
        """
        Return a logger bound to a source name.

        Args:
            name: A source name, or a class whose qualified name is used.
        """
        if isinstance(name, type):
            name = f"{name.__module__}.{name.__qualname__}"
        return SourceLogger(self, name)

    def __enter__(self) -> "FileLogger":
        return self.start()

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.stop()


class SourceLogger:
    """Per-call-site wrapper that stamps a source name and level."""

    def __init__(self, file_logger: FileLogger, source: str) -> None:
        self.file_logger = file_logger
        self.source = source

    def info(self, template: Optional[str], *args: Any) -> None:
        self.file_logger.enqueue(LogLevel.INFO, self.source, template, *args)

    def warn(self, template: Optional[str], *args: Any) -> None:
        self.file_logger.enqueue(LogLevel.WARN, self.source, template, *args)

    def error(self, template: Optional[str], *args: Any) -> None:
        self.file_logger.enqueue(LogLevel.ERROR, self.source, template, *args)
