# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Background consumer that drains the queue into the log file."""

import sys
import threading
from typing import TYPE_CHECKING, Optional

from coreason_file_logger.config import FileLoggerConfig
from coreason_file_logger.models import WorkerState
from coreason_file_logger.utils.logger import logger
from coreason_file_logger.writer import LogFileWriter

if TYPE_CHECKING:
    from coreason_file_logger.logger import FileLogger


class LogWorker:
    """
    Single long-lived consumer for a FileLogger.

    Reads the context's target path and run flag on every cycle, so path
    switches and shutdown are picked up without any handshake.
    """

    def __init__(self, context: "FileLogger", writer: LogFileWriter) -> None:
        """
        Initialize the worker.

        Args:
            context: The owning FileLogger (queue, target path, run flag, settings).
            writer: The file writer this worker drives exclusively.
        """
        self.context = context
        self.writer = writer
        self.state = WorkerState.RUNNING
        self._thread: Optional[threading.Thread] = None
        self._process_lock = threading.RLock()

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Spawn the daemon thread running the loop."""
        if self.is_alive:
            return
        self._thread = threading.Thread(
            target=self.run,
            name=FileLoggerConfig.WORKER_THREAD_NAME,
            daemon=True,
        )
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the loop to finish.

        Returns:
            True if the thread is no longer running.
        """
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def run(self) -> None:
        """Poll/write loop: RUNNING -> DRAINING -> STOPPED."""
        queue = self.context.queue
        timeout = self.context.settings.poll_timeout
        logger.debug("Log worker started")

        while True:
            # poll + process is one step under the lock, so drain() can never
            # overtake an entry the worker has already dequeued.
            with self._process_lock:
                if self.state is WorkerState.STOPPED:
                    break
                try:
                    entry = queue.poll(timeout)
                    if entry is not None:
                        if not self.context.running:
                            self.state = WorkerState.DRAINING
                        self.process(entry)
                    elif not self.context.running:
                        if queue.empty():
                            self.state = WorkerState.STOPPED
                        else:
                            self.state = WorkerState.DRAINING
                except Exception as e:
                    # The loop must outlive any single failure.
                    logger.error(f"Log worker iteration failed: {e}")

        with self._process_lock:
            self.writer.close()
        logger.debug("Log worker stopped")

    def process(self, entry: str) -> None:
        """
        Persist one entry and mirror it to the console.

        Never raises; failures are logged and the writer reopens next time.
        """
        with self._process_lock:
            path = self.context.target_path
            try:
                data = entry.encode(FileLoggerConfig.ENCODING, errors=FileLoggerConfig.ENCODING_ERRORS)
                self.writer.write(path, data)
            except Exception as e:
                logger.error(f"Failed to persist log entry to {path}: {e}")
                self.writer.close()

            if self.context.settings.mirror_to_console:
                try:
                    sys.stdout.write(entry)
                except Exception as e:
                    logger.warning(f"Failed to mirror log entry to console: {e}")

    def drain(self) -> int:
        """
        Synchronously write everything still queued, then close the file.

        Returns:
            Number of entries drained.
        """
        with self._process_lock:
            self.state = WorkerState.STOPPED
            entries = self.context.queue.drain()
            for entry in entries:
                self.process(entry)
            self.writer.close()
        return len(entries)
