# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Bounded, thread-safe FIFO of rendered log entries."""

import queue
import threading
from typing import Optional

from coreason_file_logger.config import FileLoggerConfig


class BoundedLogQueue:
    """
    Many-producer, single-consumer queue that drops entries when full.

    Dropping is intentional: producers must never wait on disk I/O, so under
    sustained overload the newest entries are discarded and counted.
    """

    def __init__(self, capacity: int = FileLoggerConfig.DEFAULT_CAPACITY) -> None:
        """
        Initialize the queue.

        Args:
            capacity: Maximum number of pending entries. Must be positive.

        Raises:
            ValueError: If capacity is not positive.
        """
        if capacity <= 0:
            raise ValueError(f"Queue capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._queue: queue.Queue[str] = queue.Queue(maxsize=capacity)
        self._dropped = 0
        self._dropped_lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dropped(self) -> int:
        """Number of entries discarded because the queue was full."""
        return self._dropped

    def offer(self, entry: str) -> bool:
        """
        Insert an entry without blocking.

        Returns:
            True if the entry was queued, False if it was dropped.
        """
        try:
            self._queue.put_nowait(entry)
            return True
        except queue.Full:
            with self._dropped_lock:
                self._dropped += 1
            return False

    def poll(self, timeout: float) -> Optional[str]:
        """
        Wait up to timeout seconds for the next entry.

        Returns:
            The oldest entry, or None if nothing arrived in time.
        """
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self) -> list[str]:
        """Remove and return everything currently queued, oldest first."""
        entries: list[str] = []
        while True:
            try:
                entries.append(self._queue.get_nowait())
            except queue.Empty:
                return entries

    def empty(self) -> bool:
        return self._queue.empty()

    def qsize(self) -> int:
        return self._queue.qsize()
