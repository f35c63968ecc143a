# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Tests for the bounded log queue."""

import threading
import time

import pytest

from coreason_file_logger.log_queue import BoundedLogQueue


class TestBoundedLogQueue:
    """Backpressure and ordering behavior."""

    def test_fifo_order_preserved(self) -> None:
        """Test N <= capacity entries come back in order, byte-for-byte."""
        q = BoundedLogQueue(capacity=10)
        entries = [f"line {i} é\n" for i in range(10)]
        for entry in entries:
            assert q.offer(entry) is True

        received = [q.poll(0.01) for _ in range(10)]
        assert received == entries
        assert q.empty()

    def test_overflow_dropped_silently(self) -> None:
        """Test entries beyond capacity are dropped and counted."""
        q = BoundedLogQueue(capacity=3)
        results = [q.offer(str(i)) for i in range(5)]

        assert results == [True, True, True, False, False]
        assert q.dropped == 2
        assert q.qsize() == 3
        assert q.drain() == ["0", "1", "2"]

    def test_poll_timeout_returns_none(self) -> None:
        """Test an empty queue returns None after the timeout."""
        q = BoundedLogQueue(capacity=1)
        start = time.monotonic()
        assert q.poll(0.05) is None
        assert time.monotonic() - start >= 0.04

    def test_poll_wakes_on_offer(self) -> None:
        """Test a blocked consumer receives an entry offered from another thread."""
        q = BoundedLogQueue(capacity=1)
        timer = threading.Timer(0.05, q.offer, args=("late",))
        timer.start()
        try:
            assert q.poll(5.0) == "late"
        finally:
            timer.cancel()

    def test_drain_empties_queue(self) -> None:
        q = BoundedLogQueue(capacity=5)
        q.offer("a")
        q.offer("b")
        assert q.drain() == ["a", "b"]
        assert q.drain() == []

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_invalid_capacity(self, capacity: int) -> None:
        """Test non-positive capacity is rejected."""
        with pytest.raises(ValueError, match="capacity must be positive"):
            BoundedLogQueue(capacity=capacity)

    def test_concurrent_producers(self) -> None:
        """Test many producers never exceed capacity and keep per-producer order."""
        q = BoundedLogQueue(capacity=250)
        barrier = threading.Barrier(8)

        def produce(pid: int) -> None:
            barrier.wait()
            for i in range(100):
                q.offer(f"{pid}:{i}")

        threads = [threading.Thread(target=produce, args=(pid,)) for pid in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        entries = q.drain()
        assert len(entries) == 250
        assert q.dropped == 800 - 250

        last_seen: dict[str, int] = {}
        for entry in entries:
            pid, seq = entry.split(":")
            assert int(seq) > last_seen.get(pid, -1)
            last_seen[pid] = int(seq)
