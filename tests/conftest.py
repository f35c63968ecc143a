# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Shared fixtures."""

import time
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger

from coreason_file_logger.config import FileLoggerSettings


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Target log file inside a not-yet-existing directory."""
    return tmp_path / "logs" / "app.log"


@pytest.fixture
def settings(log_path: Path) -> FileLoggerSettings:
    """Fast-polling settings with console mirroring disabled."""
    return FileLoggerSettings(path=log_path, poll_timeout=0.01, join_timeout=5.0, mirror_to_console=False)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru diagnostics emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def wait_for() -> Callable[..., bool]:
    """Return a helper that polls a condition until it holds or times out."""

    def _wait(condition: Callable[[], bool], timeout: float = 5.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if condition():
                return True
            time.sleep(0.005)
        return condition()

    return _wait
