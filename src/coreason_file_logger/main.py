# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_file_logger

"""Command-line demo for the asynchronous file logger."""

import argparse
import os
import sys
import threading
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from coreason_file_logger.config import FileLoggerConfig, FileLoggerSettings
from coreason_file_logger.exceptions import InvalidSettingsError
from coreason_file_logger.logger import FileLogger


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Asynchronous file logger demo")
    parser.add_argument(
        "--path",
        type=Path,
        default=FileLoggerConfig.DEFAULT_LOG_PATH,
        help="Log file to append to",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=FileLoggerConfig.DEFAULT_CAPACITY,
        help="Maximum number of pending entries before new ones are dropped",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=FileLoggerConfig.MAX_FILE_SIZE,
        help="Size in bytes above which the log file is rotated to <path>.bak",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="How many times to repeat the demo batch",
    )
    parser.add_argument(
        "--no-console",
        action="store_true",
        help="Do not mirror entries to stdout",
    )
    return parser.parse_args(args)


def setup_logging() -> None:
    """Configure diagnostic logging based on environment variables."""
    logger.remove()
    logger.add(sys.stderr, level=os.getenv("LOG_LEVEL", "INFO"))


def build_settings(parsed_args: argparse.Namespace) -> FileLoggerSettings:
    """
    Turn parsed arguments into validated settings.

    Raises:
        InvalidSettingsError: If any value is out of range.
    """
    try:
        return FileLoggerSettings(
            path=parsed_args.path,
            capacity=parsed_args.capacity,
            max_bytes=parsed_args.max_bytes,
            mirror_to_console=not parsed_args.no_console,
        )
    except ValidationError as e:
        raise InvalidSettingsError(f"Invalid logger settings: {e}") from e


def run_demo(file_logger: FileLogger, count: int) -> None:
    """
    Write a representative batch of entries.

    Args:
        file_logger: A started FileLogger.
        count: Number of batches.
    """
    log = file_logger.get_logger("coreason_file_logger.demo")

    for i in range(count):
        log.info("Demo batch {} started", i + 1)
        log.info("Processing remote task, task id: {}, user: {}", f"task-{i + 1}", "demo")
        try:
            raise RuntimeError("database connection timed out")
        except RuntimeError as e:
            log.error("Business logic failed, reason: {}", str(e), e)

        worker = threading.Thread(target=log.warn, args=("log from thread {}", i + 1), name=f"demo-{i + 1}")
        worker.start()
        worker.join()


def main(args: list[str] | None = None) -> None:
    """Main entry point for the demo."""
    setup_logging()
    parsed_args = parse_args(args)

    try:
        settings = build_settings(parsed_args)
        logger.info(f"Writing demo entries to {settings.path}")
        with FileLogger(settings) as file_logger:
            run_demo(file_logger, parsed_args.count)
    except Exception as e:
        logger.error(f"Demo failed: {e}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
