"""Centralized diagnostic logging configuration using loguru."""

import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

# Sink: Stderr (Console). This is the fallback channel for failures inside the
# file logger itself, so it must never point at the file logger's own output.
logger.add(
    sys.stderr,
    level=os.getenv("LOG_LEVEL", "INFO"),
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

# Export the configured logger
__all__ = ["logger"]
