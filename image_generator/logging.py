from __future__ import annotations

"""Centralised Loguru configuration.

Use setup_logger() at program start. Idempotent – repeated calls are no-ops.

stdout carries the MCP message stream, so every sink here targets stderr or a
file.
"""
import sys
from pathlib import Path
from typing import Literal

from loguru import logger

_INITIALISED = False


def setup_logger(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None,
    log_dir: str | None = None,
) -> None:
    """Configure Loguru sinks once per process.

    If *level* is *None* ``INFO`` is used. When *log_dir* is given, ``app.log``
    and ``debug.log`` are written there with rotation.
    """

    global _INITIALISED
    if _INITIALISED:
        return

    if level is None:
        level = "INFO"
    level = level.upper()  # type: ignore[assignment]

    logger.remove()  # remove default stderr sink

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        logger.add(str(Path(log_dir) / "app.log"), level="INFO", rotation="1 MB", retention="10 days")
        logger.add(str(Path(log_dir) / "debug.log"), level="DEBUG", rotation="1 MB", retention="10 days")

    logger.add(
        sys.stderr,
        level=level,
        format="<level>{message}</level>",
        colorize=True,
    )

    logger.info("Logger initialised (level: {})", level)

    _INITIALISED = True
