"""Logging setup utilities."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

LOGGER_NAME = "indexdir"


def get_logger(component: str, logger: logging.Logger | None = None) -> logging.Logger:
    """Return ``logger`` when injected, else the namespaced module logger."""

    if logger is not None:
        return logger
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


def configure_logging(
    *,
    log_path: Path | None = None,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure project-wide logging handlers.

    Console messages go to ``stream`` (stdout by default); calling again with
    another stream replaces the console handler rather than adding a second one.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    target = stream if stream is not None else sys.stdout

    console = next(
        (h for h in logger.handlers if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)),
        None,
    )
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if console is not None and console.stream is not target:
        # the previous stream may already be closed, so it is not flushed
        logger.removeHandler(console)
        console = None

    if console is None:
        stream_handler = logging.StreamHandler(stream=target)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
