"""Source directory resolution from a root and a relative path."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from indexdir.config.models import SourceDirectorySettings
from indexdir.errors import AssertionFailure, ConfigError
from indexdir.util.logging import get_logger

_NULL = "<null>"


def resolve_source_directory(
    root_key: str,
    relative_key: str,
    provider_name: str,
    properties: Mapping[str, Any],
    *,
    logger: logging.Logger | None = None,
) -> str:
    """Build a source directory out of the configured root and relative path.

    Without a root the relative path is taken as is and must already exist.
    With a root, both the root and ``root/relative`` are created when missing
    and the canonical absolute path of the combination is returned.
    """

    log = get_logger("directory", logger)
    settings = SourceDirectorySettings.from_properties(
        properties, root_key=root_key, relative_key=relative_key
    )
    root = settings.root
    log.debug(
        "Guess source directory from %s %s and %s %s",
        root_key,
        root if root is not None else _NULL,
        relative_key,
        settings.relative if settings.relative is not None else _NULL,
    )

    relative = settings.relative if settings.relative is not None else provider_name

    if not root:
        log.debug("No root directory, go with relative %s", relative)
        if not Path(relative).is_dir():
            raise ConfigError(f"Unable to read source directory: {relative}")
        return relative

    log.debug("Get directory from root %s + relative %s", root, relative)
    root_dir = Path(root)
    if not root_dir.is_dir():
        try:
            root_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"{root} does not exist and cannot be created") from exc

    # mkdir may have returned without leaving a directory behind
    if not root_dir.is_dir():
        raise ConfigError(f"{root} does not exist")

    source_dir = root_dir / relative
    if not source_dir.is_dir():
        try:
            source_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"{source_dir} does not exist and cannot be created") from exc

    try:
        return str(source_dir.resolve(strict=True))
    except (OSError, RuntimeError) as exc:
        raise AssertionFailure(f"Unable to get canonical path: {root} + {relative}") from exc


__all__ = ["resolve_source_directory"]
