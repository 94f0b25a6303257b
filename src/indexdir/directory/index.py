"""Index directory resolution from the index base and index name."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from indexdir.config.models import IndexDirectorySettings
from indexdir.errors import ConfigError
from indexdir.util.logging import get_logger
from indexdir.util.paths import application_base_dir, substitute_home_token

from .access import ProbeFileWriteAccess, WriteAccessCheck


def determine_index_dir(
    provider_name: str,
    properties: Mapping[str, Any],
    *,
    logger: logging.Logger | None = None,
    base_dir: str | Path | None = None,
    write_access: WriteAccessCheck | None = None,
) -> Path:
    """Return the directory holding the index ``provider_name``.

    The base directory is created if needed and must be writable; the
    index-specific directory below it is left for the index engine to create.
    """

    log = get_logger("directory", logger)
    settings = IndexDirectorySettings.from_properties(properties)
    index_name = settings.effective_index_name(provider_name)

    # "~" stands for the application base directory
    home = base_dir if base_dir is not None else application_base_dir()
    index_base = substitute_home_token(settings.index_base, home)

    base_path = Path(index_base)
    if not base_path.is_dir():
        log.debug("Creating index base directory %s", base_path)
        try:
            base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.debug("Index base directory %s could not be created: %s", base_path, exc)

    checker = write_access if write_access is not None else ProbeFileWriteAccess(logger=log)
    if not checker.has_write_access(base_path):
        raise ConfigError(f"Cannot write into index directory: {index_base}")

    index_dir = base_path.resolve() / index_name
    log.debug("Index %s stored in %s", provider_name, index_dir)
    return index_dir


__all__ = ["determine_index_dir"]
