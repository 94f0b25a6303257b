"""Resolve everything an index engine needs before opening an index."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from indexdir.directory.access import WriteAccessCheck
from indexdir.directory.index import determine_index_dir
from indexdir.locking.strategy import LockSelection, create_lock_selection


@dataclass(frozen=True)
class IndexLocation:
    """Index directory together with the lock strategy guarding it."""

    name: str
    directory: Path
    lock: LockSelection

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "directory": str(self.directory), "lock": self.lock.to_dict()}


def prepare_index(
    provider_name: str,
    properties: Mapping[str, Any],
    *,
    logger: logging.Logger | None = None,
    base_dir: str | Path | None = None,
    write_access: WriteAccessCheck | None = None,
) -> IndexLocation:
    """Resolve the index directory, then pick its lock strategy."""

    directory = determine_index_dir(
        provider_name,
        properties,
        logger=logger,
        base_dir=base_dir,
        write_access=write_access,
    )
    lock = create_lock_selection(directory, properties, logger=logger)
    return IndexLocation(name=provider_name, directory=directory, lock=lock)


__all__ = ["IndexLocation", "prepare_index"]
