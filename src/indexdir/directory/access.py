"""Write-access checks for index base directories."""

from __future__ import annotations

import errno
import logging
import uuid
from pathlib import Path
from typing import Protocol, runtime_checkable

from indexdir.util.logging import get_logger

_READ_ONLY_ERRNOS = frozenset({errno.EROFS})


@runtime_checkable
class WriteAccessCheck(Protocol):
    """Anything able to tell whether new files can be written into a directory."""

    def has_write_access(self, directory: Path) -> bool:
        """Return True when ``directory`` accepts new files."""
        ...


class ProbeFileWriteAccess:
    """Create an empty uniquely named file in the directory, then remove it."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = get_logger("directory", logger)

    def has_write_access(self, directory: Path) -> bool:
        if not directory.is_dir():
            return False

        probe = directory / uuid.uuid4().hex
        try:
            probe.open("x", encoding="utf-8").close()
        except PermissionError:
            return False
        except OSError as exc:
            if exc.errno in _READ_ONLY_ERRNOS:
                return False
            raise

        try:
            probe.unlink()
        except OSError as exc:
            # a leftover probe does not make the directory unwritable
            self._logger.debug("Could not remove write probe %s: %s", probe, exc)
        return True


__all__ = ["ProbeFileWriteAccess", "WriteAccessCheck"]
