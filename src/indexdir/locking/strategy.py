"""Lock strategy selection for index directories."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

from indexdir.config.models import IndexDirectorySettings
from indexdir.util.logging import get_logger


class LockStrategy(str, Enum):
    """How writers coordinate exclusive access to an index directory."""

    SIMPLE = "simple"
    NATIVE = "native"
    SINGLE = "single"
    NONE = "none"

    @property
    def requires_directory(self) -> bool:
        """Whether the strategy keeps its lock state in the index directory."""

        return self in (LockStrategy.SIMPLE, LockStrategy.NATIVE)


LOCK_STRATEGIES: Mapping[str, LockStrategy] = {
    "simple": LockStrategy.SIMPLE,
    "native": LockStrategy.NATIVE,
    "single": LockStrategy.SINGLE,
    "none": LockStrategy.NONE,
}
DEFAULT_LOCK_STRATEGY = LockStrategy.SIMPLE
FALLBACK_LOCK_STRATEGY = LockStrategy.SIMPLE


@dataclass(frozen=True)
class LockSelection:
    """Chosen strategy plus the directory filesystem-backed strategies lock in."""

    strategy: LockStrategy
    directory: Optional[Path] = None

    def to_dict(self) -> dict[str, object]:
        return {
            "strategy": self.strategy.value,
            "directory": str(self.directory) if self.directory is not None else None,
        }


def parse_lock_strategy(name: str | None, *, logger: logging.Logger | None = None) -> LockStrategy:
    """Map a ``locking_strategy`` value to a strategy; never fails."""

    if name is None:
        return DEFAULT_LOCK_STRATEGY

    strategy = LOCK_STRATEGIES.get(name)
    if strategy is None:
        get_logger("locking", logger).warning(
            'Invalid configuration setting for option locking_strategy "%s"; option ignored!', name
        )
        return FALLBACK_LOCK_STRATEGY
    return strategy


def create_lock_selection(
    index_dir: Path,
    properties: Mapping[str, Any],
    *,
    logger: logging.Logger | None = None,
) -> LockSelection:
    """Select the configured lock strategy for ``index_dir``."""

    settings = IndexDirectorySettings.from_properties(properties)
    strategy = parse_lock_strategy(settings.locking_strategy, logger=logger)
    if strategy.requires_directory:
        return LockSelection(strategy=strategy, directory=index_dir)
    return LockSelection(strategy=strategy)


__all__ = [
    "DEFAULT_LOCK_STRATEGY",
    "FALLBACK_LOCK_STRATEGY",
    "LOCK_STRATEGIES",
    "LockSelection",
    "LockStrategy",
    "create_lock_selection",
    "parse_lock_strategy",
]
