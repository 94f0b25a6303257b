"""Lock strategy selection."""

from .strategy import (
    DEFAULT_LOCK_STRATEGY,
    FALLBACK_LOCK_STRATEGY,
    LOCK_STRATEGIES,
    LockSelection,
    LockStrategy,
    create_lock_selection,
    parse_lock_strategy,
)

__all__ = [
    "DEFAULT_LOCK_STRATEGY",
    "FALLBACK_LOCK_STRATEGY",
    "LOCK_STRATEGIES",
    "LockSelection",
    "LockStrategy",
    "create_lock_selection",
    "parse_lock_strategy",
]
