"""Error types raised while resolving index and source directories."""

from __future__ import annotations


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or points at an unusable location."""


class AssertionFailure(AssertionError):
    """Raised when an internal invariant does not hold; not a configuration problem."""


__all__ = ["AssertionFailure", "ConfigError"]
