"""Pydantic views over the loosely typed directory provider properties."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

INDEX_BASE_KEY = "indexBase"
INDEX_NAME_KEY = "indexName"
LOCKING_STRATEGY_KEY = "locking_strategy"


def _configured(properties: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is ``None``; they count as not configured."""

    return {key: value for key, value in properties.items() if value is not None}


class IndexDirectorySettings(BaseModel):
    """Settings read by the index directory resolver and the lock selector."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    index_base: str = Field(default=".", alias=INDEX_BASE_KEY)
    index_name: Optional[str] = Field(default=None, alias=INDEX_NAME_KEY)
    locking_strategy: Optional[str] = Field(default=None, alias=LOCKING_STRATEGY_KEY)

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "IndexDirectorySettings":
        return cls.model_validate(_configured(properties))

    def effective_index_name(self, provider_name: str) -> str:
        """Return the configured index name, falling back to ``provider_name``."""

        if self.index_name is None:
            return provider_name
        return self.index_name


class SourceDirectorySettings(BaseModel):
    """Root and relative parts of a source directory.

    The property keys holding both parts are chosen by the caller, so the
    view is built from already extracted values.
    """

    model_config = ConfigDict(frozen=True)

    root: Optional[str] = None
    relative: Optional[str] = None

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, Any],
        *,
        root_key: str,
        relative_key: str,
    ) -> "SourceDirectorySettings":
        configured = _configured(properties)
        return cls.model_validate(
            {"root": configured.get(root_key), "relative": configured.get(relative_key)}
        )


__all__ = [
    "INDEX_BASE_KEY",
    "INDEX_NAME_KEY",
    "IndexDirectorySettings",
    "LOCKING_STRATEGY_KEY",
    "SourceDirectorySettings",
]
