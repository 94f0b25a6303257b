"""Directory provider property loading."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from indexdir.errors import ConfigError

from .models import INDEX_BASE_KEY

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[no-redef]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("indexdir.default.yaml")
ENV_INDEX_BASE = "INDEXDIR_INDEX_BASE"

DEFAULT_SECTION = "default"
INDEXES_SECTION = "indexes"


def load_properties(
    index_name: str,
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, str | None]:
    """Return the flat provider properties for ``index_name``.

    Shared ``default`` properties are merged with the ``indexes.<index_name>``
    section; the optional file at ``path`` is layered over the packaged
    defaults and ``overrides`` over both.
    """

    merged = _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    if path:
        user_data = _expect_mapping(_read_structured_file(path), path)
        merged = _deep_merge(merged, user_data)

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    defaults = _expect_mapping(merged.get(DEFAULT_SECTION), path or DEFAULT_CONFIG_PATH)
    indexes = _expect_mapping(merged.get(INDEXES_SECTION), path or DEFAULT_CONFIG_PATH)
    specific = _expect_mapping(indexes.get(index_name), path or DEFAULT_CONFIG_PATH)

    # flat keys are shortcuts for the shared section
    flat = {
        key: value
        for key, value in merged.items()
        if key not in {DEFAULT_SECTION, INDEXES_SECTION} and not isinstance(value, Mapping)
    }

    properties = _deep_merge(_deep_merge(defaults, flat), specific)

    env_base = os.getenv(ENV_INDEX_BASE)
    if env_base:
        properties[INDEX_BASE_KEY] = env_base

    return {str(key): _stringify(value, key) for key, value in properties.items()}


def dump_example_config(dest: Path) -> None:
    """Write the packaged default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)

    payload = _read_structured_file(DEFAULT_CONFIG_PATH)
    if dest.suffix.lower() in {".json"}:
        dest.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(payload, sort_keys=False),
        encoding="utf-8",
    )


def _stringify(value: Any, key: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, Mapping) or isinstance(value, (list, tuple)):
        raise ConfigError(f"Property '{key}' must be a scalar, got {type(value).__name__}.")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


_PARSERS: dict[str, Callable[[str], Any]] = {
    ".yaml": lambda text: yaml.safe_load(text) or {},
    ".yml": lambda text: yaml.safe_load(text) or {},
    ".toml": tomllib.loads,
    ".json": json.loads,
}
_PARSE_ERRORS = (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError)


def _read_structured_file(path: Path) -> Any:
    """Parse a YAML, TOML or JSON configuration file chosen by suffix."""

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigError(f"Unsupported config format for {path}")
    if not path.is_file():
        raise ConfigError(f"Config file {path} does not exist.")

    try:
        return parser(path.read_text(encoding="utf-8"))
    except _PARSE_ERRORS as exc:
        raise ConfigError(f"Config file {path} could not be parsed: {exc}") from exc


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Layer ``extra`` over ``base``; sections present in both are merged key by key."""

    merged = dict(base)
    for key, value in extra.items():
        current = merged.get(key)
        both_sections = isinstance(current, Mapping) and isinstance(value, Mapping)
        merged[key] = _deep_merge(current, value) if both_sections else value
    return merged


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Turn ``indexes.Books.indexName=x`` style keys into nested sections."""

    expanded: dict[str, Any] = {}
    for key, value in overrides.items():
        *sections, leaf = str(key).split(".")
        nested: dict[str, Any] = {leaf: value}
        for section in reversed(sections):
            nested = {section: nested}
        expanded = _deep_merge(expanded, nested)
    return expanded


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_INDEX_BASE",
    "dump_example_config",
    "load_properties",
]
