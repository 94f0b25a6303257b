from __future__ import annotations

import os
from pathlib import Path

import yaml

INDEX_NAME = "Books"


class RecordingWriteAccess:
    """Write-access check returning a fixed answer and remembering what it saw."""

    def __init__(self, writable: bool = True) -> None:
        self.writable = writable
        self.checked: list[Path] = []

    def has_write_access(self, directory: Path) -> bool:
        self.checked.append(directory)
        return self.writable


def write_config(path: Path, payload: dict[str, object]) -> Path:
    """Dump ``payload`` as YAML to ``path`` and return it."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return path


def list_tree(root: Path) -> list[str]:
    """Return every path below ``root`` relative to it, sorted."""

    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


def running_as_root() -> bool:
    return hasattr(os, "geteuid") and os.geteuid() == 0
