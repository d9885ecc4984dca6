"""Named text slots persisted locally, one file per key."""

from __future__ import annotations

import re
from pathlib import Path


def _default_storage_dir() -> Path:
    return Path.home() / ".mapty" / "storage"


def _slot_name(key: str) -> str:
    s = re.sub(r"[^a-zA-Z0-9_-]+", "-", key.strip()).strip("-")
    if not s:
        raise ValueError(f"Invalid storage key {key!r}")
    return s


class LocalStorage:
    def __init__(self, base_dir: Path | None = None) -> None:
        self._root = base_dir or _default_storage_dir()

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        return self._root / f"{_slot_name(key)}.json"

    def get_item(self, key: str) -> str | None:
        target = self.path_for(key)
        if not target.exists():
            return None
        return target.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        target = self.path_for(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp = target.with_name(target.name + ".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(target)

    def remove_item(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)
